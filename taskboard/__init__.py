"""Taskboard: Project/Task domain service with a JSON-over-HTTP façade"""

__version__ = "1.0.0"
