"""Services package"""

from .project_service import ProjectService
from .task_service import TaskService
from .worker_service import WorkerService

__all__ = ["ProjectService", "TaskService", "WorkerService"]
