"""Domain entities package"""

from taskboard.models.task import Task, TaskStatus
from taskboard.models.project import Project
from taskboard.models.worker import Worker
from taskboard.models.employee import (
    Division,
    Document,
    Employee,
    EmployeeWithDate,
    EmployeeWithDivision,
    SimpleSource,
)

__all__ = [
    "Project",
    "Task",
    "TaskStatus",
    "Worker",
    "Division",
    "Document",
    "Employee",
    "EmployeeWithDate",
    "EmployeeWithDivision",
    "SimpleSource",
]
