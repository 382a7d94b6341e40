"""API schemas package"""

from .project import ProjectDTO
from .task import TaskDTO
from .worker import WorkerDTO
from .employee import (
    DivisionDTO,
    DocumentDTO,
    EmployeeDTO,
    EmployeeWithDateDTO,
    EmployeeWithDivisionDTO,
    SimpleDestination,
)

__all__ = [
    "ProjectDTO",
    "TaskDTO",
    "WorkerDTO",
    "DivisionDTO",
    "DocumentDTO",
    "EmployeeDTO",
    "EmployeeWithDateDTO",
    "EmployeeWithDivisionDTO",
    "SimpleDestination",
]
