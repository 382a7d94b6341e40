"""Entity <-> DTO mappers"""

from .task_mapper import TaskMapper
from .project_mapper import ProjectMapper
from .worker_mapper import WorkerMapper
from .employee_mapper import (
    DivisionMapper,
    DocumentMapper,
    EmployeeMapper,
    EmployeeWithDateMapper,
    EmployeeWithDivisionMapper,
    SimpleSourceDestinationMapper,
)

__all__ = [
    "ProjectMapper",
    "TaskMapper",
    "WorkerMapper",
    "DivisionMapper",
    "DocumentMapper",
    "EmployeeMapper",
    "EmployeeWithDateMapper",
    "EmployeeWithDivisionMapper",
    "SimpleSourceDestinationMapper",
]
