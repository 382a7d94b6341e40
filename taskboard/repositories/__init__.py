"""Repositories package"""

from taskboard.repositories.base import (
    CrudRepository,
    ProjectRepository,
    TaskRepository,
    WorkerRepository,
)
from taskboard.repositories.memory import (
    InMemoryStore,
    InMemoryProjectRepository,
    InMemoryTaskRepository,
    InMemoryWorkerRepository,
)

__all__ = [
    "CrudRepository",
    "ProjectRepository",
    "TaskRepository",
    "WorkerRepository",
    "InMemoryStore",
    "InMemoryProjectRepository",
    "InMemoryTaskRepository",
    "InMemoryWorkerRepository",
]
