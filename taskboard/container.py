"""Composition root: repositories, services and mappers"""

from datetime import date
from typing import Callable

from dependency_injector import containers, providers

from taskboard.config import Settings
from taskboard.mappers import ProjectMapper, TaskMapper, WorkerMapper
from taskboard.repositories import (
    InMemoryProjectRepository,
    InMemoryStore,
    InMemoryTaskRepository,
    InMemoryWorkerRepository,
)
from taskboard.services import ProjectService, TaskService, WorkerService


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Every application owns one container and therefore one in-memory store.
    Use build_container() to bind the settings and the clock.
    """

    # 1. Configuration
    settings = providers.Dependency(instance_of=Settings)
    clock = providers.Object(date.today)

    # 2. Persistence (Singleton: all repositories share one store)
    store = providers.Singleton(InMemoryStore)

    project_repository = providers.Singleton(
        InMemoryProjectRepository,
        store,
        prefix=settings.provided.project_prefix,
        suffix=settings.provided.project_suffix,
    )

    task_repository = providers.Singleton(InMemoryTaskRepository, store)

    worker_repository = providers.Singleton(InMemoryWorkerRepository, store)

    # 3. Services (Factory: stateless, new instance per request)
    project_service = providers.Factory(ProjectService, project_repository, clock=clock)

    task_service = providers.Factory(TaskService, task_repository, clock=clock)

    worker_service = providers.Factory(WorkerService, worker_repository)

    # 4. Mappers
    task_mapper = providers.Singleton(TaskMapper)

    project_mapper = providers.Singleton(ProjectMapper, task_mapper)

    worker_mapper = providers.Singleton(WorkerMapper)


def build_container(settings: Settings, clock: Callable[[], date] = date.today) -> Container:
    """Container bound to the given settings and clock"""
    return Container(settings=providers.Object(settings), clock=providers.Object(clock))
