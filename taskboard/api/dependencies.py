"""API dependencies resolving services and mappers from the application container"""

from fastapi import Depends, Request

from taskboard.container import Container
from taskboard.mappers import ProjectMapper, TaskMapper, WorkerMapper
from taskboard.services import ProjectService, TaskService, WorkerService


def get_container(request: Request) -> Container:
    """Container owned by the running application"""
    return request.app.state.container


def get_project_service(container: Container = Depends(get_container)) -> ProjectService:
    return container.project_service()


def get_task_service(container: Container = Depends(get_container)) -> TaskService:
    return container.task_service()


def get_worker_service(container: Container = Depends(get_container)) -> WorkerService:
    return container.worker_service()


def get_project_mapper(container: Container = Depends(get_container)) -> ProjectMapper:
    return container.project_mapper()


def get_task_mapper(container: Container = Depends(get_container)) -> TaskMapper:
    return container.task_mapper()


def get_worker_mapper(container: Container = Depends(get_container)) -> WorkerMapper:
    return container.worker_mapper()
