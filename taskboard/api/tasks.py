"""Task management endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from taskboard.api.dependencies import get_task_mapper, get_task_service
from taskboard.errors import ValidationError
from taskboard.mappers import TaskMapper
from taskboard.schemas import TaskDTO
from taskboard.services import TaskService

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get("", response_model=List[TaskDTO], status_code=status.HTTP_200_OK)
async def find_tasks(
    project_id: Optional[int] = Query(None, alias="projectId", description="Owning project id"),
    service: TaskService = Depends(get_task_service),
    mapper: TaskMapper = Depends(get_task_mapper),
):
    """List tasks, optionally only those of one project"""
    tasks = service.find_all() if project_id is None else service.find_by_project(project_id)
    return [mapper.to_dto(t) for t in tasks]


@router.get("/{task_id}", response_model=TaskDTO, status_code=status.HTTP_200_OK)
async def find_one(
    task_id: int,
    service: TaskService = Depends(get_task_service),
    mapper: TaskMapper = Depends(get_task_mapper),
):
    return mapper.to_dto(service.find_by_id(task_id))


@router.post("", response_model=TaskDTO, status_code=status.HTTP_201_CREATED)
async def create(
    task_dto: TaskDTO,
    service: TaskService = Depends(get_task_service),
    mapper: TaskMapper = Depends(get_task_mapper),
):
    """
    Create a task for an existing project

    Returns 404 when projectId or assigneeId do not identify stored entities.
    """
    if not task_dto.name:
        raise ValidationError("name", "must not be empty")
    if task_dto.project_id is None:
        raise ValidationError("projectId", "must be provided")

    task = mapper.to_entity(task_dto)
    task.id = None
    return mapper.to_dto(service.save(task))


@router.put("/{task_id}", response_model=TaskDTO, status_code=status.HTTP_200_OK)
async def update(
    task_id: int,
    task_dto: TaskDTO,
    service: TaskService = Depends(get_task_service),
    mapper: TaskMapper = Depends(get_task_mapper),
):
    saved = service.update_by_id(task_id, mapper.to_entity(task_dto))
    return mapper.to_dto(saved)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete(
    task_id: int,
    service: TaskService = Depends(get_task_service),
):
    service.delete_by_id(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
