"""Project management endpoints"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from taskboard.api.dependencies import get_project_mapper, get_project_service
from taskboard.errors import ValidationError
from taskboard.mappers import ProjectMapper
from taskboard.schemas import ProjectDTO
from taskboard.services import ProjectService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=List[ProjectDTO], status_code=status.HTTP_200_OK)
async def find_projects(
    name: Optional[str] = Query(None, description="Substring the project name must contain"),
    service: ProjectService = Depends(get_project_service),
    mapper: ProjectMapper = Depends(get_project_mapper),
):
    """
    List projects in insertion order

    With ?name= only projects whose name contains the value are returned;
    an empty value matches every project.
    """
    projects = service.find_all() if name is None else service.find_by_name(name)
    return [mapper.to_dto(p) for p in projects]


@router.get("/{project_id}", response_model=ProjectDTO, status_code=status.HTTP_200_OK)
async def find_one(
    project_id: int,
    service: ProjectService = Depends(get_project_service),
    mapper: ProjectMapper = Depends(get_project_mapper),
):
    """Get a project with its tasks"""
    return mapper.to_dto(service.find_by_id(project_id))


@router.post("", response_model=ProjectDTO, status_code=status.HTTP_201_CREATED)
async def create(
    project_dto: ProjectDTO,
    service: ProjectService = Depends(get_project_service),
    mapper: ProjectMapper = Depends(get_project_mapper),
):
    """
    Create a project

    The id and dateCreated of the body are ignored; the stored project gets
    a fresh id and today's date.
    """
    if not project_dto.name:
        raise ValidationError("name", "must not be empty")

    project = mapper.to_entity(project_dto)
    project.id = None
    saved = service.save(project)

    logger.info(f"Created project {saved.id} via API")
    return mapper.to_dto(saved)


@router.put("/{project_id}", response_model=ProjectDTO, status_code=status.HTTP_200_OK)
async def update(
    project_id: int,
    project_dto: ProjectDTO,
    service: ProjectService = Depends(get_project_service),
    mapper: ProjectMapper = Depends(get_project_mapper),
):
    """Overwrite a project; its id and dateCreated are kept"""
    saved = service.update_by_id(project_id, mapper.to_entity(project_dto))
    return mapper.to_dto(saved)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete(
    project_id: int,
    service: ProjectService = Depends(get_project_service),
):
    """Delete a project together with its tasks"""
    service.delete_by_id(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
