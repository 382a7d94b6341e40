"""Worker management endpoints"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from taskboard.api.dependencies import get_worker_mapper, get_worker_service
from taskboard.errors import ValidationError
from taskboard.mappers import WorkerMapper
from taskboard.schemas import WorkerDTO
from taskboard.services import WorkerService

router = APIRouter(prefix="/workers", tags=["Workers"])


@router.get("", response_model=List[WorkerDTO], status_code=status.HTTP_200_OK)
async def find_workers(
    service: WorkerService = Depends(get_worker_service),
    mapper: WorkerMapper = Depends(get_worker_mapper),
):
    return [mapper.to_dto(w) for w in service.find_all()]


@router.get("/{worker_id}", response_model=WorkerDTO, status_code=status.HTTP_200_OK)
async def find_one(
    worker_id: int,
    service: WorkerService = Depends(get_worker_service),
    mapper: WorkerMapper = Depends(get_worker_mapper),
):
    return mapper.to_dto(service.find_by_id(worker_id))


@router.post("", response_model=WorkerDTO, status_code=status.HTTP_201_CREATED)
async def create(
    worker_dto: WorkerDTO,
    service: WorkerService = Depends(get_worker_service),
    mapper: WorkerMapper = Depends(get_worker_mapper),
):
    """Register a worker; the email must not be in use"""
    if not worker_dto.email:
        raise ValidationError("email", "must not be empty")

    worker = mapper.to_entity(worker_dto)
    worker.id = None
    return mapper.to_dto(service.save(worker))


@router.put("/{worker_id}", response_model=WorkerDTO, status_code=status.HTTP_200_OK)
async def update(
    worker_id: int,
    worker_dto: WorkerDTO,
    service: WorkerService = Depends(get_worker_service),
    mapper: WorkerMapper = Depends(get_worker_mapper),
):
    saved = service.update_by_id(worker_id, mapper.to_entity(worker_dto))
    return mapper.to_dto(saved)


@router.delete("/{worker_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete(
    worker_id: int,
    service: WorkerService = Depends(get_worker_service),
):
    """Delete a worker; their tasks become unassigned"""
    service.delete_by_id(worker_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
