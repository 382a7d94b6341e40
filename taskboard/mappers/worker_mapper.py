"""Worker entity <-> DTO mapper"""

from taskboard.models import Worker
from taskboard.schemas import WorkerDTO


class WorkerMapper:

    def to_dto(self, entity: Worker) -> WorkerDTO:
        return WorkerDTO(
            id=entity.id,
            email=entity.email,
            first_name=entity.first_name,
            last_name=entity.last_name,
        )

    def to_entity(self, dto: WorkerDTO) -> Worker:
        return Worker(
            id=dto.id,
            email=dto.email,
            first_name=dto.first_name,
            last_name=dto.last_name,
        )
