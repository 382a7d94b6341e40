"""Project entity <-> DTO mapper"""

from typing import Optional

from taskboard.mappers.task_mapper import TaskMapper
from taskboard.models import Project
from taskboard.schemas import ProjectDTO


class ProjectMapper:
    """
    Translation between Project and ProjectDTO.

    Nested tasks are mapped with the TaskMapper toward the DTO and ignored
    toward the entity, where tasks are derived by the repository.
    """

    def __init__(self, task_mapper: Optional[TaskMapper] = None):
        self.task_mapper = task_mapper or TaskMapper()

    def to_dto(self, entity: Project) -> ProjectDTO:
        return ProjectDTO(
            id=entity.id,
            code=entity.code,
            name=entity.name,
            description=entity.description,
            date_created=entity.date_created,
            tasks=[self.task_mapper.to_dto(t) for t in entity.tasks],
        )

    def to_entity(self, dto: ProjectDTO) -> Project:
        return Project(
            id=dto.id,
            code=dto.code,
            name=dto.name,
            description=dto.description,
            date_created=dto.date_created,
        )
