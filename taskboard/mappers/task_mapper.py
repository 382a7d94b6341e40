"""Task entity <-> DTO mapper"""

from taskboard.models import Task, TaskStatus
from taskboard.schemas import TaskDTO


class TaskMapper:
    """Stateless field-for-field translation between Task and TaskDTO"""

    def to_dto(self, entity: Task) -> TaskDTO:
        return TaskDTO(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            date_created=entity.date_created,
            due_date=entity.due_date,
            status=entity.status,
            project_id=entity.project_id,
            assignee_id=entity.assignee_id,
        )

    def to_entity(self, dto: TaskDTO) -> Task:
        return Task(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            date_created=dto.date_created,
            due_date=dto.due_date,
            status=dto.status or TaskStatus.TO_DO,
            project_id=dto.project_id,
            assignee_id=dto.assignee_id,
        )
