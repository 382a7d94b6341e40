"""Task service"""

import logging
from datetime import date
from typing import Callable, List

from taskboard.errors import NotFoundError
from taskboard.models import Task, TaskStatus
from taskboard.repositories import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Policy layer above the task repository"""

    def __init__(self, repository: TaskRepository, clock: Callable[[], date] = date.today):
        self.repository = repository
        self.clock = clock

    def find_by_id(self, task_id: int) -> Task:
        task = self.repository.find_by_id(task_id)
        if task is None:
            logger.warning(f"Task {task_id} not found")
            raise NotFoundError.for_entity("Task", task_id)
        return task

    def find_all(self) -> List[Task]:
        return self.repository.find_all()

    def find_by_project(self, project_id: int) -> List[Task]:
        return self.repository.find_by_project_id(project_id)

    def find_due_after(self, due_date: date, inclusive: bool = False) -> List[Task]:
        """Tasks due strictly after due_date, or on/after it when inclusive"""
        if inclusive:
            return self.repository.find_by_due_date_greater_than_equal(due_date)
        return self.repository.find_by_due_date_greater_than(due_date)

    def find_overdue(self, status: TaskStatus = TaskStatus.TO_DO) -> List[Task]:
        """Tasks due before today that are still in the given status"""
        return self.repository.find_by_due_date_before_and_status_equals(self.clock(), status)

    def find_by_assignee_first_name(self, first_name: str) -> List[Task]:
        return self.repository.find_by_assignee_first_name(first_name)

    def save(self, task: Task) -> Task:
        saved = self.repository.save(task, created_on=self.clock())
        logger.info(f"Saved task {saved.id} in project {saved.project_id} ({saved.status.label})")
        return saved

    def update_by_id(self, task_id: int, task: Task) -> Task:
        task.id = task_id
        try:
            return self.repository.update(task)
        except NotFoundError as exc:
            logger.warning(f"Update of task {task_id} rejected: {exc.message}")
            raise

    def delete_by_id(self, task_id: int) -> None:
        self.find_by_id(task_id)
        self.repository.delete_by_id(task_id)
