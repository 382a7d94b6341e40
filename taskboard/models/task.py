"""Task entity"""

import enum
from dataclasses import dataclass
from datetime import date
from typing import Optional


class TaskStatus(str, enum.Enum):
    """Task workflow status"""

    TO_DO = "TO_DO"
    IN_PROGRESS = "IN_PROGRESS"
    ON_HOLD = "ON_HOLD"
    DONE = "DONE"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    TaskStatus.TO_DO: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.ON_HOLD: "On Hold",
    TaskStatus.DONE: "Done",
}


@dataclass
class Task:
    """
    Dated work item belonging to exactly one Project.

    The owning Project is referenced by id only; the Project's task set is
    derived from these back-references by the repository.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None
    project_id: Optional[int] = None
    status: TaskStatus = TaskStatus.TO_DO
    assignee_id: Optional[int] = None
    date_created: Optional[date] = None
    id: Optional[int] = None

    def __repr__(self):
        return f"<Task(id={self.id}, name={self.name}, status={self.status.value})>"
