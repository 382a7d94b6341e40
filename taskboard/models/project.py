"""Project model"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from taskboard.models.task import Task


@dataclass
class Project:
    """
    Named unit of work with a unique code.
    Tasks are filled in by the repository on read and ignored on save.
    """

    code: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    date_created: Optional[date] = None
    internal_id: Optional[str] = None
    tasks: List[Task] = field(default_factory=list)
    id: Optional[int] = None

    def __repr__(self):
        return f"<Project(id={self.id}, code={self.code}, name={self.name})>"
