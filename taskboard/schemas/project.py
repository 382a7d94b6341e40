"""Project schemas"""

from datetime import date
from typing import List, Optional
from pydantic import Field

from taskboard.schemas.base import CamelModel
from taskboard.schemas.task import TaskDTO


class ProjectDTO(CamelModel):
    """
    Project as exchanged over HTTP.

    dateCreated is accepted on input but overwritten on create and kept on
    update; tasks are output only.
    """
    id: Optional[int] = None
    code: Optional[str] = Field(None, description="Unique project code")
    name: Optional[str] = Field(None, description="Project name")
    description: Optional[str] = Field(None, description="Project description")
    date_created: Optional[date] = Field(None, description="Creation date")
    tasks: List[TaskDTO] = Field(default_factory=list, description="Tasks of the project")
