"""Task schemas"""

from datetime import date
from typing import Optional
from pydantic import Field

from taskboard.models import TaskStatus
from taskboard.schemas.base import CamelModel


class TaskDTO(CamelModel):
    """Task as exchanged over HTTP"""
    id: Optional[int] = None
    name: Optional[str] = Field(None, description="Task name")
    description: Optional[str] = Field(None, description="Task description")
    date_created: Optional[date] = Field(None, description="Set by the service on create")
    due_date: Optional[date] = Field(None, description="Due date")
    status: TaskStatus = Field(default=TaskStatus.TO_DO, description="Task status")
    project_id: Optional[int] = Field(None, description="Owning project id")
    assignee_id: Optional[int] = Field(None, description="Assigned worker id")
