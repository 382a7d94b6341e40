"""Worker schemas"""

from typing import Optional
from pydantic import Field

from taskboard.schemas.base import CamelModel


class WorkerDTO(CamelModel):
    """Worker as exchanged over HTTP"""
    id: Optional[int] = None
    email: Optional[str] = Field(None, description="Unique email address")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
