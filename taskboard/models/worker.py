"""Worker model"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Worker:
    """Person a Task can be assigned to; email is unique"""

    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    id: Optional[int] = None

    def __repr__(self):
        return f"<Worker(id={self.id}, email={self.email})>"
