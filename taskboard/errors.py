"""
Domain Errors
=============

Error kinds raised by the repository and service layers. The HTTP façade
translates each kind into a status code and a problem-details body.
"""

from typing import Any, Optional


class TaskboardError(Exception):
    """Base error carrying a human-readable message and an optional entity id"""

    def __init__(self, message: str, entity_id: Optional[Any] = None):
        self.message = message
        self.entity_id = entity_id
        super().__init__(message)


class NotFoundError(TaskboardError):
    """Raised when an entity with the requested id does not exist"""

    @classmethod
    def for_entity(cls, kind: str, entity_id: Any) -> "NotFoundError":
        return cls(f"{kind} {entity_id} not found", entity_id=entity_id)


class UniquenessViolationError(TaskboardError):
    """Raised when a save would break a unique attribute (Project code, Worker email)"""

    def __init__(self, field: str, value: Any, entity_id: Optional[Any] = None):
        self.field = field
        self.value = value
        super().__init__(f"{field} '{value}' is already in use", entity_id=entity_id)


class ValidationError(TaskboardError):
    """Raised when an inbound entity is missing a required field"""

    def __init__(self, field: str, message: str, entity_id: Optional[Any] = None):
        self.field = field
        super().__init__(f"{field}: {message}", entity_id=entity_id)


class InternalError(TaskboardError):
    """Raised for unexpected failures inside the core"""
