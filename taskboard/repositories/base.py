"""Repository ports"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Generic, Iterable, List, Optional, TypeVar

from taskboard.models import Project, Task, TaskStatus, Worker

T = TypeVar("T")


class CrudRepository(ABC, Generic[T]):
    """
    Storage port shared by every entity kind.

    Implementations assign ids on first save, hand out copies so callers
    never hold a reference to stored state, and keep results in insertion
    order.
    """

    @abstractmethod
    def find_by_id(self, entity_id: int) -> Optional[T]:
        """Return the stored entity or None"""

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return a snapshot of all entities in insertion order"""

    @abstractmethod
    def find_all_by_id(self, ids: Iterable[int]) -> List[T]:
        """Return the stored entities among ids, unknown ids are skipped"""

    @abstractmethod
    def save(self, entity: T, created_on: Optional[date] = None) -> T:
        """
        Insert or overwrite and return the stored copy.

        An entity whose id is None or unknown to the store is inserted under a
        fresh id and, when created_on is given, stamped with it as dateCreated.
        A known id overwrites the stored entity and keeps its dateCreated.
        """

    @abstractmethod
    def update(self, entity: T) -> T:
        """Overwrite the stored entity, raising NotFoundError if its id is unknown"""

    @abstractmethod
    def save_all(self, entities: Iterable[T]) -> List[T]:
        """Save every entity or none of them"""

    @abstractmethod
    def delete_by_id(self, entity_id: int) -> None:
        """Remove the entity, raising NotFoundError if it does not exist"""

    def delete(self, entity: T) -> None:
        """Remove the entity identified by entity.id"""
        self.delete_by_id(entity.id)

    @abstractmethod
    def delete_all(self, entities: Iterable[T]) -> None:
        """Remove every entity or none of them"""

    @abstractmethod
    def count(self) -> int:
        """Number of stored entities"""


class ProjectRepository(CrudRepository[Project]):
    """Project storage with code uniqueness and cascading task removal"""

    @abstractmethod
    def find_by_name_containing(self, name: str) -> List[Project]:
        """Case-sensitive literal substring match on name"""

    @abstractmethod
    def find_by_name_starting_with(self, prefix: str) -> List[Project]:
        """Case-sensitive literal prefix match on name"""

    @abstractmethod
    def find_distinct_by_tasks_name_containing(self, name: str) -> List[Project]:
        """Projects with at least one task whose name contains the substring"""

    @abstractmethod
    def find_project_by_code(self, code: str) -> Optional[Project]:
        """Project with the given code or None"""

    @abstractmethod
    def delete_by_name_containing(self, name: str) -> int:
        """Remove matching projects with their tasks, return how many were removed"""


class TaskRepository(CrudRepository[Task]):
    """Task storage and date/status/assignee queries"""

    @abstractmethod
    def find_by_project_id(self, project_id: int) -> List[Task]:
        pass

    @abstractmethod
    def find_by_due_date_greater_than(self, due_date: date) -> List[Task]:
        pass

    @abstractmethod
    def find_by_due_date_greater_than_equal(self, due_date: date) -> List[Task]:
        pass

    @abstractmethod
    def find_by_due_date_before_and_status_equals(
        self, due_date: date, status: TaskStatus
    ) -> List[Task]:
        pass

    @abstractmethod
    def find_by_assignee_first_name(self, first_name: str) -> List[Task]:
        pass


class WorkerRepository(CrudRepository[Worker]):
    """Worker storage with email uniqueness"""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Worker]:
        pass
