"""In-memory repository implementations"""

import copy
import logging
import threading
from abc import abstractmethod
from contextlib import contextmanager
from datetime import date
from typing import Any, Dict, Iterable, Iterator, List, Optional

from taskboard.errors import NotFoundError, UniquenessViolationError, ValidationError
from taskboard.models import Project, Task, TaskStatus, Worker
from taskboard.repositories.base import (
    CrudRepository,
    ProjectRepository,
    TaskRepository,
    WorkerRepository,
)

logger = logging.getLogger(__name__)


class InMemoryStore:
    """
    Shared state behind the in-memory repositories.

    Projects, tasks and workers live in insertion-ordered dicts keyed by id.
    A single re-entrant lock serializes every repository operation so that
    batches and cascades are observed atomically.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self.projects: Dict[int, Project] = {}
        self.tasks: Dict[int, Task] = {}
        self.workers: Dict[int, Worker] = {}
        self._sequences: Dict[str, int] = {"project": 0, "task": 0, "worker": 0}

    def next_id(self, kind: str) -> int:
        # Sequences are not rolled back with a failed batch, ids are never reused
        self._sequences[kind] += 1
        return self._sequences[kind]

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Hold the lock and restore the collections if the block raises"""
        with self.lock:
            snapshot = (
                copy.deepcopy(self.projects),
                copy.deepcopy(self.tasks),
                copy.deepcopy(self.workers),
            )
            try:
                yield
            except Exception:
                self.projects, self.tasks, self.workers = snapshot
                logger.info("Batch rejected, store restored to previous state")
                raise


class InMemoryCrudRepository(CrudRepository):
    """Generic upsert/delete logic; subclasses provide checks and cascades"""

    kind: str = ""
    label: str = ""

    def __init__(self, store: InMemoryStore):
        self.store = store

    @property
    @abstractmethod
    def _items(self) -> Dict[int, Any]:
        """Collection in the store holding this repository's entities"""

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _check(self, entity, entity_id: Optional[int]) -> None:
        """Validate an entity about to be stored under entity_id (None for new)"""

    def _after_assign(self, entity) -> None:
        """Adjust a stored copy once its id is known"""

    def _cascade(self, entity_id: int) -> None:
        """Remove or detach dependents of an entity about to be deleted"""

    def _read(self, entity):
        return copy.deepcopy(entity)

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def find_by_id(self, entity_id: int):
        with self.store.lock:
            entity = self._items.get(entity_id)
            return self._read(entity) if entity is not None else None

    def find_all(self) -> List[Any]:
        with self.store.lock:
            return [self._read(e) for e in self._items.values()]

    def find_all_by_id(self, ids: Iterable[int]) -> List[Any]:
        wanted = set(ids)
        with self.store.lock:
            return [self._read(e) for e in self._items.values() if e.id in wanted]

    def count(self) -> int:
        with self.store.lock:
            return len(self._items)

    def _filter(self, predicate) -> List[Any]:
        with self.store.lock:
            return [self._read(e) for e in self._items.values() if predicate(e)]

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def save(self, entity, created_on: Optional[date] = None):
        with self.store.lock:
            existing = self._items.get(entity.id) if entity.id is not None else None
            if existing is None:
                return self._insert(entity, created_on)
            return self._overwrite(entity, existing)

    def update(self, entity):
        with self.store.lock:
            existing = self._items.get(entity.id) if entity.id is not None else None
            if existing is None:
                raise NotFoundError.for_entity(self.label, entity.id)
            return self._overwrite(entity, existing)

    def _insert(self, entity, created_on: Optional[date]):
        stored = copy.deepcopy(entity)
        self._check(stored, None)
        stored.id = self.store.next_id(self.kind)
        if created_on is not None:
            stored.date_created = created_on
        return self._put(stored)

    def _overwrite(self, entity, existing):
        stored = copy.deepcopy(entity)
        self._check(stored, existing.id)
        if hasattr(existing, "date_created"):
            stored.date_created = existing.date_created
        return self._put(stored)

    def _put(self, stored):
        self._after_assign(stored)
        self._items[stored.id] = stored
        logger.info(f"Saved {self.label} {stored.id}")
        return self._read(stored)

    def save_all(self, entities: Iterable[Any]) -> List[Any]:
        with self.store.atomic():
            return [self.save(entity) for entity in entities]

    def delete_by_id(self, entity_id: int) -> None:
        with self.store.lock:
            if entity_id not in self._items:
                raise NotFoundError.for_entity(self.label, entity_id)
            self._cascade(entity_id)
            del self._items[entity_id]
            logger.info(f"Deleted {self.label} {entity_id}")

    def delete_all(self, entities: Iterable[Any]) -> None:
        with self.store.atomic():
            for entity in entities:
                self.delete_by_id(entity.id)


class InMemoryProjectRepository(InMemoryCrudRepository, ProjectRepository):
    """Projects; computes the internal id when a prefix and suffix are configured"""

    kind = "project"
    label = "Project"

    def __init__(
        self,
        store: InMemoryStore,
        prefix: Optional[str] = None,
        suffix: Optional[int] = None,
    ):
        super().__init__(store)
        self.prefix = prefix
        self.suffix = suffix

    @property
    def _items(self) -> Dict[int, Project]:
        return self.store.projects

    def _check(self, entity: Project, entity_id: Optional[int]) -> None:
        if entity.code is None:
            return
        for other in self.store.projects.values():
            if other.code == entity.code and other.id != entity_id:
                raise UniquenessViolationError("code", entity.code, entity_id=entity_id)

    def _after_assign(self, entity: Project) -> None:
        # Tasks are derived from their back-references, never stored on the project
        entity.tasks = []
        if self.prefix is not None and self.suffix is not None:
            entity.internal_id = f"{self.prefix}-{entity.id}-{self.suffix}"
            logger.info(f"Generated internal id {entity.internal_id}")

    def _cascade(self, entity_id: int) -> None:
        orphans = [t.id for t in self.store.tasks.values() if t.project_id == entity_id]
        for task_id in orphans:
            del self.store.tasks[task_id]
        if orphans:
            logger.info(f"Removed {len(orphans)} tasks of Project {entity_id}")

    def _read(self, entity: Project) -> Project:
        project = copy.deepcopy(entity)
        project.tasks = [
            copy.deepcopy(t) for t in self.store.tasks.values() if t.project_id == entity.id
        ]
        return project

    def find_by_name_containing(self, name: str) -> List[Project]:
        return self._filter(lambda p: name in (p.name or ""))

    def find_by_name_starting_with(self, prefix: str) -> List[Project]:
        return self._filter(lambda p: (p.name or "").startswith(prefix))

    def find_distinct_by_tasks_name_containing(self, name: str) -> List[Project]:
        def has_matching_task(project: Project) -> bool:
            return any(
                t.project_id == project.id and name in (t.name or "")
                for t in self.store.tasks.values()
            )

        return self._filter(has_matching_task)

    def find_project_by_code(self, code: str) -> Optional[Project]:
        matches = self._filter(lambda p: p.code == code)
        return matches[0] if matches else None

    def delete_by_name_containing(self, name: str) -> int:
        with self.store.lock:
            ids = [p.id for p in self.store.projects.values() if name in (p.name or "")]
            for project_id in ids:
                self.delete_by_id(project_id)
            return len(ids)


class InMemoryTaskRepository(InMemoryCrudRepository, TaskRepository):
    """Tasks; every task must reference a stored project"""

    kind = "task"
    label = "Task"

    @property
    def _items(self) -> Dict[int, Task]:
        return self.store.tasks

    def _check(self, entity: Task, entity_id: Optional[int]) -> None:
        if entity.project_id is None:
            raise ValidationError("project_id", "a task must belong to a project", entity_id)
        if entity.project_id not in self.store.projects:
            raise NotFoundError.for_entity("Project", entity.project_id)
        if entity.assignee_id is not None and entity.assignee_id not in self.store.workers:
            raise NotFoundError.for_entity("Worker", entity.assignee_id)

    def find_by_project_id(self, project_id: int) -> List[Task]:
        return self._filter(lambda t: t.project_id == project_id)

    def find_by_due_date_greater_than(self, due_date: date) -> List[Task]:
        return self._filter(lambda t: t.due_date is not None and t.due_date > due_date)

    def find_by_due_date_greater_than_equal(self, due_date: date) -> List[Task]:
        return self._filter(lambda t: t.due_date is not None and t.due_date >= due_date)

    def find_by_due_date_before_and_status_equals(
        self, due_date: date, status: TaskStatus
    ) -> List[Task]:
        return self._filter(
            lambda t: t.due_date is not None and t.due_date < due_date and t.status == status
        )

    def find_by_assignee_first_name(self, first_name: str) -> List[Task]:
        def assigned_to(task: Task) -> bool:
            worker = self.store.workers.get(task.assignee_id)
            return worker is not None and worker.first_name == first_name

        return self._filter(assigned_to)


class InMemoryWorkerRepository(InMemoryCrudRepository, WorkerRepository):
    """Workers; deleting a worker unassigns their tasks"""

    kind = "worker"
    label = "Worker"

    @property
    def _items(self) -> Dict[int, Worker]:
        return self.store.workers

    def _check(self, entity: Worker, entity_id: Optional[int]) -> None:
        if entity.email is None:
            return
        for other in self.store.workers.values():
            if other.email == entity.email and other.id != entity_id:
                raise UniquenessViolationError("email", entity.email, entity_id=entity_id)

    def _cascade(self, entity_id: int) -> None:
        for task in self.store.tasks.values():
            if task.assignee_id == entity_id:
                task.assignee_id = None

    def find_by_email(self, email: str) -> Optional[Worker]:
        matches = self._filter(lambda w: w.email == email)
        return matches[0] if matches else None
