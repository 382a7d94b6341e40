"""Project service"""

import logging
from datetime import date
from typing import Callable, List

from taskboard.errors import NotFoundError
from taskboard.models import Project
from taskboard.repositories import ProjectRepository

logger = logging.getLogger(__name__)


class ProjectService:
    """
    Policy layer above the project repository.

    Stamps dateCreated on new projects and turns missing lookups into
    NotFoundError.
    """

    def __init__(self, repository: ProjectRepository, clock: Callable[[], date] = date.today):
        """Initialize with a repository and the clock used for dateCreated"""
        self.repository = repository
        self.clock = clock

    def find_by_id(self, project_id: int) -> Project:
        """
        Get a project by id.

        Raises:
            NotFoundError: If no project has this id
        """
        project = self.repository.find_by_id(project_id)
        if project is None:
            logger.warning(f"Project {project_id} not found")
            raise NotFoundError.for_entity("Project", project_id)
        return project

    def find_all(self) -> List[Project]:
        return self.repository.find_all()

    def find_by_name(self, name: str) -> List[Project]:
        """Projects whose name contains the given text"""
        return self.repository.find_by_name_containing(name)

    def find_by_task_name(self, name: str) -> List[Project]:
        """Projects having at least one task whose name contains the given text"""
        return self.repository.find_distinct_by_tasks_name_containing(name)

    def find_by_code(self, code: str) -> Project:
        project = self.repository.find_project_by_code(code)
        if project is None:
            raise NotFoundError(f"Project with code {code} not found")
        return project

    def save(self, project: Project) -> Project:
        """
        Persist a project.

        A project the store does not know yet (no id, or an id it has never
        issued) is inserted with today's date as dateCreated; a stored
        project is overwritten and keeps its dateCreated.
        """
        saved = self.repository.save(project, created_on=self.clock())
        logger.info(f"Saved project {saved.id} ({saved.code})")
        return saved

    def update_by_id(self, project_id: int, project: Project) -> Project:
        """
        Overwrite an existing project, keeping its original dateCreated.

        Raises:
            NotFoundError: If no project has this id
        """
        project.id = project_id
        try:
            return self.repository.update(project)
        except NotFoundError as exc:
            logger.warning(f"Update of project {project_id} rejected: {exc.message}")
            raise

    def delete_by_id(self, project_id: int) -> None:
        """
        Delete a project and its tasks.

        Raises:
            NotFoundError: If no project has this id
        """
        self.find_by_id(project_id)
        self.repository.delete_by_id(project_id)
        logger.info(f"Deleted project {project_id}")
