"""
Sample data used for local development.
Creates sample projects, workers and tasks through the services.
"""

import logging
from datetime import date

from taskboard.container import Container
from taskboard.models import Project, Task, TaskStatus, Worker

logger = logging.getLogger(__name__)


def seed_sample_data(container: Container) -> None:
    """Load the sample projects, workers and tasks into an empty store"""
    projects = container.project_service()
    tasks = container.task_service()
    workers = container.worker_service()

    if projects.find_all():
        logger.info("Store already has projects, skipping sample data")
        return

    p1 = projects.save(Project(code="P1", name="Project 1", description="About Project 1"))
    p2 = projects.save(Project(code="P2", name="Project 2", description="About Project 2"))
    p3 = projects.save(Project(code="P3", name="Project 3", description="About Project 3"))
    logger.info("Created sample projects")

    john = workers.save(Worker(email="john@test.com", first_name="John", last_name="Doe"))
    susan = workers.save(Worker(email="susan@test.com", first_name="Susan", last_name="Smith"))
    logger.info("Created sample workers")

    samples = [
        Task(name="Task 1", description="Task 1 Description", due_date=date(2025, 1, 12),
             project_id=p1.id, status=TaskStatus.TO_DO, assignee_id=john.id),
        Task(name="Task 2", description="Task 2 Description", due_date=date(2025, 2, 10),
             project_id=p1.id, status=TaskStatus.TO_DO),
        Task(name="Task 3", description="Task 3 Description", due_date=date(2025, 3, 16),
             project_id=p1.id, status=TaskStatus.IN_PROGRESS, assignee_id=susan.id),
        Task(name="Task 4", description="Task 4 Description", due_date=date(2025, 6, 25),
             project_id=p2.id, status=TaskStatus.DONE, assignee_id=john.id),
        Task(name="Project Review", description="Quarterly review", due_date=date(2025, 9, 30),
             project_id=p3.id, status=TaskStatus.ON_HOLD),
    ]
    for task in samples:
        tasks.save(task)
    logger.info(f"Created {len(samples)} sample tasks")
