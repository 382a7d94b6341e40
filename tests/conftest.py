"""Pytest configuration and shared fixtures"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from taskboard.config import Settings
from taskboard.container import build_container
from taskboard.main import create_app
from taskboard.models import Project, Task, TaskStatus, Worker
from taskboard.repositories import (
    InMemoryProjectRepository,
    InMemoryStore,
    InMemoryTaskRepository,
    InMemoryWorkerRepository,
)

TODAY = date(2025, 3, 1)


@pytest.fixture
def today():
    """Fixed date returned by the service clock"""
    return TODAY


@pytest.fixture
def settings():
    """Settings isolated from any local .env file"""
    return Settings(_env_file=None)


@pytest.fixture
def container(settings, today):
    """Fresh container with an empty store and a pinned clock"""
    return build_container(settings, clock=lambda: today)


@pytest.fixture
def app(container):
    """FastAPI application bound to the test container"""
    return create_app(container=container)


@pytest.fixture
def client(app):
    """FastAPI test client fixture"""
    return TestClient(app)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def project_repository(store):
    return InMemoryProjectRepository(store)


@pytest.fixture
def task_repository(store):
    return InMemoryTaskRepository(store)


@pytest.fixture
def worker_repository(store):
    return InMemoryWorkerRepository(store)


@pytest.fixture
def sample_project(project_repository):
    """Create a sample project for testing"""
    return project_repository.save(
        Project(code="PTEST-1", name="Test Project 1", description="Description for project PTEST-1")
    )


@pytest.fixture
def sample_worker(worker_repository):
    """Create a sample worker for testing"""
    return worker_repository.save(
        Worker(email="john@test.com", first_name="John", last_name="Doe")
    )


@pytest.fixture
def sample_task(task_repository, sample_project):
    """Create a sample task for testing"""
    return task_repository.save(
        Task(
            name="First Test Task",
            description="First Test Task",
            due_date=date(2025, 2, 10),
            project_id=sample_project.id,
            status=TaskStatus.TO_DO,
        )
    )
