"""Tests for application wiring, configuration and sample data"""

from fastapi import status
from fastapi.testclient import TestClient

from taskboard.config import Settings
from taskboard.container import build_container
from taskboard.main import create_app
from taskboard.seed import seed_sample_data


class TestHealth:
    """Test basic health and root endpoints"""

    def test_basic_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "running"

    def test_unknown_route_is_problem_detail(self, client):
        response = client.get("/nothing-here")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["status"] == 404

    def test_json_responses_declare_utf8(self, client):
        ok = client.get("/health")
        missing = client.get("/projects/1")

        assert ok.headers["content-type"] == "application/json; charset=utf-8"
        assert missing.headers["content-type"] == "application/json; charset=utf-8"


class TestSettings:
    """Test configuration loading"""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.project_prefix is None
        assert settings.project_suffix is None
        assert settings.internal_id_enabled is False

    def test_dotted_option_names(self):
        settings = Settings(_env_file=None, **{"project.prefix": "PRJ", "project.suffix": "7"})

        assert settings.project_prefix == "PRJ"
        assert settings.project_suffix == 7
        assert settings.internal_id_enabled is True

    def test_unknown_options_ignored(self):
        settings = Settings(_env_file=None, **{"additional.info": "x", "project_prefix": "A"})

        assert settings.project_prefix == "A"

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("PROJECT_PREFIX", "ENV")
        monkeypatch.setenv("PROJECT_SUFFIX", "3")

        settings = Settings(_env_file=None)

        assert settings.project_prefix == "ENV"
        assert settings.project_suffix == 3

    def test_cors_origins_list(self):
        settings = Settings(_env_file=None, cors_origins="http://a, http://b")

        assert settings.cors_origins_list == ["http://a", "http://b"]


class TestContainer:
    """Test the composition root"""

    def test_repositories_share_one_store(self, container):
        assert container.store() is container.store()
        assert container.project_repository() is container.project_repository()
        assert container.project_repository().store is container.task_repository().store
        assert container.worker_repository().store is container.store()

    def test_services_are_built_per_request_over_shared_repositories(self, container):
        first, second = container.project_service(), container.project_service()

        assert first is not second
        assert first.repository is second.repository

    def test_each_container_owns_its_store(self, settings):
        first, second = build_container(settings), build_container(settings)

        assert first.store() is not second.store()

    def test_clock_reaches_the_services(self, container, today):
        assert container.task_service().clock() == today

    def test_internal_id_configured_through_settings(self):
        settings = Settings(_env_file=None, project_prefix="PRJ", project_suffix=100)
        app = create_app(container=build_container(settings))
        client = TestClient(app)

        client.post("/projects", json={"code": "P1", "name": "Project 1"})

        project = app.state.container.project_repository().find_by_id(1)
        assert project.internal_id == "PRJ-1-100"


class TestSampleData:
    """Test seeding of sample data"""

    def test_seed_sample_data(self, container):
        seed_sample_data(container)

        assert container.project_repository().count() == 3
        assert container.worker_repository().count() == 2
        assert len(container.task_service().find_by_assignee_first_name("John")) == 2
        assert [p.code for p in container.project_service().find_by_task_name("Task")] == ["P1", "P2"]

    def test_seed_is_skipped_when_store_has_projects(self, container):
        seed_sample_data(container)
        seed_sample_data(container)

        assert container.project_repository().count() == 3

    def test_seed_on_startup(self):
        settings = Settings(_env_file=None, seed_sample_data=True)
        app = create_app(settings=settings)

        assert app.state.container.project_repository().count() == 3
