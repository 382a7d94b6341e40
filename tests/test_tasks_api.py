"""Tests for task and worker API endpoints"""

from fastapi import status


def create_project(client, code="P1", name="Project 1"):
    response = client.post("/projects", json={"code": code, "name": name})
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


def create_task(client, project_id, name, due_date="2025-02-10", **extra):
    response = client.post(
        "/tasks",
        json={"name": name, "description": f"{name} description", "dueDate": due_date,
              "projectId": project_id, **extra},
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


class TestTaskEndpoints:
    """Test /tasks endpoints"""

    def test_create_task(self, client, today):
        project = create_project(client)

        task = create_task(client, project["id"], "Task 1")

        assert task["id"] == 1
        assert task["status"] == "TO_DO"
        assert task["dateCreated"] == today.isoformat()
        assert task["dueDate"] == "2025-02-10"
        assert task["projectId"] == project["id"]

    def test_project_lists_its_tasks(self, client):
        project = create_project(client)
        create_task(client, project["id"], "Task 1")
        create_task(client, project["id"], "Task 2", status="IN_PROGRESS")

        data = client.get(f"/projects/{project['id']}").json()

        assert [t["name"] for t in data["tasks"]] == ["Task 1", "Task 2"]
        assert data["tasks"][1]["status"] == "IN_PROGRESS"

    def test_create_task_for_unknown_project(self, client):
        response = client.post("/tasks", json={"name": "t", "projectId": 42})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Project 42 not found"

    def test_create_task_without_name(self, client):
        project = create_project(client)

        response = client.post("/tasks", json={"projectId": project["id"]})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_task_without_project(self, client):
        response = client.post("/tasks", json={"name": "t"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_task_with_invalid_status(self, client):
        project = create_project(client)

        response = client.post(
            "/tasks", json={"name": "t", "projectId": project["id"], "status": "LATER"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_filter_tasks_by_project(self, client):
        p1 = create_project(client, "P1", "Project 1")
        p2 = create_project(client, "P2", "Project 2")
        create_task(client, p1["id"], "a")
        create_task(client, p2["id"], "b")

        response = client.get("/tasks", params={"projectId": p2["id"]})

        assert [t["name"] for t in response.json()] == ["b"]

    def test_update_task(self, client, today):
        project = create_project(client)
        task = create_task(client, project["id"], "Task 1")

        response = client.put(
            f"/tasks/{task['id']}",
            json={**task, "status": "DONE", "dateCreated": "1970-01-01"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "DONE"
        assert response.json()["dateCreated"] == today.isoformat()

    def test_get_missing_task(self, client):
        response = client.get("/tasks/3")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {
            "type": "https://taskboard.local/errors/not_found",
            "title": "Not Found",
            "status": 404,
            "detail": "Task 3 not found",
            "instance": "/tasks/3",
        }

    def test_delete_task(self, client):
        project = create_project(client)
        task = create_task(client, project["id"], "Task 1")

        response = client.delete(f"/tasks/{task['id']}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/projects/{project['id']}").json()["tasks"] == []

    def test_delete_project_cascades_to_tasks(self, client):
        """Deleting a project removes exactly its own tasks"""
        project = create_project(client, "P1", "Project 1")
        other = create_project(client, "P2", "Project 2")
        first = create_task(client, project["id"], "Task 1")
        second = create_task(client, project["id"], "Task 2")
        kept = create_task(client, other["id"], "Task 3")

        response = client.delete(f"/projects/{project['id']}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        remaining = [t["id"] for t in client.get("/tasks").json()]
        assert first["id"] not in remaining
        assert second["id"] not in remaining
        assert remaining == [kept["id"]]


class TestWorkerEndpoints:
    """Test /workers endpoints"""

    def test_create_and_get_worker(self, client):
        response = client.post(
            "/workers", json={"email": "john@test.com", "firstName": "John", "lastName": "Doe"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        worker = response.json()
        assert worker["firstName"] == "John"
        assert client.get(f"/workers/{worker['id']}").json() == worker

    def test_duplicate_email(self, client):
        client.post("/workers", json={"email": "john@test.com", "firstName": "John"})

        response = client.post("/workers", json={"email": "john@test.com", "firstName": "Jo"})

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_create_without_email(self, client):
        response = client.post("/workers", json={"firstName": "John"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_worker(self, client):
        worker = client.post("/workers", json={"email": "john@test.com", "firstName": "John"}).json()

        response = client.put(
            f"/workers/{worker['id']}", json={"email": "john@test.com", "firstName": "Johnny"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["firstName"] == "Johnny"

    def test_delete_worker_unassigns_tasks(self, client):
        worker = client.post("/workers", json={"email": "john@test.com", "firstName": "John"}).json()
        project = create_project(client)
        task = create_task(client, project["id"], "Task 1", assigneeId=worker["id"])
        assert task["assigneeId"] == worker["id"]

        response = client.delete(f"/workers/{worker['id']}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/tasks/{task['id']}").json()["assigneeId"] is None
        assert client.get("/workers").json() == []

    def test_delete_missing_worker(self, client):
        response = client.delete("/workers/9")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Worker 9 not found"
