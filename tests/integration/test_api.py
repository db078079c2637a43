"""HTTP API tests against a fully started app."""

import pytest
from httpx import AsyncClient

from src.seo_center.catalog import all_templates

pytestmark = pytest.mark.integration


PROJECT = {"name": "Acme Web", "domain": "acme.com", "startDate": "2024-03-01"}


async def _create_project(client: AsyncClient, **overrides) -> dict:
    response = await client.post("/api/v1/projects", json={**PROJECT, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


async def _first_task(client: AsyncClient, project_id: str) -> dict:
    response = await client.get(f"/api/v1/projects/{project_id}/tasks")
    return response.json()[0]


class TestHealth:
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "mode": "guest", "database": "healthy"}


class TestSession:
    async def test_starts_as_guest(self, client: AsyncClient):
        response = await client.get("/api/v1/session")
        assert response.json() == {"mode": "guest", "userId": None, "loading": False}

    async def test_sign_in_and_out(self, client: AsyncClient):
        guest_project = await _create_project(client)

        response = await client.post("/api/v1/session", json={"user_id": "user-a"})
        assert response.json() == {"mode": "cloud", "userId": "user-a", "loading": False}
        assert (await client.get("/api/v1/projects")).json() == []

        response = await client.delete("/api/v1/session")
        assert response.json()["mode"] == "guest"
        projects = (await client.get("/api/v1/projects")).json()
        assert [p["id"] for p in projects] == [guest_project["id"]]

    async def test_blank_user_id_rejected(self, client: AsyncClient):
        response = await client.post("/api/v1/session", json={"user_id": "   "})
        assert response.status_code == 422


class TestProjects:
    async def test_create_seeds_tasks(self, client: AsyncClient):
        project = await _create_project(client, clientName="Acme Inc")

        assert project["name"] == "Acme Web"
        assert project["clientName"] == "Acme Inc"
        tasks = (await client.get(f"/api/v1/projects/{project['id']}/tasks")).json()
        assert len(tasks) == len(all_templates())
        assert tasks[0]["status"] == "not-started"

    async def test_create_validates_fields(self, client: AsyncClient):
        response = await client.post("/api/v1/projects", json={**PROJECT, "name": "  "})
        assert response.status_code == 422

    async def test_filter_tasks_by_category(self, client: AsyncClient):
        project = await _create_project(client)

        response = await client.get(
            f"/api/v1/projects/{project['id']}/tasks", params={"category": "local"}
        )

        assert response.status_code == 200
        assert {t["category"] for t in response.json()} == {"local"}

    async def test_search(self, client: AsyncClient):
        await _create_project(client)
        await _create_project(client, name="Other", domain="other.org")

        response = await client.get("/api/v1/projects", params={"q": "ACME"})

        assert [p["name"] for p in response.json()] == ["Acme Web"]

    async def test_summary(self, client: AsyncClient):
        project = await _create_project(client)

        response = await client.get(f"/api/v1/projects/{project['id']}/summary")

        body = response.json()
        assert body["score"] == 0
        assert body["stats"]["total"] == len(all_templates())
        assert body["stats"]["notStarted"] == len(all_templates())
        assert len(body["categories"]) == 6

    async def test_unknown_project_is_404(self, client: AsyncClient):
        response = await client.get("/api/v1/projects/missing/summary")

        assert response.status_code == 404
        assert "request_id" in response.json()

    async def test_delete(self, client: AsyncClient):
        project = await _create_project(client)

        response = await client.delete(f"/api/v1/projects/{project['id']}")

        assert response.status_code == 204
        assert (await client.get("/api/v1/projects")).json() == []


class TestTasks:
    async def test_patch_status_records_history(self, client: AsyncClient):
        project = await _create_project(client)
        task = await _first_task(client, project["id"])

        response = await client.patch(
            f"/api/v1/tasks/{task['id']}", json={"status": "done", "notes": "shipped"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "done"
        assert body["completionDate"] is not None
        history = (await client.get(f"/api/v1/projects/{project['id']}/history")).json()
        assert len(history) == 1
        assert history[0]["oldStatus"] == "not-started"
        assert history[0]["newStatus"] == "done"
        assert history[0]["notes"] == "shipped"

    async def test_patch_rejects_negative_time(self, client: AsyncClient):
        project = await _create_project(client)
        task = await _first_task(client, project["id"])

        response = await client.patch(
            f"/api/v1/tasks/{task['id']}", json={"timeSpentMinutes": -5}
        )

        assert response.status_code == 422

    async def test_unknown_task_is_404(self, client: AsyncClient):
        response = await client.patch("/api/v1/tasks/missing", json={"notes": "x"})
        assert response.status_code == 404


class TestAttachments:
    async def test_upload_and_delete(self, client: AsyncClient):
        project = await _create_project(client)
        task = await _first_task(client, project["id"])
        url = f"/api/v1/tasks/{task['id']}/attachments"

        response = await client.post(
            url,
            params={"filename": "proof.png"},
            content=b"\x89PNG\r\n",
            headers={"Content-Type": "image/png"},
        )

        assert response.status_code == 201
        reference = response.json()["reference"]
        assert reference.startswith("data:image/png;base64,")

        response = await client.delete(url, params={"reference": reference})
        assert response.status_code == 204
        assert (await client.get(f"/api/v1/tasks/{task['id']}")).json()["attachments"] == []

    async def test_non_image_rejected(self, client: AsyncClient):
        project = await _create_project(client)
        task = await _first_task(client, project["id"])

        response = await client.post(
            f"/api/v1/tasks/{task['id']}/attachments",
            params={"filename": "notes.txt"},
            content=b"hello",
            headers={"Content-Type": "text/plain"},
        )

        assert response.status_code == 415

    async def test_unknown_reference_is_404(self, client: AsyncClient):
        project = await _create_project(client)
        task = await _first_task(client, project["id"])

        response = await client.delete(
            f"/api/v1/tasks/{task['id']}/attachments", params={"reference": "nope"}
        )

        assert response.status_code == 404

    async def test_cloud_upload_is_served_publicly(self, client: AsyncClient):
        await client.post("/api/v1/session", json={"user_id": "user-a"})
        project = await _create_project(client)
        task = await _first_task(client, project["id"])

        response = await client.post(
            f"/api/v1/tasks/{task['id']}/attachments",
            params={"filename": "proof.png"},
            content=b"\x89PNG\r\n",
            headers={"Content-Type": "image/png"},
        )

        reference = response.json()["reference"]
        assert reference.startswith("http://test/storage/task-attachments/user-a/")
        served = await client.get(reference)
        assert served.status_code == 200
        assert served.content == b"\x89PNG\r\n"


class TestReport:
    async def test_csv_download(self, client: AsyncClient):
        project = await _create_project(client)
        task = await _first_task(client, project["id"])
        await client.patch(f"/api/v1/tasks/{task['id']}", json={"status": "in-progress"})

        response = await client.get(f"/api/v1/projects/{project['id']}/report.csv")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "Acme_Web_report_" in response.headers["content-disposition"]
        lines = response.text.strip().split("\r\n")
        assert lines[0].startswith("Date,Task ID,Task Title")
        assert len(lines) == 2
        assert "Status Update" in lines[1]

    async def test_non_ascii_project_name(self, client: AsyncClient):
        project = await _create_project(client, name="日本 SEO")

        response = await client.get(f"/api/v1/projects/{project['id']}/report.csv")

        assert response.status_code == 200
        assert "filename*=utf-8''%E6%97%A5%E6%9C%AC_SEO_report_" in response.headers[
            "content-disposition"
        ]

    async def test_end_before_start_rejected(self, client: AsyncClient):
        project = await _create_project(client)

        response = await client.get(
            f"/api/v1/projects/{project['id']}/report.csv",
            params={"start": "2024-03-02", "end": "2024-03-01"},
        )

        assert response.status_code == 422


class TestRequestId:
    async def test_http_exception_includes_request_id(self, client: AsyncClient):
        response = await client.get("/api/v1/nonexistent-endpoint")

        assert response.status_code == 404
        data = response.json()
        assert isinstance(data["request_id"], str)
        assert response.headers["x-request-id"] == data["request_id"]

    async def test_different_requests_have_different_ids(self, client: AsyncClient):
        first = await client.get("/api/v1/nonexistent-endpoint")
        second = await client.get("/api/v1/nonexistent-endpoint")

        assert first.json()["request_id"] != second.json()["request_id"]
