import json

import pytest
from fastapi.testclient import TestClient

from main import app


def test_create_first_project_gets_id_1(client):
    response = client.post("/projects", json={"title": "A", "description": "B"})

    assert response.status_code == 201
    assert response.json() == {"id": 1, "title": "A", "description": "B", "tasks": []}


def test_create_assigns_previous_max_plus_one(client, data_dir):
    (data_dir / "projects.json").write_text(json.dumps([
        {"id": 7, "title": "x", "description": "y", "tasks": []},
        {"id": 3, "title": "x", "description": "y", "tasks": []},
    ]), encoding="utf-8")

    response = client.post("/projects", json={"title": "A", "description": "B"})

    assert response.status_code == 201
    assert response.json()["id"] == 8


@pytest.mark.parametrize("body", [
    {"description": "B"},
    {"title": "A"},
    {"title": "", "description": "B"},
    {"title": "A", "description": None},
    {},
])
def test_create_with_missing_fields_is_rejected_without_writing(client, data_dir, body):
    before = (data_dir / "projects.json").read_text(encoding="utf-8")

    response = client.post("/projects", json=body)

    assert response.status_code == 400
    assert response.json() == {"message": "Title and description are required."}
    assert (data_dir / "projects.json").read_text(encoding="utf-8") == before


def test_create_without_body_is_rejected(client):
    response = client.post("/projects")

    assert response.status_code == 400
    assert response.json() == {"message": "Title and description are required."}


def test_create_with_malformed_body_returns_400(client):
    response = client.post(
        "/projects", content="{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert "message" in response.json()


def test_list_projects(client):
    assert client.get("/projects").json() == []

    client.post("/projects", json={"title": "A", "description": "B"})
    client.post("/projects", json={"title": "C", "description": "D"})

    response = client.get("/projects")
    assert response.status_code == 200
    assert [p["title"] for p in response.json()] == ["A", "C"]


def test_get_project(client, project):
    response = client.get(f"/projects/{project['id']}")
    assert response.status_code == 200
    assert response.json() == project


@pytest.mark.parametrize("project_id", ["99", "abc"])
def test_get_unknown_project_returns_404(client, project, project_id):
    response = client.get(f"/projects/{project_id}")
    assert response.status_code == 404
    assert response.json() == {"message": "Project not found."}


def test_delete_project(client, project, data_dir):
    response = client.delete(f"/projects/{project['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Project successfully deleted."}
    assert json.loads((data_dir / "projects.json").read_text(encoding="utf-8")) == []


def test_delete_unknown_project_returns_404(client):
    response = client.delete("/projects/1")
    assert response.status_code == 404
    assert response.json() == {"message": "Project not found."}


def test_delete_project_with_tasks_is_rejected(client, data_dir):
    stored = [{"id": 1, "title": "A", "description": "B", "tasks": [4]}]
    (data_dir / "projects.json").write_text(json.dumps(stored), encoding="utf-8")

    response = client.delete("/projects/1")

    assert response.status_code == 400
    assert response.json() == {"message": "Cannot delete project because it has tasks."}
    assert client.get("/projects").json() == stored


def test_unknown_route_uses_message_envelope(client):
    response = client.get("/nothing-here")
    assert response.status_code == 404
    assert "message" in response.json()


def test_cors_allows_any_origin(client):
    response = client.get("/projects", headers={"Origin": "http://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_malformed_projects_file_fails_request_without_rewrite(data_dir):
    projects_file = data_dir / "projects.json"
    projects_file.write_text("{not json", encoding="utf-8")

    with TestClient(app, raise_server_exceptions=False) as raw_client:
        response = raw_client.post("/projects", json={"title": "A", "description": "B"})

    assert response.status_code == 500
    assert projects_file.read_text(encoding="utf-8") == "{not json"
