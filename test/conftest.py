import pytest
from fastapi.testclient import TestClient

from main import app


# This fixture will be automatically used by tests in the same directory or subdirectories.
@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """
    Points DATA_DIR at a fresh temporary directory before each test,
    so every test starts with no projects.json or tasks.json.
    """
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    yield tmp_path


@pytest.fixture
def client():
    """A TestClient with the app lifespan running (collection files initialized)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def project(client):
    """A freshly created project."""
    response = client.post("/projects", json={"title": "A", "description": "B"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def task_payload():
    """Builds a valid task creation body; keyword overrides replace fields."""
    def build(pj_id, **overrides):
        payload = {
            "pjId": pj_id,
            "title": "T",
            "description": "D",
            "priority": "high",
            "dueDate": "2024-01-01",
            "status": "not-started",
        }
        payload.update(overrides)
        return payload
    return build
