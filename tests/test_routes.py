import importlib
from unittest import mock

import pytest
from fastapi.testclient import TestClient

from fakenews_ui.controllers.classifier_controller import (
    EMPTY_INPUT_MESSAGE,
    TRANSPORT_ERROR_MESSAGE,
    ClassificationController,
    get_controller,
)
from fakenews_ui.main import app

from conftest import FakeService

@pytest.fixture
def service():
    return FakeService()

@pytest.fixture
def client(service):
    controller = ClassificationController(service)
    app.dependency_overrides[get_controller] = lambda: controller
    yield TestClient(app)
    app.dependency_overrides.clear()

def test_index_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Fake News Detector" in response.text

def test_healthchecker(client):
    response = client.get("/api/healthchecker")
    assert response.status_code == 200
    assert "api_url" in response.json()

def test_initial_state(client):
    response = client.get("/api/analysis")
    assert response.json() == {"state": "idle", "input": {"title": "", "body": ""}, "outcome": None}

def test_submit_success(client, service):
    response = client.post("/api/analysis", json={"title": "Headline", "body": "Story"})

    assert response.status_code == 200
    assert response.json() == {"status": "success", "isFake": True, "confidence": 87.0}
    assert service.requests[0].model_dump() == {"text": "Story", "title": "Headline"}

def test_submit_blank_input(client, service):
    response = client.post("/api/analysis", json={"title": " ", "body": ""})

    assert response.status_code == 200
    assert response.json() == {"status": "failure", "message": EMPTY_INPUT_MESSAGE, "kind": "validation"}
    assert service.requests == []

def test_submit_transport_failure(client, service, transport_error):
    service.error = transport_error

    response = client.post("/api/analysis", json={"body": "Story"})

    assert response.json()["message"] == TRANSPORT_ERROR_MESSAGE
    assert client.get("/api/analysis").json()["state"] == "idle"

def test_clear(client):
    client.post("/api/analysis", json={"body": "Story"})
    assert client.get("/api/analysis").json()["outcome"] is not None

    response = client.delete("/api/analysis")

    assert response.status_code == 200
    assert response.json()["outcome"] is None
    assert response.json()["input"]["body"] == "Story"

def test_invalid_body_is_rejected(client):
    response = client.post("/api/analysis", json={"title": 5})
    assert response.status_code == 422

def test_index_page_renders_failure_when_server_unreachable(client):
    page = client.get("/").text
    assert "catch (err)" in page
    assert "Unable to reach the Fake News Detector page server." in page

def test_logging_configured_on_import():
    import fakenews_ui.main as main_module

    with mock.patch("logging.basicConfig") as basic_config:
        importlib.reload(main_module)

    basic_config.assert_called_once()
    assert basic_config.call_args.kwargs["level"] == main_module.settings.log_level.upper()
