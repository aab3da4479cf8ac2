"""Tests for FastAPI app entry point."""
import pytest
from fastapi.testclient import TestClient

from islamic_names.core.config import Settings


def test_health_endpoint_returns_status_ok() -> None:
    """Health check response should contain status=ok and the version."""
    from islamic_names.main import app
    client = TestClient(app)
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "version" in data


def test_lifespan_initializes_orchestrator() -> None:
    """Startup should wire the orchestrator without contacting the model."""
    from islamic_names.main import app
    from islamic_names.services.orchestrator import NameSuggestionOrchestrator

    with TestClient(app) as client:
        assert isinstance(app.state.name_orchestrator, NameSuggestionOrchestrator)
        data = client.get("/health").json()
    assert data["services"]["name_orchestrator"] == "ok"


def test_missing_credentials_start_in_degraded_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without credentials the app still starts; endpoints report 503."""
    from islamic_names.main import app

    monkeypatch.delenv("GCP_PROJECT_ID", raising=False)
    monkeypatch.setattr(
        "islamic_names.main.get_settings", lambda: Settings(_env_file=None)
    )
    if hasattr(app.state, "name_orchestrator"):
        del app.state.name_orchestrator

    with TestClient(app) as client:
        health = client.get("/health").json()
        resp = client.post(
            "/api/names/chat", json={"father_name": "Abdullah", "gender": "male"}
        )

    assert health["services"]["name_orchestrator"] == "unavailable"
    assert resp.status_code == 503


def test_app_has_correct_title() -> None:
    from islamic_names.main import app
    assert app.title == "Islamic Name Finder"


def test_app_has_cors_middleware() -> None:
    """App should allow requests from frontend origin."""
    from islamic_names.main import app
    from starlette.middleware.cors import CORSMiddleware
    middleware_classes = [m.cls for m in app.user_middleware]
    assert CORSMiddleware in middleware_classes
