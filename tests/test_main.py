import pytest
from pydantic import ValidationError

from app.config import Settings


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["environment"] == "development"
    assert body["timestamp"]


def test_root(client, settings):
    body = client.get("/").json()
    assert body["name"] == settings.PROJECT_NAME
    assert body["version"] == settings.API_VERSION


def test_settings_on_app_state(app, settings):
    assert app.state.settings is settings


def test_cors_allows_frontend(client, settings):
    res = client.options("/health", headers={
        "Origin": settings.FRONTEND_URL,
        "Access-Control-Request-Method": "GET",
    })
    assert res.headers["access-control-allow-origin"] == settings.FRONTEND_URL


def test_unknown_streak_timezone_fails_settings():
    with pytest.raises(ValidationError):
        Settings(DATABASE_URL="sqlite://", STREAK_TIMEZONE="Mars/Olympus")


def test_named_streak_timezone_is_accepted():
    assert Settings(DATABASE_URL="sqlite://", STREAK_TIMEZONE="Europe/London").STREAK_TIMEZONE == "Europe/London"
