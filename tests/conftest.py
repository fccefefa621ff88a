import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.database.base_class import Base
from app.main import create_app
from app.model.motivational_content import ContentType, MotivationalContent


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite://", SECRET_KEY="test-secret", STREAK_TIMEZONE="UTC")


@pytest.fixture
def app(settings):
    application = create_app(settings)
    Base.metadata.create_all(bind=application.state.engine)
    yield application
    Base.metadata.drop_all(bind=application.state.engine)
    application.state.engine.dispose()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


def register(client, email="ada@buildu.org", password="secret123", first_name="Ada", last_name="Lovelace"):
    res = client.post("/auth/register", json={
        "email": email,
        "password": password,
        "firstName": first_name,
        "lastName": last_name,
    })
    assert res.status_code == 201, res.text
    return res.json()


@pytest.fixture
def auth(client):
    """Registers a user; returns (headers, user json)."""
    body = register(client)
    return {"Authorization": f"Bearer {body['accessToken']}"}, body["user"]


@pytest.fixture
def seeded_content(db):
    db.add_all([
        MotivationalContent(type=ContentType.quote, content="Start where you are.", author="Arthur Ashe", category="motivation"),
        MotivationalContent(type=ContentType.quote, content="Keep going.", author="Anon", category="perseverance"),
        MotivationalContent(type=ContentType.tip, title="Make it specific", content="Say what done means.", category="goal-setting"),
        MotivationalContent(type=ContentType.tip, title="Tailor your CV", content="Mirror the advert.", category="employment"),
        MotivationalContent(type=ContentType.tip, title="Daily practice", content="Twenty minutes a day.", category="skills"),
    ])
    db.commit()
