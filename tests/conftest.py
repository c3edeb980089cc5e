import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import coaching_app.models  # noqa: F401
from coaching_app.core.database import Base
from coaching_app.core.dependencies import get_db
from coaching_app.main import app


@pytest.fixture
def engine():
    # One shared in-memory connection so every session sees the same data
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()

@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def create_member(client):
    def _create(name="Alice", email="alice@example.com", **extra):
        response = client.post("/members", json={"name": name, "email": email, **extra})
        assert response.status_code == 201, response.text
        return response.json()
    return _create

@pytest.fixture
def create_team(client):
    def _create(name="Falcons", **extra):
        response = client.post("/teams", json={"name": name, **extra})
        assert response.status_code == 201, response.text
        return response.json()
    return _create
