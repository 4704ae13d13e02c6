import os

import pytest

# Point the app at an in-memory database before it builds its engine.
os.environ["DATABASE_URL"] = "sqlite://"

from fastapi.testclient import TestClient

from chatserver.core.database import SessionLocal, engine
from chatserver.main import app
from chatserver.models import Base


@pytest.fixture(autouse=True)
def schema():
    """Fresh tables for every test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    """A test client for the FastAPI app."""
    yield TestClient(app)
    app.dependency_overrides.clear()
