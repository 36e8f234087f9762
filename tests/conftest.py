import os

# must be set before campuscare builds its engine
os.environ["CAMPUSCARE_DATABASE_URL"] = "sqlite://"
os.environ.setdefault("CAMPUSCARE_SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient

from campuscare.app.main import app
from campuscare.db.base import Base, SessionLocal, engine


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
