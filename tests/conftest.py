import os

# Force the throwaway SQLite store before the app is imported
os.environ["TESTING"] = "1"
os.environ["SEED_ENABLED"] = "1"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select
from directory_api.db import Base, SessionLocal, engine
from directory_api.main import app
from directory_api.models import Employee

# Fixture for a freshly seeded store; entering the client runs the startup sequence
@pytest.fixture(scope="session")
def client():
    Base.metadata.drop_all(bind=engine)
    with TestClient(app) as c:
        yield c
    Base.metadata.drop_all(bind=engine)

# Direct store access for checks that bypass the API
@pytest.fixture
def db_session(client):
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def employee_count(db_session):
    def _count():
        db_session.expire_all()
        return db_session.scalar(select(func.count()).select_from(Employee))
    return _count
