"""Shared fixtures: an in-memory SQLite store behind the FastAPI app."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["INSIGHTS_REPLY_DELAY"] = "0"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

import models.database  # noqa: F401
from client.schema_client import SchemaStudioClient
from database.database import build_engine, get_db
from main import app
from models.base import Base


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


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
def api(client):
    return SchemaStudioClient(http=client)


@pytest.fixture
def sales_db(client):
    response = client.post("/api/databases", json={"name": "Sales", "database_type": "postgresql"})
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def orders_table(client, sales_db):
    response = client.post(
        f"/api/tables/database/{sales_db['id']}",
        json={
            "name": "orders",
            "description": "Customer orders",
            "attributes": [
                {"name": "id", "data_type": "INTEGER", "is_primary_key": True, "is_nullable": False},
                {"name": "total", "data_type": "DECIMAL(10,2)"},
            ],
        },
    )
    assert response.status_code == 201
    return response.json()["data"]
