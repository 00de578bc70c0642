"""Shared fixtures: a throwaway SQLite catalog and an app wired to it."""

import os

# keep the module-level engine away from a real server
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SESSION_BACKEND", "memory")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from storefront.data.database import Base, make_engine
from storefront.data.seed import seed
from storefront.main import create_app
from storefront.services.login_service import LoginService
from storefront.services.session_store import InMemorySessionStore


@pytest.fixture()
def session_factory(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'storefront.db'}")
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    engine.dispose()


@pytest.fixture()
def catalog(session_factory):
    """Two categories, products 1 Laptop 256.23, 2 Mouse 25.50, 3 Cocina 25.35."""
    seed(session_factory)
    return session_factory


@pytest.fixture()
def session_store():
    return InMemorySessionStore()


@pytest.fixture()
def app(catalog, session_store):
    return create_app(
        session_store=session_store,
        session_factory=catalog,
        login_service=LoginService("admin", "123"),
    )


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def logged_client(client):
    response = client.post(
        "/login", data={"user": "admin", "password": "123"}, follow_redirects=False
    )
    assert response.status_code == 302
    return client
