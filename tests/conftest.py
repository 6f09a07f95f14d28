import os

# Base en mémoire et secrets de test, avant tout import de l'application
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ACCESS_TOKEN_SECRET"] = "test-access-secret"
os.environ["REFRESH_TOKEN_SECRET"] = "test-refresh-secret"

import pytest
from fastapi.testclient import TestClient

from main import app
from tourism.core import database


@pytest.fixture
def client():
    """Client de test sur une base vierge."""
    database.Base.metadata.drop_all(bind=database.engine)
    database.init_db()
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_user():
    return {"username": "Laurenz19", "email": "laurenz@example.com", "password": "Laurenz19"}


@pytest.fixture
def tokens(client, sample_user):
    client.post("/api/register", json=sample_user)
    resp = client.post("/api/login", json={"email": sample_user["email"], "password": sample_user["password"]})
    return resp.json()


@pytest.fixture
def auth_headers(tokens):
    return {"Authorization": f"Bearer {tokens['accessToken']}"}


@pytest.fixture
def make_visitor(client, auth_headers):
    def _make(name="Rakoto", address="Antananarivo"):
        resp = client.post("/api/visitors", json={"name": name, "address": address}, headers=auth_headers)
        assert resp.status_code == 201
        return resp.json()
    return _make


@pytest.fixture
def make_site(client, auth_headers):
    def _make(name="Tsingy", place="Bemaraha", tarif=1000):
        resp = client.post("/api/sites", json={"name": name, "place": place, "tarif": tarif}, headers=auth_headers)
        assert resp.status_code == 201
        return resp.json()
    return _make


@pytest.fixture
def make_visit(client, auth_headers):
    def _make(visitor_id, site_id, duration=1, date_visit="2023-01-15"):
        resp = client.post(
            "/api/visits",
            json={"visitor_id": visitor_id, "site_id": site_id, "duration": duration, "date_visit": date_visit},
            headers=auth_headers,
        )
        assert resp.status_code == 201
        return resp.json()
    return _make
