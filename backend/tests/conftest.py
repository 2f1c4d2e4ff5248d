"""Shared pytest fixtures: every test runs against a freshly created SQLite file."""
import os
import tempfile

_tmpdir = tempfile.mkdtemp(prefix="munch-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_tmpdir, "test.db")
os.environ["SEED_FOODS"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from munch.db import init_db, new_session  # noqa: E402
from munch.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_db():
    init_db(reset=True, seed=False)
    yield


@pytest.fixture
def db():
    s = new_session()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def sample_foods(client):
    """Burger 5.99 and Pizza 7.99, as returned by the API."""
    created = []
    for payload in (
        {"name": "Burger", "description": "A juicy beef burger", "price_cents": 599},
        {"name": "Pizza", "description": "Cheesy pizza with pepperoni", "price_cents": 799},
    ):
        res = client.post("/api/foods", json=payload)
        assert res.status_code == 201
        created.append(res.json())
    return created
