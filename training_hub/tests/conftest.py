"""Shared fixtures for Training Hub tests.

Provides:
- fake_db: patches supabase_client with an in-memory fake
- failing_db: every query fails the way a PostgREST error does
- client: sync TestClient wired to the FastAPI app
- sample row factories for gyms and training plans
"""

import os
import uuid
from collections import defaultdict
from unittest.mock import MagicMock, patch

import pytest
from postgrest.exceptions import APIError

# Set env vars before any app imports
os.environ.setdefault("SUPABASE_URL", "https://fake.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "fake-key")


# ---------------------------------------------------------------------------
# In-memory fake Supabase
# ---------------------------------------------------------------------------

class FakeQueryResult:
    def __init__(self, data=None, count=None):
        self.data = data or []
        self.count = count


class FakeQueryBuilder:
    """Mimics the read half of the supabase-py query builder chain."""

    def __init__(self, store, table_name, error=None):
        self._store = store
        self._table = table_name
        self._error = error
        self._filters = []
        self._limit_val = None
        self.columns = "*"

    def select(self, columns="*", count=None):
        self.columns = columns
        return self

    def eq(self, col, val):
        self._filters.append((col, val))
        return self

    def limit(self, n):
        self._limit_val = n
        return self

    def execute(self):
        if self._error is not None:
            raise self._error
        rows = [
            r for r in self._store[self._table]
            if all(r.get(col) == val for col, val in self._filters)
        ]
        if self._limit_val is not None:
            rows = rows[:self._limit_val]
        return FakeQueryResult(data=rows)


class FakeDB:
    """In-memory store keyed by table name."""

    def __init__(self):
        self.store = defaultdict(list)
        self.queries = []

    def table(self, name, error=None):
        q = FakeQueryBuilder(self.store, name, error)
        self.queries.append(q)
        return q


@pytest.fixture
def fake_db():
    """Provides a clean in-memory DB and patches supabase_client._table."""
    db = FakeDB()

    with patch("training_hub.supabase_client._table", side_effect=db.table):
        with patch("training_hub.supabase_client.get_client", return_value=MagicMock()):
            yield db


@pytest.fixture
def failing_db():
    """Every read raises an APIError."""
    db = FakeDB()
    error = APIError({"message": "relation does not exist", "code": "42P01", "hint": None, "details": None})

    def failing_table(name):
        return db.table(name, error=error)

    with patch("training_hub.supabase_client._table", side_effect=failing_table):
        with patch("training_hub.supabase_client.get_client", return_value=MagicMock()):
            yield db


def _make_client():
    from fastapi.testclient import TestClient
    from training_hub.app import create_app

    return TestClient(create_app())


@pytest.fixture
def client(fake_db):
    """Sync test client for FastAPI app with mocked DB."""
    with _make_client() as c:
        yield c


@pytest.fixture
def failing_client(failing_db):
    with _make_client() as c:
        yield c


# ---------------------------------------------------------------------------
# Data factories
# ---------------------------------------------------------------------------

def make_gym(**overrides):
    defaults = {
        "id": str(uuid.uuid4()),
        "name": "Test Gym",
        "address": "1 High Street",
        "city": "London",
        "country": "United Kingdom",
        "image_url": None,
    }
    defaults.update(overrides)
    return defaults


def make_plan(**overrides):
    defaults = {
        "id": str(uuid.uuid4()),
        "slug": "test-plan",
        "title": "Test Plan",
        "main_image_url": None,
        "description": "Twelve weeks of running, sled work and wall balls.",
        "price_text": "$25/month",
        "fitness_level": "Beginner",
        "days_per_week": "3-5",
    }
    defaults.update(overrides)
    return defaults
