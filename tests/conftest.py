# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - An in-memory stand-in for the Supabase query builder, installed as
#   the SupabaseClient singleton so services and routes run unchanged
# - A FastAPI TestClient wired to that store
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from collections import defaultdict
from dataclasses import dataclass
from typing import Any
from uuid import uuid4

import pytest


# =============================================================================
# In-memory Supabase
# =============================================================================

@dataclass
class FakeResponse:
    """Mirrors the data/count attributes of a postgrest APIResponse."""
    data: list[dict[str, Any]]
    count: int | None = None


class FakeQuery:
    """
    Chainable query over a list of row dicts.

    Supports the subset of the postgrest builder the app uses:
    select/insert/delete, eq/neq/gte/lte filters, limit and execute.
    """

    def __init__(self, name: str, rows: list[dict[str, Any]], failing: set[str]):
        self.name = name
        self.rows = rows
        self.failing = failing
        self.action = "select"
        self.columns: list[str] | None = None
        self.payload: list[dict[str, Any]] = []
        self.filters: list = []
        self.max_rows: int | None = None
        self.count: str | None = None

    def select(self, columns: str = "*", count: str | None = None):
        self.action = "select"
        self.columns = None if columns.strip() == "*" else [c.strip() for c in columns.split(",")]
        self.count = count
        return self

    def insert(self, data):
        self.action = "insert"
        self.payload = data if isinstance(data, list) else [data]
        return self

    def delete(self, count: str | None = None):
        self.action = "delete"
        self.count = count
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def neq(self, column, value):
        self.filters.append(lambda row: row.get(column) != value)
        return self

    def gte(self, column, value):
        self.filters.append(lambda row: row.get(column) is not None and row.get(column) >= value)
        return self

    def lte(self, column, value):
        self.filters.append(lambda row: row.get(column) is not None and row.get(column) <= value)
        return self

    def limit(self, size: int):
        self.max_rows = size
        return self

    def _matches(self, row) -> bool:
        return all(check(row) for check in self.filters)

    def execute(self) -> FakeResponse:
        if self.name in self.failing:
            raise RuntimeError(f"relation \"{self.name}\" is unavailable")

        if self.action == "insert":
            inserted = []
            for item in self.payload:
                row = {"id": str(uuid4()), **item}
                self.rows.append(row)
                inserted.append(dict(row))
            return FakeResponse(data=inserted)

        if self.action == "delete":
            removed = [row for row in self.rows if self._matches(row)]
            self.rows[:] = [row for row in self.rows if not self._matches(row)]
            return FakeResponse(
                data=removed,
                count=len(removed) if self.count else None,
            )

        matched = [row for row in self.rows if self._matches(row)]
        total = len(matched)
        if self.max_rows is not None:
            matched = matched[:self.max_rows]
        if self.columns is not None:
            matched = [{c: row.get(c) for c in self.columns} for row in matched]
        else:
            matched = [dict(row) for row in matched]
        return FakeResponse(data=matched, count=total if self.count else None)


class FakeSupabase:
    """Stands in for supabase.Client; tables are lists of dicts."""

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = defaultdict(list)
        self.failing: set[str] = set()

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(name, self.tables[name], self.failing)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_db(monkeypatch):
    """Install an empty in-memory store as the Supabase singleton."""
    from lib.supabase_client import SupabaseClient

    db = FakeSupabase()
    monkeypatch.setattr(SupabaseClient, "_instance", db)
    return db


@pytest.fixture
def client(fake_db):
    """TestClient for the app, backed by the in-memory store."""
    from fastapi.testclient import TestClient

    from app.main import app

    return TestClient(app)


@pytest.fixture
def legacy_errors(monkeypatch):
    """Switch error responses to the legacy {message} shape."""
    from app.config import settings

    monkeypatch.setattr(settings, "LEGACY_ERROR_RESPONSES", True)


@pytest.fixture
def alice(fake_db):
    """A stored user row."""
    from lib.supabase_client import SupabaseClient

    return SupabaseClient.insert_user("alice")


@pytest.fixture
def sample_exercise_rows():
    """Exercise dates spread over three months."""
    return [
        {"description": "run", "duration": 30, "date": "2023-01-01"},
        {"description": "swim", "duration": 45, "date": "2023-02-01"},
        {"description": "bike", "duration": 60, "date": "2023-03-01"},
    ]
