"""Shared pytest fixtures for the portfolio API tests."""

from __future__ import annotations

from typing import Any, Generator, Sequence

import pytest
from fastapi.testclient import TestClient

from portfolio_api.auth import dependencies as auth_dependencies
from portfolio_api.core import db


class FakeStore:
    """In-memory stand-in for the asyncpg helpers in `portfolio_api.core.db`.

    Every call is recorded as (method, sql, args). Set `rows`, `status` or
    `error` to control what the next calls return.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any, tuple]] = []
        self.rows: list[dict[str, Any]] = []
        self.status = "INSERT 0 1"
        self.error: Exception | None = None

    def _record(self, method: str, sql: Any, args: tuple) -> None:
        self.calls.append((method, sql, args))
        if self.error is not None:
            raise self.error

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self._record("fetch_all", sql, args)
        return list(self.rows)

    async def execute(self, sql: str, *args: Any) -> str:
        self._record("execute", sql, args)
        return self.status

    async def execute_batch(self, statements: Sequence[tuple[str, Sequence[Any]]]) -> list[str]:
        statements = [(sql, tuple(args)) for sql, args in statements]
        self._record("execute_batch", statements, ())
        return [self.status for _ in statements]


@pytest.fixture
def fake_store(monkeypatch: pytest.MonkeyPatch) -> FakeStore:
    """Replace the store client functions with a recording fake."""
    store = FakeStore()
    monkeypatch.setattr(db, "fetch_all", store.fetch_all)
    monkeypatch.setattr(db, "execute", store.execute)
    monkeypatch.setattr(db, "execute_batch", store.execute_batch)
    return store


@pytest.fixture
def anonymous_client(fake_store: FakeStore) -> TestClient:
    """TestClient without credentials.

    Not used as a context manager, so the lifespan (and the real pool) never
    starts.
    """
    from portfolio_api.main import app

    return TestClient(app)


@pytest.fixture
def client(anonymous_client: TestClient) -> Generator[TestClient, None, None]:
    """TestClient whose requests pass the admin check."""
    app = anonymous_client.app
    app.dependency_overrides[auth_dependencies.require_admin] = lambda: "admin"
    try:
        yield anonymous_client
    finally:
        app.dependency_overrides.clear()
