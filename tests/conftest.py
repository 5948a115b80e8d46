"""Shared test fixtures for the SQLCraft backend."""

from typing import Any, List, Optional, Tuple

import psycopg2
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from sqlcraft.main import app
from sqlcraft.models.content import Base
from sqlcraft.modules.playground.gateway import QueryGateway

FORBIDDEN_PREFIXES = ["DROP", "DELETE", "TRUNCATE", "ALTER", "CREATE", "INSERT", "UPDATE"]


# =============================================================================
# Fake psycopg2 errors carrying a SQLSTATE
# =============================================================================

def pg_error(base: type, sqlstate: Optional[str], message: str) -> Exception:
    """Build a psycopg2 error instance with a fixed pgcode."""
    error_cls = type("FakePgError", (base,), {"pgcode": sqlstate, "diag": None})
    return error_cls(message)


# =============================================================================
# In-memory pool standing in for psycopg2.pool.ThreadedConnectionPool
# =============================================================================

class FakeCursor:
    def __init__(self, conn: "FakeConnection"):
        self._conn = conn
        self.description = None
        self.rowcount = -1
        self._rows: List[dict] = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql: str, params: Any = None) -> None:
        self._conn.executed.append((sql, params))
        if sql.startswith("SET "):
            return
        outcome = self._conn.outcome
        if isinstance(outcome, Exception):
            raise outcome
        columns, rows = outcome
        self.description = [(name,) for name in columns]
        self._rows = rows
        self.rowcount = len(rows)

    def fetchall(self) -> List[dict]:
        return self._rows


class FakeConnection:
    def __init__(self):
        self.outcome: Any = ([], [])
        self.executed: List[Tuple[str, Any]] = []
        self.rollbacks = 0

    def cursor(self, cursor_factory=None) -> FakeCursor:
        return FakeCursor(self)

    def rollback(self) -> None:
        self.rollbacks += 1


class FakePool:
    """Counts checkouts so tests can assert every connection came back."""

    def __init__(self):
        self.connection = FakeConnection()
        self.checked_out = 0
        self.getconn_calls = 0
        self.released_closed: List[bool] = []
        self.unreachable = False

    def getconn(self) -> FakeConnection:
        self.getconn_calls += 1
        if self.unreachable:
            raise psycopg2.OperationalError("could not connect to server: Connection refused")
        self.checked_out += 1
        return self.connection

    def putconn(self, conn: FakeConnection, close: bool = False) -> None:
        self.checked_out -= 1
        self.released_closed.append(close)


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()


@pytest.fixture
def gateway(fake_pool: FakePool) -> QueryGateway:
    return QueryGateway(
        pool_provider=lambda: fake_pool,
        statement_timeout_ms=5000,
        forbidden_prefixes=FORBIDDEN_PREFIXES,
    )


# =============================================================================
# HTTP and content store
# =============================================================================

@pytest.fixture
def client() -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def content_engine():
    """In-memory SQLite engine with the content tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()
