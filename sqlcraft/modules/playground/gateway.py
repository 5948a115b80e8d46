"""
Query gateway for the SQL playground

Policy layer in front of the playground database:
1. Reject statements whose first keyword is on the denylist (no round-trip)
2. Check a connection out of the pool, set statement_timeout, run the query
3. Return the rows, or classify the database error

The denylist is a prefix check on the trimmed, upper-cased text. It is not
a parser: a CTE or multi-statement batch starting with SELECT gets through.
The sandbox role being read-only is what actually protects the data.

Usage:
    gateway = get_query_gateway()
    outcome = gateway.execute("SELECT * FROM customers")
    if isinstance(outcome, QueryErrorResponse):
        ...
"""
import time
import logging
from datetime import date, datetime, time as dt_time, timedelta
from decimal import Decimal
from functools import lru_cache
from typing import Any, Callable, Dict, Sequence, Union
from uuid import UUID

import psycopg2
from psycopg2 import pool
from psycopg2.extras import RealDictCursor

from sqlcraft.core.config import get_settings
from sqlcraft.core.database import get_playground_pool, playground_connection
from sqlcraft.modules.playground.error_classifier import (
    classify_error,
    forbidden_operation,
    network_error,
)
from sqlcraft.schemas.query import QueryErrorResponse, QueryResult, RawQueryError

logger = logging.getLogger(__name__)

QueryOutcome = Union[QueryResult, QueryErrorResponse]

# SQLSTATE for "canceling statement due to statement timeout"
QUERY_CANCELED = "57014"


def _json_value(value: Any) -> Any:
    """Convert driver values that JSON cannot carry as-is"""
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (datetime, date, dt_time)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return str(value)
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, (bytes, memoryview)):
        return bytes(value).hex()
    return value


class QueryGateway:
    """
    Runs learner queries against the playground database

    No retries: each failure is classified and returned once.
    """

    def __init__(
        self,
        pool_provider: Callable[[], Any],
        statement_timeout_ms: int,
        forbidden_prefixes: Sequence[str],
    ):
        """
        Args:
            pool_provider: returns a pool exposing getconn()/putconn()
            statement_timeout_ms: server-side limit applied before each query
            forbidden_prefixes: leading keywords that are rejected outright
        """
        self._pool_provider = pool_provider
        self.statement_timeout_ms = statement_timeout_ms
        self.forbidden_prefixes = tuple(p.upper() for p in forbidden_prefixes)

    def is_forbidden(self, query: str) -> bool:
        """True if the query starts with a denylisted keyword"""
        return query.strip().upper().startswith(self.forbidden_prefixes)

    def execute(self, query: str) -> QueryOutcome:
        """
        Execute one playground query

        Args:
            query: SQL text, forwarded verbatim when allowed

        Returns:
            QueryResult on success, QueryErrorResponse otherwise
        """
        if self.is_forbidden(query):
            logger.info(f"[QueryGateway] Rejected forbidden statement: {query.strip()[:60]!r}")
            return forbidden_operation()

        started = time.perf_counter()
        try:
            with playground_connection(self._pool_provider()) as conn:
                return self._run(conn, query, started)
        except (psycopg2.OperationalError, pool.PoolError) as e:
            # Only checkout failures reach here; _run classifies its own errors
            logger.error(f"[QueryGateway] Playground database unreachable: {e}")
            return network_error()

    def _run(self, conn, query: str, started: float) -> QueryOutcome:
        try:
            with conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute("SET statement_timeout = %s", (self.statement_timeout_ms,))
                cur.execute(query)
                columns = [col[0] for col in cur.description] if cur.description else []
                rows = cur.fetchall() if cur.description else []
                row_count = cur.rowcount if cur.rowcount and cur.rowcount > 0 else len(rows)
        except psycopg2.Error as e:
            code = getattr(e, "pgcode", None)
            diag = getattr(e, "diag", None)
            message = (getattr(diag, "message_primary", None) or str(e)).strip()
            if code == QUERY_CANCELED:
                logger.warning(f"[QueryGateway] Query hit statement_timeout ({self.statement_timeout_ms}ms)")
            else:
                logger.warning(f"[QueryGateway] Query failed: code={code} message={message}")
            return classify_error(RawQueryError(message=message, code=code))

        elapsed_ms = int((time.perf_counter() - started) * 1000)
        logger.debug(f"[QueryGateway] {row_count} rows in {elapsed_ms}ms")

        return QueryResult(
            columns=columns,
            rows=[self._serialize_row(row) for row in rows],
            row_count=row_count,
            execution_time=elapsed_ms,
        )

    @staticmethod
    def _serialize_row(row: Dict[str, Any]) -> Dict[str, Any]:
        return {key: _json_value(value) for key, value in row.items()}


@lru_cache()
def get_query_gateway() -> QueryGateway:
    """Gateway configured from settings, shared by all requests"""
    settings = get_settings()
    return QueryGateway(
        pool_provider=get_playground_pool,
        statement_timeout_ms=settings.QUERY_STATEMENT_TIMEOUT_MS,
        forbidden_prefixes=settings.QUERY_FORBIDDEN_PREFIXES,
    )
