"""
Database connection management

Two pools:
1. Playground PostgreSQL (learner queries) - psycopg2 ThreadedConnectionPool
2. Content database (learning paths, scenarios) - SQLAlchemy QueuePool

Usage:
    from sqlcraft.core.database import (
        get_content_engine,
        playground_connection
    )

    # Content (SQLAlchemy)
    engine = get_content_engine()
    with Session(engine) as session:
        session.scalars(select(LearningPath))

    # Playground (psycopg2 pool), connection is always returned
    with playground_connection() as conn:
        with conn.cursor() as cur:
            cur.execute("SELECT 1")
"""
import logging
from typing import Optional
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool
from psycopg2 import pool

from sqlcraft.core.config import get_settings

logger = logging.getLogger(__name__)

# Global pool instances
_content_engine: Optional[Engine] = None
_playground_pool: Optional[pool.ThreadedConnectionPool] = None

# =============================================================================
# Content database (SQLAlchemy)
# =============================================================================

def get_content_engine() -> Engine:
    """
    Get the content database SQLAlchemy Engine (pooled)

    Returns:
        SQLAlchemy Engine instance
    """
    global _content_engine

    if _content_engine is None:
        settings = get_settings()

        _content_engine = create_engine(
            settings.CONTENT_DB_URL,
            poolclass=QueuePool,
            pool_size=settings.CONTENT_POOL_SIZE,
            max_overflow=settings.CONTENT_MAX_OVERFLOW,
            pool_timeout=30,       # seconds to wait for a free connection
            pool_recycle=3600,
            pool_pre_ping=True,
            echo=settings.DEBUG_MODE
        )

        logger.info(
            f"[Database] Content pool initialised "
            f"(pool_size={settings.CONTENT_POOL_SIZE}, max_overflow={settings.CONTENT_MAX_OVERFLOW})"
        )

    return _content_engine

def close_content_engine():
    """Dispose the content pool on shutdown."""
    global _content_engine

    if _content_engine is not None:
        _content_engine.dispose()
        _content_engine = None
        logger.info("[Database] Content pool closed")

# =============================================================================
# Playground PostgreSQL (psycopg2 pool)
# =============================================================================

def _init_playground_pool() -> pool.ThreadedConnectionPool:
    """
    Build the playground connection pool

    Raises psycopg2.OperationalError when the server cannot be reached.
    """
    settings = get_settings()

    playground_pool = pool.ThreadedConnectionPool(
        minconn=settings.PLAYGROUND_POOL_MIN,
        maxconn=settings.PLAYGROUND_POOL_MAX,
        host=settings.PLAYGROUND_DB_HOST,
        port=settings.PLAYGROUND_DB_PORT,
        user=settings.PLAYGROUND_DB_USER,
        password=settings.PLAYGROUND_DB_PASSWORD,
        database=settings.PLAYGROUND_DB_NAME,
    )

    logger.info(
        f"[Database] Playground pool initialised "
        f"(minconn={settings.PLAYGROUND_POOL_MIN}, maxconn={settings.PLAYGROUND_POOL_MAX})"
    )
    return playground_pool

def get_playground_pool() -> pool.ThreadedConnectionPool:
    """Return the playground pool, creating it on first use."""
    global _playground_pool

    if _playground_pool is None:
        _playground_pool = _init_playground_pool()

    return _playground_pool

@contextmanager
def playground_connection(connection_pool=None):
    """
    Playground connection context manager

    Checks a connection out of the pool and always hands it back, on
    success and on error. Any open transaction is rolled back first so
    session settings such as statement_timeout do not leak to the next
    borrower.

    Args:
        connection_pool: pool exposing getconn()/putconn(), defaults to the
            global playground pool
    """
    connection_pool = connection_pool or get_playground_pool()
    conn = connection_pool.getconn()
    try:
        yield conn
    finally:
        broken = False
        try:
            conn.rollback()
        except Exception as e:
            # Broken connections are closed instead of recycled
            logger.warning(f"[Database] Rollback before release failed: {e}")
            broken = True
        connection_pool.putconn(conn, close=broken)

def close_playground_pool():
    """Close every playground connection on shutdown."""
    global _playground_pool

    if _playground_pool is not None:
        _playground_pool.closeall()
        _playground_pool = None
        logger.info("[Database] Playground pool closed")

# =============================================================================
# Application lifecycle
# =============================================================================

def init_database():
    """
    Create the content tables if missing

    Called on application startup. The playground pool is created lazily on
    the first query so the service can start while the sandbox is down.
    """
    from sqlcraft.models.content import Base

    Base.metadata.create_all(get_content_engine())
    logger.info("[Database] Content schema ready")

def close_database():
    """Close every pool, called on application shutdown."""
    close_content_engine()
    close_playground_pool()
    logger.info("[Database] All pools closed")
