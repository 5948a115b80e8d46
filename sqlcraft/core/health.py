import logging
from sqlalchemy import text
from starlette.concurrency import run_in_threadpool

from sqlcraft.core.database import get_content_engine, get_playground_pool, playground_connection

logger = logging.getLogger(__name__)

def _ping_playground() -> None:
    with playground_connection(get_playground_pool()) as conn:
        with conn.cursor() as cur:
            cur.execute("SELECT 1")

def _ping_content() -> None:
    with get_content_engine().connect() as conn:
        conn.execute(text("SELECT 1"))

async def check_playground_db() -> str:
    """Check connection to the playground PostgreSQL."""
    try:
        await run_in_threadpool(_ping_playground)
        return "connected"
    except Exception as e:
        logger.error(f"Playground database check failed: {e}")
        return f"failed: {str(e)}"

async def check_content_db() -> str:
    """Check connection to the content database."""
    try:
        await run_in_threadpool(_ping_content)
        return "connected"
    except Exception as e:
        logger.error(f"Content database check failed: {e}")
        return f"failed: {str(e)}"
