import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from sqlcraft.core.config import get_settings
from sqlcraft.core.database import close_database, init_database
from sqlcraft.core.health import check_content_db, check_playground_db
from sqlcraft.core.logging import setup_logging
from sqlcraft.api.v1 import joins, learning_paths, query, scenarios, schema_designer

settings = get_settings()
setup_logging(debug=settings.DEBUG_MODE)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        init_database()
    except SQLAlchemyError as e:
        # Content routes answer 500 until the database is back
        logger.error(f"[Startup] Content database unavailable: {e}")
    yield
    close_database()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register Routers
app.include_router(query.router, prefix=settings.API_PREFIX)            # SQL playground
app.include_router(schema_designer.router, prefix=settings.API_PREFIX)  # schema validation
app.include_router(joins.router, prefix=settings.API_PREFIX)            # JOIN visualizer
app.include_router(learning_paths.router, prefix=settings.API_PREFIX)   # lesson content
app.include_router(scenarios.router, prefix=settings.API_PREFIX)        # industry scenarios

@app.get("/health")
async def health_check():
    """
    Health check endpoint to verify service status and dependencies.
    """
    results = {
        "playground_db": await check_playground_db(),
        "content_db": await check_content_db(),
    }

    overall_status = "ok"
    if any(str(v).startswith("failed") for v in results.values()):
        overall_status = "degraded"

    return {
        "status": overall_status,
        "version": settings.VERSION,
        "dependencies": results
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT
    )
