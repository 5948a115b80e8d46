from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List
from dotenv import load_dotenv
import os

# Explicitly load .env from project root if not loaded
base_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(base_dir, ".env")
if os.path.exists(env_path):
    load_dotenv(env_path, override=True)
else:
    load_dotenv()

class Settings(BaseSettings):
    """
    SQLCraft global settings

    Priority: environment variable > .env file > default
    """

    # ===========================================
    # Project
    # ===========================================
    PROJECT_NAME: str = "SQLCraft Backend"    # API docs title
    VERSION: str = "0.1.0"
    API_PREFIX: str = "/api"                  # prefix for every router

    # ===========================================
    # Server
    # ===========================================
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 5000
    CORS_ORIGINS: List[str] = ["*"]

    # ===========================================
    # Playground database (PostgreSQL)
    # Sandbox that learner queries run against. The role should be read-only.
    # ===========================================
    PLAYGROUND_DB_HOST: str = "localhost"
    PLAYGROUND_DB_PORT: int = 5432
    PLAYGROUND_DB_USER: str = "postgres"
    PLAYGROUND_DB_PASSWORD: str = ""
    PLAYGROUND_DB_NAME: str = "sqlcraft_playground"
    PLAYGROUND_POOL_MIN: int = 1
    PLAYGROUND_POOL_MAX: int = 10

    # ===========================================
    # Query policy
    # ===========================================
    QUERY_STATEMENT_TIMEOUT_MS: int = 5000    # server-side statement_timeout per query
    QUERY_FORBIDDEN_PREFIXES: List[str] = [
        "DROP", "DELETE", "TRUNCATE", "ALTER", "CREATE", "INSERT", "UPDATE",
    ]

    # ===========================================
    # Content database (learning paths, lessons, scenarios)
    # ===========================================
    CONTENT_DB_URL: str = "postgresql+psycopg2://postgres:@localhost:5432/sqlcraft"
    CONTENT_POOL_SIZE: int = 5
    CONTENT_MAX_OVERFLOW: int = 10

    # ===========================================
    # Debug
    # ===========================================
    # Development only: verbose logging and SQL echo on the content engine
    DEBUG_MODE: bool = False

    class Config:
        # .env is loaded by load_dotenv above
        env_file = None
        case_sensitive = True

@lru_cache()
def get_settings():
    return Settings()
