"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    # MySQL (MYSQL_HOST, MYSQL_USER, ...)
    mysql_host: str = "localhost"
    mysql_user: str = ""
    mysql_password: str = ""
    mysql_database: str = ""
    mysql_port: int = 3306

    # Full SQLAlchemy URL; takes precedence over the MYSQL_* fields when set
    database_url: str = ""

    jobs_table: str = "future_of_jobs"
    db_pool_size: int = 10
    # Seconds a request waits for a free pooled connection; None waits indefinitely
    db_pool_timeout: float | None = None

    # Default page size for the article feed
    articles_limit: int = Field(default=12, ge=1)

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
