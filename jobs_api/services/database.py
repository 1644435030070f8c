"""Read-only access to the job impact table.

One pooled SQLAlchemy engine per process. Every query checks a connection
out with ``with engine.connect()`` so it goes back to the pool on every exit
path, including errors.
"""

import logging

from sqlalchemy import Engine, column, create_engine, select, table, text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import QueuePool

from jobs_api.config import get_settings
from jobs_api.models.article import JobImpactRecord

logger = logging.getLogger(__name__)

RECORD_COLUMNS = [
    "id",
    "title",
    "url",
    "jobs_at_risk",
    "jobs_replaced",
    "new_ai_jobs",
    "skills_remaining",
    "skills_automated",
    "affected_industry",
    "funding_data",
    "summary",
    "detailed_analysis",
]

# Lazy singleton, lives for the process lifetime
_engine: Engine | None = None


class InvalidInputError(ValueError):
    """Request input rejected before touching the database."""


class StorageError(Exception):
    """The database could not be reached or the query failed."""


def get_database_url() -> str | URL:
    """Return the configured URL, preferring an explicit DATABASE_URL."""
    settings = get_settings()
    if settings.database_url:
        return settings.database_url
    return URL.create(
        "mysql+pymysql",
        username=settings.mysql_user,
        password=settings.mysql_password,
        host=settings.mysql_host,
        port=settings.mysql_port,
        database=settings.mysql_database,
    )


def get_engine() -> Engine:
    """Return the shared engine, creating its connection pool on first use."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_engine(
            get_database_url(),
            poolclass=QueuePool,
            pool_size=settings.db_pool_size,
            max_overflow=0,
            pool_timeout=settings.db_pool_timeout,
            pool_pre_ping=True,
        )
        logger.info(
            "Database engine created (pool_size=%d, table=%s)",
            settings.db_pool_size,
            settings.jobs_table,
        )
    return _engine


def dispose_engine() -> None:
    """Close pooled connections and drop the engine."""
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None


def _jobs_table():
    return table(get_settings().jobs_table, *(column(c) for c in RECORD_COLUMNS))


def parse_record_id(raw: str | int) -> int:
    """Parse a path parameter into a record ID, or raise InvalidInputError."""
    try:
        return int(str(raw).strip())
    except ValueError:
        raise InvalidInputError(f"Invalid article ID: {raw!r}") from None


def fetch_one(record_id: int) -> JobImpactRecord | None:
    """Fetch a single record by ID. Returns None if there is no such row."""
    jobs = _jobs_table()
    query = select(jobs).where(jobs.c.id == record_id)
    try:
        with get_engine().connect() as conn:
            row = conn.execute(query).mappings().first()
    except SQLAlchemyError as e:
        logger.error("Database error fetching record %s: %s", record_id, e)
        raise StorageError("Failed to fetch record") from e

    if row is None:
        return None
    return JobImpactRecord(**row)


def fetch_many(limit: int | None = None) -> list[JobImpactRecord]:
    """Fetch records newest ID first, at most ``limit`` of them when given."""
    if limit is not None and limit < 1:
        raise InvalidInputError(f"Invalid limit: {limit}")

    jobs = _jobs_table()
    query = select(jobs).order_by(jobs.c.id.desc())
    if limit is not None:
        query = query.limit(limit)

    try:
        with get_engine().connect() as conn:
            rows = conn.execute(query).mappings().all()
    except SQLAlchemyError as e:
        logger.error("Database error fetching records (limit=%s): %s", limit, e)
        raise StorageError("Failed to fetch records") from e

    return [JobImpactRecord(**row) for row in rows]


def check_database_connectivity() -> bool:
    """Lightweight connectivity check running SELECT 1."""
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.warning("Database connectivity check failed: %s", e)
        return False
