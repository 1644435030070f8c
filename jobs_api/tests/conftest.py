"""Shared fixtures for jobs-impact-api tests."""

import pytest
from sqlalchemy import create_engine, text


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset module-level singletons between tests."""
    yield

    # 1. Settings LRU cache
    from jobs_api.config import get_settings

    get_settings.cache_clear()

    # 2. Database engine singleton
    import jobs_api.services.database as db_mod

    db_mod.dispose_engine()


@pytest.fixture
def mock_settings(monkeypatch, tmp_path):
    """Provide a Settings object pointing at a throwaway SQLite database."""
    from jobs_api.config import Settings, get_settings

    test_settings = Settings(
        database_url=f"sqlite:///{tmp_path / 'jobs.db'}",
        mysql_host="",
        mysql_database="",
        jobs_table="future_of_jobs",
        db_pool_size=2,
        db_pool_timeout=5,
        articles_limit=12,
    )

    get_settings.cache_clear()
    monkeypatch.setattr("jobs_api.config.get_settings", lambda: test_settings)

    # Patch get_settings in every module that imports it directly
    # (from jobs_api.config import get_settings creates a local binding that
    # the jobs_api.config monkeypatch above does not affect)
    for mod_path in [
        "jobs_api.services.database",
        "jobs_api.routers.articles",
        "jobs_api.main",
    ]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    return test_settings


@pytest.fixture
def jobs_db(mock_settings):
    """Create the job impact table in the test database.

    Returns a helper that inserts rows given as dicts of column values.
    """
    engine = create_engine(mock_settings.database_url)
    with engine.begin() as conn:
        conn.execute(
            text(
                """
                CREATE TABLE future_of_jobs (
                    id INTEGER PRIMARY KEY,
                    title TEXT,
                    url TEXT,
                    jobs_at_risk TEXT,
                    jobs_replaced TEXT,
                    new_ai_jobs TEXT,
                    skills_remaining TEXT,
                    skills_automated TEXT,
                    affected_industry TEXT,
                    funding_data TEXT,
                    summary TEXT,
                    detailed_analysis TEXT
                )
                """
            )
        )

    def insert(**row):
        columns = ", ".join(row)
        params = ", ".join(f":{c}" for c in row)
        with engine.begin() as conn:
            conn.execute(
                text(f"INSERT INTO future_of_jobs ({columns}) VALUES ({params})"),
                row,
            )

    yield insert
    engine.dispose()
