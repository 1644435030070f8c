"""
AI Jobs Impact API

Thin FastAPI backend serving job impact articles and dashboard statistics.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from jobs_api.config import get_settings
from jobs_api.middleware import (
    RequestIDMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_logging,
)
from jobs_api.routers import articles, stats
from jobs_api.services.database import check_database_connectivity, dispose_engine

logger = logging.getLogger(__name__)

settings = get_settings()

configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown."""
    yield
    dispose_engine()


app = FastAPI(
    title="AI Jobs Impact API",
    description="Read-only statistics on AI's impact on employment",
    version="0.1.0",
    lifespan=lifespan,
)

# Starlette wraps in reverse order: the last middleware added runs first
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)
app.add_middleware(RequestIDMiddleware)

# Routers
app.include_router(articles.router, prefix="/api")
app.include_router(stats.router, prefix="/api")


def _check_config() -> str:
    """Verify database configuration is present. Returns 'ok' or 'fail'."""
    s = get_settings()
    if s.database_url or (s.mysql_host and s.mysql_database):
        return "ok"
    return "fail"


async def _run_health_checks() -> dict[str, Any]:
    """Run all health checks, returning the full response body."""
    config_status = _check_config()
    db_ok = await run_in_threadpool(check_database_connectivity)
    checks = {"config": config_status, "database": "ok" if db_ok else "fail"}
    failed = [k for k, v in checks.items() if v != "ok"]

    if failed:
        overall = "degraded"
        logger.warning("Health check degraded, failed: %s", ", ".join(failed))
    else:
        overall = "ok"

    return {
        "status": overall,
        "service": "jobs-impact-api",
        "version": "0.1.0",
        "checks": checks,
    }


@app.get("/api/health")
async def health_check() -> JSONResponse:
    """Health check verifying configuration and database reachability."""
    result = await _run_health_checks()
    return JSONResponse(content=result, status_code=200)
