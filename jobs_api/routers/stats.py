"""Dashboard statistics endpoint."""

from fastapi import APIRouter, HTTPException
from starlette.concurrency import run_in_threadpool

from jobs_api.models.stats import DashboardStats
from jobs_api.services.database import StorageError, fetch_many
from jobs_api.services.stats import compute_dashboard_stats

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=DashboardStats)
async def dashboard_stats():
    """Get job impact totals and top industries/skills across all records."""
    try:
        records = await run_in_threadpool(fetch_many)
    except StorageError:
        raise HTTPException(
            status_code=500, detail="Failed to fetch statistics from database"
        )
    return compute_dashboard_stats(records)
