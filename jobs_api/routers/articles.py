"""Article feed endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Query
from starlette.concurrency import run_in_threadpool

from jobs_api.config import get_settings
from jobs_api.models.article import DisplayArticle
from jobs_api.services.database import (
    InvalidInputError,
    StorageError,
    fetch_many,
    fetch_one,
    parse_record_id,
)
from jobs_api.services.transform import (
    replacement_trend,
    risk_trend,
    to_display_article,
)

router = APIRouter(prefix="/articles", tags=["articles"])
logger = logging.getLogger(__name__)


@router.get(
    "",
    response_model=list[DisplayArticle],
    response_model_exclude_none=True,
)
async def list_articles(
    limit: int | None = Query(
        default=None,
        ge=1,
        le=500,
        description="Maximum number of articles to return (defaults to ARTICLES_LIMIT)",
    ),
):
    """Get the newest articles, newest ID first.

    The feed compares new AI jobs against jobs replaced for its trend.
    """
    limit = limit or get_settings().articles_limit
    try:
        records = await run_in_threadpool(fetch_many, limit)
    except StorageError:
        raise HTTPException(
            status_code=500, detail="Failed to fetch articles from database"
        )

    return [
        to_display_article(record, trend_variant=replacement_trend)
        for record in records
    ]


@router.get(
    "/{article_id}",
    response_model=DisplayArticle,
    response_model_exclude_none=True,
)
async def get_article_by_id(article_id: str):
    """Get a single article by ID.

    The detail view compares new AI jobs against jobs at risk for its trend.
    """
    try:
        record_id = parse_record_id(article_id)
    except InvalidInputError:
        raise HTTPException(status_code=400, detail="Invalid article ID")

    try:
        record = await run_in_threadpool(fetch_one, record_id)
    except StorageError:
        raise HTTPException(
            status_code=500, detail="Failed to fetch article from database"
        )

    if record is None:
        raise HTTPException(status_code=404, detail="Article not found")
    logger.debug("Serving article %d", record_id)
    return to_display_article(record, trend_variant=risk_trend)
