"""Turn stored job impact records into display articles.

Records are read as-is from the table: numbers may be text, list columns
may be JSON arrays or comma-joined strings. Everything here is pure and
never raises on malformed data; bad values degrade to 0, ``[]`` or a fixed
fallback label.
"""

import json
import math
import random
import re
from collections.abc import Callable
from datetime import date, datetime, timezone
from typing import Any
from urllib.parse import urlparse

from jobs_api.models.article import DisplayArticle, Insights, JobImpactRecord, Trend
from jobs_api.services.funding import parse_funding
from jobs_api.services.metrics import (
    estimate_companies_involved,
    impact_score,
    job_creation_ratio,
    trend_by_replacement,
    trend_by_risk,
)
from jobs_api.services.text import NOT_AVAILABLE, normalize

DEFAULT_CATEGORY = "Technology"
DEFAULT_SOURCE = "Tech Analysis"
DEFAULT_URL = "#"
TIMEFRAME = "2024-2026"
GEOGRAPHIC_SPREAD = ["North America", "Europe", "Asia-Pacific"]

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_SURROUNDING_QUOTES_RE = re.compile(r"^[\"']|[\"']$")

TrendFn = Callable[[int, int, int], Trend]


def coerce_int(value: Any) -> int:
    """Parse a loosely typed count; unparseable or negative values become 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(0, value)
    if isinstance(value, float):
        return max(0, int(value)) if math.isfinite(value) else 0
    match = _LEADING_INT_RE.match(str(value))
    if not match:
        return 0
    return max(0, int(match.group(1)))


def _item_to_text(item: Any) -> str:
    if isinstance(item, str):
        return item.strip()
    if item is None:
        return ""
    # Objects and numbers inside a JSON array are flattened for display
    return normalize(json.dumps(item))


def decode_list(value: Any) -> list[str]:
    """Decode a list column stored as a JSON array or a comma-joined string."""
    if not value:
        return []

    if isinstance(value, list):
        items = value
    else:
        text = str(value)
        try:
            decoded = json.loads(text)
        except ValueError:
            decoded = None
        if isinstance(decoded, list):
            items = decoded
        else:
            items = text.split(",")

    texts = (_item_to_text(item) for item in items)
    return [t for t in texts if t and t != NOT_AVAILABLE]


def clean_title(title: str | None, record_id: int) -> str:
    """Strip surrounding quote characters; fall back to a placeholder."""
    if title:
        cleaned = _SURROUNDING_QUOTES_RE.sub("", title).strip()
        if cleaned:
            return cleaned
    return f"Article {record_id}"


def source_from_url(url: str | None) -> str:
    """Derive a source label from the URL host: ``https://www.wired.com/x`` -> ``Wired``."""
    if not url:
        return DEFAULT_SOURCE
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return DEFAULT_SOURCE
    if not hostname:
        return DEFAULT_SOURCE

    if hostname.startswith("www."):
        hostname = hostname[len("www.") :]
    name = hostname.split(".")[0]
    if not name:
        return DEFAULT_SOURCE
    return name[0].upper() + name[1:]


def _join_or(items: list[str], fallback: str) -> str:
    return ", ".join(items) if items else fallback


def build_summary(
    industries: list[str],
    jobs_at_risk: int,
    jobs_replaced: int,
    new_ai_jobs: int,
) -> str:
    industry = _join_or(industries, "various industries")
    return (
        f"This analysis examines the impact of AI and automation on {industry}. "
        f"The study reveals that {jobs_at_risk:,} jobs are at risk of being affected, "
        f"with {jobs_replaced:,} positions potentially being replaced. "
        f"However, the technological advancement is also expected to create "
        f"{new_ai_jobs:,} new AI-related positions, indicating a shift in the "
        f"job market rather than a net loss."
    )


def build_full_content(
    industries: list[str],
    jobs_at_risk: int,
    jobs_replaced: int,
    new_ai_jobs: int,
    skills_automated: list[str],
    skills_remaining: list[str],
    funding: str | None,
) -> str:
    industry = _join_or(industries, "technology")
    investment = (
        f"Investment in this transition is estimated at {funding}."
        if funding
        else "Significant investment will be required to manage this transition effectively."
    )
    paragraphs = [
        f"The {industry} industry is experiencing significant transformation due to "
        f"artificial intelligence and automation technologies. Our analysis indicates "
        f"that {jobs_at_risk:,} positions are currently at risk of being impacted.",
        f"Job Displacement: Approximately {jobs_replaced:,} traditional roles may be "
        f"replaced by automated systems. The skills most affected include: "
        f"{_join_or(skills_automated, 'none reported')}.",
        f"Job Creation: Despite the displacement, {new_ai_jobs:,} new positions are "
        f"expected to emerge, particularly in areas requiring human oversight of AI "
        f"systems, creative problem-solving, and technical expertise.",
        f"Skills Evolution: Skills that remain valuable include: "
        f"{_join_or(skills_remaining, 'none reported')}.",
        f"Economic Impact: The transition represents both challenges and "
        f"opportunities for the {industry} industry. {investment}",
    ]
    return "\n\n".join(paragraphs)


def risk_trend(at_risk: int, replaced: int, new: int) -> Trend:
    return trend_by_risk(at_risk, new)


def replacement_trend(at_risk: int, replaced: int, new: int) -> Trend:
    return trend_by_replacement(replaced, new)


def to_display_article(
    record: JobImpactRecord,
    *,
    trend_variant: TrendFn = risk_trend,
    rng: random.Random | None = None,
    today: date | None = None,
) -> DisplayArticle:
    """Build the display article for one record.

    Args:
        record: The stored row.
        trend_variant: ``risk_trend`` (detail view) or ``replacement_trend``
            (article feed).
        rng: Random source for the company-count estimate.
        today: Display date; defaults to the current UTC date.
    """
    rng = rng or random.Random()
    today = today or datetime.now(timezone.utc).date()

    jobs_at_risk = coerce_int(record.jobs_at_risk)
    jobs_replaced = coerce_int(record.jobs_replaced)
    new_ai_jobs = coerce_int(record.new_ai_jobs)

    skills_remaining = decode_list(record.skills_remaining)
    skills_automated = decode_list(record.skills_automated)
    industries = decode_list(record.affected_industry)
    funding = parse_funding(decode_list(record.funding_data))

    summary = record.summary or build_summary(
        industries, jobs_at_risk, jobs_replaced, new_ai_jobs
    )
    full_content = record.detailed_analysis or build_full_content(
        industries,
        jobs_at_risk,
        jobs_replaced,
        new_ai_jobs,
        skills_automated,
        skills_remaining,
        funding,
    )

    insights = Insights(
        jobs_affected=jobs_at_risk,
        companies_involved=estimate_companies_involved(jobs_at_risk, rng),
        timeframe=TIMEFRAME,
        sectors=industries or [DEFAULT_CATEGORY],
        skills_replaced=skills_automated or None,
        skills_created=skills_remaining if new_ai_jobs > 0 and skills_remaining else None,
        trend=trend_variant(jobs_at_risk, jobs_replaced, new_ai_jobs),
        impact_score=impact_score(jobs_at_risk, new_ai_jobs),
        geographic_spread=list(GEOGRAPHIC_SPREAD),
        cost_savings=funding,
        job_creation_ratio=job_creation_ratio(jobs_replaced, new_ai_jobs),
    )

    return DisplayArticle(
        id=record.id,
        title=clean_title(record.title, record.id),
        source=source_from_url(record.url),
        date=today.isoformat(),
        category=industries[0] if industries else DEFAULT_CATEGORY,
        url=record.url or DEFAULT_URL,
        summary=summary,
        full_content=full_content,
        insights=insights,
    )
