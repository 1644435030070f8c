"""Dashboard statistics: totals and top labels across all records."""

import logging
from collections import Counter

from jobs_api.models.article import JobImpactRecord
from jobs_api.models.stats import DashboardStats, RankedItem
from jobs_api.services.metrics import impact_score, job_creation_ratio, trend_by_risk
from jobs_api.services.transform import coerce_int, decode_list

logger = logging.getLogger(__name__)

TOP_N = 5


def _distinct(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def _top(counter: Counter, n: int = TOP_N) -> list[RankedItem]:
    return [RankedItem(name=name, count=count) for name, count in counter.most_common(n)]


def compute_dashboard_stats(records: list[JobImpactRecord]) -> DashboardStats:
    """Aggregate job counts and label frequencies over ``records``.

    Each label counts once per record, so a skill listed twice in one row
    is not double-counted.
    """
    at_risk = replaced = new = 0
    industries: Counter = Counter()
    automated: Counter = Counter()
    remaining: Counter = Counter()

    for record in records:
        at_risk += coerce_int(record.jobs_at_risk)
        replaced += coerce_int(record.jobs_replaced)
        new += coerce_int(record.new_ai_jobs)
        industries.update(_distinct(decode_list(record.affected_industry)))
        automated.update(_distinct(decode_list(record.skills_automated)))
        remaining.update(_distinct(decode_list(record.skills_remaining)))

    logger.debug("Aggregated stats over %d records", len(records))

    return DashboardStats(
        total_records=len(records),
        total_jobs_at_risk=at_risk,
        total_jobs_replaced=replaced,
        total_new_ai_jobs=new,
        trend=trend_by_risk(at_risk, new),
        impact_score=impact_score(at_risk, new),
        job_creation_ratio=job_creation_ratio(replaced, new),
        top_industries=_top(industries),
        top_automated_skills=_top(automated),
        top_remaining_skills=_top(remaining),
    )
