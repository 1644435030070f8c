"""Derived job impact metrics: trend, impact score and job creation ratio.

All inputs are non-negative ints already coerced from the stored columns
(see ``transform.coerce_int``).
"""

import math
import random

from jobs_api.models.article import Trend

# (exclusive lower bound on combined jobs, score), highest first
IMPACT_SCORE_STEPS = [
    (100_000, 10),
    (50_000, 8),
    (10_000, 6),
    (1_000, 4),
    (100, 2),
]

# (exclusive lower bound on jobs at risk, inclusive randint range), highest first
COMPANY_BUCKETS = [
    (50_000, (100, 599)),
    (10_000, (50, 149)),
    (1_000, (10, 59)),
]
COMPANY_FALLBACK_RANGE = (1, 10)


def trend_by_risk(jobs_at_risk: int, new_ai_jobs: int) -> Trend:
    """Compare new AI jobs against jobs at risk, with a 1.5x tolerance.

    Used by the article detail endpoint.
    """
    if new_ai_jobs > jobs_at_risk:
        return Trend.POSITIVE
    if jobs_at_risk > new_ai_jobs * 1.5:
        return Trend.NEGATIVE
    return Trend.NEUTRAL


def trend_by_replacement(jobs_replaced: int, new_ai_jobs: int) -> Trend:
    """Compare new AI jobs against jobs replaced outright.

    Used by the article feed endpoint.
    """
    if new_ai_jobs > jobs_replaced:
        return Trend.POSITIVE
    if jobs_replaced > new_ai_jobs:
        return Trend.NEGATIVE
    return Trend.NEUTRAL


def impact_score(jobs_at_risk: int, new_ai_jobs: int) -> int:
    """Bucket combined job counts into a 1-10 severity score."""
    total = jobs_at_risk + new_ai_jobs
    for threshold, score in IMPACT_SCORE_STEPS:
        if total > threshold:
            return score
    return 1


def _round_half_up(value: float, digits: int = 1) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def job_creation_ratio(jobs_replaced: int, new_ai_jobs: int) -> float:
    """New AI jobs per replaced job, to one decimal place.

    With nothing replaced the ratio degenerates to the raw new-job count.
    """
    if jobs_replaced == 0:
        return new_ai_jobs
    return _round_half_up(new_ai_jobs / jobs_replaced)


def estimate_companies_involved(jobs_at_risk: int, rng: random.Random) -> int:
    """Rough company count placeholder until the table carries a real column.

    The result is random within the bucket for ``jobs_at_risk``; pass a
    seeded ``random.Random`` for reproducible output.
    """
    low, high = COMPANY_FALLBACK_RANGE
    for threshold, bucket in COMPANY_BUCKETS:
        if jobs_at_risk > threshold:
            low, high = bucket
            break
    return rng.randint(low, high)
