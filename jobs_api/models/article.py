"""Job impact record and display article models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Trend(str, Enum):
    """Direction of job creation versus displacement."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class JobImpactRecord(BaseModel):
    """One row of the job impact table, as stored.

    Numeric columns may come back as text and list columns may be JSON
    arrays, comma-joined strings or empty, so everything is kept loose here
    and coerced by the transformer.
    """

    id: int
    title: str | None = None
    url: str | None = None
    jobs_at_risk: int | float | str | None = None
    jobs_replaced: int | float | str | None = None
    new_ai_jobs: int | float | str | None = None
    skills_remaining: str | list | None = None
    skills_automated: str | list | None = None
    affected_industry: str | list | None = None
    funding_data: str | list | None = None
    summary: str | None = None
    detailed_analysis: str | None = None


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Insights(_CamelModel):
    """Derived metrics shown on article cards and detail views."""

    jobs_affected: int
    companies_involved: int
    timeframe: str
    sectors: list[str]
    skills_replaced: list[str] | None = None
    skills_created: list[str] | None = None
    trend: Trend
    impact_score: int
    geographic_spread: list[str]
    cost_savings: str | None = None
    job_creation_ratio: float | None = None


class DisplayArticle(_CamelModel):
    """Display-ready article built fresh from a JobImpactRecord per request."""

    id: int
    title: str
    source: str
    date: str
    category: str
    url: str
    summary: str
    full_content: str
    insights: Insights
