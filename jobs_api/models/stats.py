"""Dashboard aggregate statistics models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from jobs_api.models.article import Trend


class RankedItem(BaseModel):
    """A label and how many records mention it."""

    name: str
    count: int


class DashboardStats(BaseModel):
    """Totals across every job impact record, for the overview widgets."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_records: int
    total_jobs_at_risk: int
    total_jobs_replaced: int
    total_new_ai_jobs: int
    trend: Trend
    impact_score: int
    job_creation_ratio: float
    top_industries: list[RankedItem] = []
    top_automated_skills: list[RankedItem] = []
    top_remaining_skills: list[RankedItem] = []
