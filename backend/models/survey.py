"""
Response models for the survey endpoints.

Field names are snake_case in Python and camelCase on the wire, which is the
contract the dashboard frontend reads.
"""
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InterestSummary(CamelModel):
    interests: Dict[str, int] = Field(default_factory=dict)
    avg_interest: float = 0.0
    total_entries: int = 0


class RatingSummary(CamelModel):
    project_ratings: Dict[str, float] = Field(default_factory=dict)
    avg_rating: float = 0.0
    total_entries: int = 0
    unique_companies: int = 0


class CorrelationPoint(CamelModel):
    company: str
    interest: int
    rating: float


class TrendPoint(CamelModel):
    month: str
    rating: float


class SkillLevel(CamelModel):
    skill: str
    level: int


class ProjectTime(CamelModel):
    project: str
    hours: int


class ErrorDetail(CamelModel):
    """Body of the `detail` field on a failed request."""
    error: str
    message: str


# Mood counts are a plain label -> count mapping with a fixed key set
MoodCounts = Dict[str, int]
CorrelationData = List[CorrelationPoint]
TrendData = List[TrendPoint]
