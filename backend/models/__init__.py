from .rows import Row, RowProfile, SanitizedRow
from .survey import (
    CorrelationPoint,
    ErrorDetail,
    InterestSummary,
    ProjectTime,
    RatingSummary,
    SkillLevel,
    TrendPoint,
)

__all__ = [
    "Row", "RowProfile", "SanitizedRow",
    "CorrelationPoint", "ErrorDetail", "InterestSummary", "ProjectTime",
    "RatingSummary", "SkillLevel", "TrendPoint",
]
