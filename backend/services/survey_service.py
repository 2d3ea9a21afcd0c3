"""
Survey service: fetches sheet ranges and runs the aggregators over them.

Every call fetches fresh rows; nothing is cached between requests. A fetch
failure propagates as FetchError and no partial result is produced.
"""
import asyncio
from typing import List, Optional

from core.config import settings
from core.logfire_config import log_info
from models.survey import (
    CorrelationPoint,
    InterestSummary,
    MoodCounts,
    RatingSummary,
    TrendPoint,
)
from services import aggregation
from services.row_source import GoogleSheetsRowSource, RowSource


class SurveyService:
    """Read-only survey statistics over an injected row source."""

    def __init__(
        self,
        row_source: RowSource,
        interests_range: Optional[str] = None,
        ratings_range: Optional[str] = None,
    ):
        self.row_source = row_source
        self.interests_range = interests_range or settings.google_sheets.interests_range
        self.ratings_range = ratings_range or settings.google_sheets.ratings_range

    async def interests(self) -> InterestSummary:
        rows = await self.row_source.fetch(self.interests_range)
        summary = aggregation.aggregate_interests(rows)
        log_info("Interests aggregated", total_rows=len(rows), valid_entries=summary.total_entries)
        return summary

    async def ratings(self) -> RatingSummary:
        rows = await self.row_source.fetch(self.ratings_range)
        summary = aggregation.aggregate_ratings(rows)
        log_info(
            "Ratings aggregated",
            total_rows=len(rows),
            valid_entries=summary.total_entries,
            projects=len(summary.project_ratings),
        )
        return summary

    async def correlation(self) -> List[CorrelationPoint]:
        """Fetch both sheets concurrently, then join interest and rating per company."""
        interest_rows, rating_rows = await asyncio.gather(
            self.row_source.fetch(self.interests_range),
            self.row_source.fetch(self.ratings_range),
        )
        points = aggregation.correlate(interest_rows, rating_rows)
        log_info(
            "Correlation computed",
            interest_rows=len(interest_rows),
            rating_rows=len(rating_rows),
            companies=len(points),
        )
        return points

    async def mood(self) -> MoodCounts:
        rows = await self.row_source.fetch(self.interests_range)
        counts = aggregation.aggregate_moods(rows)
        log_info("Moods aggregated", total_rows=len(rows), matched=sum(counts.values()))
        return counts

    async def trend(self) -> List[TrendPoint]:
        rows = await self.row_source.fetch(self.ratings_range)
        points = aggregation.aggregate_trend(rows)
        log_info(
            "Trend aggregated",
            total_rows=len(rows),
            months_with_data=sum(1 for point in points if point.rating),
        )
        return points


_survey_service: Optional[SurveyService] = None


def get_survey_service() -> SurveyService:
    """FastAPI dependency returning the shared Google Sheets backed service."""
    global _survey_service
    if _survey_service is None:
        _survey_service = SurveyService(GoogleSheetsRowSource())
    return _survey_service
