from typing import List

from fastapi import APIRouter, Depends, HTTPException

from core.logfire_config import log_error
from models.survey import (
    CorrelationPoint,
    ErrorDetail,
    InterestSummary,
    MoodCounts,
    RatingSummary,
    TrendPoint,
)
from services.survey_service import SurveyService, get_survey_service

router = APIRouter(prefix="/api", tags=["survey"])

ERROR_RESPONSES = {500: {"description": "The survey data could not be read or aggregated"}}


def _failure(code: str, message: str, error: Exception) -> HTTPException:
    log_error("Survey request failed", error=error, code=code)
    return HTTPException(
        status_code=500,
        detail=ErrorDetail(error=code, message=message).model_dump(),
    )


@router.get("/interests", response_model=InterestSummary, responses=ERROR_RESPONSES)
async def get_interests(service: SurveyService = Depends(get_survey_service)):
    """Interest types with their answer counts, plus the average interest level."""
    try:
        return await service.interests()
    except Exception as e:
        raise _failure("interests_unavailable", "Errore nel recupero dei dati di interesse", e)


@router.get("/ratings", response_model=RatingSummary, responses=ERROR_RESPONSES)
async def get_ratings(service: SurveyService = Depends(get_survey_service)):
    """Average rating per project and overall, with entry and company counts."""
    try:
        return await service.ratings()
    except Exception as e:
        raise _failure("ratings_unavailable", "Errore nel recupero dei dati di valutazione", e)


@router.get("/correlation", response_model=List[CorrelationPoint], responses=ERROR_RESPONSES)
async def get_correlation(service: SurveyService = Depends(get_survey_service)):
    """
    Interest level against average rating for every company found in both sheets.

    A company's interest is the level from its last row in the interests
    sheet; its rating is the mean of all its ratings.
    """
    try:
        return await service.correlation()
    except Exception as e:
        raise _failure("correlation_unavailable", "Errore nel recupero dei dati di correlazione", e)


@router.get("/mood", response_model=MoodCounts, responses=ERROR_RESPONSES)
async def get_mood(service: SurveyService = Depends(get_survey_service)):
    """Answer counts for each of the five mood labels."""
    try:
        return await service.mood()
    except Exception as e:
        raise _failure("mood_unavailable", "Errore nel recupero dei dati del mood", e)


@router.get("/trend", response_model=List[TrendPoint], responses=ERROR_RESPONSES)
async def get_trend(service: SurveyService = Depends(get_survey_service)):
    """Average rating for each month of the year, January to December."""
    try:
        return await service.trend()
    except Exception as e:
        raise _failure("trend_unavailable", "Errore nel recupero dei dati dell'andamento temporale", e)
