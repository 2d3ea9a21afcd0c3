from .row_source import FetchError, GoogleSheetsRowSource, RowSource
from .survey_service import SurveyService, get_survey_service

__all__ = [
    "FetchError",
    "GoogleSheetsRowSource",
    "RowSource",
    "SurveyService",
    "get_survey_service",
]
