from __future__ import annotations

from typing import Dict, List

import pytest
from fastapi.testclient import TestClient

from main import app
from services.row_source import FetchError
from services.survey_service import SurveyService, get_survey_service

INTERESTS_RANGE = "Foglio1!A2:D"
RATINGS_RANGE = "Foglio2!A2:D"


class FakeRowSource:
    """In-memory row source keyed by range name."""

    def __init__(self, sheets: Dict[str, List[list]], failing: tuple = ()) -> None:
        self.sheets = sheets
        self.failing = set(failing)
        self.calls: List[str] = []

    async def fetch(self, range_name: str) -> List[list]:
        self.calls.append(range_name)
        if range_name in self.failing:
            raise FetchError(range_name, "permission denied")
        return [list(row) for row in self.sheets.get(range_name, [])]


@pytest.fixture()
def interest_rows() -> List[list]:
    return [
        ["19/10/2026 10:00:00", "Acme", "Curioso 🙂", "3"],
        ["19/10/2026 10:05:00", "Beta", "Coinvolto 😃", "5"],
        ["20/10/2026 09:00:00", "Acme", "Curioso 🙂", "4"],
        ["20/10/2026 09:30:00", "Gamma", "", "2"],
        ["20/10/2026 09:45:00", "Delta", "Annoiato", "abc"],
        ["21/10/2026 11:00:00", "Epsilon"],
    ]


@pytest.fixture()
def rating_rows() -> List[list]:
    return [
        ["15/01/2026 10:00:00", "Acme", "ESP3D BOX", "4"],
        ["20/01/2026 10:00:00", "Acme", "Flipper Zero", "2"],
        ["03/02/2026 10:00:00", "Beta", "ESP3D BOX", "5"],
        ["not a date", "Zeta", "Website", "3"],
        ["10/03/2026 10:00:00", "", "", "3,5"],
        ["11/03/2026 10:00:00", "Omega", "Website", "n/a"],
    ]


@pytest.fixture()
def row_source(interest_rows, rating_rows) -> FakeRowSource:
    return FakeRowSource({INTERESTS_RANGE: interest_rows, RATINGS_RANGE: rating_rows})


@pytest.fixture()
def survey_service(row_source) -> SurveyService:
    return SurveyService(row_source, interests_range=INTERESTS_RANGE, ratings_range=RATINGS_RANGE)


@pytest.fixture()
def client(survey_service):
    app.dependency_overrides[get_survey_service] = lambda: survey_service
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
