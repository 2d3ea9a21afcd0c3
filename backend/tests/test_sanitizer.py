from __future__ import annotations

from datetime import date

import pytest

from models.rows import (
    COMPANY_INTEREST_PROFILE,
    DEFAULT_INTEREST_CATEGORY,
    DEFAULT_PROJECT,
    INTEREST_PROFILE,
    MOOD_PROFILE,
    RATING_PROFILE,
    TREND_PROFILE,
)
from services.sanitizer import (
    parse_date,
    parse_float,
    parse_int,
    resolve_category,
    sanitize_row,
)


class TestParseInt:
    @pytest.mark.parametrize("value, expected", [("3", 3), (" 4 ", 4), (5, 5), ("3.7", 3), (2.0, 2), ("-1", -1)])
    def test_accepts_numbers(self, value, expected) -> None:
        assert parse_int(value) == expected

    @pytest.mark.parametrize("value", ["", "   ", None, "abc", "nan", True])
    def test_rejects_non_numbers(self, value) -> None:
        assert parse_int(value) is None


class TestParseFloat:
    @pytest.mark.parametrize("value, expected", [("4.5", 4.5), ("4,5", 4.5), (3, 3.0), (" 2 ", 2.0)])
    def test_accepts_numbers(self, value, expected) -> None:
        assert parse_float(value) == expected

    @pytest.mark.parametrize("value", ["", None, "ottimo", "inf", "NaN", float("nan"), False])
    def test_rejects_non_finite_or_text(self, value) -> None:
        assert parse_float(value) is None


class TestParseDate:
    def test_day_first_timestamp(self) -> None:
        assert parse_date("03/02/2026 10:00:00") == date(2026, 2, 3)

    @pytest.mark.parametrize("value", ["19/10/2026 10.23.45", "19/10/2026 10.23"])
    def test_dotted_time(self, value) -> None:
        assert parse_date(value) == date(2026, 10, 19)

    def test_dotted_date_without_time_is_not_read_as_time(self) -> None:
        assert parse_date("03.02.2026") == date(2026, 2, 3)

    def test_iso_date_is_not_read_day_first(self) -> None:
        assert parse_date("2026-02-03") == date(2026, 2, 3)
        assert parse_date("2026-02-03T08:15:00") == date(2026, 2, 3)

    @pytest.mark.parametrize("value", ["", None, "not a date", "31/31/2026"])
    def test_unparseable(self, value) -> None:
        assert parse_date(value) is None


def test_resolve_category_uses_default_only_when_blank() -> None:
    assert resolve_category("  Curioso  ", "x") == "Curioso"
    assert resolve_category("", "x") == "x"
    assert resolve_category(None, None) is None


class TestSanitizeRow:
    def test_too_short_row_is_invalid(self) -> None:
        assert sanitize_row(["d", "Acme", "Curioso"], INTEREST_PROFILE) is None

    def test_interest_row(self) -> None:
        entry = sanitize_row(["d", "Acme", "Curioso", "3"], INTEREST_PROFILE)
        assert entry is not None
        assert entry.score == 3
        assert isinstance(entry.score, int)
        assert entry.category == "Curioso"

    def test_blank_interest_category_gets_default(self) -> None:
        entry = sanitize_row(["d", "Acme", "", "3"], INTEREST_PROFILE)
        assert entry.category == DEFAULT_INTEREST_CATEGORY

    def test_blank_project_gets_default(self) -> None:
        entry = sanitize_row(["d", "Acme", " ", "4.5"], RATING_PROFILE)
        assert entry.category == DEFAULT_PROJECT
        assert entry.score == 4.5
        assert entry.company == "Acme"

    def test_non_numeric_score_is_invalid(self) -> None:
        assert sanitize_row(["d", "Acme", "ProjX", "buono"], RATING_PROFILE) is None

    def test_company_profile_requires_company(self) -> None:
        assert sanitize_row(["d", "", "Curioso", "3"], COMPANY_INTEREST_PROFILE) is None

    def test_mood_requires_label(self) -> None:
        assert sanitize_row(["d", "Acme", ""], MOOD_PROFILE) is None
        assert sanitize_row(["d", "Acme", "Curioso 🙂"], MOOD_PROFILE).category == "Curioso 🙂"

    def test_mood_label_is_kept_unstripped(self) -> None:
        assert sanitize_row(["d", "Acme", "Curioso 🙂 "], MOOD_PROFILE).category == "Curioso 🙂 "
        assert sanitize_row(["d", "Acme", "   "], MOOD_PROFILE) is None

    def test_negative_score_is_accepted(self) -> None:
        assert sanitize_row(["d", "Acme", "Curioso", "-3"], INTEREST_PROFILE).score == -3

    def test_trend_rating_is_optional(self) -> None:
        entry = sanitize_row(["15/01/2026"], TREND_PROFILE)
        assert entry.submitted_on == date(2026, 1, 15)
        assert entry.score is None

    def test_trend_bad_date_is_invalid(self) -> None:
        assert sanitize_row(["yesterday-ish", "Acme", "P", "4"], TREND_PROFILE) is None
