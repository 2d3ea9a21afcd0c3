"""
Row sanitizer: validates and coerces one raw sheet row against a RowProfile.

Sheets hand back formatted text, so every cell goes through a best-effort
parse. A row that fails its profile yields None and is simply left out of the
fold; nothing here raises for bad input.
"""
import math
import re
from datetime import date, datetime
from numbers import Number
from typing import Any, Optional, Union

from dateutil import parser as date_parser

from models.rows import Row, RowProfile, SanitizedRow

# it-IT sheets write times with dots: "19/10/2026 10.23.45"
DOTTED_TIME = re.compile(r"(?<=\s)(\d{1,2})\.(\d{2})(?:\.(\d{2}))?$")


def _cell(row: Row, index: Optional[int]) -> Any:
    if index is None or index >= len(row):
        return None
    return row[index]


def clean_text(value: Any) -> Optional[str]:
    """Return the stripped text of a cell, or None when it is blank."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def resolve_category(value: Any, default: Optional[str]) -> Optional[str]:
    """Use the cell's label, falling back to `default` when it is blank."""
    return clean_text(value) or default


def parse_float(value: Any) -> Optional[float]:
    """
    Parse a continuous score.

    Accepts numbers and numeric text, including the Italian decimal comma
    ("4,5") when the text has no dot. NaN and infinities are rejected.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, Number):
        number = float(value)
    else:
        text = clean_text(value)
        if text is None:
            return None
        if "," in text and "." not in text:
            text = text.replace(",", ".")
        try:
            number = float(text)
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    return number


def parse_int(value: Any) -> Optional[int]:
    """
    Parse a discrete count.

    Decimal input is truncated toward zero ("3.7" -> 3).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = clean_text(value)
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    number = parse_float(text)
    if number is None:
        return None
    return int(number)


def _colon_time(text: str) -> str:
    return DOTTED_TIME.sub(lambda m: ":".join(part for part in m.groups() if part), text)


def parse_date(value: Any) -> Optional[date]:
    """Parse an ISO date or a day-first sheet timestamp (19/10/2026 10.23.45)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = clean_text(value)
    if text is None:
        return None
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    try:
        return date_parser.parse(_colon_time(text), dayfirst=True).date()
    except (ValueError, OverflowError):
        return None


def parse_number(value: Any, kind: str) -> Optional[Union[int, float]]:
    if kind == "int":
        return parse_int(value)
    return parse_float(value)


def sanitize_row(row: Row, profile: RowProfile) -> Optional[SanitizedRow]:
    """
    Check `row` against `profile` and return its coerced fields.

    Returns None when the row is too short, a required numeric cell does not
    parse, a required company or category is blank, or the date is unreadable.
    """
    if row is None or len(row) < profile.min_columns:
        return None

    fields = {}

    if profile.date_index is not None:
        submitted_on = parse_date(_cell(row, profile.date_index))
        if submitted_on is None:
            return None
        fields["submitted_on"] = submitted_on

    if profile.numeric_index is not None:
        score = parse_number(_cell(row, profile.numeric_index), profile.numeric_kind)
        if score is None and profile.numeric_required:
            return None
        fields["score"] = score

    if profile.company_index is not None:
        company = clean_text(_cell(row, profile.company_index))
        if company is None and profile.company_required:
            return None
        fields["company"] = company

    if profile.category_index is not None:
        raw_category = _cell(row, profile.category_index)
        if profile.exact_category:
            category = str(raw_category) if clean_text(raw_category) else None
        else:
            category = resolve_category(raw_category, profile.category_default)
        if category is None:
            return None
        fields["category"] = category

    return SanitizedRow(**fields)
