"""
Typed view of spreadsheet rows.

Sheet rows arrive as positional lists of loosely typed cells. A RowProfile
names the columns an aggregation needs; the sanitizer turns a raw row into a
SanitizedRow carrying only those fields, already coerced.
"""
from datetime import date
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

# One raw row as returned by the row source
Row = List[Any]

# Column positions shared by both survey sheets
DATE_COLUMN = 0
COMPANY_COLUMN = 1
CATEGORY_COLUMN = 2
SCORE_COLUMN = 3

DEFAULT_INTEREST_CATEGORY = "Non specificato"
DEFAULT_PROJECT = "Progetto non specificato"


class RowProfile(BaseModel):
    """Column requirements an aggregation places on a raw row."""
    model_config = ConfigDict(frozen=True)

    min_columns: int
    numeric_index: Optional[int] = None
    numeric_kind: Literal["int", "float"] = "float"
    numeric_required: bool = True
    category_index: Optional[int] = None
    category_default: Optional[str] = None  # None: a blank category invalidates the row
    exact_category: bool = False  # keep the label unstripped for exact matching
    company_index: Optional[int] = None
    company_required: bool = False
    date_index: Optional[int] = None


class SanitizedRow(BaseModel):
    """A row that passed its profile, with named and coerced fields."""
    model_config = ConfigDict(frozen=True)

    submitted_on: Optional[date] = None
    company: Optional[str] = None
    category: Optional[str] = None
    score: Optional[Union[int, float]] = None


INTEREST_PROFILE = RowProfile(
    min_columns=4,
    numeric_index=SCORE_COLUMN,
    numeric_kind="int",
    category_index=CATEGORY_COLUMN,
    category_default=DEFAULT_INTEREST_CATEGORY,
)

RATING_PROFILE = RowProfile(
    min_columns=4,
    numeric_index=SCORE_COLUMN,
    numeric_kind="float",
    category_index=CATEGORY_COLUMN,
    category_default=DEFAULT_PROJECT,
    company_index=COMPANY_COLUMN,
)

MOOD_PROFILE = RowProfile(
    min_columns=3,
    category_index=CATEGORY_COLUMN,
    exact_category=True,
)

COMPANY_INTEREST_PROFILE = RowProfile(
    min_columns=4,
    numeric_index=SCORE_COLUMN,
    numeric_kind="int",
    company_index=COMPANY_COLUMN,
    company_required=True,
)

COMPANY_RATING_PROFILE = RowProfile(
    min_columns=4,
    numeric_index=SCORE_COLUMN,
    numeric_kind="float",
    company_index=COMPANY_COLUMN,
    company_required=True,
)

TREND_PROFILE = RowProfile(
    min_columns=1,
    date_index=DATE_COLUMN,
    numeric_index=SCORE_COLUMN,
    numeric_kind="float",
    numeric_required=False,
)
