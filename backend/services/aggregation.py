"""
Aggregation engine for survey sheets.

Each aggregator folds raw rows into a summary model. They are pure functions
of their input: rows that fail the sanitizer contribute nothing, and an empty
input gives zero counts and zero averages.
"""
from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Mapping, Sequence

from models.rows import (
    COMPANY_INTEREST_PROFILE,
    COMPANY_RATING_PROFILE,
    INTEREST_PROFILE,
    MOOD_PROFILE,
    RATING_PROFILE,
    TREND_PROFILE,
    Row,
)
from models.survey import (
    CorrelationPoint,
    InterestSummary,
    MoodCounts,
    RatingSummary,
    TrendPoint,
)
from services.sanitizer import sanitize_row

MOOD_LABELS = (
    "Non interessato 😢",
    "Distratto 😕",
    "Curioso 🙂",
    "Coinvolto 😃",
    "Molto interessato 🤩",
)

ONE_DECIMAL = Decimal("0.1")

# Italian short month names, January first
MONTH_LABELS = (
    "Gen", "Feb", "Mar", "Apr", "Mag", "Giu",
    "Lug", "Ago", "Set", "Ott", "Nov", "Dic",
)


def average(values: Sequence[float]) -> float:
    """
    Mean rounded to one decimal; 0.0 for an empty sequence.

    Ties round away from zero on the float's exact value (3.25 -> 3.3).
    """
    if not values:
        return 0.0
    mean = Decimal(sum(values) / len(values))
    return float(mean.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP))


def aggregate_interests(rows: Iterable[Row]) -> InterestSummary:
    """Count answers per interest type and average the interest level."""
    interests: Dict[str, int] = defaultdict(int)
    levels: List[int] = []

    for row in rows:
        entry = sanitize_row(row, INTEREST_PROFILE)
        if entry is None:
            continue
        levels.append(entry.score)
        interests[entry.category] += 1

    return InterestSummary(
        interests=dict(interests),
        avg_interest=average(levels),
        total_entries=len(levels),
    )


def aggregate_ratings(rows: Iterable[Row]) -> RatingSummary:
    """
    Average ratings per project and overall.

    Per-project averages are taken over each project's full list of ratings,
    not averaged from running means. `unique_companies` counts distinct
    non-blank company names among the valid rows.
    """
    project_ratings: Dict[str, List[float]] = defaultdict(list)
    ratings: List[float] = []
    companies = set()

    for row in rows:
        entry = sanitize_row(row, RATING_PROFILE)
        if entry is None:
            continue
        ratings.append(entry.score)
        project_ratings[entry.category].append(entry.score)
        if entry.company:
            companies.add(entry.company)

    return RatingSummary(
        project_ratings={project: average(values) for project, values in project_ratings.items()},
        avg_rating=average(ratings),
        total_entries=len(ratings),
        unique_companies=len(companies),
    )


def aggregate_moods(rows: Iterable[Row]) -> MoodCounts:
    """Count the five known mood labels; anything else is ignored."""
    counts = {label: 0 for label in MOOD_LABELS}
    for row in rows:
        entry = sanitize_row(row, MOOD_PROFILE)
        if entry is not None and entry.category in counts:
            counts[entry.category] += 1
    return counts


def company_interests(rows: Iterable[Row]) -> Dict[str, int]:
    """
    Interest level per company.

    A company answering more than once keeps only its last row's level;
    interest is not averaged, unlike company_ratings.
    """
    interests: Dict[str, int] = {}
    for row in rows:
        entry = sanitize_row(row, COMPANY_INTEREST_PROFILE)
        if entry is not None:
            interests[entry.company] = entry.score
    return interests


def company_ratings(rows: Iterable[Row]) -> Dict[str, List[float]]:
    """All ratings per company, in row order."""
    ratings: Dict[str, List[float]] = defaultdict(list)
    for row in rows:
        entry = sanitize_row(row, COMPANY_RATING_PROFILE)
        if entry is not None:
            ratings[entry.company].append(entry.score)
    return dict(ratings)


def join_company_metrics(
    interests: Mapping[str, int],
    ratings: Mapping[str, Sequence[float]],
) -> List[CorrelationPoint]:
    """Inner join on company, in the interest map's order."""
    return [
        CorrelationPoint(company=company, interest=interest, rating=average(ratings[company]))
        for company, interest in interests.items()
        if company in ratings and ratings[company]
    ]


def correlate(interest_rows: Iterable[Row], rating_rows: Iterable[Row]) -> List[CorrelationPoint]:
    """Pair each company's interest level with its average rating."""
    return join_company_metrics(company_interests(interest_rows), company_ratings(rating_rows))


def aggregate_trend(rows: Iterable[Row]) -> List[TrendPoint]:
    """
    Average rating per calendar month.

    Always returns twelve points, January to December; months without a
    rated row report 0. Rows with an unreadable date are skipped.
    """
    monthly: Dict[str, List[float]] = defaultdict(list)
    for row in rows:
        entry = sanitize_row(row, TREND_PROFILE)
        if entry is None or entry.score is None:
            continue
        monthly[MONTH_LABELS[entry.submitted_on.month - 1]].append(entry.score)

    return [TrendPoint(month=month, rating=average(monthly.get(month, []))) for month in MONTH_LABELS]
