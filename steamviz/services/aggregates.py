from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Sequence, Tuple
import pandas as pd

from ..schemas import GameRecord, GenreAggregate, YearCount
from ..taxonomy import RATINGS

RatingDistribution = Dict[str, int]

_COLUMNS = ["release_year", "genre", "rating"]


def _frame(records: Sequence[GameRecord]) -> pd.DataFrame:
    rows = [(r.release_year, r.genre, r.rating) for r in records]
    return pd.DataFrame(rows, columns=_COLUMNS)


def format_percent(count: int, total: int) -> str:
    if total <= 0:
        return "0.0%"
    # ties round up, as JavaScript toFixed does for these values
    pct = Decimal(repr(count / total * 100)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{pct}%"


def group_by_year(records: Sequence[GameRecord]) -> List[YearCount]:
    """Release counts per distinct year, ascending by year."""
    df = _frame(records).dropna(subset=["release_year"])
    if df.empty:
        return []
    counts = df.groupby("release_year", sort=True).size()
    return [YearCount(year=int(y), count=int(n)) for y, n in counts.items()]


def distinct_years(records: Sequence[GameRecord]) -> List[int]:
    return sorted({int(r.release_year) for r in records if r.release_year is not None})


def genre_counts(df: pd.DataFrame) -> List[GenreAggregate]:
    counts = df.dropna(subset=["genre"]).groupby("genre", sort=False).size()
    total = int(counts.sum())
    return [
        GenreAggregate(genre=str(g), count=int(n), percent=format_percent(int(n), total))
        for g, n in counts.items()
    ]


def rating_distribution(df: pd.DataFrame) -> RatingDistribution:
    counts = df["rating"].value_counts(dropna=True)
    return {label: int(counts.get(label, 0)) for label in RATINGS}


def aggregate_for_year(
    records: Sequence[GameRecord],
    year: int,
) -> Tuple[List[GenreAggregate], RatingDistribution]:
    """
    Genre breakdown (first-appearance order, one-decimal percents) and the
    seven-label rating distribution for a single release year.
    Years without records give ([], all zeros).
    """
    df = _frame(records)
    dff = df[df["release_year"] == year]
    return genre_counts(dff), rating_distribution(dff)
