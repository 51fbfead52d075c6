from typing import Dict, List, Mapping, Sequence

from ..schemas import GameRecord, GenreAggregate, RatingCount, YearCount
from ..taxonomy import RATINGS
from .aggregates import distinct_years


def releases_by_year(year_counts: Sequence[YearCount]) -> Dict[int, int]:
    return {yc.year: yc.count for yc in year_counts}


def rating_bars(distribution: Mapping[str, int]) -> List[RatingCount]:
    return [RatingCount(rating=label, count=int(distribution.get(label, 0))) for label in RATINGS]


def treemap_tiles(genres: Sequence[GenreAggregate]) -> List[GenreAggregate]:
    return list(genres)


def year_options(records: Sequence[GameRecord]) -> List[int]:
    return distinct_years(records)
