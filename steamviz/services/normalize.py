import logging
from typing import Any, Iterable, Mapping, Optional, Tuple
import pandas as pd

from ..config import DATE_COLUMN, GENRE_COLUMN, RATING_COLUMN
from ..schemas import GameRecord

logger = logging.getLogger(__name__)

_CANONICAL_FIELDS = set(GameRecord.model_fields)


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    s = str(value)
    return s if s.strip() else None


def parse_year(value: Any) -> Optional[int]:
    """Calendar year of a date-like value, or None when it is not a date."""
    s = _text(value)
    if s is None:
        return None
    ts = pd.to_datetime(s, errors="coerce")
    if pd.isna(ts):
        return None
    return int(ts.year)


def normalize_record(raw: Mapping[str, Any]) -> Optional[GameRecord]:
    year = parse_year(raw.get(DATE_COLUMN))
    if year is None:
        return None
    genre = _text(raw.get(GENRE_COLUMN))
    if genre is None:
        return None

    passthrough = {k: v for k, v in raw.items() if k not in _CANONICAL_FIELDS}
    return GameRecord(
        release_year=year,
        genre=genre,
        rating=_text(raw.get(RATING_COLUMN)),
        **passthrough,
    )


def normalize_records(rows: Iterable[Mapping[str, Any]]) -> Tuple[GameRecord, ...]:
    kept = []
    seen = 0
    for raw in rows:
        seen += 1
        rec = normalize_record(raw)
        if rec is not None:
            kept.append(rec)
    logger.debug("normalized %d rows: kept %d, dropped %d", seen, len(kept), seen - len(kept))
    return tuple(kept)
