import logging
from typing import Any, Dict, List
import pandas as pd

from ..config import DATE_COLUMN, GENRE_COLUMN, RATING_COLUMN
from ..errors import DatasetLoadError

logger = logging.getLogger(__name__)

EXPECTED_COLS = [DATE_COLUMN, GENRE_COLUMN, RATING_COLUMN]


def load_dataset(path: str) -> pd.DataFrame:
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DatasetLoadError(f"could not read {path}: {e}") from e
    df.columns = [c.strip() for c in df.columns]
    for c in EXPECTED_COLS:
        if c not in df.columns:
            logger.warning("column %r missing from %s, every row will be dropped", c, path)
            df[c] = pd.NA
    logger.info("read %d rows from %s", len(df), path)
    return df


def raw_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Rows as plain column -> value mappings, empty cells as None."""
    out = df.astype(object).where(df.notna(), None)
    return out.to_dict(orient="records")


def read_raw_records(path: str) -> List[Dict[str, Any]]:
    return raw_records(load_dataset(path))
