import os
from pathlib import Path

import pytest

SAMPLE_CSV = Path(__file__).parent / "data" / "games_sample.csv"
os.environ["STEAMVIZ_DATA_PATH"] = str(SAMPLE_CSV)

from steamviz.schemas import GameRecord  # noqa: E402


@pytest.fixture
def sample_csv() -> Path:
    return SAMPLE_CSV


@pytest.fixture
def make_records():
    def _make(*rows):
        return tuple(GameRecord(release_year=y, genre=g, rating=r) for y, g, r in rows)
    return _make
