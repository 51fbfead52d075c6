import pytest

from steamviz.errors import DatasetLoadError
from steamviz.services.dataset import load_dataset, read_raw_records


def test_missing_file_raises_load_error(tmp_path):
    with pytest.raises(DatasetLoadError):
        load_dataset(str(tmp_path / "nope.csv"))


def test_non_utf8_file_raises_load_error(tmp_path):
    path = tmp_path / "latin1.csv"
    path.write_bytes("name,release_date,genres\nPokémon,2004-03-01,RPG\n".encode("latin-1"))
    with pytest.raises(DatasetLoadError):
        load_dataset(str(path))


def test_missing_columns_are_added_empty(tmp_path):
    path = tmp_path / "partial.csv"
    path.write_text("name,release_date\nAlpha,2001-01-01\n", encoding="utf-8")
    rows = read_raw_records(str(path))
    assert rows == [{
        "name": "Alpha",
        "release_date": "2001-01-01",
        "genres": None,
        "overall_player_rating": None,
    }]
