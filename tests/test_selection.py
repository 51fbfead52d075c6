import logging

import pytest

from steamviz.errors import CoordinatorNotReady
from steamviz.services.selection import CoordinatorState, SelectionCoordinator
from steamviz.taxonomy import RATINGS


def test_starts_uninitialized_with_placeholder_view():
    coord = SelectionCoordinator()
    assert coord.state is CoordinatorState.UNINITIALIZED
    assert coord.selected_year is None
    view = coord.view()
    assert view.state == "uninitialized"
    assert view.treemap == [] and view.ratings == [] and view.releases_by_year == {}


def test_select_before_load_is_rejected():
    coord = SelectionCoordinator()
    with pytest.raises(CoordinatorNotReady):
        coord.select(2001)


def test_load_selects_minimum_year(make_records):
    coord = SelectionCoordinator()
    coord.load(make_records(
        (2005, "Action", "Mixed"),
        (2001, "RPG", "Mixed"),
        (2003, "Casual", "Mixed"),
    ))
    assert coord.state is CoordinatorState.READY
    assert coord.selected_year == 2001
    assert coord.years == [2001, 2003, 2005]
    assert [g.genre for g in coord.genres] == ["RPG"]


def test_empty_load_stays_uninitialized():
    coord = SelectionCoordinator()
    coord.load(())
    assert coord.state is CoordinatorState.UNINITIALIZED


def test_select_recomputes_breakdowns(make_records):
    coord = SelectionCoordinator()
    coord.load(make_records(
        (2001, "RPG", "Mixed"),
        (2002, "Action", "Very Positive"),
        (2002, "Action", "Mixed"),
    ))
    coord.select(2002)
    assert coord.selected_year == 2002
    assert [(g.genre, g.count, g.percent) for g in coord.genres] == [("Action", 2, "100.0%")]
    assert coord.ratings["Very Positive"] == 1
    assert coord.ratings["Mixed"] == 1


def test_select_absent_year_degrades_gracefully(make_records):
    coord = SelectionCoordinator()
    coord.load(make_records((2001, "RPG", "Mixed"), (2025, "Action", "Mixed")))
    coord.select(1999)
    assert coord.selected_year == 1999
    assert coord.genres == []
    assert list(coord.ratings) == list(RATINGS)
    assert sum(coord.ratings.values()) == 0


def test_reselecting_same_year_is_idempotent(make_records):
    coord = SelectionCoordinator()
    coord.load(make_records((2001, "RPG", "Mixed"), (2001, "Other", None)))
    before = coord.view()
    coord.select(2001)
    assert coord.view() == before


def test_reload_replaces_dataset_and_keeps_selection(make_records):
    coord = SelectionCoordinator()
    coord.load(make_records((2001, "RPG", "Mixed"), (2002, "Action", "Mixed")))
    coord.select(2002)
    coord.load(make_records((2002, "Strategy", "Mixed"), (2003, "Casual", "Mixed")))
    assert coord.selected_year == 2002
    assert coord.years == [2002, 2003]
    assert [g.genre for g in coord.genres] == ["Strategy"]
    assert len(coord.records) == 2


def test_select_logs_stored_year(make_records, caplog):
    coord = SelectionCoordinator()
    coord.load(make_records((2001, "RPG", "Mixed"), (2002, "Action", "Mixed")))
    with caplog.at_level(logging.DEBUG, logger="steamviz.services.selection"):
        coord.select(2002.0)
    assert coord.selected_year == 2002
    assert "selected year 2002" in caplog.text


def test_view_matches_read_model(make_records):
    coord = SelectionCoordinator()
    coord.load(make_records(
        (2020, "RPG", "Very Positive"),
        (2020, "RPG", "Mixed"),
        (2019, "Action", "Mixed"),
    ))
    coord.select(2020)
    view = coord.view()
    assert view.state == "ready"
    assert view.selected_year == 2020
    assert view.years == [2019, 2020]
    assert view.releases_by_year == {2019: 1, 2020: 2}
    assert [t.model_dump() for t in view.treemap] == [{"genre": "RPG", "count": 2, "percent": "100.0%"}]
    assert [b.rating for b in view.ratings] == list(RATINGS)
    assert view.records == 3
