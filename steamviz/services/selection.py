import logging
import threading
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..errors import CoordinatorNotReady
from ..schemas import DashboardView, GameRecord, GenreAggregate, YearCount
from ..taxonomy import RATINGS
from .aggregates import RatingDistribution, aggregate_for_year, group_by_year
from .views import rating_bars, releases_by_year, treemap_tiles, year_options

logger = logging.getLogger(__name__)


class CoordinatorState(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


class SelectionCoordinator:
    """
    Owns the working dataset and the selected year, and keeps the
    per-year aggregates in step with both.

    The dataset is replaced wholesale by ``load``; the selection changes
    only through ``select``. Every change recomputes all derived views
    before the lock is released, so readers never see a partial state.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = CoordinatorState.UNINITIALIZED
        self._records: Tuple[GameRecord, ...] = ()
        self._selected_year: Optional[int] = None
        self._years: List[int] = []
        self._year_counts: List[YearCount] = []
        self._genres: List[GenreAggregate] = []
        self._ratings: RatingDistribution = {label: 0 for label in RATINGS}

    @property
    def state(self) -> CoordinatorState:
        return self._state

    @property
    def ready(self) -> bool:
        return self._state is CoordinatorState.READY

    @property
    def selected_year(self) -> Optional[int]:
        return self._selected_year

    @property
    def records(self) -> Tuple[GameRecord, ...]:
        return self._records

    @property
    def years(self) -> List[int]:
        return list(self._years)

    @property
    def year_counts(self) -> List[YearCount]:
        return list(self._year_counts)

    @property
    def genres(self) -> List[GenreAggregate]:
        return list(self._genres)

    @property
    def ratings(self) -> RatingDistribution:
        return dict(self._ratings)

    def load(self, records: Sequence[GameRecord]) -> None:
        with self._lock:
            self._records = tuple(records)
            self._years = year_options(self._records)
            self._year_counts = group_by_year(self._records)
            if self._state is CoordinatorState.UNINITIALIZED and self._years:
                self._selected_year = self._years[0]
                self._state = CoordinatorState.READY
                logger.info(
                    "dataset ready: %d records, %d-%d, selected %d",
                    len(self._records), self._years[0], self._years[-1], self._selected_year,
                )
            elif not self._years:
                logger.warning("loaded dataset has no usable records")
            self._recompute_selection()

    def select(self, year: int) -> None:
        # Years outside the dataset are accepted and yield empty breakdowns.
        with self._lock:
            if self._state is not CoordinatorState.READY:
                raise CoordinatorNotReady("no dataset loaded yet")
            self._selected_year = int(year)
            self._recompute_selection()
            logger.debug("selected year %d", self._selected_year)

    def _recompute_selection(self) -> None:
        if self._selected_year is None:
            self._genres = []
            self._ratings = {label: 0 for label in RATINGS}
            return
        self._genres, self._ratings = aggregate_for_year(self._records, self._selected_year)

    def view(self) -> DashboardView:
        with self._lock:
            if self._state is not CoordinatorState.READY:
                return DashboardView(state=self._state.value, records=len(self._records))
            return DashboardView(
                state=self._state.value,
                selected_year=self._selected_year,
                years=list(self._years),
                releases_by_year=releases_by_year(self._year_counts),
                treemap=treemap_tiles(self._genres),
                ratings=rating_bars(self._ratings),
                records=len(self._records),
            )
