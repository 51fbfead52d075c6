import logging
from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from . import config
from .deps import get_coordinator, load_dataset_into
from .errors import CoordinatorNotReady, DatasetLoadError
from .logging_setup import configure_logging
from .observability.metrics import setup_metrics
from .schemas import (
    DashboardView,
    ReleasesResponse,
    SelectionRequest,
    SelectionState,
    YearBreakdown,
)
from .services.aggregates import aggregate_for_year
from .services.views import rating_bars, releases_by_year, treemap_tiles
from .taxonomy import GENRE_COLORS, GENRES, RATINGS

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Steam Game Visualization API", version="1.0.0")
app.state.load_error = None

setup_metrics(app)


def _load() -> int:
    n = load_dataset_into(get_coordinator())
    app.state.load_error = None
    return n


@app.on_event("startup")
def startup_event():
    try:
        _load()
    except DatasetLoadError as e:
        logger.exception("dataset load failed, dashboard stays empty")
        app.state.load_error = str(e)


@app.get("/healthz")
def healthz():
    coord = get_coordinator()
    if app.state.load_error is not None:
        return JSONResponse(
            status_code=500,
            content={"status": "error", "dataset_loaded": False, "message": app.state.load_error},
        )
    return {
        "status": "ok",
        "dataset_loaded": coord.ready,
        "state": coord.state.value,
        "rows": len(coord.records),
    }


@app.get("/meta/years")
def meta_years():
    years = get_coordinator().years
    return {"items": years, "count": len(years)}


@app.get("/meta/taxonomy")
def meta_taxonomy():
    return {"genres": list(GENRES), "ratings": list(RATINGS), "genre_colors": GENRE_COLORS}


@app.get("/stats/releases", response_model=ReleasesResponse)
def stats_releases():
    items = get_coordinator().year_counts
    return {"items": items, "by_year": releases_by_year(items), "count": len(items)}


@app.get("/stats/year/{year}", response_model=YearBreakdown)
def stats_year(year: int):
    """
    Genre and rating breakdown for any year, independent of the current
    selection. Years with no releases come back empty / zero-filled.
    """
    genres, ratings = aggregate_for_year(get_coordinator().records, year)
    return {
        "year": year,
        "total": sum(g.count for g in genres),
        "genres": treemap_tiles(genres),
        "ratings": rating_bars(ratings),
    }


@app.get("/selection", response_model=SelectionState)
def get_selection():
    coord = get_coordinator()
    return {"state": coord.state.value, "year": coord.selected_year}


@app.put("/selection", response_model=DashboardView)
def put_selection(payload: SelectionRequest):
    coord = get_coordinator()
    try:
        coord.select(payload.year)
    except CoordinatorNotReady as e:
        raise HTTPException(status_code=409, detail=str(e))
    return coord.view()


@app.get("/dashboard", response_model=DashboardView)
def dashboard():
    return get_coordinator().view()


@app.post("/dataset/reload")
def dataset_reload():
    try:
        n = _load()
    except DatasetLoadError as e:
        logger.error("reload failed: %s", e)
        app.state.load_error = str(e)
        raise HTTPException(status_code=503, detail=str(e))
    coord = get_coordinator()
    return {"status": "ok", "rows": n, "state": coord.state.value, "path": config.DATA_PATH}
