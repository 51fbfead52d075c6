from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class GameRecord(BaseModel):
    """A normalized release row. Source columns ride along as extra fields."""

    model_config = ConfigDict(frozen=True, extra="allow")

    release_year: Optional[int] = None
    genre: Optional[str] = None
    rating: Optional[str] = None


class YearCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    count: int = Field(ge=0)


class GenreAggregate(BaseModel):
    model_config = ConfigDict(frozen=True)

    genre: str
    count: int = Field(ge=0)
    percent: str


class RatingCount(BaseModel):
    rating: str
    count: int = Field(ge=0)


class YearBreakdown(BaseModel):
    year: int
    total: int
    genres: List[GenreAggregate]
    ratings: List[RatingCount]


class ReleasesResponse(BaseModel):
    items: List[YearCount]
    by_year: Dict[int, int]
    count: int


class SelectionRequest(BaseModel):
    year: int


class SelectionState(BaseModel):
    state: Literal["uninitialized", "ready"]
    year: Optional[int] = None


class DashboardView(BaseModel):
    state: Literal["uninitialized", "ready"]
    selected_year: Optional[int] = None
    years: List[int] = []
    releases_by_year: Dict[int, int] = {}
    treemap: List[GenreAggregate] = []
    ratings: List[RatingCount] = []
    records: int = 0
