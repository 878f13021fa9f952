"""Movie response models."""

from __future__ import annotations

from pydantic import Field

from tmdbkit.models.base import TMDbModel
from tmdbkit.models.common import Genre, ProductionCompany, ProductionCountry, SpokenLanguage


class BelongsToCollection(TMDbModel):
    id: int
    name: str
    poster_path: str | None = None
    backdrop_path: str | None = None


class MovieListItem(TMDbModel):
    """Movie as it appears in lists, search results and recommendations.

    Dates are kept as the strings TMDb sends (``YYYY-MM-DD``, possibly empty).
    """

    id: int
    title: str
    original_title: str | None = None
    original_language: str | None = None
    overview: str = ""
    release_date: str | None = None
    genre_ids: list[int] = Field(default_factory=list)
    poster_path: str | None = None
    backdrop_path: str | None = None
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0
    adult: bool = False
    video: bool = False


class Movie(TMDbModel):
    """Primary information about a movie."""

    id: int
    title: str
    original_title: str | None = None
    original_language: str | None = None
    tagline: str | None = None
    overview: str = ""
    runtime: int | None = None
    genres: list[Genre] = Field(default_factory=list)
    release_date: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    budget: int = 0
    revenue: int = 0
    homepage: str | None = None
    imdb_id: str | None = None
    status: str | None = None
    production_companies: list[ProductionCompany] = Field(default_factory=list)
    production_countries: list[ProductionCountry] = Field(default_factory=list)
    spoken_languages: list[SpokenLanguage] = Field(default_factory=list)
    belongs_to_collection: BelongsToCollection | None = None
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0
    adult: bool = False
    video: bool = False


__all__ = ["BelongsToCollection", "Movie", "MovieListItem"]
