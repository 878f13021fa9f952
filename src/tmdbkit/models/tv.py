"""TV series, season and episode response models.

A TV series contains seasons; a season contains episodes. Season and episode
numbers are positional within their parent, not global identifiers.
"""

from __future__ import annotations

from pydantic import Field

from tmdbkit.models.base import TMDbModel
from tmdbkit.models.common import (
    CastMember,
    CrewMember,
    Genre,
    ProductionCompany,
    ProductionCountry,
    SpokenLanguage,
)


class Creator(TMDbModel):
    id: int
    name: str
    credit_id: str | None = None
    gender: int | None = None
    profile_path: str | None = None


class NetworkSummary(TMDbModel):
    id: int
    name: str
    logo_path: str | None = None
    origin_country: str | None = None


class TVEpisode(TMDbModel):
    """A single episode.

    Attributes:
        episode_number: Position within the season (1-based)
        season_number: Season the episode belongs to
        still_path: Representative frame image path (relative)
    """

    id: int
    name: str
    episode_number: int
    season_number: int
    overview: str = ""
    air_date: str | None = None
    runtime: int | None = None
    production_code: str | None = None
    still_path: str | None = None
    show_id: int | None = None
    crew: list[CrewMember] = Field(default_factory=list)
    guest_stars: list[CastMember] = Field(default_factory=list)
    vote_average: float = 0.0
    vote_count: int = 0


class TVSeasonSummary(TMDbModel):
    id: int
    name: str
    season_number: int
    episode_count: int | None = None
    air_date: str | None = None
    overview: str = ""
    poster_path: str | None = None


class TVSeason(TMDbModel):
    """Primary information about a TV series season, including its episodes."""

    id: int
    name: str
    season_number: int
    overview: str = ""
    air_date: str | None = None
    poster_path: str | None = None
    episodes: list[TVEpisode] = Field(default_factory=list)
    vote_average: float = 0.0


class TVSeriesListItem(TMDbModel):
    id: int
    name: str
    original_name: str | None = None
    original_language: str | None = None
    overview: str = ""
    first_air_date: str | None = None
    origin_country: list[str] = Field(default_factory=list)
    genre_ids: list[int] = Field(default_factory=list)
    poster_path: str | None = None
    backdrop_path: str | None = None
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0
    adult: bool = False


class TVSeries(TMDbModel):
    """Primary information about a TV series."""

    id: int
    name: str
    original_name: str | None = None
    original_language: str | None = None
    tagline: str | None = None
    overview: str = ""
    first_air_date: str | None = None
    last_air_date: str | None = None
    in_production: bool = False
    status: str | None = None
    type: str | None = None
    homepage: str | None = None
    number_of_seasons: int | None = None
    number_of_episodes: int | None = None
    episode_run_time: list[int] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    origin_country: list[str] = Field(default_factory=list)
    created_by: list[Creator] = Field(default_factory=list)
    genres: list[Genre] = Field(default_factory=list)
    networks: list[NetworkSummary] = Field(default_factory=list)
    production_companies: list[ProductionCompany] = Field(default_factory=list)
    production_countries: list[ProductionCountry] = Field(default_factory=list)
    spoken_languages: list[SpokenLanguage] = Field(default_factory=list)
    seasons: list[TVSeasonSummary] = Field(default_factory=list)
    last_episode_to_air: TVEpisode | None = None
    next_episode_to_air: TVEpisode | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0
    adult: bool = False


__all__ = [
    "Creator",
    "NetworkSummary",
    "TVEpisode",
    "TVSeason",
    "TVSeasonSummary",
    "TVSeries",
    "TVSeriesListItem",
]
