"""Reference data models: configuration, certifications, watch providers, find."""

from __future__ import annotations

from pydantic import Field

from tmdbkit.models.base import TMDbModel
from tmdbkit.models.movies import MovieListItem
from tmdbkit.models.people import PersonListItem
from tmdbkit.models.tv import TVEpisode, TVSeasonSummary, TVSeriesListItem


class ImagesConfiguration(TMDbModel):
    """Base URLs and sizes for building image URLs.

    An image URL is ``secure_base_url + size + file_path``.
    """

    base_url: str
    secure_base_url: str
    backdrop_sizes: list[str] = Field(default_factory=list)
    logo_sizes: list[str] = Field(default_factory=list)
    poster_sizes: list[str] = Field(default_factory=list)
    profile_sizes: list[str] = Field(default_factory=list)
    still_sizes: list[str] = Field(default_factory=list)


class APIConfiguration(TMDbModel):
    images: ImagesConfiguration
    change_keys: list[str] = Field(default_factory=list)


class Country(TMDbModel):
    iso_3166_1: str
    english_name: str
    native_name: str | None = None


class Language(TMDbModel):
    iso_639_1: str
    english_name: str
    name: str = ""


class Certification(TMDbModel):
    certification: str
    meaning: str
    order: int


class CertificationsByCountry(TMDbModel):
    """Certifications keyed by ISO 3166-1 country code."""

    certifications: dict[str, list[Certification]] = Field(default_factory=dict)


class WatchProvider(TMDbModel):
    provider_id: int
    provider_name: str
    logo_path: str | None = None
    display_priority: int | None = None


class WatchProviderList(TMDbModel):
    results: list[WatchProvider] = Field(default_factory=list)


class WatchProviderRegion(TMDbModel):
    iso_3166_1: str
    english_name: str
    native_name: str | None = None


class WatchProviderRegionList(TMDbModel):
    results: list[WatchProviderRegion] = Field(default_factory=list)


class RegionWatchProviders(TMDbModel):
    """Where a title can be watched in one region, by offer type."""

    link: str | None = None
    flatrate: list[WatchProvider] = Field(default_factory=list)
    rent: list[WatchProvider] = Field(default_factory=list)
    buy: list[WatchProvider] = Field(default_factory=list)
    free: list[WatchProvider] = Field(default_factory=list)
    ads: list[WatchProvider] = Field(default_factory=list)


class ShowWatchProviders(TMDbModel):
    """Watch providers of a movie or TV series keyed by region code."""

    id: int | None = None
    results: dict[str, RegionWatchProviders] = Field(default_factory=dict)


class FindResults(TMDbModel):
    """Objects matching an external ID (IMDb, TVDB, Wikidata ...)."""

    movie_results: list[MovieListItem] = Field(default_factory=list)
    tv_results: list[TVSeriesListItem] = Field(default_factory=list)
    person_results: list[PersonListItem] = Field(default_factory=list)
    tv_episode_results: list[TVEpisode] = Field(default_factory=list)
    tv_season_results: list[TVSeasonSummary] = Field(default_factory=list)


__all__ = [
    "APIConfiguration",
    "Certification",
    "CertificationsByCountry",
    "Country",
    "FindResults",
    "ImagesConfiguration",
    "Language",
    "RegionWatchProviders",
    "ShowWatchProviders",
    "WatchProvider",
    "WatchProviderList",
    "WatchProviderRegion",
    "WatchProviderRegionList",
]
