"""Collection, company and network response models."""

from __future__ import annotations

from pydantic import Field

from tmdbkit.models.base import TMDbModel
from tmdbkit.models.movies import MovieListItem


class Collection(TMDbModel):
    """A movie collection (franchise) and its parts."""

    id: int
    name: str
    overview: str = ""
    poster_path: str | None = None
    backdrop_path: str | None = None
    parts: list[MovieListItem] = Field(default_factory=list)


class ParentCompany(TMDbModel):
    id: int
    name: str
    logo_path: str | None = None


class Company(TMDbModel):
    id: int
    name: str
    description: str = ""
    headquarters: str | None = None
    homepage: str | None = None
    logo_path: str | None = None
    origin_country: str | None = None
    parent_company: ParentCompany | None = None


class Network(TMDbModel):
    id: int
    name: str
    headquarters: str | None = None
    homepage: str | None = None
    logo_path: str | None = None
    origin_country: str | None = None


class LogoImage(TMDbModel):
    file_path: str
    file_type: str | None = None
    width: int
    height: int
    aspect_ratio: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0


class LogoCollection(TMDbModel):
    """Logos of a company or network."""

    id: int | None = None
    logos: list[LogoImage] = Field(default_factory=list)


__all__ = [
    "Collection",
    "Company",
    "LogoCollection",
    "LogoImage",
    "Network",
    "ParentCompany",
]
