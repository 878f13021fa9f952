"""Person response models."""

from __future__ import annotations

from pydantic import Field

from tmdbkit.models.base import TMDbModel
from tmdbkit.models.media import MediaListItem


class Person(TMDbModel):
    """Primary information about a person."""

    id: int
    name: str
    also_known_as: list[str] = Field(default_factory=list)
    biography: str = ""
    birthday: str | None = None
    deathday: str | None = None
    gender: int | None = None
    homepage: str | None = None
    imdb_id: str | None = None
    known_for_department: str | None = None
    place_of_birth: str | None = None
    profile_path: str | None = None
    popularity: float = 0.0
    adult: bool = False


class PersonListItem(TMDbModel):
    id: int
    name: str
    known_for_department: str | None = None
    known_for: list[MediaListItem] = Field(default_factory=list)
    gender: int | None = None
    profile_path: str | None = None
    popularity: float = 0.0
    adult: bool = False


class PersonCredit(MediaListItem):
    """A movie or TV series credit of a person.

    Cast credits carry ``character``; crew credits carry ``job`` and
    ``department``.
    """

    credit_id: str | None = None
    character: str | None = None
    job: str | None = None
    department: str | None = None
    episode_count: int | None = None


class PersonCredits(TMDbModel):
    """Credits returned by the combined, movie and TV credit endpoints."""

    id: int | None = None
    cast: list[PersonCredit] = Field(default_factory=list)
    crew: list[PersonCredit] = Field(default_factory=list)


__all__ = ["Person", "PersonCredit", "PersonCredits", "PersonListItem"]
