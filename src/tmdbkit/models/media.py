"""Mixed-media list models.

Multi search, trending and person credits return movies, TV series and
people in one list. Movie items have ``title`` and ``release_date``, TV items
have ``name`` and ``first_air_date``, person items have ``name`` and
``profile_path``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from tmdbkit.models.base import TMDbModel

MediaType = Literal["movie", "tv", "person"]


class MediaListItem(TMDbModel):
    """Single item of a mixed-media list.

    Example:
        >>> item = MediaListItem(id=1399, media_type="tv", name="Game of Thrones")
        >>> item.display_title
        'Game of Thrones'
    """

    id: int
    media_type: MediaType | None = None
    title: str | None = None
    name: str | None = None
    original_title: str | None = None
    original_name: str | None = None
    original_language: str | None = None
    release_date: str | None = None
    first_air_date: str | None = None
    overview: str = ""
    genre_ids: list[int] = Field(default_factory=list)
    poster_path: str | None = None
    backdrop_path: str | None = None
    profile_path: str | None = None
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0
    adult: bool = False

    @property
    def display_title(self) -> str:
        """Title regardless of media type."""
        return self.title or self.name or "Unknown"

    @property
    def display_date(self) -> str | None:
        return self.release_date or self.first_air_date


__all__ = ["MediaListItem", "MediaType"]
