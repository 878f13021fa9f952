"""Movie service facade."""

from __future__ import annotations

from collections.abc import Sequence

from tmdbkit.endpoints import movies
from tmdbkit.models import (
    ExternalIDs,
    ImageCollection,
    KeywordCollection,
    Movie,
    MovieListItem,
    PageableList,
    Review,
    ShowCredits,
    ShowWatchProviders,
    StatusResponse,
    VideoCollection,
)
from tmdbkit.services.base import BaseService


class MovieService(BaseService):
    """Movie details, media, lists and ratings."""

    async def details(self, movie_id: int, language: str | None = None) -> Movie:
        return await self._execute(
            f"movie details for {movie_id}",
            movies.DETAILS,
            movie_id=movie_id,
            language=self._language(language),
        )

    async def credits(self, movie_id: int, language: str | None = None) -> ShowCredits:
        return await self._execute(
            f"movie credits for {movie_id}",
            movies.CREDITS,
            movie_id=movie_id,
            language=self._language(language),
        )

    async def reviews(
        self, movie_id: int, language: str | None = None, page: int | None = None
    ) -> PageableList[Review]:
        return await self._execute(
            f"movie reviews for {movie_id}",
            movies.REVIEWS,
            movie_id=movie_id,
            language=self._language(language),
            page=page,
        )

    async def images(
        self, movie_id: int, languages: Sequence[str] | None = None
    ) -> ImageCollection:
        """Fetch posters, backdrops and logos.

        Args:
            movie_id: TMDb movie ID
            languages: Locales whose images to include. Defaults to the
                current locale.
        """
        return await self._execute(
            f"movie images for {movie_id}",
            movies.IMAGES,
            movie_id=movie_id,
            languages=self._languages(languages),
        )

    async def videos(
        self, movie_id: int, languages: Sequence[str] | None = None
    ) -> VideoCollection:
        return await self._execute(
            f"movie videos for {movie_id}",
            movies.VIDEOS,
            movie_id=movie_id,
            languages=self._languages(languages),
        )

    async def recommendations(
        self, movie_id: int, language: str | None = None, page: int | None = None
    ) -> PageableList[MovieListItem]:
        return await self._execute(
            f"movie recommendations for {movie_id}",
            movies.RECOMMENDATIONS,
            movie_id=movie_id,
            language=self._language(language),
            page=page,
        )

    async def similar(
        self, movie_id: int, language: str | None = None, page: int | None = None
    ) -> PageableList[MovieListItem]:
        return await self._execute(
            f"similar movies for {movie_id}",
            movies.SIMILAR,
            movie_id=movie_id,
            language=self._language(language),
            page=page,
        )

    async def keywords(self, movie_id: int) -> KeywordCollection:
        return await self._execute(
            f"movie keywords for {movie_id}", movies.KEYWORDS, movie_id=movie_id
        )

    async def external_ids(self, movie_id: int) -> ExternalIDs:
        return await self._execute(
            f"movie external IDs for {movie_id}", movies.EXTERNAL_IDS, movie_id=movie_id
        )

    async def watch_providers(self, movie_id: int) -> ShowWatchProviders:
        return await self._execute(
            f"movie watch providers for {movie_id}", movies.WATCH_PROVIDERS, movie_id=movie_id
        )

    async def now_playing(
        self, language: str | None = None, page: int | None = None, region: str | None = None
    ) -> PageableList[MovieListItem]:
        return await self._execute(
            "now playing movies",
            movies.NOW_PLAYING,
            language=self._language(language),
            page=page,
            region=self._region(region),
        )

    async def popular(
        self, language: str | None = None, page: int | None = None, region: str | None = None
    ) -> PageableList[MovieListItem]:
        return await self._execute(
            "popular movies",
            movies.POPULAR,
            language=self._language(language),
            page=page,
            region=self._region(region),
        )

    async def top_rated(
        self, language: str | None = None, page: int | None = None, region: str | None = None
    ) -> PageableList[MovieListItem]:
        return await self._execute(
            "top rated movies",
            movies.TOP_RATED,
            language=self._language(language),
            page=page,
            region=self._region(region),
        )

    async def upcoming(
        self, language: str | None = None, page: int | None = None, region: str | None = None
    ) -> PageableList[MovieListItem]:
        return await self._execute(
            "upcoming movies",
            movies.UPCOMING,
            language=self._language(language),
            page=page,
            region=self._region(region),
        )

    async def add_rating(
        self,
        movie_id: int,
        value: float,
        session_id: str | None = None,
        guest_session_id: str | None = None,
    ) -> StatusResponse:
        """Rate a movie between 0.5 and 10.0 for a user or guest session."""
        return await self._execute(
            f"rating update for movie {movie_id}",
            movies.ADD_RATING,
            movie_id=movie_id,
            session_id=session_id,
            guest_session_id=guest_session_id,
            body={"value": value},
        )

    async def delete_rating(
        self,
        movie_id: int,
        session_id: str | None = None,
        guest_session_id: str | None = None,
    ) -> StatusResponse:
        return await self._execute(
            f"rating removal for movie {movie_id}",
            movies.DELETE_RATING,
            movie_id=movie_id,
            session_id=session_id,
            guest_session_id=guest_session_id,
        )


__all__ = ["MovieService"]
