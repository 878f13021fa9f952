"""Search, discover and trending service facades."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from tmdbkit.endpoints import search
from tmdbkit.endpoints.search import TimeWindow
from tmdbkit.models import (
    Collection,
    Company,
    Keyword,
    MediaListItem,
    MovieListItem,
    PageableList,
    PersonListItem,
    TVSeriesListItem,
)
from tmdbkit.services.base import BaseService

IDList = Union[int, str, Sequence[Union[int, str]]]


class SearchService(BaseService):
    """Free-text search across the TMDb catalogue."""

    async def multi(
        self,
        query: str,
        *,
        include_adult: bool | None = None,
        language: str | None = None,
        page: int | None = None,
    ) -> PageableList[MediaListItem]:
        """Search movies, TV series and people at once."""
        return await self._execute(
            f"multi search results for '{query}'",
            search.MULTI,
            query=query,
            include_adult=include_adult,
            language=self._language(language),
            page=page,
        )

    async def movies(
        self,
        query: str,
        *,
        include_adult: bool | None = None,
        language: str | None = None,
        primary_release_year: int | None = None,
        page: int | None = None,
        region: str | None = None,
        year: int | None = None,
    ) -> PageableList[MovieListItem]:
        return await self._execute(
            f"movie search results for '{query}'",
            search.MOVIES,
            query=query,
            include_adult=include_adult,
            language=self._language(language),
            primary_release_year=primary_release_year,
            page=page,
            region=self._region(region),
            year=year,
        )

    async def tv_series(
        self,
        query: str,
        *,
        first_air_date_year: int | None = None,
        include_adult: bool | None = None,
        language: str | None = None,
        page: int | None = None,
        year: int | None = None,
    ) -> PageableList[TVSeriesListItem]:
        return await self._execute(
            f"TV series search results for '{query}'",
            search.TV_SERIES,
            query=query,
            first_air_date_year=first_air_date_year,
            include_adult=include_adult,
            language=self._language(language),
            page=page,
            year=year,
        )

    async def people(
        self,
        query: str,
        *,
        include_adult: bool | None = None,
        language: str | None = None,
        page: int | None = None,
    ) -> PageableList[PersonListItem]:
        return await self._execute(
            f"person search results for '{query}'",
            search.PEOPLE,
            query=query,
            include_adult=include_adult,
            language=self._language(language),
            page=page,
        )

    async def collections(
        self,
        query: str,
        *,
        include_adult: bool | None = None,
        language: str | None = None,
        page: int | None = None,
        region: str | None = None,
    ) -> PageableList[Collection]:
        return await self._execute(
            f"collection search results for '{query}'",
            search.COLLECTIONS,
            query=query,
            include_adult=include_adult,
            language=self._language(language),
            page=page,
            region=self._region(region),
        )

    async def companies(self, query: str, *, page: int | None = None) -> PageableList[Company]:
        return await self._execute(
            f"company search results for '{query}'", search.COMPANIES, query=query, page=page
        )

    async def keywords(self, query: str, *, page: int | None = None) -> PageableList[Keyword]:
        return await self._execute(
            f"keyword search results for '{query}'", search.KEYWORDS, query=query, page=page
        )


class DiscoverService(BaseService):
    """Filtered and sorted listings.

    ID filters accept one ID, a comma-separated string, or a sequence of IDs
    which is sent comma-joined (TMDb's AND semantics).
    """

    async def movies(
        self,
        *,
        include_adult: bool | None = None,
        language: str | None = None,
        page: int | None = None,
        primary_release_year: int | None = None,
        region: str | None = None,
        sort_by: str | None = None,
        with_companies: IDList | None = None,
        with_genres: IDList | None = None,
        with_keywords: IDList | None = None,
        with_original_language: str | None = None,
        with_people: IDList | None = None,
    ) -> PageableList[MovieListItem]:
        return await self._execute(
            "discovered movies",
            search.DISCOVER_MOVIES,
            include_adult=include_adult,
            language=self._language(language),
            page=page,
            primary_release_year=primary_release_year,
            region=self._region(region),
            sort_by=sort_by,
            with_companies=with_companies,
            with_genres=with_genres,
            with_keywords=with_keywords,
            with_original_language=with_original_language,
            with_people=with_people,
        )

    async def tv_series(
        self,
        *,
        first_air_date_year: int | None = None,
        include_adult: bool | None = None,
        language: str | None = None,
        page: int | None = None,
        sort_by: str | None = None,
        with_companies: IDList | None = None,
        with_genres: IDList | None = None,
        with_keywords: IDList | None = None,
        with_networks: IDList | None = None,
        with_original_language: str | None = None,
    ) -> PageableList[TVSeriesListItem]:
        return await self._execute(
            "discovered TV series",
            search.DISCOVER_TV_SERIES,
            first_air_date_year=first_air_date_year,
            include_adult=include_adult,
            language=self._language(language),
            page=page,
            sort_by=sort_by,
            with_companies=with_companies,
            with_genres=with_genres,
            with_keywords=with_keywords,
            with_networks=with_networks,
            with_original_language=with_original_language,
        )


class TrendingService(BaseService):
    async def all(
        self,
        time_window: TimeWindow = TimeWindow.DAY,
        language: str | None = None,
        page: int | None = None,
    ) -> PageableList[MediaListItem]:
        return await self._execute(
            f"trending media for the {TimeWindow(time_window).value}",
            search.TRENDING_ALL,
            time_window=time_window,
            language=self._language(language),
            page=page,
        )

    async def movies(
        self,
        time_window: TimeWindow = TimeWindow.DAY,
        language: str | None = None,
        page: int | None = None,
    ) -> PageableList[MovieListItem]:
        return await self._execute(
            f"trending movies for the {TimeWindow(time_window).value}",
            search.TRENDING_MOVIES,
            time_window=time_window,
            language=self._language(language),
            page=page,
        )

    async def tv_series(
        self,
        time_window: TimeWindow = TimeWindow.DAY,
        language: str | None = None,
        page: int | None = None,
    ) -> PageableList[TVSeriesListItem]:
        return await self._execute(
            f"trending TV series for the {TimeWindow(time_window).value}",
            search.TRENDING_TV_SERIES,
            time_window=time_window,
            language=self._language(language),
            page=page,
        )

    async def people(
        self,
        time_window: TimeWindow = TimeWindow.DAY,
        language: str | None = None,
        page: int | None = None,
    ) -> PageableList[PersonListItem]:
        return await self._execute(
            f"trending people for the {TimeWindow(time_window).value}",
            search.TRENDING_PEOPLE,
            time_window=time_window,
            language=self._language(language),
            page=page,
        )


__all__ = ["DiscoverService", "SearchService", "TrendingService"]
