"""TV series, season and episode service facades."""

from __future__ import annotations

from collections.abc import Sequence

from tmdbkit.endpoints import tv
from tmdbkit.models import (
    ExternalIDs,
    ImageCollection,
    KeywordCollection,
    PageableList,
    Review,
    ShowCredits,
    ShowWatchProviders,
    StatusResponse,
    TVEpisode,
    TVSeason,
    TVSeries,
    TVSeriesListItem,
    VideoCollection,
)
from tmdbkit.services.base import BaseService


class TVSeriesService(BaseService):
    """TV series details, media, lists and ratings."""

    async def details(self, series_id: int, language: str | None = None) -> TVSeries:
        return await self._execute(
            f"TV series details for {series_id}",
            tv.DETAILS,
            series_id=series_id,
            language=self._language(language),
        )

    async def credits(self, series_id: int, language: str | None = None) -> ShowCredits:
        return await self._execute(
            f"TV series credits for {series_id}",
            tv.CREDITS,
            series_id=series_id,
            language=self._language(language),
        )

    async def aggregate_credits(
        self, series_id: int, language: str | None = None
    ) -> ShowCredits:
        """Cast and crew across every season of a series."""
        return await self._execute(
            f"TV series aggregate credits for {series_id}",
            tv.AGGREGATE_CREDITS,
            series_id=series_id,
            language=self._language(language),
        )

    async def reviews(
        self, series_id: int, language: str | None = None, page: int | None = None
    ) -> PageableList[Review]:
        return await self._execute(
            f"TV series reviews for {series_id}",
            tv.REVIEWS,
            series_id=series_id,
            language=self._language(language),
            page=page,
        )

    async def images(
        self, series_id: int, languages: Sequence[str] | None = None
    ) -> ImageCollection:
        return await self._execute(
            f"TV series images for {series_id}",
            tv.IMAGES,
            series_id=series_id,
            languages=self._languages(languages),
        )

    async def videos(
        self, series_id: int, languages: Sequence[str] | None = None
    ) -> VideoCollection:
        return await self._execute(
            f"TV series videos for {series_id}",
            tv.VIDEOS,
            series_id=series_id,
            languages=self._languages(languages),
        )

    async def recommendations(
        self, series_id: int, language: str | None = None, page: int | None = None
    ) -> PageableList[TVSeriesListItem]:
        return await self._execute(
            f"TV series recommendations for {series_id}",
            tv.RECOMMENDATIONS,
            series_id=series_id,
            language=self._language(language),
            page=page,
        )

    async def similar(
        self, series_id: int, language: str | None = None, page: int | None = None
    ) -> PageableList[TVSeriesListItem]:
        return await self._execute(
            f"similar TV series for {series_id}",
            tv.SIMILAR,
            series_id=series_id,
            language=self._language(language),
            page=page,
        )

    async def keywords(self, series_id: int) -> KeywordCollection:
        return await self._execute(
            f"TV series keywords for {series_id}", tv.KEYWORDS, series_id=series_id
        )

    async def external_ids(self, series_id: int) -> ExternalIDs:
        return await self._execute(
            f"TV series external IDs for {series_id}", tv.EXTERNAL_IDS, series_id=series_id
        )

    async def watch_providers(self, series_id: int) -> ShowWatchProviders:
        return await self._execute(
            f"TV series watch providers for {series_id}",
            tv.WATCH_PROVIDERS,
            series_id=series_id,
        )

    async def airing_today(
        self, language: str | None = None, page: int | None = None
    ) -> PageableList[TVSeriesListItem]:
        return await self._execute(
            "TV series airing today",
            tv.AIRING_TODAY,
            language=self._language(language),
            page=page,
        )

    async def on_the_air(
        self, language: str | None = None, page: int | None = None
    ) -> PageableList[TVSeriesListItem]:
        return await self._execute(
            "TV series on the air",
            tv.ON_THE_AIR,
            language=self._language(language),
            page=page,
        )

    async def popular(
        self, language: str | None = None, page: int | None = None
    ) -> PageableList[TVSeriesListItem]:
        return await self._execute(
            "popular TV series", tv.POPULAR, language=self._language(language), page=page
        )

    async def top_rated(
        self, language: str | None = None, page: int | None = None
    ) -> PageableList[TVSeriesListItem]:
        return await self._execute(
            "top rated TV series", tv.TOP_RATED, language=self._language(language), page=page
        )

    async def add_rating(
        self,
        series_id: int,
        value: float,
        session_id: str | None = None,
        guest_session_id: str | None = None,
    ) -> StatusResponse:
        return await self._execute(
            f"rating update for TV series {series_id}",
            tv.ADD_RATING,
            series_id=series_id,
            session_id=session_id,
            guest_session_id=guest_session_id,
            body={"value": value},
        )

    async def delete_rating(
        self,
        series_id: int,
        session_id: str | None = None,
        guest_session_id: str | None = None,
    ) -> StatusResponse:
        return await self._execute(
            f"rating removal for TV series {series_id}",
            tv.DELETE_RATING,
            series_id=series_id,
            session_id=session_id,
            guest_session_id=guest_session_id,
        )


class TVSeasonService(BaseService):
    """Details and media of one season of a TV series."""

    async def details(
        self, series_id: int, season_number: int, language: str | None = None
    ) -> TVSeason:
        return await self._execute(
            f"season {season_number} of TV series {series_id}",
            tv.SEASON_DETAILS,
            series_id=series_id,
            season_number=season_number,
            language=self._language(language),
        )

    async def credits(
        self, series_id: int, season_number: int, language: str | None = None
    ) -> ShowCredits:
        return await self._execute(
            f"credits for season {season_number} of TV series {series_id}",
            tv.SEASON_CREDITS,
            series_id=series_id,
            season_number=season_number,
            language=self._language(language),
        )

    async def images(
        self, series_id: int, season_number: int, languages: Sequence[str] | None = None
    ) -> ImageCollection:
        return await self._execute(
            f"images for season {season_number} of TV series {series_id}",
            tv.SEASON_IMAGES,
            series_id=series_id,
            season_number=season_number,
            languages=self._languages(languages),
        )

    async def videos(
        self, series_id: int, season_number: int, languages: Sequence[str] | None = None
    ) -> VideoCollection:
        return await self._execute(
            f"videos for season {season_number} of TV series {series_id}",
            tv.SEASON_VIDEOS,
            series_id=series_id,
            season_number=season_number,
            languages=self._languages(languages),
        )


class TVEpisodeService(BaseService):
    """Details and media of one episode of a TV series."""

    async def details(
        self,
        series_id: int,
        season_number: int,
        episode_number: int,
        language: str | None = None,
    ) -> TVEpisode:
        return await self._execute(
            f"episode S{season_number}E{episode_number} of TV series {series_id}",
            tv.EPISODE_DETAILS,
            series_id=series_id,
            season_number=season_number,
            episode_number=episode_number,
            language=self._language(language),
        )

    async def credits(
        self,
        series_id: int,
        season_number: int,
        episode_number: int,
        language: str | None = None,
    ) -> ShowCredits:
        return await self._execute(
            f"credits for episode S{season_number}E{episode_number} of TV series {series_id}",
            tv.EPISODE_CREDITS,
            series_id=series_id,
            season_number=season_number,
            episode_number=episode_number,
            language=self._language(language),
        )

    async def images(
        self,
        series_id: int,
        season_number: int,
        episode_number: int,
        languages: Sequence[str] | None = None,
    ) -> ImageCollection:
        return await self._execute(
            f"images for episode S{season_number}E{episode_number} of TV series {series_id}",
            tv.EPISODE_IMAGES,
            series_id=series_id,
            season_number=season_number,
            episode_number=episode_number,
            languages=self._languages(languages),
        )

    async def videos(
        self,
        series_id: int,
        season_number: int,
        episode_number: int,
        languages: Sequence[str] | None = None,
    ) -> VideoCollection:
        return await self._execute(
            f"videos for episode S{season_number}E{episode_number} of TV series {series_id}",
            tv.EPISODE_VIDEOS,
            series_id=series_id,
            season_number=season_number,
            episode_number=episode_number,
            languages=self._languages(languages),
        )


__all__ = ["TVEpisodeService", "TVSeasonService", "TVSeriesService"]
