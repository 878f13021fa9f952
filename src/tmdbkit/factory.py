"""Convenience aggregate wiring every service facade to one API client."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from tmdbkit.api.client import APIClient, create_api_client
from tmdbkit.config.settings import TMDbSettings
from tmdbkit.services import (
    CertificationService,
    CollectionService,
    CompanyService,
    ConfigurationService,
    DiscoverService,
    FindService,
    GenreService,
    KeywordService,
    MovieService,
    NetworkService,
    PersonService,
    ReviewService,
    SearchService,
    TrendingService,
    TVEpisodeService,
    TVSeasonService,
    TVSeriesService,
    WatchProviderService,
)
from tmdbkit.shared.locales import LocaleProvider
from tmdbkit.shared.protocols import ServiceLogger

log = logging.getLogger(__name__)


class TMDbClient:
    """All TMDb service facades sharing one API client.

    Example:
        >>> async with TMDbClient(TMDbSettings(api_key="...")) as tmdb:
        ...     movie = await tmdb.movies.details(603)

    Args:
        settings: Client configuration. Loaded from ``TMDB_*`` environment
            variables when omitted.
        session: Optional externally managed aiohttp session
        locale_provider: Default-locale source for every facade. Defaults to
            ``settings.language``.
        logger: Logger handed to every facade
    """

    def __init__(
        self,
        settings: TMDbSettings | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        locale_provider: LocaleProvider | None = None,
        logger: ServiceLogger | None = None,
    ) -> None:
        self.api_client: APIClient = create_api_client(settings, session=session)
        self.settings = self.api_client.settings
        self.locale_provider = locale_provider or self.settings.locale_provider()

        args = (self.api_client, self.locale_provider)
        self.movies = MovieService(*args, logger=logger)
        self.tv_series = TVSeriesService(*args, logger=logger)
        self.tv_seasons = TVSeasonService(*args, logger=logger)
        self.tv_episodes = TVEpisodeService(*args, logger=logger)
        self.people = PersonService(*args, logger=logger)
        self.search = SearchService(*args, logger=logger)
        self.discover = DiscoverService(*args, logger=logger)
        self.trending = TrendingService(*args, logger=logger)
        self.genres = GenreService(*args, logger=logger)
        self.collections = CollectionService(*args, logger=logger)
        self.companies = CompanyService(*args, logger=logger)
        self.networks = NetworkService(*args, logger=logger)
        self.keywords = KeywordService(*args, logger=logger)
        self.certifications = CertificationService(*args, logger=logger)
        self.watch_providers = WatchProviderService(*args, logger=logger)
        self.configuration = ConfigurationService(*args, logger=logger)
        self.reviews = ReviewService(*args, logger=logger)
        self.find = FindService(*args, logger=logger)
        log.debug("TMDbClient ready: %r", self.settings)

    async def close(self) -> None:
        await self.api_client.close()

    async def __aenter__(self) -> TMDbClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


__all__ = ["TMDbClient"]
