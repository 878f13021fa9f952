"""Reference data service facades.

Genres, certifications, watch providers, API configuration and lookup by
external ID. These resources change rarely; callers that need them often
should keep their own copy.
"""

from __future__ import annotations

from tmdbkit.endpoints import reference
from tmdbkit.endpoints.reference import ExternalSource
from tmdbkit.models import (
    APIConfiguration,
    CertificationsByCountry,
    Country,
    FindResults,
    GenreList,
    Language,
    WatchProviderList,
    WatchProviderRegionList,
)
from tmdbkit.services.base import BaseService


class GenreService(BaseService):
    async def movie_genres(self, language: str | None = None) -> GenreList:
        return await self._execute(
            "movie genres", reference.MOVIE_GENRES, language=self._language(language)
        )

    async def tv_genres(self, language: str | None = None) -> GenreList:
        return await self._execute(
            "TV genres", reference.TV_GENRES, language=self._language(language)
        )


class CertificationService(BaseService):
    async def movie_certifications(self) -> CertificationsByCountry:
        return await self._execute("movie certifications", reference.MOVIE_CERTIFICATIONS)

    async def tv_certifications(self) -> CertificationsByCountry:
        return await self._execute("TV certifications", reference.TV_CERTIFICATIONS)


class WatchProviderService(BaseService):
    """Streaming, rental and purchase providers known to TMDb."""

    async def available_regions(self, language: str | None = None) -> WatchProviderRegionList:
        return await self._execute(
            "watch provider regions",
            reference.WATCH_PROVIDER_REGIONS,
            language=self._language(language),
        )

    async def movie_providers(
        self, language: str | None = None, watch_region: str | None = None
    ) -> WatchProviderList:
        return await self._execute(
            "movie watch providers",
            reference.MOVIE_WATCH_PROVIDERS,
            language=self._language(language),
            watch_region=self._region(watch_region),
        )

    async def tv_providers(
        self, language: str | None = None, watch_region: str | None = None
    ) -> WatchProviderList:
        return await self._execute(
            "TV watch providers",
            reference.TV_WATCH_PROVIDERS,
            language=self._language(language),
            watch_region=self._region(watch_region),
        )


class ConfigurationService(BaseService):
    async def api_configuration(self) -> APIConfiguration:
        """Image base URLs and available sizes."""
        return await self._execute("API configuration", reference.API_CONFIGURATION)

    async def countries(self, language: str | None = None) -> list[Country]:
        return await self._execute(
            "countries", reference.COUNTRIES, language=self._language(language)
        )

    async def languages(self) -> list[Language]:
        return await self._execute("languages", reference.LANGUAGES)


class FindService(BaseService):
    async def by_external_id(
        self,
        external_id: str,
        external_source: ExternalSource,
        language: str | None = None,
    ) -> FindResults:
        """Look up TMDb objects by an ID from another database.

        Example:
            >>> await find.by_external_id("tt0133093", ExternalSource.IMDB)
        """
        return await self._execute(
            f"objects with {ExternalSource(external_source).value} {external_id}",
            reference.FIND,
            external_id=external_id,
            external_source=external_source,
            language=self._language(language),
        )


__all__ = [
    "CertificationService",
    "ConfigurationService",
    "FindService",
    "GenreService",
    "WatchProviderService",
]
