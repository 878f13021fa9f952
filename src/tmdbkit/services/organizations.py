"""Collection, company, network, keyword and review service facades."""

from __future__ import annotations

from collections.abc import Sequence

from tmdbkit.endpoints import organizations
from tmdbkit.models import (
    Collection,
    Company,
    ImageCollection,
    Keyword,
    LogoCollection,
    Network,
    Review,
)
from tmdbkit.services.base import BaseService


class CollectionService(BaseService):
    async def details(self, collection_id: int, language: str | None = None) -> Collection:
        return await self._execute(
            f"collection details for {collection_id}",
            organizations.COLLECTION_DETAILS,
            collection_id=collection_id,
            language=self._language(language),
        )

    async def images(
        self, collection_id: int, languages: Sequence[str] | None = None
    ) -> ImageCollection:
        return await self._execute(
            f"collection images for {collection_id}",
            organizations.COLLECTION_IMAGES,
            collection_id=collection_id,
            languages=self._languages(languages),
        )


class CompanyService(BaseService):
    async def details(self, company_id: int) -> Company:
        return await self._execute(
            f"company details for {company_id}",
            organizations.COMPANY_DETAILS,
            company_id=company_id,
        )

    async def images(self, company_id: int) -> LogoCollection:
        return await self._execute(
            f"company logos for {company_id}",
            organizations.COMPANY_IMAGES,
            company_id=company_id,
        )


class NetworkService(BaseService):
    async def details(self, network_id: int) -> Network:
        return await self._execute(
            f"network details for {network_id}",
            organizations.NETWORK_DETAILS,
            network_id=network_id,
        )

    async def images(self, network_id: int) -> LogoCollection:
        return await self._execute(
            f"network logos for {network_id}",
            organizations.NETWORK_IMAGES,
            network_id=network_id,
        )


class KeywordService(BaseService):
    async def details(self, keyword_id: int) -> Keyword:
        return await self._execute(
            f"keyword details for {keyword_id}",
            organizations.KEYWORD_DETAILS,
            keyword_id=keyword_id,
        )


class ReviewService(BaseService):
    async def details(self, review_id: str) -> Review:
        """Fetch one review. Review IDs are hex strings, not integers."""
        return await self._execute(
            f"review {review_id}", organizations.REVIEW_DETAILS, review_id=review_id
        )


__all__ = [
    "CollectionService",
    "CompanyService",
    "KeywordService",
    "NetworkService",
    "ReviewService",
]
