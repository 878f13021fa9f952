"""Person service facade."""

from __future__ import annotations

from tmdbkit.endpoints import people
from tmdbkit.models import (
    ExternalIDs,
    ImageCollection,
    PageableList,
    Person,
    PersonCredits,
    PersonListItem,
)
from tmdbkit.services.base import BaseService


class PersonService(BaseService):
    async def details(self, person_id: int, language: str | None = None) -> Person:
        return await self._execute(
            f"person details for {person_id}",
            people.DETAILS,
            person_id=person_id,
            language=self._language(language),
        )

    async def combined_credits(
        self, person_id: int, language: str | None = None
    ) -> PersonCredits:
        """Movie and TV credits of a person in one list."""
        return await self._execute(
            f"combined credits for person {person_id}",
            people.COMBINED_CREDITS,
            person_id=person_id,
            language=self._language(language),
        )

    async def movie_credits(self, person_id: int, language: str | None = None) -> PersonCredits:
        return await self._execute(
            f"movie credits for person {person_id}",
            people.MOVIE_CREDITS,
            person_id=person_id,
            language=self._language(language),
        )

    async def tv_credits(self, person_id: int, language: str | None = None) -> PersonCredits:
        return await self._execute(
            f"TV credits for person {person_id}",
            people.TV_CREDITS,
            person_id=person_id,
            language=self._language(language),
        )

    async def images(self, person_id: int) -> ImageCollection:
        return await self._execute(
            f"profile images for person {person_id}", people.IMAGES, person_id=person_id
        )

    async def external_ids(self, person_id: int) -> ExternalIDs:
        return await self._execute(
            f"external IDs for person {person_id}", people.EXTERNAL_IDS, person_id=person_id
        )

    async def popular(
        self, language: str | None = None, page: int | None = None
    ) -> PageableList[PersonListItem]:
        return await self._execute(
            "popular people", people.POPULAR, language=self._language(language), page=page
        )


__all__ = ["PersonService"]
