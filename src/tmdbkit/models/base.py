"""
Base models for TMDb responses.

All response models inherit from TMDbModel, which ignores unknown keys so
that fields added to the API later do not break decoding.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class TMDbModel(BaseModel):
    """Common base for all response models.

    Configuration:
        - extra="ignore": Silently ignore unknown fields
        - populate_by_name=True: Accept both field names and aliases
        - frozen=True: Decoded responses are plain, immutable data
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class PageableList(TMDbModel, Generic[T]):
    """One page of a paginated TMDb list response.

    Example:
        >>> page = PageableList[Genre](page=1, results=[], total_pages=0, total_results=0)
    """

    page: int = 1
    results: list[T] = Field(default_factory=list)
    total_pages: int = 0
    total_results: int = 0


__all__ = ["PageableList", "TMDbModel"]
