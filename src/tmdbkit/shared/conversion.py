"""
Response Conversion Utilities

This module converts raw TMDb response bodies into typed pydantic models and
back into JSON-safe structures.

Conversion Strategy:
- Parse bytes with orjson
- Use a cached TypeAdapter per target type
- Wrap every failure in DecodingError carrying the target type name
"""

from __future__ import annotations

import functools
from typing import Any, TypeVar, cast, get_origin

import orjson
from pydantic import BaseModel, TypeAdapter, ValidationError

from tmdbkit.shared.errors import DecodingError, create_decoding_error

T = TypeVar("T")


@functools.lru_cache(maxsize=256)
def _get_type_adapter(target: Any) -> TypeAdapter[Any]:
    """Get or create a cached TypeAdapter for the given type.

    TypeAdapter instances are expensive to create, so they are cached with
    functools.lru_cache, which is safe to share between concurrent callers.
    """
    return TypeAdapter(target)


def type_name(target: Any) -> str:
    """Human-readable name of a decode target (``Movie``, ``PageableList[Review]``)."""
    if get_origin(target) is not None:
        return repr(target)
    return getattr(target, "__name__", None) or repr(target)


class ModelConverter:
    """Static utility class for converting between JSON and pydantic models.

    Usage:
        >>> from tmdbkit.models import Genre
        >>> genre = ModelConverter.from_json_bytes(b'{"id": 16, "name": "Animation"}', Genre)
        >>> genre.name
        'Animation'
    """

    @staticmethod
    def to_model(data: Any, target: type[T], *, url: str | None = None) -> T:
        """Validate already-parsed JSON data against the target type.

        Args:
            data: Parsed JSON value
            target: Target model class (or any type TypeAdapter accepts)
            url: Request URL, recorded in the error context

        Returns:
            Validated instance

        Raises:
            DecodingError: If validation fails (wraps pydantic ValidationError)
        """
        try:
            adapter = _get_type_adapter(target)
            return cast("T", adapter.validate_python(data))
        except ValidationError as e:
            validation_errors = cast(
                "list[dict[str, Any]]", [dict(err) for err in e.errors()]
            )
            raise create_decoding_error(
                type_name(target),
                url=url,
                original_error=e,
                validation_errors=validation_errors,
            ) from e

    @staticmethod
    def from_json_bytes(raw: bytes, target: type[T], *, url: str | None = None) -> T:
        """Parse a JSON body and validate it against the target type.

        Raises:
            DecodingError: If the body is not JSON or does not match target
        """
        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            raise create_decoding_error(
                type_name(target),
                url=url,
                original_error=e,
                invalid_json=True,
            ) from e
        return ModelConverter.to_model(data, target, url=url)

    @staticmethod
    def to_dict(
        model: BaseModel,
        *,
        by_alias: bool = True,
        exclude_none: bool = False,
    ) -> dict[str, Any]:
        """Convert a pydantic model to a JSON-safe dictionary."""
        return model.model_dump(
            mode="json",
            by_alias=by_alias,
            exclude_none=exclude_none,
        )

    @staticmethod
    def to_json_bytes(value: Any) -> bytes:
        """Serialize a request body with orjson.

        Pydantic models are dumped in JSON mode first; anything else must be
        natively serializable by orjson.
        """
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json", by_alias=True, exclude_none=True)
        return orjson.dumps(value)


__all__ = ["DecodingError", "ModelConverter", "type_name"]
