"""Table-driven request construction.

Every TMDb endpoint is declared once as an ``EndpointSpec``: a path template,
the response model, the optional query filters it accepts and its HTTP
method. ``EndpointSpec.build`` turns keyword arguments into an ``APIRequest``
through the single routine ``build_request``.

Building is pure: no I/O, no logging, no failure for well-formed calls.
"""

from __future__ import annotations

import string
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, Optional, TypeVar
from urllib.parse import quote

from tmdbkit.api.request import APIRequest, HTTPMethod
from tmdbkit.shared.constants import LocaleTokens, QueryKeys
from tmdbkit.shared.locales import join_language_codes, language_code, region_filter_code

T = TypeVar("T")

Encoder = Callable[[Any], Optional[str]]

_FORMATTER = string.Formatter()


def _scalar(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def encode_plain(value: Any) -> str | None:
    """Render a scalar or sequence filter value as TMDb expects it."""
    if isinstance(value, (list, tuple)):
        return LocaleTokens.LIST_SEPARATOR.join(_scalar(item) for item in value)
    return _scalar(value)


def encode_language(value: Any) -> str | None:
    return language_code(str(value))


def encode_region(value: Any) -> str | None:
    return region_filter_code(str(value))


def encode_language_list(value: Any) -> str | None:
    if isinstance(value, str):
        value = [value]
    return join_language_codes(value)


@dataclass(frozen=True)
class QueryFilter:
    """One optional query parameter of an endpoint.

    Attributes:
        argument: Keyword argument name accepted by ``EndpointSpec.build``
        key: Query parameter name on the wire
        encode: Converts the argument value into the query value
    """

    argument: str
    key: str
    encode: Encoder = encode_plain

    def render(self, value: Any) -> str | None:
        """Encode a value, returning None when it should be omitted."""
        if value is None:
            return None
        encoded = self.encode(value)
        if not encoded:
            return None
        return encoded


def plain_filter(argument: str, key: str | None = None) -> QueryFilter:
    return QueryFilter(argument, key or argument)


LANGUAGE = QueryFilter("language", QueryKeys.LANGUAGE, encode_language)
REGION = QueryFilter("region", QueryKeys.REGION, encode_region)
PAGE = QueryFilter("page", QueryKeys.PAGE)
INCLUDE_IMAGE_LANGUAGE = QueryFilter(
    "languages", QueryKeys.INCLUDE_IMAGE_LANGUAGE, encode_language_list
)
INCLUDE_VIDEO_LANGUAGE = QueryFilter(
    "languages", QueryKeys.INCLUDE_VIDEO_LANGUAGE, encode_language_list
)
QUERY = plain_filter("query", QueryKeys.QUERY)
INCLUDE_ADULT = plain_filter("include_adult", QueryKeys.INCLUDE_ADULT)
SESSION_ID = plain_filter("session_id", QueryKeys.SESSION_ID)
GUEST_SESSION_ID = plain_filter("guest_session_id", QueryKeys.GUEST_SESSION_ID)

LOCALIZED = (LANGUAGE,)
LOCALIZED_PAGE = (LANGUAGE, PAGE)
REGIONAL_PAGE = (LANGUAGE, PAGE, REGION)
RATING_SESSION = (SESSION_ID, GUEST_SESSION_ID)


def path_identifiers(path_template: str) -> tuple[str, ...]:
    """Names of the ``{placeholders}`` in a path template, in order."""
    return tuple(
        field_name
        for _literal, field_name, _spec, _conversion in _FORMATTER.parse(path_template)
        if field_name is not None
    )


def resolve_path(path_template: str, identifiers: Mapping[str, Any]) -> str:
    """Substitute identifiers into a path template.

    Numeric identifiers are inserted as-is; string identifiers are
    percent-encoded so they stay a single path segment.

    Raises:
        ValueError: If the template names an identifier that was not supplied
    """
    parts: list[str] = []
    for literal, field_name, _spec, _conversion in _FORMATTER.parse(path_template):
        parts.append(literal)
        if field_name is None:
            continue
        if identifiers.get(field_name) is None:
            msg = f"Missing identifier '{field_name}' for path {path_template}"
            raise ValueError(msg)
        value = identifiers[field_name]
        text = _scalar(value)
        if isinstance(value, str):
            text = quote(text, safe="")
        parts.append(text)
    return "".join(parts)


def build_request(
    path_template: str,
    response_model: type[T],
    *,
    identifiers: Mapping[str, Any] | None = None,
    filters: Iterable[QueryFilter] = (),
    values: Mapping[str, Any] | None = None,
    method: HTTPMethod = HTTPMethod.GET,
    headers: Mapping[str, str] | None = None,
    body: Any = None,
) -> APIRequest[T]:
    """Build a request descriptor.

    Query items follow the order of ``filters``; a filter whose value is
    missing or encodes to an empty string is left out entirely.

    Args:
        path_template: Path with ``{name}`` placeholders
        response_model: Type the response decodes into
        identifiers: Values for the path placeholders
        filters: Optional filters the endpoint accepts
        values: Filter argument values keyed by ``QueryFilter.argument``
        method: HTTP method
        headers: Extra request headers
        body: Optional request body

    Returns:
        The request descriptor
    """
    values = values or {}
    query_items: dict[str, str] = {}
    for query_filter in filters:
        rendered = query_filter.render(values.get(query_filter.argument))
        if rendered is not None:
            query_items[query_filter.key] = rendered

    return APIRequest(
        path=resolve_path(path_template, identifiers or {}),
        response_model=response_model,
        query_items=query_items,
        method=method,
        headers=headers or {},
        body=body,
    )


@dataclass(frozen=True)
class EndpointSpec(Generic[T]):
    """Declarative description of one TMDb endpoint.

    Example:
        >>> images = EndpointSpec("/movie/{movie_id}/images", ImageCollection,
        ...                       filters=(INCLUDE_IMAGE_LANGUAGE,))
        >>> images.build(movie_id=1, languages=["en-GB", "fr"]).query_items
        mappingproxy({'include_image_language': 'en,fr'})
    """

    path: str
    response_model: type[T]
    filters: tuple[QueryFilter, ...] = ()
    method: HTTPMethod = HTTPMethod.GET
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def identifiers(self) -> tuple[str, ...]:
        return path_identifiers(self.path)

    @property
    def arguments(self) -> tuple[str, ...]:
        """Every keyword ``build`` accepts besides ``body``."""
        return self.identifiers + tuple(f.argument for f in self.filters)

    def build(self, *, body: Any = None, **arguments: Any) -> APIRequest[T]:
        """Build a request from identifiers and filter values.

        Raises:
            TypeError: If an argument is not accepted by this endpoint
            ValueError: If a path identifier is missing
        """
        unknown = set(arguments) - set(self.arguments)
        if unknown:
            msg = f"{self.path} got unexpected arguments: {', '.join(sorted(unknown))}"
            raise TypeError(msg)

        return build_request(
            self.path,
            self.response_model,
            identifiers={name: arguments.get(name) for name in self.identifiers},
            filters=self.filters,
            values=arguments,
            method=self.method,
            headers=self.headers,
            body=body,
        )


__all__ = [
    "GUEST_SESSION_ID",
    "INCLUDE_ADULT",
    "INCLUDE_IMAGE_LANGUAGE",
    "INCLUDE_VIDEO_LANGUAGE",
    "LANGUAGE",
    "LOCALIZED",
    "LOCALIZED_PAGE",
    "PAGE",
    "QUERY",
    "RATING_SESSION",
    "REGION",
    "REGIONAL_PAGE",
    "SESSION_ID",
    "EndpointSpec",
    "QueryFilter",
    "build_request",
    "encode_language",
    "encode_language_list",
    "encode_plain",
    "encode_region",
    "path_identifiers",
    "plain_filter",
    "resolve_path",
]
