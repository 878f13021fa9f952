"""Request descriptors.

An ``APIRequest`` describes one TMDb call independently of any transport:
the resolved path, ordered query items, HTTP method, extra headers, an
optional body, and the model the response decodes into. Descriptors are
built fresh per call and never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class HTTPMethod(str, Enum):
    """HTTP methods used by the TMDb API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True, eq=True)
class APIRequest(Generic[T]):
    """Immutable description of a single API call.

    Attributes:
        path: Absolute API path with every identifier substituted,
            e.g. ``/movie/550/images``
        response_model: Type the JSON response is decoded into
        query_items: Ordered query parameters; never contains empty values
        method: HTTP method
        headers: Request-specific headers, merged over the client defaults
        body: Raw bytes, a JSON-serializable value, or None
    """

    path: str
    response_model: type[T]
    query_items: Mapping[str, str] = field(default_factory=dict)
    method: HTTPMethod = HTTPMethod.GET
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None

    def __post_init__(self) -> None:
        if "{" in self.path or "}" in self.path:
            msg = f"Request path has unresolved placeholders: {self.path}"
            raise ValueError(msg)
        # Read-only views over private copies keep the descriptor immutable.
        object.__setattr__(self, "query_items", MappingProxyType(dict(self.query_items)))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def has_body(self) -> bool:
        return self.body is not None

    def __repr__(self) -> str:
        return (
            f"APIRequest({self.method.value} {self.path}, "
            f"query_items={dict(self.query_items)!r}, "
            f"response_model={getattr(self.response_model, '__name__', self.response_model)})"
        )


__all__ = ["APIRequest", "HTTPMethod"]
