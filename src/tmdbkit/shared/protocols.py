"""Protocol definitions for dependency inversion.

Service facades depend on these protocols rather than on concrete classes, so
tests can substitute recording fakes for the logger and the API client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from tmdbkit.api.request import APIRequest

T = TypeVar("T")


@runtime_checkable
class ServiceLogger(Protocol):
    """Minimal logging capability used by service facades.

    ``logging.Logger`` satisfies this protocol.
    """

    def info(self, msg: str) -> None: ...

    def error(self, msg: str) -> None: ...


class APIClientProtocol(Protocol):
    """Anything able to execute a request descriptor."""

    async def execute(self, request: APIRequest[T]) -> T: ...


__all__ = ["APIClientProtocol", "ServiceLogger"]
