"""
Pytest configuration and shared fixtures for tmdbkit tests.

HTTP traffic never leaves the process: ``FakeSession`` mimics the part of
``aiohttp.ClientSession`` that ``APIClient`` uses and serves canned
responses per request path.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

import orjson
import pytest

from tmdbkit.config import TMDbSettings
from tmdbkit.shared.locales import fixed_locale


@dataclass
class RecordedCall:
    method: str
    url: str
    params: list[tuple[str, str]]
    headers: dict[str, str]
    data: bytes | None


class FakeResponse:
    """Canned HTTP response; ``delay`` postpones the body read."""

    def __init__(self, status: int = 200, body: Any = None, delay: float = 0.0) -> None:
        self.status = status
        if body is None:
            body = {}
        self._body = body if isinstance(body, bytes) else orjson.dumps(body)
        self._delay = delay

    async def read(self) -> bytes:
        if self._delay:
            await asyncio.sleep(self._delay)
        return self._body


class _RequestContext:
    """Async context returned by ``FakeSession.request``; records how it exited."""

    def __init__(self, outcome: FakeResponse | BaseException) -> None:
        self._outcome = outcome
        self.exited = False
        self.exit_type: type[BaseException] | None = None

    async def __aenter__(self) -> FakeResponse:
        if isinstance(self._outcome, BaseException):
            raise self._outcome
        return self._outcome

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        self.exited = True
        self.exit_type = exc_type
        return False


class FakeSession:
    """Stand-in for aiohttp.ClientSession routing requests by URL suffix."""

    def __init__(self) -> None:
        self.closed = False
        self.calls: list[RecordedCall] = []
        self.contexts: list[_RequestContext] = []
        self._routes: dict[str, FakeResponse | BaseException] = {}

    def add(self, path: str, outcome: FakeResponse | BaseException) -> None:
        self._routes[path] = outcome

    def request(self, method: str, url: str, **kwargs: Any) -> _RequestContext:
        self.calls.append(
            RecordedCall(
                method=method,
                url=url,
                params=list(kwargs.get("params") or []),
                headers=dict(kwargs.get("headers") or {}),
                data=kwargs.get("data"),
            )
        )
        outcome: FakeResponse | BaseException = FakeResponse(404, {"status_message": "not routed"})
        for path, candidate in self._routes.items():
            if url.endswith(path):
                outcome = candidate
                break
        context = _RequestContext(outcome)
        self.contexts.append(context)
        return context

    async def close(self) -> None:
        self.closed = True


class RecordingLogger:
    """Collects facade log messages; satisfies ServiceLogger."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, msg: str) -> None:
        self.infos.append(msg)

    def error(self, msg: str) -> None:
        self.errors.append(msg)


class RecordingAPIClient:
    """Records request descriptors and returns or raises a fixed outcome."""

    def __init__(self, result: Any = None, error: BaseException | None = None) -> None:
        self.requests: list[Any] = []
        self.result = result
        self.error = error

    async def execute(self, request: Any) -> Any:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.result

    @property
    def last_request(self) -> Any:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer TMDB_* variables out of the tests."""
    for name in (
        "TMDB_API_KEY",
        "TMDB_ACCESS_TOKEN",
        "TMDB_BASE_URL",
        "TMDB_TIMEOUT",
        "TMDB_LANGUAGE",
        "TMDB_LOG_LEVEL",
        "TMDB_FOLLOW_SYSTEM_LOCALE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> TMDbSettings:
    return TMDbSettings(api_key="test_api_key", language="en-US")  # pragma: allowlist secret


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def recording_client() -> RecordingAPIClient:
    return RecordingAPIClient()


@pytest.fixture
def locale_provider():
    return fixed_locale("en-GB")


@pytest.fixture
def make_response():
    """Factory for canned responses: ``make_response(200, {...}, delay=0.1)``."""
    return FakeResponse


@pytest.fixture
def make_recording_client():
    return RecordingAPIClient
