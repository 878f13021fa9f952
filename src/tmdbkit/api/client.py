"""Async TMDb API client.

This module sends ``APIRequest`` descriptors over HTTP with aiohttp and
decodes the responses into their typed models. It is the only place in
tmdbkit where runtime failures originate:

- transport failures and timeouts raise ``NetworkError``
- non-2xx responses raise ``HTTPError``
- bodies that do not match the response model raise ``DecodingError``
- cancelling the awaiting task aborts the request and re-raises
  ``asyncio.CancelledError`` untouched

There are no retries and no caches; each call is independent.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, TypeVar

import aiohttp

from tmdbkit.api.request import APIRequest
from tmdbkit.config.settings import TMDbSettings, get_settings
from tmdbkit.shared.constants import Headers, HTTPStatusCodes, QueryKeys
from tmdbkit.shared.conversion import ModelConverter
from tmdbkit.shared.errors import TMDbError, create_http_error, create_network_error
from tmdbkit.shared.logging import log_api_call, log_operation_error, log_operation_start

logger = logging.getLogger(__name__)

T = TypeVar("T")


class APIClient:
    """Asynchronous TMDb API client using aiohttp.

    The client keeps no per-call state: the settings and default headers are
    fixed at construction, so any number of ``execute`` calls may run
    concurrently on one instance.
    """

    def __init__(
        self,
        settings: TMDbSettings,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            settings: Client configuration.
            session: Optional externally managed session. When omitted the
                client creates one lazily and closes it in ``close()``.
        """
        self.settings = settings
        self._session = session
        self._owns_session = session is None
        self._timeout = aiohttp.ClientTimeout(total=settings.timeout)
        self._default_headers = self._build_default_headers()

    def _build_default_headers(self) -> dict[str, str]:
        headers = {Headers.ACCEPT: Headers.JSON}
        if self.settings.access_token:
            headers[Headers.AUTHORIZATION] = Headers.BEARER_PREFIX + self.settings.access_token
        return headers

    def _get_session(self) -> aiohttp.ClientSession:
        # Session construction does not await, so concurrent first calls on
        # one event loop cannot create two sessions.
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
            logger.debug("Created aiohttp session for %s", self.settings.base_url)
        return self._session

    def url_for(self, request: APIRequest[Any]) -> str:
        """Absolute URL of a request, without its query string."""
        return f"{self.settings.base_url}{request.path}"

    def query_for(self, request: APIRequest[Any]) -> list[tuple[str, str]]:
        """Ordered query parameters: credential first, then the request's items."""
        params: list[tuple[str, str]] = []
        if self.settings.api_key:
            params.append((QueryKeys.API_KEY, self.settings.api_key))
        params.extend(request.query_items.items())
        return params

    def headers_for(self, request: APIRequest[Any]) -> dict[str, str]:
        """Default headers merged with the request's; the request wins.

        Header names compare case-insensitively, so a request header replaces
        the default of the same name whatever its casing.
        """
        headers = dict(self._default_headers)
        if request.has_body:
            headers[Headers.CONTENT_TYPE] = Headers.JSON_UTF8
        overridden = {name.lower() for name in request.headers}
        headers = {name: value for name, value in headers.items() if name.lower() not in overridden}
        headers.update(request.headers)
        return headers

    @staticmethod
    def body_for(request: APIRequest[Any]) -> bytes | None:
        if request.body is None:
            return None
        if isinstance(request.body, (bytes, bytearray)):
            return bytes(request.body)
        return ModelConverter.to_json_bytes(request.body)

    async def execute(self, request: APIRequest[T]) -> T:
        """Send a request and decode its response.

        Args:
            request: The request descriptor.

        Returns:
            The response decoded into ``request.response_model``.

        Raises:
            NetworkError: Connection failure or timeout.
            HTTPError: The server answered with a non-2xx status.
            DecodingError: The body is not valid JSON for the response model.
            asyncio.CancelledError: The awaiting task was cancelled.
        """
        method = request.method.value
        log_operation_start(logger, "api_call", {"method": method, "path": request.path})
        try:
            return await self._send(request)
        except TMDbError as e:
            log_operation_error(logger, e, operation="api_call")
            raise

    async def _send(self, request: APIRequest[T]) -> T:
        url = self.url_for(request)
        method = request.method.value
        session = self._get_session()
        started = time.perf_counter()

        try:
            async with session.request(
                method,
                url,
                params=self.query_for(request),
                headers=self.headers_for(request),
                data=self.body_for(request),
                timeout=self._timeout,
            ) as response:
                status = response.status
                raw = await response.read()
        except asyncio.TimeoutError as e:
            raise create_network_error(
                f"Request timed out after {self.settings.timeout}s",
                url=url,
                method=method,
                original_error=e,
                timeout=True,
            ) from e
        except aiohttp.ClientError as e:
            raise create_network_error(
                f"Request failed: {e}",
                url=url,
                method=method,
                original_error=e,
            ) from e

        log_api_call(
            logger,
            request.path,
            method=method,
            status_code=status,
            duration_ms=(time.perf_counter() - started) * 1000,
        )

        if not HTTPStatusCodes.is_success(status):
            raise create_http_error(
                status,
                raw.decode("utf-8", errors="replace"),
                url=url,
                method=method,
            )

        return ModelConverter.from_json_bytes(raw, request.response_model, url=url)

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            logger.debug("APIClient session closed")
        self._session = None

    async def __aenter__(self) -> APIClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


def create_api_client(
    settings: TMDbSettings | None = None,
    session: aiohttp.ClientSession | None = None,
) -> APIClient:
    """Create an API client, loading settings from the environment if needed.

    Raises:
        ConfigurationError: If no credential is configured.
    """
    if settings is None:
        settings = get_settings()
    settings.validate_credentials()
    return APIClient(settings, session=session)


__all__ = ["APIClient", "create_api_client"]
