"""Common behaviour of the TMDb service facades.

A facade turns keyword arguments into a request through an endpoint table
entry, fills in locale-dependent filters the caller left out, and hands the
request to the API client. It logs the intent before the call and the
failure after it; the failure itself is re-raised untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, TypeVar

from tmdbkit.api.endpoints import EndpointSpec
from tmdbkit.shared.locales import LocaleProvider, region_code
from tmdbkit.shared.protocols import APIClientProtocol, ServiceLogger

T = TypeVar("T")


class BaseService:
    """Base class for every service facade.

    Args:
        api_client: Executes request descriptors
        locale_provider: Zero-argument callable returning the caller's
            current default locale identifier, e.g. ``"en-US"``
        logger: Receives ``info`` and ``error`` messages. Defaults to the
            module logger of the concrete facade.
    """

    def __init__(
        self,
        api_client: APIClientProtocol,
        locale_provider: LocaleProvider,
        logger: ServiceLogger | None = None,
    ) -> None:
        self._api_client = api_client
        self._locale_provider = locale_provider
        self._logger: ServiceLogger = logger or logging.getLogger(type(self).__module__)

    def _language(self, language: str | None) -> str:
        if language is not None:
            return language
        return self._locale_provider()

    def _region(self, region: str | None) -> str | None:
        if region is not None:
            return region
        return region_code(self._locale_provider())

    def _languages(self, languages: Sequence[str] | None) -> Sequence[str]:
        if languages is not None:
            return languages
        return [self._locale_provider()]

    async def _execute(self, operation: str, endpoint: EndpointSpec[T], **arguments: Any) -> T:
        """Build the request for ``endpoint`` and execute it.

        Args:
            operation: Human-readable description used in log messages
            endpoint: Endpoint table entry
            **arguments: Identifiers and filter values for ``endpoint.build``

        Returns:
            The decoded response

        Raises:
            Whatever the API client raises, unchanged.
        """
        request = endpoint.build(**arguments)
        self._logger.info(f"Fetching {operation}")
        try:
            return await self._api_client.execute(request)
        except Exception as e:
            self._logger.error(f"Failed to fetch {operation}: {e}")
            raise


__all__ = ["BaseService"]
