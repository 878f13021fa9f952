"""tmdbkit - async client for The Movie Database (TMDb) v3 API.

Requests are described by immutable ``APIRequest`` descriptors built from
endpoint tables, executed by ``APIClient`` and decoded into pydantic models.
Service facades add default-locale handling and logging on top.
"""

__version__ = "0.1.0"

from tmdbkit.api import APIClient, APIRequest, EndpointSpec, HTTPMethod, create_api_client
from tmdbkit.config import TMDbSettings, get_settings
from tmdbkit.endpoints import ExternalSource, TimeWindow
from tmdbkit.factory import TMDbClient
from tmdbkit.shared.errors import (
    CancellationError,
    ConfigurationError,
    DecodingError,
    ErrorCode,
    HTTPError,
    NetworkError,
    TMDbError,
)

__all__ = [
    "APIClient",
    "APIRequest",
    "CancellationError",
    "ConfigurationError",
    "DecodingError",
    "EndpointSpec",
    "ErrorCode",
    "ExternalSource",
    "HTTPError",
    "HTTPMethod",
    "NetworkError",
    "TMDbClient",
    "TMDbError",
    "TMDbSettings",
    "TimeWindow",
    "create_api_client",
    "get_settings",
]
