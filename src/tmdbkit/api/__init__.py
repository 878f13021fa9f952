"""Request construction and dispatch.

This package provides the request descriptor, the table-driven endpoint
builder and the async API client.
"""

from tmdbkit.api.client import APIClient, create_api_client
from tmdbkit.api.endpoints import EndpointSpec, QueryFilter, build_request
from tmdbkit.api.request import APIRequest, HTTPMethod

__all__ = [
    "APIClient",
    "APIRequest",
    "EndpointSpec",
    "HTTPMethod",
    "QueryFilter",
    "build_request",
    "create_api_client",
]
