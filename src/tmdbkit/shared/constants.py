"""TMDb API Constants.

This module contains the fixed values of the TMDb wire contract: base URLs,
query parameter keys, header names and HTTP status ranges.
"""

from __future__ import annotations


class TMDB:
    """TMDb API configuration constants."""

    API_BASE_URL = "https://api.themoviedb.org/3"
    IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
    DEFAULT_LANGUAGE = "en-US"
    DEFAULT_TIMEOUT = 30.0
    ENV_PREFIX = "TMDB_"


class QueryKeys:
    """TMDb query parameter names."""

    API_KEY = "api_key"
    LANGUAGE = "language"
    REGION = "region"
    PAGE = "page"
    QUERY = "query"
    INCLUDE_ADULT = "include_adult"
    INCLUDE_IMAGE_LANGUAGE = "include_image_language"
    INCLUDE_VIDEO_LANGUAGE = "include_video_language"
    YEAR = "year"
    PRIMARY_RELEASE_YEAR = "primary_release_year"
    FIRST_AIR_DATE_YEAR = "first_air_date_year"
    SORT_BY = "sort_by"
    WITH_GENRES = "with_genres"
    WITH_PEOPLE = "with_people"
    WITH_COMPANIES = "with_companies"
    WITH_KEYWORDS = "with_keywords"
    WITH_ORIGINAL_LANGUAGE = "with_original_language"
    EXTERNAL_SOURCE = "external_source"
    SESSION_ID = "session_id"
    GUEST_SESSION_ID = "guest_session_id"
    WATCH_REGION = "watch_region"


class LocaleTokens:
    """Values used when rendering locale-derived query values."""

    # Rendered in place of a locale whose language subtag cannot be parsed.
    UNMAPPED_LANGUAGE = "null"
    LIST_SEPARATOR = ","
    SUBTAG_SEPARATORS = ("-", "_")


class Headers:
    """HTTP header names and values."""

    ACCEPT = "Accept"
    AUTHORIZATION = "Authorization"
    CONTENT_TYPE = "Content-Type"
    JSON = "application/json"
    JSON_UTF8 = "application/json;charset=utf-8"
    BEARER_PREFIX = "Bearer "


class HTTPStatusCodes:
    """HTTP status code constants."""

    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500

    @staticmethod
    def is_success(code: int) -> bool:
        """Check if status code indicates success (2xx)."""
        return 200 <= code < 300


__all__ = ["TMDB", "HTTPStatusCodes", "Headers", "LocaleTokens", "QueryKeys"]
