"""Reference data endpoints.

Genres, certifications, watch providers, API configuration and external-ID
lookup.
"""

from __future__ import annotations

from enum import Enum

from tmdbkit.api.endpoints import (
    LANGUAGE,
    LOCALIZED,
    EndpointSpec,
    QueryFilter,
    encode_region,
    plain_filter,
)
from tmdbkit.models import (
    APIConfiguration,
    CertificationsByCountry,
    Country,
    FindResults,
    GenreList,
    Language,
    WatchProviderList,
    WatchProviderRegionList,
)
from tmdbkit.shared.constants import QueryKeys


class ExternalSource(str, Enum):
    """External ID namespaces accepted by /find."""

    IMDB = "imdb_id"
    TVDB = "tvdb_id"
    WIKIDATA = "wikidata_id"
    FACEBOOK = "facebook_id"
    INSTAGRAM = "instagram_id"
    TWITTER = "twitter_id"
    TIKTOK = "tiktok_id"
    YOUTUBE = "youtube_id"


EXTERNAL_SOURCE = plain_filter("external_source", QueryKeys.EXTERNAL_SOURCE)
WATCH_REGION = QueryFilter("watch_region", QueryKeys.WATCH_REGION, encode_region)

# Genres
MOVIE_GENRES = EndpointSpec("/genre/movie/list", GenreList, LOCALIZED)
TV_GENRES = EndpointSpec("/genre/tv/list", GenreList, LOCALIZED)

# Certifications
MOVIE_CERTIFICATIONS = EndpointSpec("/certification/movie/list", CertificationsByCountry)
TV_CERTIFICATIONS = EndpointSpec("/certification/tv/list", CertificationsByCountry)

# Watch providers
WATCH_PROVIDER_REGIONS = EndpointSpec("/watch/providers/regions", WatchProviderRegionList, LOCALIZED)
MOVIE_WATCH_PROVIDERS = EndpointSpec(
    "/watch/providers/movie", WatchProviderList, (LANGUAGE, WATCH_REGION)
)
TV_WATCH_PROVIDERS = EndpointSpec(
    "/watch/providers/tv", WatchProviderList, (LANGUAGE, WATCH_REGION)
)

# Configuration
API_CONFIGURATION = EndpointSpec("/configuration", APIConfiguration)
COUNTRIES = EndpointSpec("/configuration/countries", list[Country], LOCALIZED)
LANGUAGES = EndpointSpec("/configuration/languages", list[Language])

# Find
FIND = EndpointSpec("/find/{external_id}", FindResults, (EXTERNAL_SOURCE, LANGUAGE))
