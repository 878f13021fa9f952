"""Movie endpoints."""

from __future__ import annotations

from tmdbkit.api.endpoints import (
    INCLUDE_IMAGE_LANGUAGE,
    INCLUDE_VIDEO_LANGUAGE,
    LOCALIZED,
    LOCALIZED_PAGE,
    RATING_SESSION,
    REGIONAL_PAGE,
    EndpointSpec,
)
from tmdbkit.api.request import HTTPMethod
from tmdbkit.models import (
    ExternalIDs,
    ImageCollection,
    KeywordCollection,
    Movie,
    MovieListItem,
    PageableList,
    Review,
    ShowCredits,
    ShowWatchProviders,
    StatusResponse,
    VideoCollection,
)

DETAILS = EndpointSpec("/movie/{movie_id}", Movie, LOCALIZED)
CREDITS = EndpointSpec("/movie/{movie_id}/credits", ShowCredits, LOCALIZED)
REVIEWS = EndpointSpec("/movie/{movie_id}/reviews", PageableList[Review], LOCALIZED_PAGE)
IMAGES = EndpointSpec("/movie/{movie_id}/images", ImageCollection, (INCLUDE_IMAGE_LANGUAGE,))
VIDEOS = EndpointSpec("/movie/{movie_id}/videos", VideoCollection, (INCLUDE_VIDEO_LANGUAGE,))
RECOMMENDATIONS = EndpointSpec(
    "/movie/{movie_id}/recommendations", PageableList[MovieListItem], LOCALIZED_PAGE
)
SIMILAR = EndpointSpec("/movie/{movie_id}/similar", PageableList[MovieListItem], LOCALIZED_PAGE)
KEYWORDS = EndpointSpec("/movie/{movie_id}/keywords", KeywordCollection)
EXTERNAL_IDS = EndpointSpec("/movie/{movie_id}/external_ids", ExternalIDs)
WATCH_PROVIDERS = EndpointSpec("/movie/{movie_id}/watch/providers", ShowWatchProviders)

NOW_PLAYING = EndpointSpec("/movie/now_playing", PageableList[MovieListItem], REGIONAL_PAGE)
POPULAR = EndpointSpec("/movie/popular", PageableList[MovieListItem], REGIONAL_PAGE)
TOP_RATED = EndpointSpec("/movie/top_rated", PageableList[MovieListItem], REGIONAL_PAGE)
UPCOMING = EndpointSpec("/movie/upcoming", PageableList[MovieListItem], REGIONAL_PAGE)

ADD_RATING = EndpointSpec(
    "/movie/{movie_id}/rating", StatusResponse, RATING_SESSION, method=HTTPMethod.POST
)
DELETE_RATING = EndpointSpec(
    "/movie/{movie_id}/rating", StatusResponse, RATING_SESSION, method=HTTPMethod.DELETE
)
