"""TV series, season and episode endpoints.

Series endpoints take ``series_id``; season endpoints add ``season_number``;
episode endpoints add ``episode_number``.
"""

from __future__ import annotations

from tmdbkit.api.endpoints import (
    INCLUDE_IMAGE_LANGUAGE,
    INCLUDE_VIDEO_LANGUAGE,
    LOCALIZED,
    LOCALIZED_PAGE,
    RATING_SESSION,
    EndpointSpec,
)
from tmdbkit.api.request import HTTPMethod
from tmdbkit.models import (
    ExternalIDs,
    ImageCollection,
    KeywordCollection,
    PageableList,
    Review,
    ShowCredits,
    ShowWatchProviders,
    StatusResponse,
    TVEpisode,
    TVSeason,
    TVSeries,
    TVSeriesListItem,
    VideoCollection,
)

_SERIES = "/tv/{series_id}"
_SEASON = _SERIES + "/season/{season_number}"
_EPISODE = _SEASON + "/episode/{episode_number}"

# Series
DETAILS = EndpointSpec(_SERIES, TVSeries, LOCALIZED)
CREDITS = EndpointSpec(_SERIES + "/credits", ShowCredits, LOCALIZED)
AGGREGATE_CREDITS = EndpointSpec(_SERIES + "/aggregate_credits", ShowCredits, LOCALIZED)
REVIEWS = EndpointSpec(_SERIES + "/reviews", PageableList[Review], LOCALIZED_PAGE)
IMAGES = EndpointSpec(_SERIES + "/images", ImageCollection, (INCLUDE_IMAGE_LANGUAGE,))
VIDEOS = EndpointSpec(_SERIES + "/videos", VideoCollection, (INCLUDE_VIDEO_LANGUAGE,))
RECOMMENDATIONS = EndpointSpec(
    _SERIES + "/recommendations", PageableList[TVSeriesListItem], LOCALIZED_PAGE
)
SIMILAR = EndpointSpec(_SERIES + "/similar", PageableList[TVSeriesListItem], LOCALIZED_PAGE)
KEYWORDS = EndpointSpec(_SERIES + "/keywords", KeywordCollection)
EXTERNAL_IDS = EndpointSpec(_SERIES + "/external_ids", ExternalIDs)
WATCH_PROVIDERS = EndpointSpec(_SERIES + "/watch/providers", ShowWatchProviders)

AIRING_TODAY = EndpointSpec("/tv/airing_today", PageableList[TVSeriesListItem], LOCALIZED_PAGE)
ON_THE_AIR = EndpointSpec("/tv/on_the_air", PageableList[TVSeriesListItem], LOCALIZED_PAGE)
POPULAR = EndpointSpec("/tv/popular", PageableList[TVSeriesListItem], LOCALIZED_PAGE)
TOP_RATED = EndpointSpec("/tv/top_rated", PageableList[TVSeriesListItem], LOCALIZED_PAGE)

ADD_RATING = EndpointSpec(
    _SERIES + "/rating", StatusResponse, RATING_SESSION, method=HTTPMethod.POST
)
DELETE_RATING = EndpointSpec(
    _SERIES + "/rating", StatusResponse, RATING_SESSION, method=HTTPMethod.DELETE
)

# Seasons
SEASON_DETAILS = EndpointSpec(_SEASON, TVSeason, LOCALIZED)
SEASON_CREDITS = EndpointSpec(_SEASON + "/credits", ShowCredits, LOCALIZED)
SEASON_IMAGES = EndpointSpec(_SEASON + "/images", ImageCollection, (INCLUDE_IMAGE_LANGUAGE,))
SEASON_VIDEOS = EndpointSpec(_SEASON + "/videos", VideoCollection, (INCLUDE_VIDEO_LANGUAGE,))

# Episodes
EPISODE_DETAILS = EndpointSpec(_EPISODE, TVEpisode, LOCALIZED)
EPISODE_CREDITS = EndpointSpec(_EPISODE + "/credits", ShowCredits, LOCALIZED)
EPISODE_IMAGES = EndpointSpec(_EPISODE + "/images", ImageCollection, (INCLUDE_IMAGE_LANGUAGE,))
EPISODE_VIDEOS = EndpointSpec(_EPISODE + "/videos", VideoCollection, (INCLUDE_VIDEO_LANGUAGE,))
