"""Search, discover and trending endpoints."""

from __future__ import annotations

from enum import Enum

from tmdbkit.api.endpoints import (
    INCLUDE_ADULT,
    LANGUAGE,
    PAGE,
    QUERY,
    REGION,
    EndpointSpec,
    plain_filter,
)
from tmdbkit.models import (
    Collection,
    Company,
    Keyword,
    MediaListItem,
    MovieListItem,
    PageableList,
    PersonListItem,
    TVSeriesListItem,
)
from tmdbkit.shared.constants import QueryKeys


class TimeWindow(str, Enum):
    """Trending time windows."""

    DAY = "day"
    WEEK = "week"


YEAR = plain_filter("year", QueryKeys.YEAR)
PRIMARY_RELEASE_YEAR = plain_filter("primary_release_year", QueryKeys.PRIMARY_RELEASE_YEAR)
FIRST_AIR_DATE_YEAR = plain_filter("first_air_date_year", QueryKeys.FIRST_AIR_DATE_YEAR)
SORT_BY = plain_filter("sort_by", QueryKeys.SORT_BY)
WITH_GENRES = plain_filter("with_genres", QueryKeys.WITH_GENRES)
WITH_PEOPLE = plain_filter("with_people", QueryKeys.WITH_PEOPLE)
WITH_COMPANIES = plain_filter("with_companies", QueryKeys.WITH_COMPANIES)
WITH_KEYWORDS = plain_filter("with_keywords", QueryKeys.WITH_KEYWORDS)
WITH_ORIGINAL_LANGUAGE = plain_filter("with_original_language", QueryKeys.WITH_ORIGINAL_LANGUAGE)
WITH_NETWORKS = plain_filter("with_networks")

# Search
MULTI = EndpointSpec(
    "/search/multi", PageableList[MediaListItem], (QUERY, INCLUDE_ADULT, LANGUAGE, PAGE)
)
MOVIES = EndpointSpec(
    "/search/movie",
    PageableList[MovieListItem],
    (QUERY, INCLUDE_ADULT, LANGUAGE, PRIMARY_RELEASE_YEAR, PAGE, REGION, YEAR),
)
TV_SERIES = EndpointSpec(
    "/search/tv",
    PageableList[TVSeriesListItem],
    (QUERY, FIRST_AIR_DATE_YEAR, INCLUDE_ADULT, LANGUAGE, PAGE, YEAR),
)
PEOPLE = EndpointSpec(
    "/search/person", PageableList[PersonListItem], (QUERY, INCLUDE_ADULT, LANGUAGE, PAGE)
)
COLLECTIONS = EndpointSpec(
    "/search/collection", PageableList[Collection], (QUERY, INCLUDE_ADULT, LANGUAGE, PAGE, REGION)
)
COMPANIES = EndpointSpec("/search/company", PageableList[Company], (QUERY, PAGE))
KEYWORDS = EndpointSpec("/search/keyword", PageableList[Keyword], (QUERY, PAGE))

# Discover
DISCOVER_MOVIES = EndpointSpec(
    "/discover/movie",
    PageableList[MovieListItem],
    (
        INCLUDE_ADULT,
        LANGUAGE,
        PAGE,
        PRIMARY_RELEASE_YEAR,
        REGION,
        SORT_BY,
        WITH_COMPANIES,
        WITH_GENRES,
        WITH_KEYWORDS,
        WITH_ORIGINAL_LANGUAGE,
        WITH_PEOPLE,
    ),
)
DISCOVER_TV_SERIES = EndpointSpec(
    "/discover/tv",
    PageableList[TVSeriesListItem],
    (
        FIRST_AIR_DATE_YEAR,
        INCLUDE_ADULT,
        LANGUAGE,
        PAGE,
        SORT_BY,
        WITH_COMPANIES,
        WITH_GENRES,
        WITH_KEYWORDS,
        WITH_NETWORKS,
        WITH_ORIGINAL_LANGUAGE,
    ),
)

# Trending
TRENDING_ALL = EndpointSpec(
    "/trending/all/{time_window}", PageableList[MediaListItem], (LANGUAGE, PAGE)
)
TRENDING_MOVIES = EndpointSpec(
    "/trending/movie/{time_window}", PageableList[MovieListItem], (LANGUAGE, PAGE)
)
TRENDING_TV_SERIES = EndpointSpec(
    "/trending/tv/{time_window}", PageableList[TVSeriesListItem], (LANGUAGE, PAGE)
)
TRENDING_PEOPLE = EndpointSpec(
    "/trending/person/{time_window}", PageableList[PersonListItem], (LANGUAGE, PAGE)
)
