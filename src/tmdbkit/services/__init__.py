"""Service facades, one per TMDb resource family.

Every facade is constructed with ``(api_client, locale_provider, logger=None)``
and fills in language and region filters from ``locale_provider`` when the
caller leaves them out.
"""

from tmdbkit.services.base import BaseService
from tmdbkit.services.movies import MovieService
from tmdbkit.services.organizations import (
    CollectionService,
    CompanyService,
    KeywordService,
    NetworkService,
    ReviewService,
)
from tmdbkit.services.people import PersonService
from tmdbkit.services.reference import (
    CertificationService,
    ConfigurationService,
    FindService,
    GenreService,
    WatchProviderService,
)
from tmdbkit.services.search import DiscoverService, SearchService, TrendingService
from tmdbkit.services.tv import TVEpisodeService, TVSeasonService, TVSeriesService

__all__ = [
    "BaseService",
    "CertificationService",
    "CollectionService",
    "CompanyService",
    "ConfigurationService",
    "DiscoverService",
    "FindService",
    "GenreService",
    "KeywordService",
    "MovieService",
    "NetworkService",
    "PersonService",
    "ReviewService",
    "SearchService",
    "TVEpisodeService",
    "TVSeasonService",
    "TVSeriesService",
    "TrendingService",
    "WatchProviderService",
]
