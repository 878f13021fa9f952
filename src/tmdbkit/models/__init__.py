"""TMDb response models.

Plain pydantic models decoded from API responses. Unknown keys are ignored.
"""

from tmdbkit.models.base import PageableList, TMDbModel
from tmdbkit.models.common import (
    CastMember,
    CrewMember,
    ExternalIDs,
    Genre,
    GenreList,
    ImageCollection,
    ImageMetadata,
    Keyword,
    KeywordCollection,
    ProductionCompany,
    ProductionCountry,
    Review,
    ReviewAuthor,
    ShowCredits,
    SpokenLanguage,
    StatusResponse,
    Video,
    VideoCollection,
)
from tmdbkit.models.media import MediaListItem, MediaType
from tmdbkit.models.movies import BelongsToCollection, Movie, MovieListItem
from tmdbkit.models.organizations import (
    Collection,
    Company,
    LogoCollection,
    LogoImage,
    Network,
    ParentCompany,
)
from tmdbkit.models.people import Person, PersonCredit, PersonCredits, PersonListItem
from tmdbkit.models.reference import (
    APIConfiguration,
    Certification,
    CertificationsByCountry,
    Country,
    FindResults,
    ImagesConfiguration,
    Language,
    RegionWatchProviders,
    ShowWatchProviders,
    WatchProvider,
    WatchProviderList,
    WatchProviderRegion,
    WatchProviderRegionList,
)
from tmdbkit.models.tv import (
    Creator,
    NetworkSummary,
    TVEpisode,
    TVSeason,
    TVSeasonSummary,
    TVSeries,
    TVSeriesListItem,
)

__all__ = [
    "APIConfiguration",
    "BelongsToCollection",
    "CastMember",
    "Certification",
    "CertificationsByCountry",
    "Collection",
    "Company",
    "Country",
    "Creator",
    "CrewMember",
    "ExternalIDs",
    "FindResults",
    "Genre",
    "GenreList",
    "ImageCollection",
    "ImageMetadata",
    "ImagesConfiguration",
    "Keyword",
    "KeywordCollection",
    "Language",
    "LogoCollection",
    "LogoImage",
    "MediaListItem",
    "MediaType",
    "Movie",
    "MovieListItem",
    "Network",
    "NetworkSummary",
    "PageableList",
    "ParentCompany",
    "Person",
    "PersonCredit",
    "PersonCredits",
    "PersonListItem",
    "ProductionCompany",
    "ProductionCountry",
    "RegionWatchProviders",
    "Review",
    "ReviewAuthor",
    "ShowCredits",
    "ShowWatchProviders",
    "SpokenLanguage",
    "StatusResponse",
    "TMDbModel",
    "TVEpisode",
    "TVSeason",
    "TVSeasonSummary",
    "TVSeries",
    "TVSeriesListItem",
    "Video",
    "VideoCollection",
    "WatchProvider",
    "WatchProviderList",
    "WatchProviderRegion",
    "WatchProviderRegionList",
]
