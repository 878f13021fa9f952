"""Response models shared by several resource families."""

from __future__ import annotations

from pydantic import Field

from tmdbkit.models.base import TMDbModel


class Genre(TMDbModel):
    """TMDb genre.

    Attributes:
        id: TMDb genre ID (e.g., 16 for Animation)
        name: Genre name, localized to the request language
    """

    id: int = Field(..., description="TMDb genre ID")
    name: str = Field(..., description="Genre name (localized)")


class GenreList(TMDbModel):
    genres: list[Genre] = Field(default_factory=list)


class ProductionCompany(TMDbModel):
    id: int
    name: str
    logo_path: str | None = None
    origin_country: str | None = None


class ProductionCountry(TMDbModel):
    iso_3166_1: str
    name: str


class SpokenLanguage(TMDbModel):
    iso_639_1: str
    name: str
    english_name: str | None = None


class ImageMetadata(TMDbModel):
    """A single image file with its dimensions and rating."""

    file_path: str
    width: int
    height: int
    aspect_ratio: float = 0.0
    # None when the image carries no text in any language.
    iso_639_1: str | None = None
    vote_average: float = 0.0
    vote_count: int = 0


class ImageCollection(TMDbModel):
    """Images belonging to a movie, TV series, season, episode or person.

    Only the lists relevant to the resource are populated; the others stay
    empty.
    """

    id: int | None = None
    backdrops: list[ImageMetadata] = Field(default_factory=list)
    logos: list[ImageMetadata] = Field(default_factory=list)
    posters: list[ImageMetadata] = Field(default_factory=list)
    profiles: list[ImageMetadata] = Field(default_factory=list)
    stills: list[ImageMetadata] = Field(default_factory=list)


class Video(TMDbModel):
    """Video metadata (trailers, teasers, featurettes)."""

    id: str
    key: str
    name: str
    site: str
    type: str
    size: int | None = None
    official: bool = False
    iso_639_1: str | None = None
    iso_3166_1: str | None = None
    published_at: str | None = None


class VideoCollection(TMDbModel):
    id: int | None = None
    results: list[Video] = Field(default_factory=list)


class CastMember(TMDbModel):
    id: int
    name: str
    character: str | None = None
    credit_id: str | None = None
    gender: int | None = None
    known_for_department: str | None = None
    order: int | None = None
    profile_path: str | None = None


class CrewMember(TMDbModel):
    id: int
    name: str
    job: str = ""
    department: str = ""
    credit_id: str | None = None
    gender: int | None = None
    profile_path: str | None = None


class ShowCredits(TMDbModel):
    """Cast and crew of a movie, series, season or episode."""

    id: int | None = None
    cast: list[CastMember] = Field(default_factory=list)
    crew: list[CrewMember] = Field(default_factory=list)


class ReviewAuthor(TMDbModel):
    name: str | None = None
    username: str | None = None
    avatar_path: str | None = None
    rating: float | None = None


class Review(TMDbModel):
    id: str
    author: str
    content: str
    author_details: ReviewAuthor | None = None
    created_at: str | None = None
    updated_at: str | None = None
    url: str | None = None
    # Only set on the /review/{id} endpoint.
    media_id: int | None = None
    media_type: str | None = None
    media_title: str | None = None


class Keyword(TMDbModel):
    id: int
    name: str


class KeywordCollection(TMDbModel):
    """Keywords of a movie (``keywords``) or TV series (``results``)."""

    id: int | None = None
    keywords: list[Keyword] = Field(default_factory=list)
    results: list[Keyword] = Field(default_factory=list)


class ExternalIDs(TMDbModel):
    id: int | None = None
    imdb_id: str | None = None
    tvdb_id: int | None = None
    wikidata_id: str | None = None
    facebook_id: str | None = None
    instagram_id: str | None = None
    twitter_id: str | None = None


class StatusResponse(TMDbModel):
    """Acknowledgement returned by write endpoints."""

    status_code: int
    status_message: str
    success: bool | None = None


__all__ = [
    "CastMember",
    "CrewMember",
    "ExternalIDs",
    "Genre",
    "GenreList",
    "ImageCollection",
    "ImageMetadata",
    "Keyword",
    "KeywordCollection",
    "ProductionCompany",
    "ProductionCountry",
    "Review",
    "ReviewAuthor",
    "ShowCredits",
    "SpokenLanguage",
    "StatusResponse",
    "Video",
    "VideoCollection",
]
