"""Tests for TMDb response models.

Samples are trimmed real responses. Decoding then re-encoding with
``exclude_unset`` must give back the declared part of the input.
"""

from __future__ import annotations

import orjson
import pytest
from pydantic import ValidationError

from tmdbkit.models import (
    APIConfiguration,
    CertificationsByCountry,
    Collection,
    FindResults,
    Genre,
    ImageCollection,
    LogoCollection,
    MediaListItem,
    Movie,
    MovieListItem,
    PageableList,
    PersonCredits,
    ShowCredits,
    ShowWatchProviders,
    TVSeason,
    TVSeries,
    VideoCollection,
)
from tmdbkit.shared.conversion import ModelConverter

SAMPLES = {
    "movie": (
        Movie,
        {
            "id": 603,
            "title": "The Matrix",
            "original_language": "en",
            "release_date": "1999-03-30",
            "runtime": 136,
            "genres": [{"id": 28, "name": "Action"}, {"id": 878, "name": "Science Fiction"}],
            "belongs_to_collection": {"id": 2344, "name": "The Matrix Collection"},
            "imdb_id": "tt0133093",
        },
    ),
    "images": (
        ImageCollection,
        {
            "id": 550,
            "backdrops": [
                {
                    "aspect_ratio": 1.778,
                    "file_path": "/hZkgoQYus5vegHoetLkCJzb17zJ.jpg",
                    "height": 2160,
                    "iso_639_1": None,
                    "vote_average": 5.456,
                    "vote_count": 9,
                    "width": 3840,
                }
            ],
            "posters": [],
        },
    ),
    "videos": (
        VideoCollection,
        {
            "id": 550,
            "results": [
                {
                    "id": "639d5326be6d88007f170f44",
                    "key": "O-b2VfmmbyA",
                    "name": "Fight Club Trailer",
                    "site": "YouTube",
                    "type": "Trailer",
                    "official": False,
                    "iso_639_1": "en",
                    "iso_3166_1": "US",
                }
            ],
        },
    ),
    "season": (
        TVSeason,
        {
            "id": 3624,
            "name": "Season 1",
            "season_number": 1,
            "air_date": "2011-04-17",
            "episodes": [
                {
                    "id": 63056,
                    "name": "Winter Is Coming",
                    "episode_number": 1,
                    "season_number": 1,
                    "runtime": 62,
                    "crew": [{"id": 44797, "name": "Tim Van Patten", "job": "Director",
                              "department": "Directing"}],
                    "guest_stars": [],
                }
            ],
        },
    ),
    "series": (
        TVSeries,
        {
            "id": 1399,
            "name": "Game of Thrones",
            "number_of_seasons": 8,
            "networks": [{"id": 49, "name": "HBO"}],
            "seasons": [{"id": 3624, "name": "Season 1", "season_number": 1}],
        },
    ),
    "credits": (
        ShowCredits,
        {
            "id": 550,
            "cast": [{"id": 819, "name": "Edward Norton", "character": "Narrator", "order": 0}],
            "crew": [{"id": 7467, "name": "David Fincher", "job": "Director",
                      "department": "Directing"}],
        },
    ),
    "person_credits": (
        PersonCredits,
        {
            "id": 287,
            "cast": [{"id": 550, "media_type": "movie", "title": "Fight Club",
                      "character": "Tyler Durden"}],
            "crew": [],
        },
    ),
    "popular": (
        PageableList[MovieListItem],
        {
            "page": 1,
            "results": [{"id": 1, "title": "One", "genre_ids": [18]}],
            "total_pages": 500,
            "total_results": 10000,
        },
    ),
    "collection": (
        Collection,
        {"id": 10, "name": "Star Wars Collection", "parts": [{"id": 11, "title": "Star Wars"}]},
    ),
    "logos": (
        LogoCollection,
        {"id": 1, "logos": [{"file_path": "/logo.png", "file_type": ".svg", "width": 500,
                             "height": 200}]},
    ),
    "certifications": (
        CertificationsByCountry,
        {"certifications": {"US": [{"certification": "R", "meaning": "Restricted", "order": 4}]}},
    ),
    "watch_providers": (
        ShowWatchProviders,
        {
            "id": 550,
            "results": {
                "KR": {
                    "link": "https://www.themoviedb.org/movie/550/watch?locale=KR",
                    "flatrate": [{"provider_id": 8, "provider_name": "Netflix"}],
                }
            },
        },
    ),
    "configuration": (
        APIConfiguration,
        {
            "images": {
                "base_url": "http://image.tmdb.org/t/p/",
                "secure_base_url": "https://image.tmdb.org/t/p/",
                "poster_sizes": ["w92", "original"],
            },
            "change_keys": ["adult"],
        },
    ),
    "find": (
        FindResults,
        {
            "movie_results": [{"id": 603, "title": "The Matrix"}],
            "tv_season_results": [{"id": 3624, "name": "Season 1", "season_number": 1}],
        },
    ),
}


@pytest.mark.parametrize("name", sorted(SAMPLES))
def test_round_trip(name: str) -> None:
    # Given
    model_type, payload = SAMPLES[name]

    # When
    decoded = ModelConverter.from_json_bytes(orjson.dumps(payload), model_type)

    # Then
    assert decoded.model_dump(mode="json", exclude_unset=True) == payload


class TestModelBehaviour:
    def test_unknown_keys_are_ignored(self) -> None:
        genre = Genre(id=16, name="Animation", unknown_field=True)

        assert genre.model_dump() == {"id": 16, "name": "Animation"}

    def test_missing_required_field(self) -> None:
        with pytest.raises(ValidationError):
            MovieListItem(id=1)

    def test_models_are_frozen(self) -> None:
        genre = Genre(id=16, name="Animation")

        with pytest.raises(ValidationError):
            genre.name = "Other"  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("payload", "title", "date"),
        [
            ({"id": 1, "media_type": "movie", "title": "Up", "release_date": "2009-05-28"},
             "Up", "2009-05-28"),
            ({"id": 2, "media_type": "tv", "name": "Lost", "first_air_date": "2004-09-22"},
             "Lost", "2004-09-22"),
            ({"id": 3, "media_type": "person", "name": "Keanu Reeves"}, "Keanu Reeves", None),
        ],
    )
    def test_media_list_item_display(self, payload: dict, title: str, date: str | None) -> None:
        item = MediaListItem.model_validate(payload)

        assert item.display_title == title
        assert item.display_date == date
