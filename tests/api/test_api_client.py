"""Tests for APIClient.

Requests go to a FakeSession; nothing touches the network.
"""

from __future__ import annotations

import asyncio
import logging

import aiohttp
import orjson
import pytest

from tmdbkit.api.client import APIClient, create_api_client
from tmdbkit.api.request import APIRequest, HTTPMethod
from tmdbkit.config import TMDbSettings
from tmdbkit.endpoints import movies
from tmdbkit.models import Genre, GenreList, ImageCollection, Movie, StatusResponse
from tmdbkit.shared.errors import (
    CancellationError,
    ConfigurationError,
    DecodingError,
    ErrorCode,
    HTTPError,
    NetworkError,
)

MOVIE_JSON = {
    "id": 603,
    "title": "The Matrix",
    "release_date": "1999-03-30",
    "genres": [{"id": 28, "name": "Action"}],
    "unexpected": {"nested": True},
}


@pytest.fixture
def client(settings: TMDbSettings, fake_session) -> APIClient:
    return APIClient(settings, session=fake_session)


class TestRequestComposition:
    """Test cases for URL, query, header and body composition."""

    def test_url_joins_base_and_path(self, client: APIClient) -> None:
        request = APIRequest("/movie/603", Movie)

        assert client.url_for(request) == "https://api.themoviedb.org/3/movie/603"

    def test_api_key_precedes_query_items(self, client: APIClient) -> None:
        request = movies.REVIEWS.build(movie_id=603, language="en-US", page=2)

        assert client.query_for(request) == [
            ("api_key", "test_api_key"),
            ("language", "en"),
            ("page", "2"),
        ]

    def test_no_api_key_with_bearer_token(self, fake_session) -> None:
        # Given
        settings = TMDbSettings(access_token="token123")
        client = APIClient(settings, session=fake_session)

        # When
        params = client.query_for(APIRequest("/configuration", Movie))
        headers = client.headers_for(APIRequest("/configuration", Movie))

        # Then
        assert params == []
        assert headers["Authorization"] == "Bearer token123"
        assert headers["Accept"] == "application/json"

    def test_request_headers_win_over_defaults(self, client: APIClient) -> None:
        request = APIRequest("/movie/1", Movie, headers={"Accept": "text/plain", "X-Trace": "1"})

        headers = client.headers_for(request)

        assert headers == {"Accept": "text/plain", "X-Trace": "1"}

    @pytest.mark.parametrize("name", ["accept", "ACCEPT", "aCcEpT"])
    def test_request_header_wins_whatever_its_casing(self, client: APIClient, name: str) -> None:
        # Given
        request = APIRequest("/movie/1", Movie, headers={name: "text/plain"})

        # When
        headers = client.headers_for(request)

        # Then
        assert headers == {name: "text/plain"}

    def test_lowercase_content_type_replaces_default(self, client: APIClient) -> None:
        request = APIRequest(
            "/movie/1/rating",
            StatusResponse,
            method=HTTPMethod.POST,
            headers={"content-type": "application/json"},
            body={"value": 8.0},
        )

        headers = client.headers_for(request)

        assert [name.lower() for name in headers].count("content-type") == 1
        assert headers["content-type"] == "application/json"

    def test_content_type_added_for_body(self, client: APIClient) -> None:
        request = APIRequest("/movie/1/rating", StatusResponse, method=HTTPMethod.POST, body={})

        assert client.headers_for(request)["Content-Type"] == "application/json;charset=utf-8"

    def test_body_serialization(self) -> None:
        json_request = APIRequest("/x", Movie, body={"value": 8.5})
        raw_request = APIRequest("/x", Movie, body=b"raw")
        empty_request = APIRequest("/x", Movie)

        assert orjson.loads(APIClient.body_for(json_request)) == {"value": 8.5}
        assert APIClient.body_for(raw_request) == b"raw"
        assert APIClient.body_for(empty_request) is None


class TestExecute:
    """Test cases for APIClient.execute."""

    @pytest.mark.asyncio
    async def test_success_decodes_model(self, client: APIClient, fake_session, make_response) -> None:
        # Given
        fake_session.add("/movie/603", make_response(200, MOVIE_JSON))

        # When
        movie = await client.execute(movies.DETAILS.build(movie_id=603, language="en-US"))

        # Then
        assert isinstance(movie, Movie)
        assert movie.title == "The Matrix"
        assert movie.genres == [Genre(id=28, name="Action")]

        call = fake_session.calls[0]
        assert call.method == "GET"
        assert call.url == "https://api.themoviedb.org/3/movie/603"
        assert call.params == [("api_key", "test_api_key"), ("language", "en")]
        assert call.data is None

    @pytest.mark.asyncio
    async def test_post_sends_json_body(self, client: APIClient, fake_session, make_response) -> None:
        # Given
        fake_session.add(
            "/movie/603/rating",
            make_response(201, {"status_code": 1, "status_message": "Success."}),
        )
        request = movies.ADD_RATING.build(movie_id=603, guest_session_id="g1", body={"value": 8.5})

        # When
        status = await client.execute(request)

        # Then
        assert status.status_code == 1
        call = fake_session.calls[0]
        assert call.method == "POST"
        assert orjson.loads(call.data) == {"value": 8.5}
        assert call.params == [("api_key", "test_api_key"), ("guest_session_id", "g1")]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status", "code"),
        [
            (401, ErrorCode.API_AUTHENTICATION_FAILED),
            (404, ErrorCode.API_RESOURCE_NOT_FOUND),
            (429, ErrorCode.API_RATE_LIMIT),
            (503, ErrorCode.API_SERVER_ERROR),
            (400, ErrorCode.HTTP_ERROR),
        ],
    )
    async def test_non_2xx_raises_http_error(
        self, client: APIClient, fake_session, make_response, status: int, code: ErrorCode
    ) -> None:
        # Given
        body = {"status_code": 34, "status_message": "The resource could not be found."}
        fake_session.add("/movie/1", make_response(status, body))

        # When
        with pytest.raises(HTTPError) as exc_info:
            await client.execute(APIRequest("/movie/1", Movie))

        # Then
        assert exc_info.value.status_code == status
        assert exc_info.value.code is code
        assert orjson.loads(exc_info.value.body) == body

    @pytest.mark.asyncio
    async def test_malformed_json_raises_decoding_error(
        self, client: APIClient, fake_session, make_response
    ) -> None:
        fake_session.add("/genre/movie/list", make_response(200, b"{not json"))

        with pytest.raises(DecodingError) as exc_info:
            await client.execute(APIRequest("/genre/movie/list", GenreList))

        assert exc_info.value.type_name == "GenreList"
        assert exc_info.value.code is ErrorCode.INVALID_JSON
        assert isinstance(exc_info.value.__cause__, orjson.JSONDecodeError)

    @pytest.mark.asyncio
    async def test_shape_mismatch_raises_decoding_error(
        self, client: APIClient, fake_session, make_response
    ) -> None:
        fake_session.add("/movie/1", make_response(200, {"id": "not-a-number"}))

        with pytest.raises(DecodingError) as exc_info:
            await client.execute(APIRequest("/movie/1", Movie))

        assert exc_info.value.type_name == "Movie"
        assert exc_info.value.code is ErrorCode.DECODING_ERROR
        assert exc_info.value.validation_errors

    @pytest.mark.asyncio
    async def test_connection_failure_raises_network_error(
        self, client: APIClient, fake_session
    ) -> None:
        # Given
        cause = aiohttp.ClientConnectionError("Connection refused")
        fake_session.add("/movie/1", cause)

        # When
        with pytest.raises(NetworkError) as exc_info:
            await client.execute(APIRequest("/movie/1", Movie))

        # Then
        assert exc_info.value.code is ErrorCode.NETWORK_ERROR
        assert exc_info.value.original_error is cause
        assert exc_info.value.__cause__ is cause

    @pytest.mark.asyncio
    async def test_timeout_raises_network_error(self, client: APIClient, fake_session) -> None:
        fake_session.add("/movie/1", asyncio.TimeoutError())

        with pytest.raises(NetworkError) as exc_info:
            await client.execute(APIRequest("/movie/1", Movie))

        assert exc_info.value.code is ErrorCode.API_TIMEOUT

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, client: APIClient, fake_session, make_response) -> None:
        # Given
        fake_session.add("/movie/1", make_response(200, MOVIE_JSON, delay=10))
        task = asyncio.create_task(client.execute(APIRequest("/movie/1", Movie)))
        await asyncio.sleep(0.01)

        # When
        task.cancel()

        # Then
        with pytest.raises(CancellationError):
            await task

        context = fake_session.contexts[0]
        assert context.exited is True
        assert context.exit_type is asyncio.CancelledError

    @pytest.mark.asyncio
    async def test_failure_is_logged_with_error_context(
        self, client: APIClient, fake_session, make_response, caplog: pytest.LogCaptureFixture
    ) -> None:
        # Given
        fake_session.add("/movie/1", make_response(404, {"status_code": 34}))

        # When
        with caplog.at_level(logging.DEBUG, logger="tmdbkit.api.client"):
            with pytest.raises(HTTPError):
                await client.execute(APIRequest("/movie/1", Movie))

        # Then
        started = [r for r in caplog.records if r.getMessage() == "Starting operation 'api_call'"]
        assert started[0].context == {"method": "GET", "path": "/movie/1"}
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert errors[0].error_code == "API_RESOURCE_NOT_FOUND"
        assert errors[0].operation == "api_call"

    @pytest.mark.asyncio
    async def test_concurrent_calls_resolve_independently(
        self, client: APIClient, fake_session, make_response
    ) -> None:
        # Given: later requests answer first
        ids = [1, 2, 3, 4, 5]
        for movie_id in ids:
            fake_session.add(
                f"/movie/{movie_id}",
                make_response(
                    200,
                    {"id": movie_id, "title": f"Movie {movie_id}"},
                    delay=0.05 * (len(ids) - movie_id),
                ),
            )

        # When
        results = await asyncio.gather(
            *(client.execute(APIRequest(f"/movie/{movie_id}", Movie)) for movie_id in ids)
        )

        # Then
        assert [movie.id for movie in results] == ids
        assert [movie.title for movie in results] == [f"Movie {i}" for i in ids]

    @pytest.mark.asyncio
    async def test_list_response_model(self, client: APIClient, fake_session, make_response) -> None:
        fake_session.add(
            "/movie/1/images",
            make_response(200, {"id": 1, "posters": [{"file_path": "/a.jpg", "width": 1, "height": 2}]}),
        )

        images = await client.execute(APIRequest("/movie/1/images", ImageCollection))

        assert images.posters[0].file_path == "/a.jpg"
        assert images.backdrops == []


class TestSessionLifecycle:
    """Test cases for session ownership."""

    @pytest.mark.asyncio
    async def test_injected_session_is_not_closed(self, settings: TMDbSettings, fake_session) -> None:
        async with APIClient(settings, session=fake_session):
            pass

        assert fake_session.closed is False

    @pytest.mark.asyncio
    async def test_owned_session_is_created_lazily_and_closed(
        self, settings: TMDbSettings, fake_session, make_response, mocker
    ) -> None:
        # Given
        factory = mocker.patch("tmdbkit.api.client.aiohttp.ClientSession", return_value=fake_session)
        fake_session.add("/movie/603", make_response(200, MOVIE_JSON))
        client = APIClient(settings)
        factory.assert_not_called()

        # When
        await client.execute(APIRequest("/movie/603", Movie))
        await client.close()

        # Then
        factory.assert_called_once()
        assert fake_session.closed is True


class TestCreateAPIClient:
    def test_requires_credentials(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            create_api_client(TMDbSettings())

        assert exc_info.value.code is ErrorCode.MISSING_CREDENTIALS

    def test_loads_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TMDB_API_KEY", "env_key")

        client = create_api_client()

        assert client.settings.api_key == "env_key"
