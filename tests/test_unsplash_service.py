"""
Tests for the Unsplash client and the remote photo search endpoint.
"""

import asyncio

import httpx
import pytest

from picstash.core.exceptions import InternalError, NotFoundError, ValidationError
from picstash.services.unsplash_service import UnsplashClient, search_images

UNSPLASH_RESULT = {
    "id": "abc",
    "urls": {"regular": "https://images.unsplash.com/photo-abc?w=1080", "small": "https://images.unsplash.com/photo-abc?w=400"},
    "alt_description": "a red car",
    "description": "Red car on a road",
}


def make_client(settings, handler):
    return UnsplashClient(settings, transport=httpx.MockTransport(handler))


class TestUnsplashClient:

    def test_given_query_when_searching_then_sends_credential_and_query(self, settings):
        # Given
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["query"] = request.url.params.get("query")
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json={"results": [UNSPLASH_RESULT]})

        client = make_client(settings, handler)

        # When
        results = asyncio.run(client.search_photos("car"))

        # Then
        assert results == [UNSPLASH_RESULT]
        assert seen == {"path": "/search/photos", "query": "car", "auth": "Client-ID test-key"}

    def test_given_one_result_when_searching_images_then_maps_fields(self, settings):
        client = make_client(settings, lambda request: httpx.Response(200, json={"results": [UNSPLASH_RESULT]}))

        photos = asyncio.run(search_images(client, "car"))

        assert len(photos) == 1
        assert photos[0].image_url == "https://images.unsplash.com/photo-abc?w=1080"
        assert photos[0].alt_description == "a red car"
        assert photos[0].description == "Red car on a road"

    def test_given_no_results_when_searching_images_then_raises_not_found(self, settings):
        client = make_client(settings, lambda request: httpx.Response(200, json={"results": []}))

        with pytest.raises(NotFoundError) as exc_info:
            asyncio.run(search_images(client, "nothing"))

        assert exc_info.value.message == "No images found for the given query."

    def test_given_remote_error_when_searching_images_then_raises_internal_error(self, settings):
        client = make_client(settings, lambda request: httpx.Response(401, json={"errors": ["OAuth error"]}))

        with pytest.raises(InternalError) as exc_info:
            asyncio.run(search_images(client, "car"))

        assert exc_info.value.message == "Failed to fetch unsplash api."
        assert "401" in exc_info.value.error

    def test_given_malformed_result_entry_when_searching_images_then_raises_internal_error(self, settings):
        client = make_client(settings, lambda request: httpx.Response(200, json={"results": ["not-a-record"]}))

        with pytest.raises(InternalError) as exc_info:
            asyncio.run(search_images(client, "car"))

        assert exc_info.value.message == "Failed to fetch unsplash api."

    def test_given_empty_term_when_searching_images_then_raises_validation_error(self, settings):
        client = make_client(settings, lambda request: httpx.Response(200, json={"results": []}))

        with pytest.raises(ValidationError) as exc_info:
            asyncio.run(search_images(client, ""))

        assert exc_info.value.message == "Query term is required."


class TestSearchImagesEndpoint:

    def test_given_no_query_term_when_searching_then_returns_400(self, client, unsplash):
        response = client.get("/api/photos/search")

        assert response.status_code == 400
        assert response.json() == {"message": "Query term is required."}
        unsplash.search_photos.assert_not_called()

    def test_given_one_result_when_searching_then_returns_single_item(self, client, unsplash):
        # Given
        unsplash.search_photos.return_value = [UNSPLASH_RESULT]

        # When
        response = client.get("/api/photos/search", params={"queryTerm": "car"})

        # Then
        assert response.status_code == 200
        assert response.json() == [{
            "imageUrl": "https://images.unsplash.com/photo-abc?w=1080",
            "altDescription": "a red car",
            "description": "Red car on a road",
        }]
        unsplash.search_photos.assert_awaited_once_with("car")

    def test_given_empty_result_when_searching_then_returns_404(self, client, unsplash):
        unsplash.search_photos.return_value = []

        response = client.get("/api/photos/search", params={"queryTerm": "zzz"})

        assert response.status_code == 404
        assert response.json() == {"message": "No images found for the given query."}

    def test_given_remote_failure_when_searching_then_returns_500_with_error(self, client, unsplash):
        unsplash.search_photos.side_effect = httpx.ConnectError("connection refused")

        response = client.get("/api/photos/search", params={"queryTerm": "car"})

        assert response.status_code == 500
        assert response.json() == {
            "message": "Failed to fetch unsplash api.",
            "error": "connection refused",
        }
