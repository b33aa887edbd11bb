# picstash/services/unsplash_service.py
from typing import List, Optional

import httpx
from loguru import logger

from picstash.config import Settings
from picstash.core.exceptions import InternalError, NotFoundError, ValidationError
from picstash.core.validation import validate_query_term
from picstash.schemas.photo import RemotePhoto


class UnsplashClient:
    """Thin async client for the Unsplash API"""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.client = httpx.AsyncClient(
            base_url=settings.unsplash_base_url,
            headers={"Authorization": f"Client-ID {settings.unsplash_access_key}"},
            transport=transport
        )

    async def search_photos(self, query: str) -> List[dict]:
        """GET /search/photos and return the raw result records"""
        response = await self.client.get("/search/photos", params={"query": query})
        response.raise_for_status()
        return response.json()["results"]

    async def aclose(self) -> None:
        await self.client.aclose()


async def search_images(client: UnsplashClient, query_term: Optional[str]) -> List[RemotePhoto]:
    """Search Unsplash and keep only the fields we store"""

    invalid = validate_query_term(query_term)
    if invalid is not None:
        raise ValidationError(invalid["message"])

    try:
        results = await client.search_photos(query_term)
        photos = [
            RemotePhoto(
                image_url=result["urls"]["regular"],
                alt_description=result.get("alt_description"),
                description=result.get("description")
            ) for result in results
        ]
    except (httpx.HTTPError, KeyError, TypeError, AttributeError, ValueError) as e:
        logger.error(f"Unsplash search failed for '{query_term}': {e}")
        raise InternalError("Failed to fetch unsplash api.", str(e))

    if not photos:
        raise NotFoundError("No images found for the given query.")

    return photos
