"""Categories API client."""

from loguru import logger

from eonet_client.base import BaseClient
from eonet_client.categories.schemas import CategorySchema, decode_category
from eonet_client.decoding import decode_batch

CATEGORIES_ENDPOINT = "/categories"


class CategoriesClient(BaseClient):
    """Client for the EONET categories endpoint."""

    async def categories(self) -> list[CategorySchema]:
        """GET /categories - decoded categories sorted by name."""
        data = await self.request(CATEGORIES_ENDPOINT)
        raw = data.get("categories")
        if not isinstance(raw, list):
            logger.warning("No categories array in response")
            raw = []

        categories = sorted(decode_batch(raw, decode_category), key=lambda c: c.name)
        logger.info("Categories: {}", len(categories))
        return categories
