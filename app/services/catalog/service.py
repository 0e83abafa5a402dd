"""Catalog service - cached categories and the event feed."""

from collections.abc import Callable, Iterable

from loguru import logger

from app.services.catalog.cache import ReplayCache
from app.services.catalog.filters import filtered_events
from eonet_client import safe_request
from eonet_client.categories import CategoriesClient, CategorySchema
from eonet_client.events import EventsClient, EventSchema
from settings import DEFAULT_LOOKBACK_DAYS


class CatalogService:
    """Categories fetched once per process, events fetched on demand."""

    def __init__(
        self,
        categories_client: Callable[[], CategoriesClient] = CategoriesClient,
        events_client: Callable[[], EventsClient] = EventsClient,
    ):
        self._categories_client = categories_client
        self._events_client = events_client
        self._categories = ReplayCache(self._load_categories, initial=[], name="categories")
        logger.debug("CatalogService initialized")

    async def _fetch_categories(self) -> list[CategorySchema]:
        async with self._categories_client() as client:
            return await client.categories()

    async def _load_categories(self) -> list[CategorySchema]:
        # a failed fetch is cached as [] as well; it is not retried
        return await safe_request(self._fetch_categories(), [])

    async def categories(self) -> list[CategorySchema]:
        """Categories sorted by name. Only the first call hits the API."""
        return await self._categories.get()

    def subscribe_categories(self, callback: Callable[[list[CategorySchema]], None]) -> Callable[[], None]:
        """Get the current categories now and the fetched ones once they arrive."""
        return self._categories.subscribe(callback)

    async def events(self, days: int = DEFAULT_LOOKBACK_DAYS) -> list[EventSchema]:
        """Open then closed events of the last ``days`` days. Not cached."""
        async with self._events_client() as client:
            return await client.fetch_events(days)

    @staticmethod
    def filtered_events(events: Iterable[EventSchema], category: CategorySchema) -> list[EventSchema]:
        return filtered_events(events, category)

    async def attach_events(self, events: list[EventSchema]) -> list[CategorySchema]:
        """Append each category's not yet recorded events to ``category.events``."""
        categories = await self.categories()
        added = 0
        for category in categories:
            new_events = filtered_events(events, category)
            category.events.extend(new_events)
            added += len(new_events)
        logger.info("Attached {} events to {} categories", added, len(categories))
        return categories
