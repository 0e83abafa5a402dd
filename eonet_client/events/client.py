"""Events API client."""

import asyncio

from loguru import logger

from eonet_client.base import BaseClient, safe_request
from eonet_client.decoding import decode_batch
from eonet_client.errors import InvalidJSON
from eonet_client.events.schemas import EventSchema, EventStatus, decode_event
from settings import DEFAULT_LOOKBACK_DAYS

EVENTS_ENDPOINT = "/events"


class EventsClient(BaseClient):
    """Client for the EONET events endpoint."""

    async def events(self, days: int = DEFAULT_LOOKBACK_DAYS, closed: bool = False) -> list[EventSchema]:
        """GET /events?days={days}&status={open|closed} - one decoded batch.

        A response without an ``events`` array is a broken batch and raises
        InvalidJSON; malformed records inside the array are only dropped.
        """
        status = EventStatus.CLOSED if closed else EventStatus.OPEN
        data = await self.request(EVENTS_ENDPOINT, {"days": days, "status": status})
        raw = data.get("events")
        if not isinstance(raw, list):
            raise InvalidJSON(EVENTS_ENDPOINT)
        return decode_batch(raw, decode_event)

    async def fetch_events(self, days: int = DEFAULT_LOOKBACK_DAYS) -> list[EventSchema]:
        """Open and closed events for the last ``days`` days, open first.

        Both batches are requested concurrently. A failed batch counts as
        empty, so this never raises for network or payload errors.
        """
        open_events, closed_events = await asyncio.gather(
            safe_request(self.events(days, closed=False), []),
            safe_request(self.events(days, closed=True), []),
        )
        logger.info("Events: {} open, {} closed (last {} days)", len(open_events), len(closed_events), days)
        return open_events + closed_events
