"""Events API client and schemas."""

from eonet_client.events.client import EVENTS_ENDPOINT, EventsClient
from eonet_client.events.schemas import EventSchema, EventStatus, decode_event

__all__ = [
    "EVENTS_ENDPOINT",
    "EventsClient",
    "EventSchema",
    "EventStatus",
    "decode_event",
]
