"""EONET API client package."""

from eonet_client.base import BaseClient, build_url, safe_request, set_api_config
from eonet_client.categories import CategoriesClient, CategorySchema
from eonet_client.decoding import decode_batch
from eonet_client.errors import EONETError, InvalidJSON, InvalidParameter, InvalidURL, NetworkError
from eonet_client.events import EventsClient, EventSchema, EventStatus

__all__ = [
    # Base
    "BaseClient",
    "build_url",
    "safe_request",
    "set_api_config",
    "decode_batch",
    # Clients
    "CategoriesClient",
    "EventsClient",
    # Schemas
    "CategorySchema",
    "EventSchema",
    "EventStatus",
    # Errors
    "EONETError",
    "InvalidURL",
    "InvalidParameter",
    "InvalidJSON",
    "NetworkError",
]
