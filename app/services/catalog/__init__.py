"""Catalog service - categories, events and their join."""

from app.services.catalog.cache import ReplayCache
from app.services.catalog.filters import filtered_events
from app.services.catalog.service import CatalogService

__all__ = [
    "CatalogService",
    "ReplayCache",
    "filtered_events",
]
