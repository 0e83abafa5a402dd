"""Services package - service class exports."""

from app.services.catalog import CatalogService

__all__ = [
    "CatalogService",
]
