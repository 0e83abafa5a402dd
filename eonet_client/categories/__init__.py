"""Categories API client and schemas."""

from eonet_client.categories.client import CATEGORIES_ENDPOINT, CategoriesClient
from eonet_client.categories.schemas import CategorySchema, decode_category

__all__ = [
    "CATEGORIES_ENDPOINT",
    "CategoriesClient",
    "CategorySchema",
    "decode_category",
]
