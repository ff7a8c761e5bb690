"""
Service layer for the product collection.

The collection is the only unit of mutation: clients either read the
whole set or push a complete replacement.  Store errors are logged
here and re-raised for the API layer to translate.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from product_store_api.app.core.db import ProductStore
from product_store_api.app.core.exceptions import StorageError
from product_store_api.app.schemas.product import Product


logger = logging.getLogger(__name__)


class ProductService:
    """Service class for reading and replacing the product collection."""

    @classmethod
    async def list_products(cls, store: ProductStore) -> List[Product]:
        """Return all stored products (order not guaranteed)."""
        try:
            return await store.list_all()
        except StorageError:
            logger.exception("Failed to list products")
            raise

    @classmethod
    async def replace_products(cls, store: ProductStore, products: Sequence[Product]) -> None:
        """Replace the entire collection with ``products``."""
        try:
            await store.replace_all(products)
        except StorageError:
            logger.exception("Failed to replace products")
            raise
        logger.info("Stored %d products", len(products))
