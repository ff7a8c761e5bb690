"""
Product collection endpoints.

``GET /products`` returns the whole collection and ``POST /products``
replaces it.  Storage failures propagate as ``StorageError`` and are
turned into responses by the handlers registered in ``main``.
"""

from typing import List

from fastapi import APIRouter, Depends

from product_store_api.app.core.db import ProductStore, get_store
from product_store_api.app.schemas.product import Product
from product_store_api.app.services.product_service import ProductService

router = APIRouter()

PRODUCTS_UPDATED = "Products updated"


@router.get("/products", response_model=List[Product], summary="List all products")
async def list_products(store: ProductStore = Depends(get_store)) -> List[Product]:
    """Return every stored product.  Order is not guaranteed."""
    return await ProductService.list_products(store)


@router.post("/products", response_model=str, summary="Replace all products")
async def replace_products(
    products: List[Product],
    store: ProductStore = Depends(get_store),
) -> str:
    """Replace the whole collection with the posted array."""
    await ProductService.replace_products(store, products)
    return PRODUCTS_UPDATED
