"""
Top‑level router.

Aggregates domain routers.  The products router defines its own
``/products`` path so no prefix is added here.
"""

from fastapi import APIRouter

from .endpoints import products

router = APIRouter()

router.include_router(products.router, tags=["products"])
