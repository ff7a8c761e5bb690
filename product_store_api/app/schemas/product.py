"""
Pydantic model for a product.

A product is a name, a price and a free-form quantity label such as
``"12 boxes"``.  Types are checked strictly so that a numeric string
is not silently accepted as a price and a number is not accepted as a
quantity.  Prices must be finite: ``NaN`` and ``Infinity`` cannot be
stored or returned as JSON numbers.
"""

from pydantic import BaseModel, Field


class Product(BaseModel):
    """A single entry of the product collection."""

    name: str = Field(..., examples=["Widget"])
    price: float = Field(..., allow_inf_nan=False, examples=[9.99])
    quantity: str = Field(..., examples=["10 units"])

    model_config = {
        "strict": True,
    }
