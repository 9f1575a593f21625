"""Cart models for the storefront"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from .product import ProductSnapshot

ZERO = Decimal("0")


class LineItem(BaseModel):
    """One slot in a shopping cart"""
    product_id: str
    size: Optional[str] = None
    color: Optional[str] = None
    quantity: int = Field(ge=1)
    unit_price: Decimal = Field(ge=0)
    product: Optional[ProductSnapshot] = None

    @property
    def slot(self) -> tuple[str, Optional[str], Optional[str]]:
        return (self.product_id, self.size, self.color)

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class Cart(BaseModel):
    """Shopping cart snapshot"""
    items: list[LineItem] = []
    subtotal: Decimal = ZERO
    tax: Decimal = ZERO
    shipping: Decimal = ZERO
    total: Decimal = ZERO
    count: int = 0
    currency: str = "USD"


class LineItemRecord(BaseModel):
    """Persisted form of a line item.

    Quantity is left unconstrained so that a damaged record can still be
    read and repaired on load.
    """
    product_id: str
    quantity: int
    size: Optional[str] = None
    color: Optional[str] = None
    unit_price: Decimal = Field(ge=0)
    product: Optional[ProductSnapshot] = None


class CartRecord(BaseModel):
    """Persisted cart: items plus the totals computed when it was saved"""
    items: list[LineItemRecord] = []
    subtotal: Decimal = ZERO
    tax: Decimal = ZERO
    shipping: Decimal = ZERO
    total: Decimal = ZERO


class AddToCartRequest(BaseModel):
    """Request to add item to cart"""
    product_id: str
    quantity: int = 1
    size: Optional[str] = None
    color: Optional[str] = None


class UpdateCartItemRequest(BaseModel):
    """Request to update cart item quantity"""
    quantity: int
    size: Optional[str] = None
    color: Optional[str] = None


class CartResponse(BaseModel):
    """Cart API response"""
    cart_id: str
    cart: Cart
    message: Optional[str] = None
