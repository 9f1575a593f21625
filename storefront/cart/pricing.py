"""Cart pricing policy and totals"""

from decimal import Decimal
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from ..core.config import Settings, get_settings
from ..models.cart import ZERO, LineItem


class PricingPolicy(BaseModel):
    """Tax and shipping constants applied to every cart"""
    tax_rate: Decimal = Field(default=Decimal("0.10"), ge=0)
    free_shipping_threshold: Decimal = Field(default=Decimal("100.00"), ge=0)
    shipping_flat_fee: Decimal = Field(default=Decimal("10.00"), ge=0)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "PricingPolicy":
        settings = settings or get_settings()
        return cls(
            tax_rate=settings.tax_rate,
            free_shipping_threshold=settings.free_shipping_threshold,
            shipping_flat_fee=settings.shipping_flat_fee,
        )

    def shipping_for(self, subtotal: Decimal) -> Decimal:
        """Flat fee unless the subtotal is strictly above the threshold"""
        if subtotal > self.free_shipping_threshold:
            return ZERO
        return self.shipping_flat_fee


class CartTotals(BaseModel):
    """Derived monetary fields of a cart"""
    subtotal: Decimal = ZERO
    tax: Decimal = ZERO
    shipping: Decimal = ZERO
    total: Decimal = ZERO


def price_items(items: Iterable[LineItem], policy: PricingPolicy) -> CartTotals:
    """Compute subtotal, tax, shipping and total for a list of line items"""
    subtotal = sum((item.line_total for item in items), ZERO)
    tax = subtotal * policy.tax_rate
    shipping = policy.shipping_for(subtotal)
    return CartTotals(
        subtotal=subtotal,
        tax=tax,
        shipping=shipping,
        total=subtotal + tax + shipping,
    )
