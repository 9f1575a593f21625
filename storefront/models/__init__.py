# Storefront Models

from .product import Product, ProductSnapshot
from .cart import (
    Cart,
    LineItem,
    LineItemRecord,
    CartRecord,
    AddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
)
from .checkout import (
    Order,
    OrderItem,
    OrderStatus,
    CheckoutRequest,
    CheckoutResponse,
    ShippingAddress,
)

__all__ = [
    "Product",
    "ProductSnapshot",
    "Cart",
    "LineItem",
    "LineItemRecord",
    "CartRecord",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "CartResponse",
    "Order",
    "OrderItem",
    "OrderStatus",
    "CheckoutRequest",
    "CheckoutResponse",
    "ShippingAddress",
]
