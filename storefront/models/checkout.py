"""Checkout models for the storefront"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class ShippingAddress(BaseModel):
    """Shipping address for order"""
    first_name: str
    last_name: str
    address: str
    apartment: Optional[str] = None
    city: str
    state: str
    postal_code: str
    country: str = "US"
    phone: Optional[str] = None


class CheckoutRequest(BaseModel):
    """Request to checkout"""
    cart_id: str
    user_id: str
    shipping_address: ShippingAddress
    notes: Optional[str] = None


class OrderItem(BaseModel):
    """Item in an order"""
    product_id: str
    name: str
    quantity: int
    size: Optional[str] = None
    color: Optional[str] = None
    price: Decimal


class Order(BaseModel):
    """Order drafted from a cart, awaiting payment"""
    order_id: str
    user_id: str
    status: OrderStatus
    items: list[OrderItem]
    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal
    amount_cents: int
    currency: str = "USD"
    shipping_address: ShippingAddress
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CheckoutResponse(BaseModel):
    """Response from checkout"""
    success: bool
    order: Optional[Order] = None
    error_message: Optional[str] = None
