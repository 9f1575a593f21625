"""Order draft storage"""

import logging
import uuid
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..models.cart import Cart
from ..models.checkout import Order, OrderItem, OrderStatus, ShippingAddress

logger = logging.getLogger(__name__)


def to_minor_units(amount: Decimal) -> int:
    """Convert a currency amount to integer cents"""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class OrderDatabase:
    """In-memory order storage standing in for the order datastore"""

    def __init__(self):
        self.orders: dict[str, Order] = {}

    def create_order(
        self,
        cart: Cart,
        user_id: str,
        shipping_address: ShippingAddress,
        notes: Optional[str] = None,
    ) -> Order:
        """Draft a pending order from a cart snapshot"""
        now = datetime.now(timezone.utc)

        order_items = [
            OrderItem(
                product_id=item.product_id,
                name=item.product.name if item.product else item.product_id,
                quantity=item.quantity,
                size=item.size,
                color=item.color,
                price=item.unit_price,
            )
            for item in cart.items
        ]

        order = Order(
            order_id=f"ORD-{uuid.uuid4().hex[:8].upper()}",
            user_id=user_id,
            status=OrderStatus.PENDING,
            items=order_items,
            subtotal=cart.subtotal,
            tax=cart.tax,
            shipping=cart.shipping,
            total=cart.total,
            amount_cents=to_minor_units(cart.total),
            currency=cart.currency,
            shipping_address=shipping_address,
            notes=notes,
            created_at=now,
            updated_at=now,
        )

        self.orders[order.order_id] = order
        logger.info(f"Order {order.order_id} drafted for user {user_id}: {order.total} {order.currency}")
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return self.orders.get(order_id)

    def list_orders(self, user_id: Optional[str] = None, limit: int = 50) -> list[Order]:
        """List recent orders"""
        orders = list(self.orders.values())
        if user_id:
            orders = [o for o in orders if o.user_id == user_id]
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders[:limit]
