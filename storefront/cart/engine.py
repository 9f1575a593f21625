"""
Cart Engine

Owns one shopping cart and recomputes its derived totals after every
mutation. Line items are keyed by (product_id, size, color); the unit
price is captured when a slot is first created and never refreshed.

The engine performs no I/O. Persistence is handled by the caller through
to_record() / from_record().
"""

import logging
from typing import Any, Mapping, Optional, Union

from ..core.exceptions import InvalidQuantity
from ..models.cart import Cart, CartRecord, LineItem, LineItemRecord
from ..models.product import Product
from .pricing import CartTotals, PricingPolicy, price_items

logger = logging.getLogger(__name__)

Slot = tuple[str, Optional[str], Optional[str]]


def _require_int(quantity: Any) -> int:
    # bool is an int subclass but never a meaningful quantity
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidQuantity(quantity)
    return quantity


class CartEngine:
    """Shopping cart state with explicit mutate-then-recompute operations"""

    def __init__(self, policy: Optional[PricingPolicy] = None, currency: str = "USD"):
        self.policy = policy or PricingPolicy()
        self.currency = currency
        self._items: list[LineItem] = []
        self._totals = CartTotals()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add_item(
        self,
        product: Union[Product, Mapping[str, Any]],
        quantity: int = 1,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Cart:
        """Add quantity units of a product, merging into an existing slot"""
        if _require_int(quantity) < 1:
            raise InvalidQuantity(quantity)
        if not isinstance(product, Product):
            product = Product.model_validate(product)

        existing = self._find((product.id, size, color))
        if existing is not None:
            existing.quantity += quantity
        else:
            self._items.append(
                LineItem(
                    product_id=product.id,
                    size=size,
                    color=color,
                    quantity=quantity,
                    unit_price=product.price,
                    product=product.snapshot(),
                )
            )

        self._recalculate_totals()
        return self.cart

    def remove_item(
        self,
        product_id: str,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Cart:
        """Remove a slot; removing a slot that is not there does nothing"""
        slot = (product_id, size, color)
        self._items = [item for item in self._items if item.slot != slot]
        self._recalculate_totals()
        return self.cart

    def update_quantity(
        self,
        product_id: str,
        quantity: int,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Cart:
        """Set the quantity of an existing slot, never below 1"""
        quantity = _require_int(quantity)
        item = self._find((product_id, size, color))
        if item is not None:
            item.quantity = max(1, quantity)

        self._recalculate_totals()
        return self.cart

    def clear_cart(self) -> Cart:
        """Drop every item and reset totals to zero"""
        self._items = []
        self._totals = CartTotals()
        return self.cart

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def cart_count(self) -> int:
        """Total units across all items"""
        return sum(item.quantity for item in self._items)

    def cart_total(self):
        return self._totals.total

    @property
    def cart(self) -> Cart:
        """Detached snapshot of the current cart"""
        return Cart(
            items=[item.model_copy(deep=True) for item in self._items],
            subtotal=self._totals.subtotal,
            tax=self._totals.tax,
            shipping=self._totals.shipping,
            total=self._totals.total,
            count=self.cart_count(),
            currency=self.currency,
        )

    def is_empty(self) -> bool:
        return not self._items

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def to_record(self) -> CartRecord:
        return CartRecord(
            items=[
                LineItemRecord(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    size=item.size,
                    color=item.color,
                    unit_price=item.unit_price,
                    product=item.product.model_copy() if item.product else None,
                )
                for item in self._items
            ],
            **self._totals.model_dump(),
        )

    @classmethod
    def from_record(
        cls,
        record: Union[CartRecord, Mapping[str, Any]],
        policy: Optional[PricingPolicy] = None,
        currency: str = "USD",
    ) -> "CartEngine":
        """Rebuild an engine from a persisted record.

        Stored totals are never trusted: they are recomputed from the items.
        The one exception is an empty record with all-zero totals, which is
        a new or cleared cart. Quantities below 1 are clamped and duplicate
        slots are merged into the first occurrence.
        """
        if not isinstance(record, CartRecord):
            record = CartRecord.model_validate(record)

        engine = cls(policy=policy, currency=currency)
        for stored in record.items:
            quantity = stored.quantity
            if quantity < 1:
                logger.warning(
                    f"Clamping stored quantity {quantity} to 1 for product {stored.product_id}"
                )
                quantity = 1

            slot = (stored.product_id, stored.size, stored.color)
            existing = engine._find(slot)
            if existing is not None:
                logger.warning(f"Merging duplicate stored slot {slot}")
                existing.quantity += quantity
                continue

            engine._items.append(
                LineItem(
                    product_id=stored.product_id,
                    size=stored.size,
                    color=stored.color,
                    quantity=quantity,
                    unit_price=stored.unit_price,
                    product=stored.product,
                )
            )

        stored_totals = CartTotals(
            subtotal=record.subtotal,
            tax=record.tax,
            shipping=record.shipping,
            total=record.total,
        )
        if engine.is_empty() and stored_totals == CartTotals():
            # new or cleared cart
            return engine

        engine._recalculate_totals()
        if stored_totals != engine._totals:
            logger.warning(
                f"Stored cart totals were stale (total {record.total} -> {engine._totals.total}); recomputed"
            )
        return engine

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _find(self, slot: Slot) -> Optional[LineItem]:
        return next((item for item in self._items if item.slot == slot), None)

    def _recalculate_totals(self) -> None:
        """Recalculate cart totals"""
        self._totals = price_items(self._items, self.policy)
