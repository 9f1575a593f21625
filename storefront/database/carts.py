"""Session-keyed cart storage"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from ..cart.engine import CartEngine
from ..cart.pricing import PricingPolicy
from ..models.cart import CartRecord

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class StoredCart:
    """A serialized cart record and when it was last written"""
    payload: str
    created_at: datetime
    updated_at: datetime


class CartDatabase:
    """In-memory cart storage holding JSON cart records per cart id.

    Carts are rebuilt from their records on every load so derived totals
    always come from the items, never from what was written.
    """

    def __init__(self, policy: Optional[PricingPolicy] = None, currency: str = "USD"):
        self.policy = policy or PricingPolicy()
        self.currency = currency
        self.carts: dict[str, StoredCart] = {}

    def create_cart(self) -> str:
        """Create a new empty cart and return its id"""
        now = _utcnow()
        cart_id = str(uuid.uuid4())
        self.carts[cart_id] = StoredCart(
            payload=CartRecord().model_dump_json(),
            created_at=now,
            updated_at=now,
        )
        logger.info(f"Created cart {cart_id}")
        return cart_id

    def exists(self, cart_id: str) -> bool:
        return cart_id in self.carts

    def load(self, cart_id: str) -> Optional[CartEngine]:
        """Rebuild the engine for a cart, or None if the cart is unknown"""
        stored = self.carts.get(cart_id)
        if stored is None:
            return None
        record = CartRecord.model_validate_json(stored.payload)
        return CartEngine.from_record(record, policy=self.policy, currency=self.currency)

    def save(self, cart_id: str, engine: CartEngine) -> None:
        """Write the engine's current record"""
        now = _utcnow()
        stored = self.carts.get(cart_id)
        created_at = stored.created_at if stored else now
        self.carts[cart_id] = StoredCart(
            payload=engine.to_record().model_dump_json(),
            created_at=created_at,
            updated_at=now,
        )

    def delete_cart(self, cart_id: str) -> bool:
        """Delete a cart"""
        if cart_id in self.carts:
            del self.carts[cart_id]
            logger.info(f"Deleted cart {cart_id}")
            return True
        return False

    def cleanup_stale_carts(self, max_age_hours: int = 24) -> int:
        """Remove carts not written for longer than max_age_hours"""
        if max_age_hours < 1:
            raise ValueError(f"max_age_hours must be at least 1, got {max_age_hours}")
        now = _utcnow()
        stale = [
            cart_id for cart_id, stored in self.carts.items()
            if (now - stored.updated_at).total_seconds() > max_age_hours * 3600
        ]
        for cart_id in stale:
            del self.carts[cart_id]
        if stale:
            logger.info(f"Removed {len(stale)} stale carts")
        return len(stale)
