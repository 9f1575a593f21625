# Cart engine

from .engine import CartEngine
from .pricing import CartTotals, PricingPolicy, price_items

__all__ = ["CartEngine", "CartTotals", "PricingPolicy", "price_items"]
