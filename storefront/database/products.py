"""Storefront product lookup"""

from decimal import Decimal
from typing import Optional

from ..models.product import Product

# Sample catalog
PRODUCTS: dict[str, Product] = {
    "prod-001": Product(
        id="prod-001",
        name="Classic Cotton Tee",
        description="Heavyweight organic cotton crew neck.",
        price=Decimal("30.00"),
        image="/images/classic-tee.jpg",
        category="tops",
        sizes=["S", "M", "L", "XL"],
        colors=["black", "white", "navy"],
    ),
    "prod-002": Product(
        id="prod-002",
        name="Selvedge Denim Jacket",
        description="Raw selvedge denim with a boxy fit.",
        price=Decimal("90.00"),
        image="/images/denim-jacket.jpg",
        category="outerwear",
        sizes=["S", "M", "L"],
        colors=["indigo"],
    ),
    "prod-003": Product(
        id="prod-003",
        name="Merino Beanie",
        description="Fine-knit merino wool, one size.",
        price=Decimal("24.50"),
        image="/images/merino-beanie.jpg",
        category="accessories",
        colors=["charcoal", "olive"],
    ),
    "prod-004": Product(
        id="prod-004",
        name="Canvas Tote Bag",
        description="Waxed canvas tote with leather handles.",
        price=Decimal("45.00"),
        image="/images/canvas-tote.jpg",
        category="accessories",
    ),
    "prod-005": Product(
        id="prod-005",
        name="Leather Chelsea Boots",
        description="Full-grain leather with elastic side panels.",
        price=Decimal("180.00"),
        image="/images/chelsea-boots.jpg",
        category="footwear",
        sizes=["40", "41", "42", "43", "44"],
        colors=["brown", "black"],
        in_stock=False,
    ),
}


class ProductDatabase:
    """In-memory product lookup"""

    def __init__(self, products: Optional[dict[str, Product]] = None):
        self.products = dict(PRODUCTS if products is None else products)

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def list_products(self, category: Optional[str] = None) -> list[Product]:
        """List products, optionally in one category"""
        results = list(self.products.values())
        if category:
            results = [p for p in results if p.category == category]
        return results
