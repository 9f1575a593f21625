"""Product models for the storefront"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class Product(BaseModel):
    """Product offered in the storefront"""
    id: str
    name: str = ""
    price: Decimal = Field(ge=0)
    description: Optional[str] = None
    image: Optional[str] = None
    category: Optional[str] = None
    sizes: list[str] = []
    colors: list[str] = []
    in_stock: bool = True

    def snapshot(self) -> "ProductSnapshot":
        """Display data copied into a cart line"""
        return ProductSnapshot(name=self.name, image=self.image)


class ProductSnapshot(BaseModel):
    """Denormalized product display data kept on a line item"""
    name: str = ""
    image: Optional[str] = None
