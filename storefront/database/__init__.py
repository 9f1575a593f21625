# Database modules

from .products import ProductDatabase
from .carts import CartDatabase
from .orders import OrderDatabase

__all__ = [
    "ProductDatabase",
    "CartDatabase",
    "OrderDatabase",
]
