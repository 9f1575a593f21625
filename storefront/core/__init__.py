# Core modules

from .config import Settings, get_settings
from .exceptions import CartError, InvalidQuantity

__all__ = ["Settings", "get_settings", "CartError", "InvalidQuantity"]
