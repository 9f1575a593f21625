"""Cart domain errors"""


class CartError(Exception):
    """Base class for cart engine errors"""


class InvalidQuantity(CartError, ValueError):
    """Quantity is not a positive integer where one is required"""

    def __init__(self, quantity):
        self.quantity = quantity
        super().__init__(f"Quantity must be a positive integer, got {quantity!r}")
