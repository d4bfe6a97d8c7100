"""
Basket-related exceptions.
"""

from .base import CatalogException


class BasketException(CatalogException):
    """Base exception for basket-related errors."""
    pass


class BasketItemNotFoundException(BasketException):
    """Raised when basket item not found."""

    def __init__(self, basket_item_id: str):
        super().__init__(
            f"Basket item {basket_item_id} not found",
            details={'basket_item_id': basket_item_id}
        )
        self.basket_item_id = basket_item_id


class BasketConflictException(BasketException):
    """
    Raised when an equivalent basket line was inserted concurrently.

    The store rejects a second row for the same (user, product, configuration key).
    The basket service resolves it by merging into the row that won.
    """

    def __init__(self, user_id: str, product_id: str, config_key: str):
        super().__init__(
            f"Basket line for user {user_id}, product {product_id} already exists",
            details={'user_id': user_id, 'product_id': product_id, 'config_key': config_key}
        )
        self.user_id = user_id
        self.product_id = product_id
        self.config_key = config_key


class InvalidQuantityException(BasketException):
    """Raised when a basket quantity is not a whole number, or below 1 for an add."""

    def __init__(self, quantity: int):
        super().__init__(
            f"Invalid quantity {quantity}: must be a whole number of at least 1",
            details={'quantity': quantity}
        )
        self.quantity = quantity
