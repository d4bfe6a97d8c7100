"""
Product-related exceptions.
"""

from .base import CatalogException


class ProductException(CatalogException):
    """Base exception for product-related errors."""
    pass


class ProductNotFoundException(ProductException):
    """Raised when a product id does not resolve in the catalog."""

    def __init__(self, product_id: str):
        super().__init__(
            f"Product with ID {product_id} not found",
            details={'product_id': product_id}
        )
        self.product_id = product_id
