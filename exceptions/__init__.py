"""
Custom exceptions for the oak frame catalog.

This module provides a hierarchy of custom exceptions for consistent error handling
throughout the application.

Exception Hierarchy:
--------------------
CatalogException (base)
├── ProductException
│   └── ProductNotFoundException
├── BasketException
│   ├── BasketItemNotFoundException
│   ├── BasketConflictException
│   └── InvalidQuantityException
└── ConfigurationException
    ├── InvalidConfigurationException
    └── SavedConfigurationNotFoundException

Store failures (SQLAlchemyError) are not wrapped: basket operations catch them,
log them and return None/False so callers can tell them apart from the
caller errors above.

Usage:
------
Services raise specific exceptions:
    raise ProductNotFoundException(product_id="garage1")

Callers catch and display user-friendly messages:
    try:
        item_id = await BasketService.add_to_basket(user_id, product_id, session)
    except CatalogException as e:
        NotificationService.toast(user_id, "Error", handle_service_error(e), success=False)
"""

from .base import CatalogException
from .basket import BasketException, BasketItemNotFoundException, BasketConflictException, InvalidQuantityException
from .configuration import ConfigurationException, InvalidConfigurationException, SavedConfigurationNotFoundException
from .product import ProductException, ProductNotFoundException

__all__ = [
    # Base
    'CatalogException',

    # Basket
    'BasketException',
    'BasketItemNotFoundException',
    'BasketConflictException',
    'InvalidQuantityException',

    # Configuration
    'ConfigurationException',
    'InvalidConfigurationException',
    'SavedConfigurationNotFoundException',

    # Product
    'ProductException',
    'ProductNotFoundException',
]
