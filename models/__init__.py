"""
Models Package

This file ensures all SQLAlchemy models are imported and registered,
which is required for the foreign key from basket to products to resolve.
"""

from models.base import Base
from models.product import Product
from models.basket_item import BasketItem
from models.saved_configuration import SavedConfiguration
from models.system_settings import SystemSettings

__all__ = [
    'Base',
    'Product',
    'BasketItem',
    'SavedConfiguration',
    'SystemSettings',
]
