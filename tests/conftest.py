"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""

import sys
import os
from datetime import datetime, timedelta

import pytest

# Add parent directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Configure the environment before config.py is imported anywhere
os.environ.setdefault("RUNTIME_ENVIRONMENT", "TEST")
os.environ.setdefault("DB_NAME", ":memory:")
os.environ.setdefault("LOG_MASK_SECRETS", "true")

from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from models.base import Base
from models.product import Product
from services.notification import NotificationService


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def engine():
    """Create in-memory SQLite database"""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Create database session"""
    session = Session(engine)
    yield session
    session.rollback()
    session.close()


# ============================================================================
# Catalog Fixtures
# ============================================================================

@pytest.fixture
def make_product(session):
    """Factory inserting a committed product, newest last."""
    created = []

    def _make_product(product_id: str, category: str | None = "special-deals", price: float = 100.0, **kwargs):
        product = Product(
            id=product_id,
            name=kwargs.pop("name", f"Product {product_id}"),
            category=category,
            price=price,
            created_at=kwargs.pop("created_at", datetime(2024, 1, 1) + timedelta(minutes=len(created))),
            **kwargs
        )
        session.add(product)
        session.commit()
        created.append(product)
        return product

    return _make_product


@pytest.fixture
def garage_product(make_product):
    return make_product("garages-configurator", category="garages", price=0.0,
                        name="Oak Frame Garage", is_configurable=True,
                        images=["/images/garage.jpg"])


@pytest.fixture
def beam_product(make_product):
    return make_product("oak-beams-configurator", category="oak-beams", price=0.0,
                        name="Oak Beams", is_configurable=True)


@pytest.fixture
def deal_product(make_product):
    return make_product("deal-oak-bench", category="special-deals", price=200.0,
                        name="Oak Garden Bench", featured_image="/images/bench.jpg")


# ============================================================================
# Notification Fixtures
# ============================================================================

@pytest.fixture
def toasts():
    """Collect toasts sent during a test."""
    collected = []
    NotificationService.register_sink(collected.append)
    yield collected
    NotificationService.clear_sinks()
