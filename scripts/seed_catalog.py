#!/usr/bin/env python3
"""
Seed Catalog Script

Creates missing tables and inserts one configurator product per configurable
category plus a few special deals. Products that already exist (same id) are
skipped, so the script can be re-run safely.

Usage:
    # Create tables and seed products
    python scripts/seed_catalog.py

    # Also store the default delivery and financial settings
    python scripts/seed_catalog.py --with-settings

    # Show what would be inserted without writing
    python scripts/seed_catalog.py --dry-run

Options:
    --with-settings: Write delivery_settings and financial_settings with their defaults
    --dry-run: Print the seed products and exit
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from db import create_db_and_tables, get_db_session, session_commit
from enums.product_category import ProductCategory
from models.product import ProductDTO
from models.settings import DeliverySettingsDTO, FinancialSettingsDTO
from repositories.product import ProductRepository
from repositories.system_settings import SystemSettingsRepository, DELIVERY_SETTINGS_KEY, FINANCIAL_SETTINGS_KEY
from services.config_registry import ConfigRegistryService
from utils.logging_config import setup_logging

SPECIAL_DEALS = [
    ProductDTO(id="deal-oak-bench", name="Oak Garden Bench", price=450.0,
               description="Solid green oak bench, ready to assemble.",
               images=["/images/deals/oak-bench.jpg"], tags=["garden", "furniture"]),
    ProductDTO(id="deal-log-store", name="Oak Log Store", price=320.0,
               description="Two bay log store with a shingled roof.",
               images=["/images/deals/log-store.jpg"], tags=["garden", "storage"]),
]


def build_seed_products() -> list[ProductDTO]:
    products = []
    for category in ProductCategory:
        if category == ProductCategory.SPECIAL_DEALS:
            continue
        category_config = ConfigRegistryService.get_category_config(category)
        products.append(ProductDTO(
            id=f"{category.value}-configurator",
            name=category_config.title.replace("Configure Your ", ""),
            description=category_config.description,
            category=category.value,
            price=0.0,
            images=[category_config.image] if category_config.image else [],
            is_configurable=True,
            tags=["configurable"],
        ))
    for deal in SPECIAL_DEALS:
        products.append(deal.model_copy(update={"category": ProductCategory.SPECIAL_DEALS.value}))
    return products


async def seed(with_settings: bool = False) -> int:
    """
    Insert seed products that don't exist yet.

    Returns:
        Number of products inserted
    """
    await create_db_and_tables()

    inserted = 0
    async with get_db_session() as session:
        for product in build_seed_products():
            if await ProductRepository.get_by_id(product.id, session) is not None:
                print(f"⏭️  {product.id} already exists")
                continue
            await ProductRepository.create(product, session)
            inserted += 1
            print(f"✅ {product.id} ({product.category})")

        if with_settings:
            await SystemSettingsRepository.set_model(DELIVERY_SETTINGS_KEY, DeliverySettingsDTO(), session)
            await SystemSettingsRepository.set_model(FINANCIAL_SETTINGS_KEY, FinancialSettingsDTO(), session)
            print("✅ Default delivery and financial settings stored")

        await session_commit(session)
    return inserted


def main():
    parser = argparse.ArgumentParser(description="Seed the oak frame catalog")
    parser.add_argument("--with-settings", action="store_true",
                        help="Store default delivery and financial settings")
    parser.add_argument("--dry-run", action="store_true",
                        help="Print the seed products without writing")
    args = parser.parse_args()

    if args.dry_run:
        for product in build_seed_products():
            print(f"{product.id:32} {product.category:15} £{product.price:,.2f}")
        return

    setup_logging()
    inserted = asyncio.run(seed(with_settings=args.with_settings))
    print(f"\n📊 Inserted {inserted} products")


if __name__ == "__main__":
    main()
