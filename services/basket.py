import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_commit, session_rollback
from enums.product_category import ProductCategory
from exceptions.basket import BasketConflictException, InvalidQuantityException
from exceptions.configuration import InvalidConfigurationException
from exceptions.product import ProductNotFoundException
from models.basket_item import BasketItemDTO
from models.configuration import ConfigState
from models.price_schedule import PriceSchedule
from repositories.basket import BasketRepository
from repositories.product import ProductRepository
from repositories.system_settings import SystemSettingsRepository
from services.config_registry import ConfigRegistryService
from services.configuration_description import ConfigurationDescriptionService
from services.pricing import PricingService
from utils.config_normalizer import configs_equal, configuration_key

logger = logging.getLogger(__name__)


class BasketService:
    """
    Basket consolidation.

    One line per (user, product, equivalent configuration). Adding an
    equivalent configuration again raises the quantity of the existing line
    and keeps its price snapshot.

    Caller errors (unknown product, bad quantity, invalid configuration)
    raise. Store failures are logged, rolled back and reported as
    None / False / [] so callers can show a generic failure.
    """

    @staticmethod
    async def add_to_basket(user_id: str,
                            product_id: str,
                            session: AsyncSession | Session,
                            quantity: int = 1,
                            configuration: ConfigState | None = None,
                            category: ProductCategory | str | None = None,
                            schedule: PriceSchedule | None = None) -> str | None:
        """
        Add a product, optionally configured, to a user's basket.

        Configured adds (configuration and category given) are validated,
        priced and named from the configuration. Plain adds take the catalog
        price and product name.

        Args:
            user_id: Basket owner
            product_id: Catalog product id
            session: Database session
            quantity: Units to add, at least 1
            configuration: Configurator state, None for a plain product
            category: Category the configuration belongs to
            schedule: Unit price tables, loaded from system settings when None

        Returns:
            Id of the created or merged basket line, None if the store failed

        Raises:
            InvalidQuantityException: quantity below 1
            ProductNotFoundException: product id does not resolve or the product
                is no longer active
            InvalidConfigurationException: configuration rejected by its
                category's option set, category differs from the product's,
                or priced at 0
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise InvalidQuantityException(quantity)

        try:
            product = await ProductRepository.get_by_id(product_id, session)
            # Withdrawn products are treated as gone
            if product is None or product.is_active is False:
                raise ProductNotFoundException(product_id)

            product_category = ProductCategory.from_value(category)
            category_value = product_category.value if product_category else category
            if category and category_value != product.category:
                raise InvalidConfigurationException(category_value,
                                                    f"does not match the product's category {product.category}")
            price = product.price or 0.0
            name = product.name
            if configuration is not None and category:
                configuration = ConfigRegistryService.validate_configuration(category, configuration)
                if schedule is None:
                    schedule = await SystemSettingsRepository.get_price_schedule(session)
                price = PricingService.calculate_product_price(category, configuration, schedule,
                                                               catalog_price=product.price or 0.0)
                if price <= 0:
                    raise InvalidConfigurationException(category_value, "does not produce a positive price")
                name = ConfigurationDescriptionService.generate_configuration_description(category, configuration) \
                    or product.name

            config_key = configuration_key(configuration)

            existing = None
            for candidate in await BasketRepository.get_candidates(user_id, product_id, session):
                if configs_equal(candidate.configuration, configuration):
                    existing = candidate
                    break

            if existing is not None:
                if await BasketRepository.increment_quantity(existing.id, quantity, session):
                    await session_commit(session)
                    logger.info(f"[Basket] Merged {quantity} x {product_id} into line {existing.id} for user {user_id}")
                    return existing.id
                logger.info(f"[Basket] Line {existing.id} was removed before the merge, adding a new line")

            basket_item = BasketItemDTO(
                user_id=user_id,
                product_id=product_id,
                quantity=quantity,
                price=price,
                configuration=configuration,
                category=category_value,
                name=name,
                image=product.primary_image,
                config_key=config_key,
            )
            try:
                basket_item_id = await BasketRepository.create(basket_item, session)
            except BasketConflictException as e:
                # An equivalent line was committed between our scan and insert
                winner = await BasketRepository.get_by_config_key(e.user_id, e.product_id, e.config_key, session)
                if winner is None:
                    raise
                if not await BasketRepository.increment_quantity(winner.id, quantity, session):
                    raise
                basket_item_id = winner.id
                logger.info(f"[Basket] Concurrent add for user {user_id}, merged into line {winner.id}")

            await session_commit(session)
            logger.info(f"[Basket] Added {quantity} x {product_id} as line {basket_item_id} for user {user_id}")
            return basket_item_id
        except (SQLAlchemyError, BasketConflictException) as e:
            await session_rollback(session)
            logger.error(f"[Basket] Failed to add {product_id} for user {user_id}: {e}")
            return None

    @staticmethod
    async def update_basket_item_quantity(basket_item_id: str, quantity: int,
                                          session: AsyncSession | Session) -> bool:
        """
        Set a line's quantity. A quantity of 0 or less removes the line.

        Returns:
            False if the line doesn't exist or the store failed

        Raises:
            InvalidQuantityException: quantity is not a whole number
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidQuantityException(quantity)
        if quantity <= 0:
            return await BasketService.remove_from_basket(basket_item_id, session)

        try:
            updated = await BasketRepository.update_quantity(basket_item_id, quantity, session)
            if not updated:
                logger.info(f"[Basket] Quantity update for missing line {basket_item_id}")
                await session_rollback(session)
                return False
            await session_commit(session)
            return True
        except SQLAlchemyError as e:
            await session_rollback(session)
            logger.error(f"[Basket] Failed to update quantity of line {basket_item_id}: {e}")
            return False

    @staticmethod
    async def remove_from_basket(basket_item_id: str, session: AsyncSession | Session) -> bool:
        """Delete a line. Removing a line that is already gone succeeds."""
        try:
            await BasketRepository.delete(basket_item_id, session)
            await session_commit(session)
            return True
        except SQLAlchemyError as e:
            await session_rollback(session)
            logger.error(f"[Basket] Failed to remove line {basket_item_id}: {e}")
            return False

    @staticmethod
    async def get_basket_items(user_id: str, session: AsyncSession | Session) -> list[BasketItemDTO]:
        try:
            return await BasketRepository.get_by_user_id(user_id, session)
        except SQLAlchemyError as e:
            await session_rollback(session)
            logger.error(f"[Basket] Failed to load basket for user {user_id}: {e}")
            return []

    @staticmethod
    async def clear_basket(user_id: str, session: AsyncSession | Session) -> bool:
        """
        Remove every line of a user's basket, one line at a time.

        Each removal is committed on its own, a failure part way leaves the
        lines removed so far removed.

        Returns:
            True if every removal succeeded (or the basket was already empty)
        """
        try:
            basket_items = await BasketRepository.get_by_user_id(user_id, session)
        except SQLAlchemyError as e:
            await session_rollback(session)
            logger.error(f"[Basket] Failed to load basket for clearing, user {user_id}: {e}")
            return False

        all_removed = True
        for basket_item in basket_items:
            removed = await BasketService.remove_from_basket(basket_item.id, session)
            all_removed = all_removed and removed

        if not all_removed:
            logger.warning(f"[Basket] Basket of user {user_id} only partially cleared")
        return all_removed

    @staticmethod
    async def get_basket_total(user_id: str, session: AsyncSession | Session) -> float:
        """Sum of price snapshot × quantity over the user's lines."""
        basket_items = await BasketService.get_basket_items(user_id, session)
        return sum(basket_item.line_total for basket_item in basket_items)
