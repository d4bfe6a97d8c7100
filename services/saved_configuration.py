import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_commit, session_rollback
from enums.product_category import ProductCategory
from models.configuration import ConfigState
from models.saved_configuration import SavedConfigurationDTO
from repositories.saved_configuration import SavedConfigurationRepository
from repositories.system_settings import SystemSettingsRepository
from services.pricing import PricingService

logger = logging.getLogger(__name__)

DEFAULT_CONFIGURATION_NAME = "My Configuration"


class SavedConfigurationService:

    @staticmethod
    async def save_configuration(user_id: str,
                                 category: ProductCategory | str,
                                 config: ConfigState,
                                 session: AsyncSession | Session,
                                 name: str = DEFAULT_CONFIGURATION_NAME) -> str | None:
        """
        Save a configurator state under a name, priced with the current schedule.

        Returns:
            Id of the saved configuration, None if the store failed
        """
        product_category = ProductCategory.from_value(category)
        category_value = product_category.value if product_category else str(category)

        try:
            schedule = await SystemSettingsRepository.get_price_schedule(session)
            price = PricingService.calculate_product_price(category, config, schedule)
            saved_configuration = SavedConfigurationDTO(
                user_id=user_id,
                category=category_value,
                config=dict(config or {}),
                price=price,
                name=name or DEFAULT_CONFIGURATION_NAME,
            )
            config_id = await SavedConfigurationRepository.create(saved_configuration, session)
            await session_commit(session)
            logger.info(f"[SavedConfig] Saved {category_value} configuration {config_id} for user {user_id}")
            return config_id
        except SQLAlchemyError as e:
            await session_rollback(session)
            logger.error(f"[SavedConfig] Failed to save {category_value} configuration for user {user_id}: {e}")
            return None

    @staticmethod
    async def get_saved_configurations(user_id: str, session: AsyncSession | Session) -> list[SavedConfigurationDTO]:
        try:
            return await SavedConfigurationRepository.get_by_user_id(user_id, session)
        except SQLAlchemyError as e:
            await session_rollback(session)
            logger.error(f"[SavedConfig] Failed to load saved configurations for user {user_id}: {e}")
            return []

    @staticmethod
    async def get_saved_configuration_by_id(config_id: str,
                                            session: AsyncSession | Session) -> SavedConfigurationDTO | None:
        try:
            return await SavedConfigurationRepository.get_by_id(config_id, session)
        except SQLAlchemyError as e:
            await session_rollback(session)
            logger.error(f"[SavedConfig] Failed to load saved configuration {config_id}: {e}")
            return None

    @staticmethod
    async def delete_saved_configuration(config_id: str, session: AsyncSession | Session) -> bool:
        try:
            await SavedConfigurationRepository.delete(config_id, session)
            await session_commit(session)
            return True
        except SQLAlchemyError as e:
            await session_rollback(session)
            logger.error(f"[SavedConfig] Failed to delete saved configuration {config_id}: {e}")
            return False
