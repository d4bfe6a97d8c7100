import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from enums.product_category import ProductCategory
from exceptions import CatalogException, SavedConfigurationNotFoundException
from models.configuration import ConfigState
from services.basket import BasketService
from services.config_registry import ConfigRegistryService
from services.configuration_description import ConfigurationDescriptionService
from services.notification import NotificationService
from services.saved_configuration import SavedConfigurationService
from utils.error_handler import get_error_message, handle_service_error

logger = logging.getLogger(__name__)


class ConfiguratorService:
    """Configurator page actions: add the current state to the basket, reopen a saved state."""

    @staticmethod
    async def add_configuration_to_basket(user_id: str,
                                          product_id: str,
                                          category: ProductCategory | str,
                                          config: ConfigState,
                                          session: AsyncSession | Session,
                                          quantity: int = 1) -> str | None:
        """
        Add a configured product to the basket and tell the user how it went.

        Returns:
            Basket line id, None when the add failed (the user has already
            been shown an error toast)
        """
        try:
            basket_item_id = await BasketService.add_to_basket(user_id, product_id, session,
                                                               quantity=quantity,
                                                               configuration=config,
                                                               category=category)
        except CatalogException as e:
            await NotificationService.toast(user_id, "Error", handle_service_error(e), success=False)
            return None

        if basket_item_id is None:
            await NotificationService.toast(user_id, "Error", get_error_message("error_store_unavailable"),
                                            success=False)
            return None

        description = ConfigurationDescriptionService.generate_configuration_description(category, config)
        await NotificationService.toast(user_id, "Added to Basket",
                                        f"{description} has been added to your basket.")
        return basket_item_id

    @staticmethod
    async def load_saved_configuration(config_id: str, session: AsyncSession | Session) -> ConfigState:
        """
        Reopen a saved configuration in the configurator.

        Saved values are laid over the category defaults, so options added to
        the category after the configuration was saved start at their default.

        Raises:
            SavedConfigurationNotFoundException: No saved configuration with this id
        """
        saved = await SavedConfigurationService.get_saved_configuration_by_id(config_id, session)
        if saved is None:
            raise SavedConfigurationNotFoundException(config_id)

        saved_config = saved.config or {}
        state = ConfigRegistryService.get_default_configuration(saved.category, saved_config)
        state.update(saved_config)
        logger.debug(f"[Configurator] Loaded saved configuration {config_id} ({saved.category})")
        return state
