"""
Error Handler Utility for catalog callers

Provides centralized error handling for storefront-facing code with:
- Customer-facing error messages
- Consistent user experience
- Automatic exception to message mapping
- Logging for debugging

Usage:
    from utils.error_handler import handle_service_error

    try:
        item_id = await BasketService.add_to_basket(user_id, product_id, session)
    except CatalogException as e:
        NotificationService.toast(user_id, "Error", handle_service_error(e), success=False)
"""

import logging

from exceptions import (
    CatalogException,
    ProductNotFoundException,
    BasketItemNotFoundException,
    BasketConflictException,
    InvalidQuantityException,
    InvalidConfigurationException,
    SavedConfigurationNotFoundException,
)

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    "error_product_not_found": "This product is no longer available.",
    "error_basket_item_not_found": "This item is no longer in your basket.",
    "error_basket_conflict": "Your basket changed while adding this item, please try again.",
    "error_invalid_quantity": "Please choose a quantity of at least 1 (you entered {quantity}).",
    "error_invalid_configuration": "This configuration can't be added to your basket: {reason}.",
    "error_saved_configuration_not_found": "This saved configuration could not be found.",
    "error_store_unavailable": "Failed to add item to basket. Please try again.",
    "error_unexpected": "Something went wrong. Please try again.",
}


def get_error_message(key: str) -> str:
    return ERROR_MESSAGES.get(key, ERROR_MESSAGES["error_unexpected"])


def handle_service_error(exception: CatalogException) -> str:
    """
    Convert service exception to a user-friendly error message.

    Args:
        exception: The custom exception raised by a service

    Returns:
        Error message string

    Example:
        try:
            await BasketService.add_to_basket(user_id, "missing", session)
        except ProductNotFoundException as e:
            handle_service_error(e)  # "This product is no longer available."
    """
    logger.warning(f"Service error handled: {type(exception).__name__} - {str(exception)}")

    error_mapping = {
        ProductNotFoundException: "error_product_not_found",
        BasketItemNotFoundException: "error_basket_item_not_found",
        BasketConflictException: "error_basket_conflict",
        InvalidQuantityException: "error_invalid_quantity",
        InvalidConfigurationException: "error_invalid_configuration",
        SavedConfigurationNotFoundException: "error_saved_configuration_not_found",
    }

    message_key = error_mapping.get(type(exception))

    if not message_key:
        logger.error(f"Unmapped exception type: {type(exception).__name__}")
        return get_error_message("error_unexpected")

    exception_data = {}
    if hasattr(exception, 'quantity'):
        exception_data['quantity'] = exception.quantity
    if hasattr(exception, 'reason'):
        exception_data['reason'] = exception.reason
    if hasattr(exception, 'option_id'):
        exception_data['option_id'] = exception.option_id

    try:
        return get_error_message(message_key).format(**exception_data)
    except KeyError as e:
        logger.error(f"Missing format parameter in error message: {e}")
        return get_error_message(message_key)

