"""
Configuration-related exceptions.
"""

from .base import CatalogException


class ConfigurationException(CatalogException):
    """Base exception for product configuration errors."""
    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when a configuration does not fit its category's option set or prices to zero."""

    def __init__(self, category: str | None, reason: str, option_id: str | None = None):
        if option_id:
            message = f"Invalid configuration for {category}: option '{option_id}' {reason}"
        else:
            message = f"Invalid configuration for {category}: {reason}"
        super().__init__(
            message,
            details={'category': category, 'option_id': option_id, 'reason': reason}
        )
        self.category = category
        self.option_id = option_id
        self.reason = reason


class SavedConfigurationNotFoundException(ConfigurationException):
    """Raised when a saved configuration id does not resolve."""

    def __init__(self, config_id: str):
        super().__init__(
            f"Saved configuration {config_id} not found",
            details={'config_id': config_id}
        )
        self.config_id = config_id
