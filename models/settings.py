from pydantic import BaseModel, Field

import config


class DeliverySettingsDTO(BaseModel):
    """Delivery pricing for non-structural goods (beams, flooring, deals)."""
    free_delivery_threshold: float = Field(default=config.FREE_DELIVERY_THRESHOLD, ge=0)
    rate_per_m3: float = Field(default=config.DELIVERY_RATE_PER_M3, ge=0)
    minimum_delivery_charge: float = Field(default=config.MINIMUM_DELIVERY_CHARGE, ge=0)


class FinancialSettingsDTO(BaseModel):
    currency_symbol: str = config.CURRENCY_SYMBOL
    vat_rate: float = Field(default=config.VAT_RATE, ge=0, le=100)  # percent
