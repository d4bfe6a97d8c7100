from sqlalchemy import Column, String, DateTime, func

from models.base import Base


class SystemSettings(Base):
    """
    Key-value store for runtime-configurable catalog settings.
    Allows changing settings without a redeploy.

    Examples:
        - delivery_settings: JSON {"free_delivery_threshold": 1000, ...}
        - financial_settings: JSON {"currency_symbol": "£", "vat_rate": 20}
        - price_schedule: JSON overrides for the unit price tables
    """
    __tablename__ = 'system_settings'

    key = Column(String, primary_key=True)
    value = Column(String, nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
