import json
import logging

from pydantic import BaseModel, ValidationError
from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_execute, session_flush
from models.price_schedule import PriceSchedule
from models.settings import DeliverySettingsDTO, FinancialSettingsDTO
from models.system_settings import SystemSettings

logger = logging.getLogger(__name__)

PRICE_SCHEDULE_KEY = "price_schedule"
DELIVERY_SETTINGS_KEY = "delivery_settings"
FINANCIAL_SETTINGS_KEY = "financial_settings"


class SystemSettingsRepository:
    """
    Repository for runtime catalog configuration.

    Provides CRUD operations for the key-value SystemSettings store.
    Used for configuration that can change without a redeploy: delivery
    rates, VAT and per-deployment price schedules.
    """

    @staticmethod
    async def get(key: str, session: AsyncSession | Session) -> str | None:
        """
        Get a setting value by key.

        Args:
            key: Setting key (e.g., "delivery_settings")
            session: Database session (async or sync)

        Returns:
            Setting value as string, or None if not found
        """
        stmt = select(SystemSettings).where(SystemSettings.key == key)
        result = await session_execute(stmt, session)
        setting = result.scalar()
        return setting.value if setting else None

    @staticmethod
    async def set(key: str, value: str, session: AsyncSession | Session) -> None:
        """
        Set a setting value (insert or update).

        Args:
            key: Setting key
            value: Setting value (stored as string)
            session: Database session (async or sync)
        """
        existing = await SystemSettingsRepository.get(key, session)

        if existing is not None:
            stmt = update(SystemSettings).where(SystemSettings.key == key).values(value=value)
            await session_execute(stmt, session)
        else:
            setting = SystemSettings(key=key, value=value)
            session.add(setting)
            await session_flush(session)

    @staticmethod
    async def delete(key: str, session: AsyncSession | Session) -> None:
        stmt = delete(SystemSettings).where(SystemSettings.key == key)
        await session_execute(stmt, session)

    @staticmethod
    async def get_all(session: AsyncSession | Session) -> dict[str, str]:
        stmt = select(SystemSettings)
        result = await session_execute(stmt, session)
        settings = result.scalars().all()
        return {setting.key: setting.value for setting in settings}

    @staticmethod
    async def _get_model(key: str, model: type[BaseModel], session: AsyncSession | Session):
        raw = await SystemSettingsRepository.get(key, session)

        if not raw:
            return model()

        # Fall back to defaults if the stored JSON is broken or out of range
        try:
            return model.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"[SystemSettings] Ignoring invalid '{key}' setting, using defaults: {e}")
            return model()

    @staticmethod
    async def set_model(key: str, value: BaseModel, session: AsyncSession | Session) -> None:
        await SystemSettingsRepository.set(key, value.model_dump_json(), session)

    @staticmethod
    async def get_price_schedule(session: AsyncSession | Session) -> PriceSchedule:
        """
        Get the unit price tables in effect.

        Fields missing from the stored JSON keep their published default, a
        table given in the JSON replaces the whole default table.

        Returns:
            PriceSchedule (defaults if not set or invalid)
        """
        return await SystemSettingsRepository._get_model(PRICE_SCHEDULE_KEY, PriceSchedule, session)

    @staticmethod
    async def get_delivery_settings(session: AsyncSession | Session) -> DeliverySettingsDTO:
        return await SystemSettingsRepository._get_model(DELIVERY_SETTINGS_KEY, DeliverySettingsDTO, session)

    @staticmethod
    async def get_financial_settings(session: AsyncSession | Session) -> FinancialSettingsDTO:
        return await SystemSettingsRepository._get_model(FINANCIAL_SETTINGS_KEY, FinancialSettingsDTO, session)
