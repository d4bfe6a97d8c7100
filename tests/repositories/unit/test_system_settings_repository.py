"""
SystemSettingsRepository Unit Tests

Tests the key-value store and the typed getters with their fallbacks.
"""

import json

import pytest

from models.price_schedule import PriceSchedule
from models.settings import DeliverySettingsDTO
from repositories.system_settings import (
    SystemSettingsRepository,
    PRICE_SCHEDULE_KEY,
    DELIVERY_SETTINGS_KEY,
    FINANCIAL_SETTINGS_KEY,
)


class TestKeyValueStore:

    @pytest.mark.asyncio
    async def test_set_get_update_delete(self, session):
        await SystemSettingsRepository.set("banner", "Summer sale", session)
        assert await SystemSettingsRepository.get("banner", session) == "Summer sale"

        await SystemSettingsRepository.set("banner", "Winter sale", session)
        assert await SystemSettingsRepository.get("banner", session) == "Winter sale"

        await SystemSettingsRepository.delete("banner", session)
        assert await SystemSettingsRepository.get("banner", session) is None

    @pytest.mark.asyncio
    async def test_get_all(self, session):
        await SystemSettingsRepository.set("a", "1", session)
        await SystemSettingsRepository.set("b", "2", session)

        assert await SystemSettingsRepository.get_all(session) == {"a": "1", "b": "2"}


class TestTypedSettings:

    @pytest.mark.asyncio
    async def test_defaults_when_unset(self, session):
        delivery = await SystemSettingsRepository.get_delivery_settings(session)
        financial = await SystemSettingsRepository.get_financial_settings(session)
        schedule = await SystemSettingsRepository.get_price_schedule(session)

        assert delivery.free_delivery_threshold == 1000
        assert delivery.rate_per_m3 == 50
        assert delivery.minimum_delivery_charge == 25
        assert financial.vat_rate == 20
        assert financial.currency_symbol == "£"
        assert schedule == PriceSchedule()

    @pytest.mark.asyncio
    async def test_stored_delivery_settings(self, session):
        await SystemSettingsRepository.set_model(DELIVERY_SETTINGS_KEY, DeliverySettingsDTO(rate_per_m3=65), session)

        delivery = await SystemSettingsRepository.get_delivery_settings(session)
        assert delivery.rate_per_m3 == 65
        assert delivery.minimum_delivery_charge == 25

    @pytest.mark.asyncio
    async def test_price_schedule_override(self, session):
        await SystemSettingsRepository.set(PRICE_SCHEDULE_KEY, json.dumps({"garage_base_price": 8500}), session)

        schedule = await SystemSettingsRepository.get_price_schedule(session)
        assert schedule.garage_base_price == 8500
        assert schedule.gazebo_base_price == 5000

    @pytest.mark.asyncio
    async def test_unknown_schedule_field_falls_back(self, session):
        await SystemSettingsRepository.set(PRICE_SCHEDULE_KEY, json.dumps({"garage_base_prise": 1}), session)

        assert await SystemSettingsRepository.get_price_schedule(session) == PriceSchedule()

    @pytest.mark.asyncio
    async def test_invalid_json_falls_back(self, session):
        await SystemSettingsRepository.set(FINANCIAL_SETTINGS_KEY, "{not json", session)

        financial = await SystemSettingsRepository.get_financial_settings(session)
        assert financial.vat_rate == 20

    @pytest.mark.asyncio
    async def test_out_of_range_falls_back(self, session):
        await SystemSettingsRepository.set(FINANCIAL_SETTINGS_KEY, json.dumps({"vat_rate": 150}), session)
        await SystemSettingsRepository.set(DELIVERY_SETTINGS_KEY, json.dumps({"rate_per_m3": -5}), session)

        assert (await SystemSettingsRepository.get_financial_settings(session)).vat_rate == 20
        assert (await SystemSettingsRepository.get_delivery_settings(session)).rate_per_m3 == 50
