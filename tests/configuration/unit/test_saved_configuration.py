"""
SavedConfigurationService Unit Tests
"""

from datetime import datetime
from unittest.mock import patch, AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from models.saved_configuration import SavedConfiguration
from repositories.saved_configuration import SavedConfigurationRepository
from services.saved_configuration import SavedConfigurationService


class TestSavedConfigurationService:

    @pytest.mark.asyncio
    async def test_save_prices_configuration(self, session):
        config = {'bays': [3], 'beamSize': '8x8', 'baySize': 'large', 'catSlide': True}

        config_id = await SavedConfigurationService.save_configuration("u1", "garages", config, session,
                                                                       name="Double garage")

        saved = await SavedConfigurationService.get_saved_configuration_by_id(config_id, session)
        assert saved.price == 12800
        assert saved.name == "Double garage"
        assert saved.category == "garages"
        assert saved.config == config

    @pytest.mark.asyncio
    async def test_default_name(self, session):
        config_id = await SavedConfigurationService.save_configuration("u1", "porches", {}, session)

        saved = await SavedConfigurationService.get_saved_configuration_by_id(config_id, session)
        assert saved.name == "My Configuration"
        assert saved.price == 3500

    @pytest.mark.asyncio
    async def test_list_newest_first(self, session):
        session.add_all([
            SavedConfiguration(id="a", user_id="u1", category="gazebos", config={}, price=5000,
                               created_at=datetime(2024, 1, 1)),
            SavedConfiguration(id="b", user_id="u1", category="porches", config={}, price=3500,
                               created_at=datetime(2024, 2, 1)),
            SavedConfiguration(id="c", user_id="u2", category="porches", config={}, price=3500,
                               created_at=datetime(2024, 3, 1)),
        ])
        session.commit()

        saved = await SavedConfigurationService.get_saved_configurations("u1", session)
        assert [item.id for item in saved] == ["b", "a"]

    @pytest.mark.asyncio
    async def test_missing_returns_none(self, session):
        assert await SavedConfigurationService.get_saved_configuration_by_id("missing", session) is None

    @pytest.mark.asyncio
    async def test_delete(self, session):
        config_id = await SavedConfigurationService.save_configuration("u1", "gazebos", {}, session)

        assert await SavedConfigurationService.delete_saved_configuration(config_id, session) is True
        assert await SavedConfigurationService.get_saved_configuration_by_id(config_id, session) is None

    @pytest.mark.asyncio
    async def test_save_store_failure_returns_none(self, session):
        error = OperationalError("INSERT", {}, Exception("disk full"))
        with patch.object(SavedConfigurationRepository, 'create', new=AsyncMock(side_effect=error)):
            result = await SavedConfigurationService.save_configuration("u1", "gazebos", {}, session)

        assert result is None
        assert await SavedConfigurationService.get_saved_configurations("u1", session) == []
