from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_execute, session_flush
from models.saved_configuration import SavedConfiguration, SavedConfigurationDTO


class SavedConfigurationRepository:

    @staticmethod
    async def create(saved_configuration_dto: SavedConfigurationDTO, session: AsyncSession | Session) -> str:
        saved_configuration = SavedConfiguration(**saved_configuration_dto.model_dump(exclude_none=True))
        session.add(saved_configuration)
        await session_flush(session)
        return saved_configuration.id

    @staticmethod
    async def get_by_id(config_id: str, session: AsyncSession | Session) -> SavedConfigurationDTO | None:
        stmt = select(SavedConfiguration).where(SavedConfiguration.id == config_id)
        saved_configuration = await session_execute(stmt, session)
        saved_configuration = saved_configuration.scalar()
        if saved_configuration is None:
            return None
        return SavedConfigurationDTO.model_validate(saved_configuration, from_attributes=True)

    @staticmethod
    async def get_by_user_id(user_id: str, session: AsyncSession | Session) -> list[SavedConfigurationDTO]:
        stmt = (select(SavedConfiguration)
                .where(SavedConfiguration.user_id == user_id)
                .order_by(SavedConfiguration.created_at.desc(), SavedConfiguration.id.desc()))
        saved_configurations = await session_execute(stmt, session)
        saved_configurations = saved_configurations.scalars().all()
        return [SavedConfigurationDTO.model_validate(saved, from_attributes=True) for saved in saved_configurations]

    @staticmethod
    async def delete(config_id: str, session: AsyncSession | Session) -> None:
        stmt = delete(SavedConfiguration).where(SavedConfiguration.id == config_id)
        await session_execute(stmt, session)
