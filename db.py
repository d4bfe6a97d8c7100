from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any
import logging

from sqlalchemy import event, Engine, text, Result, CursorResult
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import Session

import config
from config import DB_NAME
from models.base import Base

"""
Imports of these models are needed to correctly create tables in the database.
For more information see https://stackoverflow.com/questions/7478403/sqlalchemy-classes-across-files
"""
from models.product import Product
from models.basket_item import BasketItem
from models.saved_configuration import SavedConfiguration
from models.system_settings import SystemSettings

logger = logging.getLogger(__name__)

# HARD DISABLE SQL echo, statements would drown the basket logs
sql_echo = False

if DB_NAME == ":memory:":
    url = "sqlite+aiosqlite:///:memory:"
else:
    data_folder = Path("data")
    if data_folder.exists() is False:
        data_folder.mkdir()
    url = f"sqlite+aiosqlite:///data/{DB_NAME}"

engine = create_async_engine(url, echo=sql_echo)
session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@asynccontextmanager
async def get_db_session() -> AsyncSession:
    async with session_maker() as session:
        yield session


# The helpers below accept both session flavours so services and repositories
# run unchanged on the async runtime engine and on sync sessions (scripts, tests).

async def session_execute(stmt, session: AsyncSession | Session) -> Result[Any] | CursorResult[Any]:
    if isinstance(session, AsyncSession):
        query_result = await session.execute(stmt)
        return query_result
    else:
        query_result = session.execute(stmt)
        return query_result


async def session_flush(session: AsyncSession | Session) -> None:
    if isinstance(session, AsyncSession):
        await session.flush()
    else:
        session.flush()


async def session_commit(session: AsyncSession | Session) -> None:
    if isinstance(session, AsyncSession):
        await session.commit()
    else:
        session.commit()


async def session_rollback(session: AsyncSession | Session) -> None:
    if isinstance(session, AsyncSession):
        await session.rollback()
    else:
        session.rollback()


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


async def check_all_tables_exist(session: AsyncSession | Session):
    for table in Base.metadata.tables.values():
        sql_query = text("SELECT name FROM sqlite_master WHERE type='table' AND name=:name")
        result = await session_execute(sql_query.bindparams(name=table.name), session)
        if result.scalar() is None:
            return False
    return True


async def create_db_and_tables():
    async with get_db_session() as session:
        if await check_all_tables_exist(session):
            logger.info(f"All {len(Base.metadata.tables)} tables present in {url}")
        else:
            logger.warning(f"Missing tables in {url}, creating schema")
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
