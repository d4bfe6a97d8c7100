from datetime import datetime

from sqlalchemy import select, update, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_execute, session_flush, session_rollback
from exceptions.basket import BasketConflictException
from models.basket_item import BasketItem, BasketItemDTO


class BasketRepository:

    @staticmethod
    async def get_by_id(basket_item_id: str, session: AsyncSession | Session) -> BasketItemDTO | None:
        stmt = select(BasketItem).where(BasketItem.id == basket_item_id)
        basket_item = await session_execute(stmt, session)
        basket_item = basket_item.scalar()
        if basket_item is None:
            return None
        return BasketItemDTO.model_validate(basket_item, from_attributes=True)

    @staticmethod
    async def get_by_user_id(user_id: str, session: AsyncSession | Session) -> list[BasketItemDTO]:
        """Basket lines of a user, newest first."""
        stmt = (select(BasketItem)
                .where(BasketItem.user_id == user_id)
                .order_by(BasketItem.created_at.desc(), BasketItem.id.desc()))
        basket_items = await session_execute(stmt, session)
        basket_items = basket_items.scalars().all()
        return [BasketItemDTO.model_validate(basket_item, from_attributes=True) for basket_item in basket_items]

    @staticmethod
    async def get_candidates(user_id: str, product_id: str, session: AsyncSession | Session) -> list[BasketItemDTO]:
        """
        All lines of a user for one product, i.e. every line an add could merge into.

        Oldest first so a merge always lands on the line the customer saw first.
        """
        stmt = (select(BasketItem)
                .where(BasketItem.user_id == user_id,
                       BasketItem.product_id == product_id)
                .order_by(BasketItem.created_at.asc(), BasketItem.id.asc()))
        basket_items = await session_execute(stmt, session)
        basket_items = basket_items.scalars().all()
        return [BasketItemDTO.model_validate(basket_item, from_attributes=True) for basket_item in basket_items]

    @staticmethod
    async def get_by_config_key(user_id: str, product_id: str, config_key: str,
                                session: AsyncSession | Session) -> BasketItemDTO | None:
        stmt = select(BasketItem).where(BasketItem.user_id == user_id,
                                        BasketItem.product_id == product_id,
                                        BasketItem.config_key == config_key)
        basket_item = await session_execute(stmt, session)
        basket_item = basket_item.scalar()
        if basket_item is None:
            return None
        return BasketItemDTO.model_validate(basket_item, from_attributes=True)

    @staticmethod
    async def create(basket_item_dto: BasketItemDTO, session: AsyncSession | Session) -> str:
        """
        Insert a new basket line.

        Raises:
            BasketConflictException: An equivalent line for the same user and
                product was inserted concurrently (unique config_key clash).
                The session is rolled back before raising.
        """
        basket_item = BasketItem(**basket_item_dto.model_dump(exclude_none=True))
        session.add(basket_item)
        try:
            await session_flush(session)
        except IntegrityError as e:
            await session_rollback(session)
            if 'uq_basket_line' in str(e.orig) or 'basket.config_key' in str(e.orig):
                raise BasketConflictException(basket_item_dto.user_id, basket_item_dto.product_id,
                                              basket_item_dto.config_key) from e
            raise
        return basket_item.id

    @staticmethod
    async def increment_quantity(basket_item_id: str, quantity: int, session: AsyncSession | Session) -> bool:
        """
        Add to the line's quantity in SQL; price and configuration are left alone.

        Returns:
            False if the line no longer exists
        """
        stmt = (update(BasketItem)
                .where(BasketItem.id == basket_item_id)
                .values(quantity=BasketItem.quantity + quantity, updated_at=datetime.utcnow()))
        result = await session_execute(stmt, session)
        return result.rowcount > 0

    @staticmethod
    async def update_quantity(basket_item_id: str, quantity: int, session: AsyncSession | Session) -> bool:
        stmt = (update(BasketItem)
                .where(BasketItem.id == basket_item_id)
                .values(quantity=quantity, updated_at=datetime.utcnow()))
        result = await session_execute(stmt, session)
        return result.rowcount > 0

    @staticmethod
    async def delete(basket_item_id: str, session: AsyncSession | Session) -> None:
        stmt = delete(BasketItem).where(BasketItem.id == basket_item_id)
        await session_execute(stmt, session)
