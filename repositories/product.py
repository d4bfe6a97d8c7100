from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_execute, session_flush
from models.product import Product, ProductDTO, ProductSearchParams

SORT_COLUMNS = {
    'price_asc': Product.price.asc(),
    'price_desc': Product.price.desc(),
    'name_asc': Product.name.asc(),
    'name_desc': Product.name.desc(),
    'newest': Product.created_at.desc(),
    'oldest': Product.created_at.asc(),
}


class ProductRepository:

    @staticmethod
    async def get_by_id(product_id: str, session: AsyncSession | Session) -> ProductDTO | None:
        stmt = select(Product).where(Product.id == product_id)
        product = await session_execute(stmt, session)
        product = product.scalar()
        if product is None:
            return None
        return ProductDTO.model_validate(product, from_attributes=True)

    @staticmethod
    async def create(product_dto: ProductDTO, session: AsyncSession | Session) -> str:
        product = Product(**product_dto.model_dump(exclude_none=True))
        session.add(product)
        await session_flush(session)
        return product.id

    @staticmethod
    async def search(params: ProductSearchParams, session: AsyncSession | Session) -> list[ProductDTO]:
        """
        Filter the catalog in SQL on the scalar columns.

        Tags and free text are left to the caller, they live in JSON and
        need case-insensitive substring matching.
        """
        stmt = select(Product)
        if params.category:
            stmt = stmt.where(Product.category == params.category)
        if params.is_active is not None:
            stmt = stmt.where(Product.is_active == params.is_active)
        if params.is_configurable is not None:
            stmt = stmt.where(Product.is_configurable == params.is_configurable)
        if params.min_price is not None:
            stmt = stmt.where(Product.price >= params.min_price)
        if params.max_price is not None:
            stmt = stmt.where(Product.price <= params.max_price)
        stmt = stmt.order_by(SORT_COLUMNS[params.sort_by], Product.id)

        products = await session_execute(stmt, session)
        products = products.scalars().all()
        return [ProductDTO.model_validate(product, from_attributes=True) for product in products]
