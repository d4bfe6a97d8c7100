import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from enums.product_category import ProductCategory
from models.product import ProductDTO, ProductSearchParams
from repositories.product import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:

    @staticmethod
    async def get_product_by_id(product_id: str, session: AsyncSession | Session) -> ProductDTO | None:
        return await ProductRepository.get_by_id(product_id, session)

    @staticmethod
    async def search_products(params: ProductSearchParams, session: AsyncSession | Session) -> list[ProductDTO]:
        """
        Search the catalog.

        Scalar filters (category, active/configurable flags, price range) run
        in SQL. Tags must all be present on the product, the free-text query
        is a case-insensitive substring match over name and description.

        Args:
            params: Filters, sort order and limit
            session: Database session

        Returns:
            At most params.limit products in the requested order
        """
        products = await ProductRepository.search(params, session)

        if params.tags:
            wanted = {tag.lower() for tag in params.tags}
            products = [product for product in products
                        if wanted.issubset({tag.lower() for tag in product.tags})]

        if params.query:
            needle = params.query.strip().lower()
            products = [product for product in products
                        if needle in (product.name or "").lower()
                        or needle in (product.description or "").lower()]

        logger.debug(f"[Catalog] Search {params.model_dump(exclude_none=True)} matched {len(products)} products")
        return products[:params.limit]

    @staticmethod
    async def get_products_by_category(category: ProductCategory | str,
                                       session: AsyncSession | Session,
                                       limit: int = 20) -> list[ProductDTO]:
        product_category = ProductCategory.from_value(category)
        if product_category is None:
            return []
        params = ProductSearchParams(category=product_category.value, limit=limit)
        return await ProductService.search_products(params, session)
