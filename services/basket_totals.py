import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from enums.product_category import ProductCategory
from models.basket_item import BasketItemDTO, BasketTotalsDTO
from models.settings import DeliverySettingsDTO, FinancialSettingsDTO
from repositories.system_settings import SystemSettingsRepository
from services.basket import BasketService
from services.pricing import PricingService

logger = logging.getLogger(__name__)

FLOORING_BOARD_THICKNESS_M = 0.02
ESTIMATED_ITEM_VOLUME_M3 = 0.5


class BasketTotalsService:
    """
    Presentation totals for the basket page: subtotal, VAT, delivery and total.

    Computed on read from the price snapshots, nothing here is stored.
    """

    @staticmethod
    def estimate_shipping_volume(item: BasketItemDTO) -> float | None:
        """
        Delivery volume of one line in m³, None when the line ships free.

        Framed buildings (garages, gazebos, porches) include delivery in their
        price. Beams and flooring are measured from their configuration,
        anything else is estimated at 0.5 m³ per line.
        """
        quantity = item.quantity or 0
        category = ProductCategory.from_value(item.category)

        if category is not None and category.is_structural:
            return None
        if item.configuration is not None and category == ProductCategory.OAK_BEAMS:
            return PricingService.calculate_beam_volume(item.configuration) * quantity
        if item.configuration is not None and category == ProductCategory.OAK_FLOORING:
            return PricingService.calculate_flooring_area(item.configuration) * FLOORING_BOARD_THICKNESS_M * quantity
        return ESTIMATED_ITEM_VOLUME_M3

    @staticmethod
    def calculate_shipping(items: list[BasketItemDTO], subtotal: float, delivery: DeliverySettingsDTO) -> float:
        if subtotal >= delivery.free_delivery_threshold:
            return 0.0

        volumes = [volume for volume in map(BasketTotalsService.estimate_shipping_volume, items) if volume is not None]
        if not volumes:
            return 0.0

        return max(sum(volumes) * delivery.rate_per_m3, delivery.minimum_delivery_charge)

    @staticmethod
    def calculate_totals(items: list[BasketItemDTO],
                         delivery: DeliverySettingsDTO | None = None,
                         financial: FinancialSettingsDTO | None = None) -> BasketTotalsDTO:
        """
        Totals for a list of basket lines.

        Example (one special deal at 200, defaults):
            subtotal 200, VAT 40, delivery max(0.5 × 50, 25) = 25, total 265
        """
        delivery = delivery or DeliverySettingsDTO()
        financial = financial or FinancialSettingsDTO()

        subtotal = sum(item.line_total for item in items)
        vat = subtotal * financial.vat_rate / 100
        shipping_cost = BasketTotalsService.calculate_shipping(items, subtotal, delivery)

        return BasketTotalsDTO(
            subtotal=round(subtotal, 2),
            vat=round(vat, 2),
            shipping_cost=round(shipping_cost, 2),
            total=round(subtotal + vat + shipping_cost, 2),
            item_count=sum(item.quantity or 0 for item in items),
        )

    @staticmethod
    async def get_basket_summary(user_id: str, session: AsyncSession | Session) -> BasketTotalsDTO:
        items = await BasketService.get_basket_items(user_id, session)
        delivery = await SystemSettingsRepository.get_delivery_settings(session)
        financial = await SystemSettingsRepository.get_financial_settings(session)
        totals = BasketTotalsService.calculate_totals(items, delivery, financial)
        logger.debug(f"[Basket] Totals for user {user_id}: {totals.model_dump()}")
        return totals
