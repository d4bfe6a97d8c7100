import logging

from enums.calculation_strategy import CalculationStrategy
from enums.flooring_schedule import FlooringSchedule
from enums.product_category import ProductCategory
from models.configuration import ConfigState
from models.price_schedule import PriceSchedule
from services.config_registry import ConfigRegistryService
from utils.config_values import first_number, record_number, round_half_up, to_number

logger = logging.getLogger(__name__)

DEFAULT_BEAM_DIMENSIONS = {"length": 200, "width": 15, "thickness": 15}  # cm
DEFAULT_FLOORING_AREA = 25  # m², flooring-type configurator only

DEFAULT_SCHEDULE = PriceSchedule()


class PricingService:
    """
    Price calculation for configured products.

    Every calculator is pure and total: malformed or missing options fall back
    to the option's neutral value, nothing raises, and the result is never
    below 0. A zero price means "not purchasable as configured" and the caller
    must reject the add.
    """

    @staticmethod
    def calculate_garage_price(config: ConfigState, schedule: PriceSchedule = DEFAULT_SCHEDULE) -> float:
        """
        Garage price: base covers one bay, every extra bay adds a fixed amount.

        Cat slide roof and large bay size are charged per bay, the beam size
        surcharge once per garage.

        Example (bays=[3], 8x8, large, cat slide):
            8000 + 2×1500 + 450 + 3×300 + 3×150 = 12800
        """
        bays = first_number(config.get('bays'), 1)
        if bays <= 0:
            bays = 1

        total = schedule.garage_base_price + (bays - 1) * schedule.garage_additional_bay_price

        if config.get('catSlide') is True:
            total += schedule.garage_cat_slide_per_bay * bays

        total += schedule.garage_beam_size_surcharges.get(config.get('beamSize'), 0)

        if config.get('baySize') == 'large':
            total += schedule.garage_large_bay_per_bay * bays

        return max(0.0, total)

    @staticmethod
    def calculate_gazebo_price(config: ConfigState, schedule: PriceSchedule = DEFAULT_SCHEDULE) -> float:
        total = schedule.gazebo_base_price
        total += schedule.gazebo_size_adjustments.get(config.get('size'), 0)

        if config.get('roofStyle') == 'hipped':
            total += schedule.gazebo_hipped_roof_surcharge

        sides = max(0.0, first_number(config.get('sides'), 0))
        total += sides * schedule.gazebo_enclosed_side_price

        if config.get('floor') is True:
            total += schedule.gazebo_floor_surcharge

        return max(0.0, total)

    @staticmethod
    def calculate_porch_price(config: ConfigState, schedule: PriceSchedule = DEFAULT_SCHEDULE) -> float:
        total = schedule.porch_base_price

        if config.get('legType') == 'floor':
            total += schedule.porch_floor_legs_surcharge

        total += schedule.porch_size_adjustments.get(config.get('sizeType'), 0)

        return max(0.0, total)

    @staticmethod
    def calculate_beam_volume(config: ConfigState) -> float:
        """
        Beam volume in m³ from a {length, width, thickness} record in cm.

        A missing record means the default 200×15×15 beam. Each dimension is
        floored at 0 so two negative inputs can't produce a positive volume.
        """
        dimensions = config.get('dimensions')
        if not isinstance(dimensions, dict):
            dimensions = DEFAULT_BEAM_DIMENSIONS

        length_m = max(0.0, record_number(dimensions, 'length')) / 100
        width_m = max(0.0, record_number(dimensions, 'width')) / 100
        thickness_m = max(0.0, record_number(dimensions, 'thickness')) / 100
        return length_m * width_m * thickness_m

    @staticmethod
    def calculate_oak_beams_price(config: ConfigState, schedule: PriceSchedule = DEFAULT_SCHEDULE) -> float:
        """
        Oak beam price: volume (m³) × unit price of the oak type, rounded to whole pounds.

        Example (200×15×15 cm, green): 0.045 m³ × 800 = 36
        """
        volume = PricingService.calculate_beam_volume(config)

        oak_type = config.get('oakType') or schedule.oak_beam_default_type
        unit_price = schedule.oak_beam_unit_prices.get(oak_type)
        if unit_price is None:
            unit_price = schedule.oak_beam_unit_prices.get(schedule.oak_beam_default_type, 0)

        return max(0.0, round_half_up(volume * unit_price))

    @staticmethod
    def calculate_flooring_area(config: ConfigState) -> float:
        """
        Flooring area in m².

        The `area` option is a {length, width, area} record: a positive direct
        area wins, otherwise length × width (both in cm). A bare number is
        accepted as a direct area. A missing record is the flooring-type
        configurator's 25 m² default, or 0 for the oak-type configurator.
        """
        record = config.get('area')
        if record is None:
            if ConfigRegistryService.get_flooring_schedule(config) == FlooringSchedule.OAK_TYPE:
                return 0.0
            return float(DEFAULT_FLOORING_AREA)

        if isinstance(record, dict):
            area = record_number(record, 'area')
            if area <= 0:
                length_m = max(0.0, record_number(record, 'length')) / 100
                width_m = max(0.0, record_number(record, 'width')) / 100
                area = length_m * width_m
        else:
            area = to_number(record)

        return max(0.0, area)

    @staticmethod
    def calculate_oak_flooring_price(config: ConfigState, schedule: PriceSchedule = DEFAULT_SCHEDULE) -> float:
        """
        Oak flooring price: area (m²) × (unit price + finish surcharge), rounded to whole pounds.

        The unit price table depends on which configurator produced the state:
        flooringType (solid/engineered) or oakType (reclaimed/kilned).

        Example (25 m², engineered, oiled): 25×65 + 25×7 = 1800
        """
        area = PricingService.calculate_flooring_area(config)

        if ConfigRegistryService.get_flooring_schedule(config) == FlooringSchedule.OAK_TYPE:
            prices = schedule.flooring_oak_type_unit_prices
            default_type = schedule.flooring_default_oak_type
            selected = config.get('oakType')
        else:
            prices = schedule.flooring_type_unit_prices
            default_type = schedule.flooring_default_type
            selected = config.get('flooringType')

        unit_price = prices.get(selected) if selected else None
        if unit_price is None:
            unit_price = prices.get(default_type, 0)

        finish_surcharge = schedule.flooring_finish_surcharges.get(config.get('finish'), 0)

        return max(0.0, round_half_up(area * unit_price + area * finish_surcharge))

    @staticmethod
    def calculate_product_price(
        category: ProductCategory | str | None,
        config: ConfigState | None,
        schedule: PriceSchedule | None = None,
        catalog_price: float = 0.0
    ) -> float:
        """
        Price a configuration for its category.

        Dispatches on the category's calculation strategy. Fixed-price
        categories (special deals) return the catalog price, unknown
        categories return 0.

        Args:
            category: Product category (enum or slug)
            config: Configurator state, None is treated as empty
            schedule: Unit price tables, defaults to the published price list
            catalog_price: Product's catalog price, used by fixed-price categories

        Returns:
            Price in GBP, never negative
        """
        schedule = schedule or DEFAULT_SCHEDULE
        config = config if isinstance(config, dict) else {}
        product_category = ProductCategory.from_value(category)

        if product_category == ProductCategory.GARAGES:
            return PricingService.calculate_garage_price(config, schedule)
        if product_category == ProductCategory.GAZEBOS:
            return PricingService.calculate_gazebo_price(config, schedule)
        if product_category == ProductCategory.PORCHES:
            return PricingService.calculate_porch_price(config, schedule)
        if product_category == ProductCategory.OAK_BEAMS:
            return PricingService.calculate_oak_beams_price(config, schedule)
        if product_category == ProductCategory.OAK_FLOORING:
            return PricingService.calculate_oak_flooring_price(config, schedule)

        category_config = ConfigRegistryService.get_category_config(product_category)
        if product_category is not None and category_config.calculation_strategy == CalculationStrategy.FIXED:
            return max(0.0, to_number(catalog_price))

        logger.warning(f"[Pricing] No price strategy for category {category!r}, pricing at 0")
        return 0.0

    @staticmethod
    def format_price(amount: float, currency_symbol: str = "£") -> str:
        """
        Format an amount for display.

        Example:
            >>> PricingService.format_price(13150)
            '£13,150.00'
        """
        return f"{currency_symbol}{amount:,.2f}"
