from enums.flooring_schedule import FlooringSchedule
from enums.product_category import ProductCategory
from models.configuration import ConfigState
from services.config_registry import ConfigRegistryService
from services.pricing import PricingService
from utils.config_values import first_number, format_number, record_number

SPECIAL_DEAL_DESCRIPTION = "Custom product configuration"


class ConfigurationDescriptionService:
    """
    Human-readable one-line summaries of configurations.

    Used as the basket line name and in toasts. Output depends only on
    (category, config); missing options read as the registry default.
    """

    @staticmethod
    def _with_defaults(category: ProductCategory, config: ConfigState | None) -> ConfigState:
        config = config if isinstance(config, dict) else {}
        state = ConfigRegistryService.get_default_configuration(category, config)
        for key, value in config.items():
            if value is not None:
                state[key] = value
        return state

    @staticmethod
    def _describe_garage(config: ConfigState) -> str:
        bays = first_number(config.get('bays'), 1)
        if bays <= 0:
            bays = 1
        description = f"{format_number(bays)} bay oak frame garage"
        if config.get('catSlide') is True:
            description += " with cat slide roof"
        description += f", {config.get('beamSize')} beams"
        if config.get('trussType'):
            description += f", {config['trussType']} trusses"
        if config.get('baySize') == 'large':
            description += ", large bay size"
        return description

    @staticmethod
    def _describe_gazebo(config: ConfigState) -> str:
        description = f"{config.get('size')} oak frame gazebo"
        if config.get('roofStyle'):
            description += f" with {config['roofStyle']} roof"
        sides = max(0.0, first_number(config.get('sides'), 0))
        if sides > 0:
            description += f", {format_number(sides)} enclosed side{'s' if sides > 1 else ''}"
        if config.get('floor') is True:
            description += ", with floor"
        return description

    @staticmethod
    def _describe_porch(config: ConfigState) -> str:
        description = f"{config.get('sizeType')} oak frame porch"
        if config.get('trussType'):
            description += f" with {config['trussType']} truss"
        if config.get('legType'):
            description += f", legs to {config['legType']}"
        return description

    @staticmethod
    def _describe_oak_beams(config: ConfigState) -> str:
        dimensions = config.get('dimensions')
        length = format_number(record_number(dimensions, 'length'))
        width = format_number(record_number(dimensions, 'width'))
        thickness = format_number(record_number(dimensions, 'thickness'))
        return f"{config.get('oakType')} oak beam, {length}cm × {width}cm × {thickness}cm"

    @staticmethod
    def _describe_oak_flooring(config: ConfigState) -> str:
        area = PricingService.calculate_flooring_area(config)
        if ConfigRegistryService.get_flooring_schedule(config) == FlooringSchedule.OAK_TYPE:
            oak_type = str(config.get('oakType') or '').capitalize()
            return f"{oak_type} Oak Flooring: {area:.2f}m²"

        description = f"{config.get('flooringType')} oak flooring, {format_number(area)}m²"
        finish = config.get('finish')
        if finish and finish != 'natural':
            description += f", {finish} finish"
        return description

    @staticmethod
    def generate_configuration_description(category: ProductCategory | str | None,
                                           config: ConfigState | None) -> str:
        """
        Describe a configuration in one line.

        Examples:
            garages: "3 bay oak frame garage with cat slide roof, 8x8 beams, curved trusses, large bay size"
            oak-beams: "green oak beam, 200cm × 15cm × 15cm"
            oak-flooring (oak-type): "Kilned Oak Flooring: 12.50m²"

        Returns:
            The description, "" for an unknown category
        """
        product_category = ProductCategory.from_value(category)
        if product_category is None:
            return ""

        state = ConfigurationDescriptionService._with_defaults(product_category, config)

        if product_category == ProductCategory.GARAGES:
            return ConfigurationDescriptionService._describe_garage(state)
        if product_category == ProductCategory.GAZEBOS:
            return ConfigurationDescriptionService._describe_gazebo(state)
        if product_category == ProductCategory.PORCHES:
            return ConfigurationDescriptionService._describe_porch(state)
        if product_category == ProductCategory.OAK_BEAMS:
            return ConfigurationDescriptionService._describe_oak_beams(state)
        if product_category == ProductCategory.OAK_FLOORING:
            return ConfigurationDescriptionService._describe_oak_flooring(state)
        return SPECIAL_DEAL_DESCRIPTION
