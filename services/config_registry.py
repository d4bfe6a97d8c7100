import copy
import logging
import math

from enums.calculation_strategy import CalculationStrategy
from enums.config_option_type import ConfigOptionType
from enums.flooring_schedule import FlooringSchedule
from enums.product_category import ProductCategory
from exceptions.configuration import InvalidConfigurationException
from models.configuration import (
    AreaConfigOption,
    CategoryConfig,
    CheckboxConfigOption,
    ConfigChoice,
    ConfigState,
    DimensionsConfigOption,
    SelectConfigOption,
    SliderConfigOption,
)
from utils.config_values import record_number, to_number

logger = logging.getLogger(__name__)

TRUSS_CHOICES = [
    ConfigChoice(value='curved', label='Curved', image='/images/config/truss-curved.jpg',
                 data_ai_hint='curved oak truss'),
    ConfigChoice(value='straight', label='Straight', image='/images/config/truss-straight.jpg',
                 data_ai_hint='straight oak truss'),
]

GARAGE_CONFIG = CategoryConfig(
    title="Configure Your Garage",
    description="Customize your oak frame garage with the options below.",
    calculation_strategy=CalculationStrategy.CONFIGURABLE,
    options=[
        SliderConfigOption(id='bays', label='Number of Bays (Added from Left)', min=1, max=4, step=1,
                           default_value=[2]),
        SelectConfigOption(id='beamSize', label='Structural Beam Sizes', default_value='6x6', choices=[
            ConfigChoice(value='6x6', label='6 inch x 6 inch', price_adjustment=0),
            ConfigChoice(value='7x7', label='7 inch x 7 inch', price_adjustment=200),
            ConfigChoice(value='8x8', label='8 inch x 8 inch', price_adjustment=450),
        ]),
        SelectConfigOption(id='trussType', label='Truss Type', type=ConfigOptionType.RADIO.value,
                           default_value='curved', choices=TRUSS_CHOICES),
        SelectConfigOption(id='baySize', label='Size Per Bay', default_value='standard', per_bay=True, choices=[
            ConfigChoice(value='standard', label='Standard (e.g., 3m wide)'),
            ConfigChoice(value='large', label='Large (e.g., 3.5m wide)', price_adjustment=300),
        ]),
        CheckboxConfigOption(id='catSlide', label='Include Cat Slide Roof? (Applies to all bays)',
                             default_value=False, price_adjustment=150, per_bay=True),
    ],
)

GAZEBO_CONFIG = CategoryConfig(
    title="Configure Your Gazebo",
    description="Customize your oak frame gazebo with the options below.",
    calculation_strategy=CalculationStrategy.CONFIGURABLE,
    options=[
        SelectConfigOption(id='size', label='Gazebo Size', default_value='medium', choices=[
            ConfigChoice(value='small', label='Small (2m x 2m)', price_adjustment=-500),
            ConfigChoice(value='medium', label='Medium (3m x 3m)', price_adjustment=0),
            ConfigChoice(value='large', label='Large (4m x 4m)', price_adjustment=800),
        ]),
        SelectConfigOption(id='roofStyle', label='Roof Style', type=ConfigOptionType.RADIO.value,
                           default_value='pitched', choices=[
            ConfigChoice(value='pitched', label='Pitched', image='/images/config/roof-pitched.jpg',
                         data_ai_hint='pitched gazebo roof'),
            ConfigChoice(value='hipped', label='Hipped', image='/images/config/roof-hipped.jpg',
                         data_ai_hint='hipped gazebo roof', price_adjustment=300),
        ]),
        SliderConfigOption(id='sides', label='Number of Enclosed Sides', min=0, max=4, step=1,
                           default_value=[0]),
        CheckboxConfigOption(id='floor', label='Include Floor', default_value=False, price_adjustment=450),
    ],
)

PORCH_CONFIG = CategoryConfig(
    title="Configure Your Porch",
    description="Customize your oak frame porch with the options below.",
    calculation_strategy=CalculationStrategy.CONFIGURABLE,
    options=[
        SelectConfigOption(id='trussType', label='Truss Type', type=ConfigOptionType.RADIO.value,
                           default_value='curved', choices=TRUSS_CHOICES),
        SelectConfigOption(id='legType', label='Leg Type', default_value='floor', choices=[
            ConfigChoice(value='floor', label='Legs to Floor', price_adjustment=150),
            ConfigChoice(value='wall', label='Legs to Wall', price_adjustment=0),
        ]),
        SelectConfigOption(id='sizeType', label='Size Type', default_value='standard', choices=[
            ConfigChoice(value='narrow', label='Narrow (e.g., 1.5m Wide)', price_adjustment=-200),
            ConfigChoice(value='standard', label='Standard (e.g., 2m Wide)', price_adjustment=0),
            ConfigChoice(value='wide', label='Wide (e.g., 2.5m Wide)', price_adjustment=400),
        ]),
    ],
)

OAK_BEAMS_CONFIG = CategoryConfig(
    title="Configure Your Oak Beams",
    description="Customize your oak beams with the options below.",
    calculation_strategy=CalculationStrategy.VOLUME,
    options=[
        SelectConfigOption(id='oakType', label='Oak Type', default_value='green', choices=[
            ConfigChoice(value='reclaimed', label='Reclaimed Oak'),
            ConfigChoice(value='kilned', label='Kiln Dried Oak'),
            ConfigChoice(value='green', label='Green Oak'),
        ]),
        DimensionsConfigOption(id='dimensions', label='Dimensions (cm)', unit='cm',
                               default_value={'length': 200, 'width': 15, 'thickness': 15}),
    ],
)

OAK_FLOORING_CONFIG = CategoryConfig(
    title="Configure Your Oak Flooring",
    description="Customize your oak flooring with the options below.",
    calculation_strategy=CalculationStrategy.AREA,
    options=[
        SelectConfigOption(id='flooringType', label='Flooring Type', default_value='engineered', choices=[
            ConfigChoice(value='solid', label='Solid Oak', price_adjustment=10),
            ConfigChoice(value='engineered', label='Engineered Oak', price_adjustment=0),
        ]),
        SelectConfigOption(id='finish', label='Finish', default_value='natural', choices=[
            ConfigChoice(value='natural', label='Natural', price_adjustment=0),
            ConfigChoice(value='lacquered', label='Lacquered', price_adjustment=5),
            ConfigChoice(value='oiled', label='Oiled', price_adjustment=7),
        ]),
        AreaConfigOption(id='area', label='Area (m²)', unit='m²',
                         default_value={'length': 5, 'width': 5, 'area': 25}),
    ],
)

# Cutting-list flooring configurator: priced per oak type instead of flooring type
OAK_FLOORING_OAK_TYPE_CONFIG = CategoryConfig(
    title="Configure Your Oak Flooring",
    description="Add flooring areas by oak type, enter the area directly or as length x width (cm).",
    calculation_strategy=CalculationStrategy.AREA,
    options=[
        SelectConfigOption(id='oakType', label='Oak Type', default_value='kilned', choices=[
            ConfigChoice(value='reclaimed', label='Reclaimed Oak'),
            ConfigChoice(value='kilned', label='Kilned Dried Oak'),
        ]),
        AreaConfigOption(id='area', label='Area Required', unit='m²',
                         default_value={'area': 10, 'length': '', 'width': ''}),
    ],
)

SPECIAL_DEALS_CONFIG = CategoryConfig(
    title="Special Deals",
    description="Limited time offers on our oak products.",
    calculation_strategy=CalculationStrategy.FIXED,
    options=[],
)

CATEGORY_CONFIGS: dict[ProductCategory, CategoryConfig] = {
    ProductCategory.GARAGES: GARAGE_CONFIG,
    ProductCategory.GAZEBOS: GAZEBO_CONFIG,
    ProductCategory.PORCHES: PORCH_CONFIG,
    ProductCategory.OAK_BEAMS: OAK_BEAMS_CONFIG,
    ProductCategory.OAK_FLOORING: OAK_FLOORING_CONFIG,
    ProductCategory.SPECIAL_DEALS: SPECIAL_DEALS_CONFIG,
}

EMPTY_CONFIG = CategoryConfig(title="", options=[], calculation_strategy=CalculationStrategy.FIXED)


class ConfigRegistryService:
    """Per-category option schemas, defaults and boundary validation."""

    @staticmethod
    def get_category_config(category: ProductCategory | str | None) -> CategoryConfig:
        """
        Get the option schema for a category.

        Unknown categories return an empty config with no options, callers
        treat that as "nothing configurable".
        """
        product_category = ProductCategory.from_value(category)
        if product_category is None:
            return EMPTY_CONFIG
        return CATEGORY_CONFIGS[product_category]

    @staticmethod
    def get_flooring_variant_config() -> CategoryConfig:
        return OAK_FLOORING_OAK_TYPE_CONFIG

    @staticmethod
    def get_flooring_schedule(config: ConfigState | None) -> FlooringSchedule:
        """
        Pick the oak flooring sub-strategy from the option set present.

        The oak-type configurator never sends flooringType, so oakType alone
        selects it. Anything else (including an empty state) is priced with
        the flooring-type schedule.
        """
        config = config or {}
        if 'oakType' in config and 'flooringType' not in config:
            return FlooringSchedule.OAK_TYPE
        return FlooringSchedule.FLOORING_TYPE

    @staticmethod
    def get_options_for(category: ProductCategory | str | None, config: ConfigState | None) -> CategoryConfig:
        """Option set in effect for a state, resolving the oak flooring variant."""
        if (ProductCategory.from_value(category) == ProductCategory.OAK_FLOORING
                and ConfigRegistryService.get_flooring_schedule(config) == FlooringSchedule.OAK_TYPE):
            return OAK_FLOORING_OAK_TYPE_CONFIG
        return ConfigRegistryService.get_category_config(category)

    @staticmethod
    def get_default_configuration(category: ProductCategory | str | None,
                                  config: ConfigState | None = None) -> ConfigState:
        """
        Build a fresh ConfigState from every option's default value.

        Pass the current state to get the defaults of the option set it
        belongs to (the oak-type flooring configurator has its own).

        Values are deep-copied so callers can mutate the state (e.g. a
        dimensions record) without touching the registry.
        """
        category_config = ConfigRegistryService.get_options_for(category, config)
        return {option.id: copy.deepcopy(option.default_value) for option in category_config.options}

    @staticmethod
    def validate_configuration(category: ProductCategory | str | None, config: ConfigState) -> ConfigState:
        """
        Check a configuration against its category's option set.

        Only options present in the state are checked, missing ones fall back
        to defaults during pricing. Keys that are not options are kept as-is.

        Raises:
            InvalidConfigurationException: On the first option whose value
                does not fit its kind (unknown choice, slider out of range,
                non-positive measurement, ...)
        """
        category_name = ProductCategory.from_value(category)
        category_label = category_name.value if category_name else str(category)
        if not isinstance(config, dict):
            raise InvalidConfigurationException(category_label, "configuration must be a mapping")

        category_config = ConfigRegistryService.get_options_for(category, config)
        for option in category_config.options:
            if option.id not in config:
                continue
            value = config[option.id]
            reason = ConfigRegistryService._check_option_value(option, value)
            if reason:
                logger.info(f"[ConfigRegistry] Rejected {category_label}.{option.id}={value!r}: {reason}")
                raise InvalidConfigurationException(category_label, reason, option_id=option.id)

        return dict(config)

    @staticmethod
    def _check_option_value(option, value) -> str | None:
        if isinstance(option, SelectConfigOption):
            if value not in option.choice_values():
                return f"must be one of {', '.join(option.choice_values())}"
        elif isinstance(option, SliderConfigOption):
            raw = value[0] if isinstance(value, (list, tuple)) and len(value) == 1 else value
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                return "must be a number or a single-element list of numbers"
            if raw < option.min or raw > option.max:
                return f"must be between {option.min:g} and {option.max:g}"
            if option.step > 0:
                steps = (raw - option.min) / option.step
                if not math.isclose(steps, round(steps), abs_tol=1e-9):
                    return f"must be in steps of {option.step:g} from {option.min:g}"
        elif isinstance(option, CheckboxConfigOption):
            if not isinstance(value, bool):
                return "must be true or false"
        elif isinstance(option, DimensionsConfigOption):
            if not isinstance(value, dict):
                return "must be a {length, width, thickness} record"
            for field in ('length', 'width', 'thickness'):
                if to_number(value.get(field)) <= 0:
                    return f"{field} must be a positive number"
        elif isinstance(option, AreaConfigOption):
            if isinstance(value, dict):
                area = record_number(value, 'area')
                if area <= 0:
                    length, width = record_number(value, 'length'), record_number(value, 'width')
                    area = length * width if length > 0 and width > 0 else 0
            else:
                area = to_number(value)
            if area <= 0:
                return "must give a positive area, directly or as length x width"
        return None
