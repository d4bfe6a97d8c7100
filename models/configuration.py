"""
Declarative option schemas for the product configurators.

Each category exposes an ordered list of options. Options are a tagged
union on `type`, so a CategoryConfig can be loaded from plain dicts
(e.g. JSON exported by the admin panel) and still come back as the right
option classes.
"""
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

from enums.calculation_strategy import CalculationStrategy
from enums.config_option_type import ConfigOptionType

# Mapping option id -> selected value. Its shape depends on the category,
# values may be missing or malformed and are defaulted by every consumer.
ConfigState = dict[str, Any]


class ConfigChoice(BaseModel):
    value: str
    label: str
    image: str | None = None
    data_ai_hint: str | None = None
    price_adjustment: float = 0.0  # Display hint, prices come from the PriceSchedule


class BaseConfigOption(BaseModel):
    id: str
    label: str
    default_value: Any = None
    data_ai_hint: str | None = None
    per_bay: bool = False
    unit: str | None = None


class SelectConfigOption(BaseConfigOption):
    type: Literal["select", "radio"] = ConfigOptionType.SELECT.value
    choices: list[ConfigChoice]

    def choice_values(self) -> list[str]:
        return [choice.value for choice in self.choices]


class SliderConfigOption(BaseConfigOption):
    # Sliders report their value as a single-element list, e.g. {"bays": [2]}
    type: Literal["slider"] = ConfigOptionType.SLIDER.value
    min: float
    max: float
    step: float = 1


class CheckboxConfigOption(BaseConfigOption):
    type: Literal["checkbox"] = ConfigOptionType.CHECKBOX.value
    default_value: bool = False
    price_adjustment: float = 0.0


class DimensionsConfigOption(BaseConfigOption):
    # default_value: {"length": ..., "width": ..., "thickness": ...}
    type: Literal["dimensions"] = ConfigOptionType.DIMENSIONS.value
    unit: str = "cm"


class AreaConfigOption(BaseConfigOption):
    # default_value: {"length": ..., "width": ..., "area": ...}, area wins when > 0
    type: Literal["area"] = ConfigOptionType.AREA.value
    unit: str = "m²"


ConfigOption = Annotated[
    Union[SelectConfigOption, SliderConfigOption, CheckboxConfigOption, DimensionsConfigOption, AreaConfigOption],
    Field(discriminator="type")
]


class CategoryConfig(BaseModel):
    title: str
    description: str | None = None
    options: list[ConfigOption] = Field(default_factory=list)
    image: str | None = None
    calculation_strategy: CalculationStrategy = CalculationStrategy.FIXED

    def get_option(self, option_id: str) -> ConfigOption | None:
        for option in self.options:
            if option.id == option_id:
                return option
        return None

    @property
    def is_configurable(self) -> bool:
        return len(self.options) > 0
