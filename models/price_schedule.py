from pydantic import BaseModel, Field


class PriceSchedule(BaseModel):
    """
    Unit prices and surcharges used by the price calculator (GBP).

    Defaults are the published price list. A deployment can override any
    field through the `price_schedule` system setting, unknown keys in the
    override are rejected so typos don't silently fall back to defaults.

    Example override (stored as JSON):
        {"oak_beam_unit_prices": {"reclaimed": 1300, "kilned": 1050, "green": 820}}
    """

    model_config = {"extra": "forbid"}

    # Garages: base covers one bay
    garage_base_price: float = 8000
    garage_additional_bay_price: float = 1500
    garage_cat_slide_per_bay: float = 150
    garage_large_bay_per_bay: float = 300
    garage_beam_size_surcharges: dict[str, float] = Field(
        default_factory=lambda: {"6x6": 0, "7x7": 200, "8x8": 450}
    )

    # Gazebos: base is a medium gazebo
    gazebo_base_price: float = 5000
    gazebo_size_adjustments: dict[str, float] = Field(
        default_factory=lambda: {"small": -500, "medium": 0, "large": 800}
    )
    gazebo_hipped_roof_surcharge: float = 300
    gazebo_enclosed_side_price: float = 250
    gazebo_floor_surcharge: float = 450

    # Porches: base is a standard porch
    porch_base_price: float = 3500
    porch_floor_legs_surcharge: float = 150
    porch_size_adjustments: dict[str, float] = Field(
        default_factory=lambda: {"narrow": -200, "standard": 0, "wide": 400}
    )

    # Oak beams: per m³
    oak_beam_unit_prices: dict[str, float] = Field(
        default_factory=lambda: {"reclaimed": 1200, "kilned": 1000, "green": 800}
    )
    oak_beam_default_type: str = "green"

    # Oak flooring: per m², flooringType configurator
    flooring_type_unit_prices: dict[str, float] = Field(
        default_factory=lambda: {"solid": 75, "engineered": 65}
    )
    flooring_default_type: str = "engineered"
    flooring_finish_surcharges: dict[str, float] = Field(
        default_factory=lambda: {"natural": 0, "lacquered": 5, "oiled": 7}
    )

    # Oak flooring: per m², oakType configurator
    flooring_oak_type_unit_prices: dict[str, float] = Field(
        default_factory=lambda: {"reclaimed": 90, "kilned": 75}
    )
    flooring_default_oak_type: str = "kilned"
