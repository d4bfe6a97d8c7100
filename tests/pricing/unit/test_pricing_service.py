"""
PricingService Unit Tests

Tests the per-category price calculators and the dispatcher.
No database needed, the calculators are pure.

Run with:
    pytest tests/pricing/unit/test_pricing_service.py -v
"""

import copy

import pytest

from enums.product_category import ProductCategory
from models.price_schedule import PriceSchedule
from services.pricing import PricingService


class TestGaragePrice:
    """Test PricingService.calculate_garage_price()"""

    def test_three_large_bays_with_cat_slide(self):
        config = {'bays': [3], 'beamSize': '8x8', 'baySize': 'large', 'catSlide': True}

        price = PricingService.calculate_product_price('garages', config)

        assert price == 8000 + 2 * 1500 + 450 + 3 * 300 + 3 * 150
        assert price == 12800

    def test_single_bay_defaults(self):
        assert PricingService.calculate_garage_price({'bays': [1], 'beamSize': '6x6'}) == 8000

    def test_missing_or_invalid_bays_price_as_one_bay(self):
        assert PricingService.calculate_garage_price({}) == 8000
        assert PricingService.calculate_garage_price({'bays': []}) == 8000
        assert PricingService.calculate_garage_price({'bays': ['many']}) == 8000
        assert PricingService.calculate_garage_price({'bays': [0]}) == 8000

    def test_scalar_bays_accepted(self):
        assert PricingService.calculate_garage_price({'bays': 2}) == 9500

    def test_each_extra_bay_costs_more(self):
        prices = [PricingService.calculate_garage_price({'bays': [n], 'catSlide': True, 'baySize': 'large'})
                  for n in range(1, 5)]
        assert all(a < b for a, b in zip(prices, prices[1:]))

    def test_bigger_beams_cost_more(self):
        prices = [PricingService.calculate_garage_price({'bays': [2], 'beamSize': size})
                  for size in ('6x6', '7x7', '8x8')]
        assert all(a < b for a, b in zip(prices, prices[1:]))

    def test_unknown_beam_size_adds_nothing(self):
        assert PricingService.calculate_garage_price({'bays': [1], 'beamSize': '9x9'}) == 8000


class TestGazeboPrice:
    """Test PricingService.calculate_gazebo_price()"""

    def test_medium_pitched_no_extras(self):
        assert PricingService.calculate_gazebo_price({'size': 'medium', 'roofStyle': 'pitched'}) == 5000

    def test_large_hipped_with_sides_and_floor(self):
        config = {'size': 'large', 'roofStyle': 'hipped', 'sides': [2], 'floor': True}
        assert PricingService.calculate_gazebo_price(config) == 5000 + 800 + 300 + 2 * 250 + 450

    def test_small_gazebo_discount(self):
        assert PricingService.calculate_gazebo_price({'size': 'small'}) == 4500

    def test_negative_sides_ignored(self):
        assert PricingService.calculate_gazebo_price({'sides': [-3]}) == 5000

    def test_each_enclosed_side_costs_more(self):
        prices = [PricingService.calculate_gazebo_price({'sides': [n]}) for n in range(0, 5)]
        assert all(a < b for a, b in zip(prices, prices[1:]))


class TestPorchPrice:
    """Test PricingService.calculate_porch_price()"""

    def test_floor_legs_wide(self):
        assert PricingService.calculate_porch_price({'legType': 'floor', 'sizeType': 'wide'}) == 3500 + 150 + 400

    def test_wall_legs_narrow(self):
        assert PricingService.calculate_porch_price({'legType': 'wall', 'sizeType': 'narrow'}) == 3300


class TestOakBeamsPrice:
    """Test PricingService.calculate_oak_beams_price()"""

    def test_green_oak_default_beam(self):
        config = {'oakType': 'green', 'dimensions': {'length': 200, 'width': 15, 'thickness': 15}}

        assert PricingService.calculate_beam_volume(config) == pytest.approx(0.045)
        assert PricingService.calculate_product_price('oak-beams', config) == 36

    def test_missing_dimensions_use_default_beam(self):
        assert PricingService.calculate_oak_beams_price({'oakType': 'green'}) == 36

    def test_unknown_oak_type_falls_back_to_green(self):
        config = {'oakType': 'ebony', 'dimensions': {'length': 200, 'width': 15, 'thickness': 15}}
        assert PricingService.calculate_oak_beams_price(config) == 36

    def test_reclaimed_is_dearest(self):
        dimensions = {'length': 300, 'width': 20, 'thickness': 20}
        reclaimed = PricingService.calculate_oak_beams_price({'oakType': 'reclaimed', 'dimensions': dimensions})
        kilned = PricingService.calculate_oak_beams_price({'oakType': 'kilned', 'dimensions': dimensions})
        green = PricingService.calculate_oak_beams_price({'oakType': 'green', 'dimensions': dimensions})

        assert reclaimed == 144
        assert kilned == 120
        assert green == 96

    def test_string_dimensions_are_parsed(self):
        config = {'oakType': 'green', 'dimensions': {'length': '200', 'width': '15', 'thickness': '15'}}
        assert PricingService.calculate_oak_beams_price(config) == 36

    def test_negative_dimensions_price_at_zero(self):
        config = {'oakType': 'green', 'dimensions': {'length': -200, 'width': -15, 'thickness': 15}}
        assert PricingService.calculate_oak_beams_price(config) == 0

    def test_longer_beam_costs_more(self):
        prices = [
            PricingService.calculate_oak_beams_price(
                {'oakType': 'kilned', 'dimensions': {'length': length, 'width': 15, 'thickness': 15}})
            for length in (100, 200, 300, 400, 500)
        ]
        # 23, 45, 68, 90, 113
        assert all(a < b for a, b in zip(prices, prices[1:]))

    def test_wider_and_thicker_beams_cost_more(self):
        sizes = (10, 15, 20, 25)
        by_width = [PricingService.calculate_oak_beams_price(
            {'oakType': 'green', 'dimensions': {'length': 300, 'width': width, 'thickness': 15}}) for width in sizes]
        by_thickness = [PricingService.calculate_oak_beams_price(
            {'oakType': 'green', 'dimensions': {'length': 300, 'width': 15, 'thickness': thickness}})
            for thickness in sizes]

        assert all(a < b for a, b in zip(by_width, by_width[1:]))
        assert by_width == by_thickness


class TestOakFlooringPrice:
    """Test PricingService.calculate_oak_flooring_price()"""

    def test_engineered_oiled_25_square_metres(self):
        config = {'flooringType': 'engineered', 'finish': 'oiled', 'area': {'length': 5, 'width': 5, 'area': 25}}
        assert PricingService.calculate_product_price('oak-flooring', config) == 1800

    def test_missing_area_defaults_to_25(self):
        assert PricingService.calculate_oak_flooring_price({'flooringType': 'solid', 'finish': 'natural'}) == 25 * 75

    def test_area_from_length_and_width_in_cm(self):
        config = {'flooringType': 'engineered', 'area': {'length': 400, 'width': 250, 'area': 0}}
        assert PricingService.calculate_flooring_area(config) == pytest.approx(10)
        assert PricingService.calculate_oak_flooring_price(config) == 650

    def test_oak_type_variant(self):
        config = {'oakType': 'reclaimed', 'area': {'area': 10, 'length': '', 'width': ''}}
        assert PricingService.calculate_oak_flooring_price(config) == 900

    def test_oak_type_variant_without_area_prices_at_zero(self):
        assert PricingService.calculate_oak_flooring_price({'oakType': 'kilned'}) == 0

    def test_rounds_half_up(self):
        config = {'flooringType': 'engineered', 'area': {'area': 0.1}, 'finish': 'natural'}
        # 0.1 × 65 = 6.5
        assert PricingService.calculate_oak_flooring_price(config) == 7


class TestCalculateProductPrice:
    """Test PricingService.calculate_product_price() dispatch"""

    def test_special_deals_use_catalog_price(self):
        assert PricingService.calculate_product_price(ProductCategory.SPECIAL_DEALS, {}, catalog_price=450) == 450

    def test_unknown_category_prices_at_zero(self):
        assert PricingService.calculate_product_price('sheds', {'bays': [2]}) == 0

    def test_none_config_treated_as_empty(self):
        assert PricingService.calculate_product_price('porches', None) == 3500

    def test_custom_schedule(self):
        schedule = PriceSchedule(oak_beam_unit_prices={'reclaimed': 1300, 'kilned': 1100, 'green': 1000})
        config = {'oakType': 'green', 'dimensions': {'length': 200, 'width': 15, 'thickness': 15}}

        assert PricingService.calculate_product_price('oak-beams', config, schedule) == 45

    def test_does_not_mutate_config(self):
        config = {'bays': [3], 'beamSize': '8x8', 'dimensions': {'length': 1}}
        snapshot = copy.deepcopy(config)

        first = PricingService.calculate_product_price('garages', config)
        second = PricingService.calculate_product_price('garages', config)

        assert first == second
        assert config == snapshot

    def test_never_negative(self):
        schedule = PriceSchedule(porch_base_price=100)
        assert PricingService.calculate_porch_price({'sizeType': 'narrow', 'legType': 'wall'}, schedule) == 0

    def test_format_price(self):
        assert PricingService.format_price(12800) == "£12,800.00"
        assert PricingService.format_price(36, "€") == "€36.00"
