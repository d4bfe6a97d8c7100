"""
ConfigurationDescriptionService Unit Tests
"""

from enums.product_category import ProductCategory
from services.configuration_description import ConfigurationDescriptionService

describe = ConfigurationDescriptionService.generate_configuration_description


class TestGarageDescription:

    def test_full_garage(self):
        config = {'bays': [3], 'beamSize': '8x8', 'baySize': 'large', 'catSlide': True, 'trussType': 'straight'}
        assert describe('garages', config) == \
            "3 bay oak frame garage with cat slide roof, 8x8 beams, straight trusses, large bay size"

    def test_missing_values_read_as_defaults(self):
        assert describe(ProductCategory.GARAGES, None) == "2 bay oak frame garage, 6x6 beams, curved trusses"

    def test_float_bays_print_as_whole_number(self):
        assert describe('garages', {'bays': [3.0], 'beamSize': '7x7'}).startswith("3 bay oak frame garage")


class TestGazeboDescription:

    def test_defaults(self):
        assert describe('gazebos', {}) == "medium oak frame gazebo with pitched roof"

    def test_single_side(self):
        assert describe('gazebos', {'size': 'small', 'sides': [1]}) == \
            "small oak frame gazebo with pitched roof, 1 enclosed side"

    def test_sides_plural_and_floor(self):
        assert describe('gazebos', {'size': 'large', 'roofStyle': 'hipped', 'sides': [3], 'floor': True}) == \
            "large oak frame gazebo with hipped roof, 3 enclosed sides, with floor"


class TestPorchDescription:

    def test_defaults(self):
        assert describe('porches', {}) == "standard oak frame porch with curved truss, legs to floor"

    def test_wall_legs(self):
        assert describe('porches', {'sizeType': 'wide', 'legType': 'wall'}) == \
            "wide oak frame porch with curved truss, legs to wall"


class TestOakDescription:

    def test_beam(self):
        config = {'oakType': 'kilned', 'dimensions': {'length': 250.0, 'width': 20, 'thickness': 12.5}}
        assert describe('oak-beams', config) == "kilned oak beam, 250cm × 20cm × 12.5cm"

    def test_default_beam(self):
        assert describe('oak-beams', {}) == "green oak beam, 200cm × 15cm × 15cm"

    def test_flooring_with_finish(self):
        config = {'flooringType': 'solid', 'finish': 'oiled', 'area': {'length': 5, 'width': 5, 'area': 25}}
        assert describe('oak-flooring', config) == "solid oak flooring, 25m², oiled finish"

    def test_natural_finish_not_mentioned(self):
        assert describe('oak-flooring', {'flooringType': 'engineered', 'finish': 'natural'}) == \
            "engineered oak flooring, 25m²"

    def test_oak_type_flooring(self):
        config = {'oakType': 'kilned', 'area': {'area': 12.5, 'length': '', 'width': ''}}
        assert describe('oak-flooring', config) == "Kilned Oak Flooring: 12.50m²"


class TestOtherCategories:

    def test_special_deals(self):
        assert describe('special-deals', {'anything': 1}) == "Custom product configuration"

    def test_unknown_category(self):
        assert describe('sheds', {'bays': [2]}) == ""

    def test_deterministic(self):
        config = {'bays': [2], 'catSlide': True}
        assert describe('garages', config) == describe('garages', dict(config))
