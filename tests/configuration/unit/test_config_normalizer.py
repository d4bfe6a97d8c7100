"""
Configuration equality and merge key tests.
"""

from utils.config_normalizer import (
    UNCONFIGURED_KEY,
    canonical_configuration,
    configs_equal,
    configuration_key,
)


class TestConfigsEqual:

    def test_both_absent(self):
        assert configs_equal(None, None) is True

    def test_one_absent(self):
        assert configs_equal(None, {}) is False
        assert configs_equal({'bays': [2]}, None) is False

    def test_key_order_ignored(self):
        a = {'bays': [3], 'beamSize': '8x8', 'catSlide': True}
        b = {'catSlide': True, 'beamSize': '8x8', 'bays': [3]}
        assert configs_equal(a, b) is True

    def test_nested_key_order_ignored(self):
        a = {'dimensions': {'length': 200, 'width': 15, 'thickness': 15}}
        b = {'dimensions': {'thickness': 15, 'width': 15, 'length': 200}}
        assert configs_equal(a, b) is True

    def test_integral_floats_equal_ints(self):
        assert configs_equal({'bays': [2.0]}, {'bays': [2]}) is True

    def test_booleans_distinct_from_numbers(self):
        assert configs_equal({'floor': True}, {'floor': 1}) is False

    def test_different_values(self):
        assert configs_equal({'bays': [2]}, {'bays': [3]}) is False

    def test_list_order_matters(self):
        assert configs_equal({'extras': ['a', 'b']}, {'extras': ['b', 'a']}) is False


class TestCanonicalForm:

    def test_compact_sorted_json(self):
        assert canonical_configuration({'b': 2.0, 'a': [1]}) == '{"a":[1],"b":2}'

    def test_absent(self):
        assert canonical_configuration(None) is None


class TestConfigurationKey:

    def test_equal_configs_share_a_key(self):
        assert configuration_key({'a': 1, 'b': 2.0}) == configuration_key({'b': 2, 'a': 1})

    def test_unconfigured_sentinel(self):
        assert configuration_key(None) == UNCONFIGURED_KEY

    def test_empty_config_is_not_unconfigured(self):
        assert configuration_key({}) != UNCONFIGURED_KEY

    def test_key_is_sha256_hex(self):
        key = configuration_key({'bays': [2]})
        assert len(key) == 64
        int(key, 16)
