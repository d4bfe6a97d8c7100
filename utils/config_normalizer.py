"""
Configuration equality for basket consolidation.

Two basket candidates for the same product are the same line item when both
are unconfigured, or when their configurations are equal in canonical form.
Canonical form is JSON with keys sorted at every level and integral floats
written as ints, so configurations built through different code paths
(different key order, 2 vs 2.0) still merge.
"""

import hashlib
import json
import math
from typing import Any

# config_key for products added without a configuration. Not a valid sha256
# hex digest, so it can never collide with a configured line.
UNCONFIGURED_KEY = "unconfigured"


def _normalize_value(value: Any) -> Any:
    # bool is a subclass of int, keep it out of the numeric branch
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return value
    if isinstance(value, dict):
        return {str(key): _normalize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize_value(item) for item in value]
    return value


def canonical_configuration(configuration: dict[str, Any] | None) -> str | None:
    """
    Serialize a configuration to its canonical JSON form.

    Returns None for an absent configuration.

    Examples:
        >>> canonical_configuration({"b": 2.0, "a": [1]})
        '{"a":[1],"b":2}'
    """
    if configuration is None:
        return None
    return json.dumps(
        _normalize_value(configuration),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )


def configs_equal(a: dict[str, Any] | None, b: dict[str, Any] | None) -> bool:
    """
    Decide whether two configurations describe the same purchasable item.

    Both absent -> equal. Exactly one absent -> not equal (an unconfigured
    product only merges with other unconfigured lines). Otherwise the
    canonical serializations are compared.
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return canonical_configuration(a) == canonical_configuration(b)


def configuration_key(configuration: dict[str, Any] | None) -> str:
    """
    Stable merge key stored on basket lines.

    Equal configurations (per configs_equal) always produce the same key.
    """
    canonical = canonical_configuration(configuration)
    if canonical is None:
        return UNCONFIGURED_KEY
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
