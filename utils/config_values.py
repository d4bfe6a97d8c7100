"""
Lenient readers for ConfigState values.

Configurator state arrives as loosely-typed JSON: sliders report [2],
text inputs report "12.5" or "", records may be missing fields. These
helpers turn such values into numbers without ever raising.
"""

import math
from typing import Any


def to_number(value: Any, default: float = 0.0) -> float:
    """
    Read a finite number from an int, float or numeric string.

    Booleans, None, blanks and anything unparsable give `default`.

    Examples:
        >>> to_number("12.5")
        12.5
        >>> to_number("", 3)
        3
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return default
    else:
        return default
    if not math.isfinite(number):
        return default
    return number


def first_number(value: Any, default: float = 0.0) -> float:
    """Slider value: first element of a list, or the scalar itself."""
    if isinstance(value, (list, tuple)):
        if not value:
            return default
        value = value[0]
    return to_number(value, default)


def record_number(record: Any, field: str, default: float = 0.0) -> float:
    """Numeric field of a dimensions/area record, `default` when the record isn't a dict."""
    if not isinstance(record, dict):
        return default
    return to_number(record.get(field), default)


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round halves away from zero for positive amounts (0.5 -> 1, 2.5 -> 3).

    Python's round() uses banker's rounding, which would price 2.5 m² of
    a 1 GBP/m² item at 2.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def format_number(value: float) -> str:
    """Human formatting for measurements: 25.0 -> '25', 12.5 -> '12.5'."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
