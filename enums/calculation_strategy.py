from enum import Enum


class CalculationStrategy(str, Enum):
    FIXED = "fixed"                # Catalog price, no options
    CONFIGURABLE = "configurable"  # Base price plus option surcharges
    VOLUME = "volume"              # Unit price per m³
    AREA = "area"                  # Unit price per m²
