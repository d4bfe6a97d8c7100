from enum import Enum


class ConfigOptionType(str, Enum):
    SELECT = "select"
    RADIO = "radio"
    SLIDER = "slider"
    CHECKBOX = "checkbox"
    DIMENSIONS = "dimensions"
    AREA = "area"
