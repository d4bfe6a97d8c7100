from enum import Enum


class FlooringSchedule(str, Enum):
    """
    Oak flooring pricing sub-strategies.

    Two configurators exist for the same category with different option
    sets, each priced from its own unit-price table:
    - FLOORING_TYPE: flooringType (solid/engineered) + finish + area
    - OAK_TYPE: oakType (reclaimed/kilned) + area
    """

    FLOORING_TYPE = "flooring-type"
    OAK_TYPE = "oak-type"
