from enum import Enum


class ProductCategory(str, Enum):
    """
    Catalog categories.

    Values are the URL slugs used by the storefront and stored as-is in
    the products, basket and saved_configurations tables.
    """

    GARAGES = "garages"
    GAZEBOS = "gazebos"
    PORCHES = "porches"
    OAK_BEAMS = "oak-beams"
    OAK_FLOORING = "oak-flooring"
    SPECIAL_DEALS = "special-deals"

    @classmethod
    def from_value(cls, value: "ProductCategory | str | None") -> "ProductCategory | None":
        """
        Convert a raw category value to the enum.

        Returns None for unknown or empty values instead of raising, callers
        treat unknown categories as "nothing configurable".

        Examples:
            >>> ProductCategory.from_value("oak-beams")
            ProductCategory.OAK_BEAMS
            >>> ProductCategory.from_value("sheds") is None
            True
        """
        if isinstance(value, cls):
            return value
        if not value:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None

    @property
    def is_structural(self) -> bool:
        """Framed buildings ship with delivery bundled into the price."""
        return self in (ProductCategory.GARAGES, ProductCategory.GAZEBOS, ProductCategory.PORCHES)
