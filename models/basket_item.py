# A basket line is one purchasable configuration of a product for one user.
# The price is a snapshot taken when the line is created; later adds of an
# equivalent configuration only raise the quantity so the price the customer
# saw stays stable even if unit prices change in between.
#
# config_key is the canonical hash of the configuration (see
# utils/config_normalizer.py) and is unique per (user, product), so the store
# itself refuses a second line for an equivalent configuration.
from datetime import datetime
from typing import Any

from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, JSON, CheckConstraint, UniqueConstraint

from models.base import Base, generate_id


class BasketItem(Base):
    __tablename__ = 'basket'

    id = Column(String, primary_key=True, default=generate_id)
    user_id = Column(String, nullable=False, index=True)
    product_id = Column(String, ForeignKey('products.id', ondelete="CASCADE"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    price = Column(Float, nullable=False)
    # none_as_null: unconfigured lines store SQL NULL, not the JSON literal 'null'
    configuration = Column(JSON(none_as_null=True), nullable=True)
    category = Column(String, nullable=True)
    name = Column(String, nullable=False)
    image = Column(String, nullable=True)
    config_key = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (
        CheckConstraint('quantity > 0', name='check_basket_quantity_positive'),
        CheckConstraint('price >= 0', name='check_basket_price_non_negative'),
        UniqueConstraint('user_id', 'product_id', 'config_key', name='uq_basket_line'),
    )


class BasketItemDTO(BaseModel):
    id: str | None = None
    user_id: str | None = None
    product_id: str | None = None
    quantity: int | None = None
    price: float | None = None
    configuration: dict[str, Any] | None = None
    category: str | None = None
    name: str | None = None
    image: str | None = None
    config_key: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def line_total(self) -> float:
        return (self.price or 0.0) * (self.quantity or 0)


class BasketTotalsDTO(BaseModel):
    """Presentation totals for a basket (VAT and delivery on top of the line totals)."""
    subtotal: float
    vat: float
    shipping_cost: float
    total: float
    item_count: int
