from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field
from sqlalchemy import Column, String, Float, Boolean, DateTime, JSON, CheckConstraint

from models.base import Base, generate_id


# Product is a catalog record. The basket only reads it: name, price and images
# are copied onto the basket line when it is created.
class Product(Base):
    __tablename__ = 'products'

    id = Column(String, primary_key=True, default=generate_id)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    category = Column(String, nullable=False, index=True)
    price = Column(Float, nullable=False, default=0.0)
    images = Column(JSON, nullable=False, default=list)
    featured_image = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    is_configurable = Column(Boolean, nullable=False, default=False)
    tags = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        CheckConstraint('price >= 0', name='check_product_price_non_negative'),
    )


class ProductDTO(BaseModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    category: str | None = None
    price: float | None = None
    images: list[str] = Field(default_factory=list)
    featured_image: str | None = None
    is_active: bool | None = None
    is_configurable: bool | None = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def primary_image(self) -> str | None:
        """Featured image, else the first gallery image."""
        if self.featured_image:
            return self.featured_image
        return self.images[0] if self.images else None


class ProductSearchParams(BaseModel):
    """Filters for catalog listings. Tags and free text are matched in memory."""
    category: str | None = None
    query: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    tags: list[str] | None = None
    sort_by: Literal['price_asc', 'price_desc', 'name_asc', 'name_desc', 'newest', 'oldest'] = 'newest'
    limit: int = Field(default=20, gt=0)
    is_active: bool | None = True
    is_configurable: bool | None = None
