from datetime import datetime
from typing import Any

from pydantic import BaseModel
from sqlalchemy import Column, String, Float, DateTime, JSON

from models.base import Base, generate_id


# Named snapshot of a configurator state a user can re-open later.
# Shares the price calculator with the basket, the price is informational only.
class SavedConfiguration(Base):
    __tablename__ = 'saved_configurations'

    id = Column(String, primary_key=True, default=generate_id)
    user_id = Column(String, nullable=False, index=True)
    category = Column(String, nullable=False)
    config = Column(JSON, nullable=False, default=dict)
    price = Column(Float, nullable=False, default=0.0)
    name = Column(String, nullable=False, default="My Configuration")
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class SavedConfigurationDTO(BaseModel):
    id: str | None = None
    user_id: str | None = None
    category: str | None = None
    config: dict[str, Any] | None = None
    price: float | None = None
    name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
