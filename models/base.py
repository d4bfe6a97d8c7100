import uuid

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def generate_id() -> str:
    """Server-side document id (32 hex chars)."""
    return uuid.uuid4().hex
