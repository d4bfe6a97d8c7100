from pydantic import BaseModel


class ToastDTO(BaseModel):
    """Short user-facing notification, e.g. "Added to basket"."""
    user_id: str | None = None
    title: str
    description: str = ""
    success: bool = True
