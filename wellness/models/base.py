"""
Shared base for table models.
"""
import uuid

from sqlmodel import Field, SQLModel


def generate_id() -> str:
    return str(uuid.uuid4())


class BaseModel(SQLModel):
    """Table models are addressed by an opaque string id generated at creation."""

    id: str = Field(default_factory=generate_id, primary_key=True, max_length=64)
