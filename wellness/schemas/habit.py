"""
Habit schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HabitBase(BaseModel):
    name: str = Field(..., max_length=200)
    target_count: int = Field(..., ge=1)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Habit name cannot be empty")
        return value


class HabitCreate(HabitBase):
    pass


class HabitUpdate(HabitBase):
    pass


class HabitResponse(BaseModel):
    """Habit as shown to the user, including derived progress."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    target_count: int
    current_count: int
    last_updated: str
    completion_percentage: int
    is_completed: bool


class LegacyHabit(BaseModel):
    """A habit as serialized in the old preferences blob (camelCase keys)."""
    id: str = Field(..., min_length=1)
    name: str = Field(..., max_length=200)
    target_count: int = Field(..., alias="targetCount", ge=1)
    current_count: int = Field(default=0, alias="currentCount", ge=0)
    last_updated: Optional[str] = Field(default="", alias="lastUpdated")

    model_config = {"populate_by_name": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Habit name cannot be empty")
        return value
