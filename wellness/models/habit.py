"""
Habit model: a daily counter tracked toward a target.
"""
import math

from sqlmodel import CheckConstraint, Field

from .base import BaseModel


class Habit(BaseModel, table=True):
    """
    A user-defined daily habit.

    ``current_count`` is the progress for the day recorded in
    ``last_updated`` (YYYY-MM-DD); it is reset when that day is over.
    """
    __tablename__ = "habits"

    name: str = Field(..., min_length=1, max_length=200, index=True)
    target_count: int = Field(..., ge=1)
    current_count: int = Field(default=0, ge=0)
    last_updated: str = Field(default="", max_length=10)

    __table_args__ = (
        CheckConstraint("length(name) > 0", name="check_habit_name_not_empty"),
        CheckConstraint("current_count >= 0", name="check_habit_current_count"),
    )

    @property
    def is_completed(self) -> bool:
        return self.current_count >= self.target_count

    @property
    def completion_percentage(self) -> int:
        """Progress toward the target in percent, rounded half up. Reads 100 only once completed."""
        if self.target_count <= 0:
            return 0
        percentage = math.floor(self.current_count / self.target_count * 100 + 0.5)
        percentage = max(0, min(100, percentage))
        if percentage == 100 and not self.is_completed:
            # 199/200 must not read as done
            return 99
        return percentage
