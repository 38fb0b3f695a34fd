"""
Habit service: validation, daily rollover and progress increments.
"""
from typing import List, Optional, Type, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from wellness.core.exceptions import ValidationError
from wellness.core.logging_config import log_info
from wellness.core.time_utils import Clock, format_date, local_today, parse_date
from wellness.models.habit import Habit
from wellness.repositories.habit_repository import HabitRepository
from wellness.schemas.habit import HabitBase, HabitCreate, HabitUpdate

MISSING_FIELDS_MESSAGE = "Please fill all fields"
INVALID_TARGET_MESSAGE = "Please enter a valid target"


class IncrementResult(BaseModel):
    """Outcome of an increment.

    ``completed_now`` is set only by the call that moved the habit from
    not completed to completed.
    """

    habit: Habit
    completed_now: bool


class HabitService:
    """Service class for habit operations."""

    def __init__(self, repository: HabitRepository, clock: Optional[Clock] = None):
        self.repository = repository
        self.clock = clock

    def today(self) -> str:
        return format_date(local_today(self.clock))

    def _roll_over(self, habit: Habit, today: str) -> bool:
        if parse_date(habit.last_updated) == parse_date(today):
            return False
        habit.current_count = 0
        habit.last_updated = today
        return True

    @staticmethod
    def _parse_input(
        schema: Type[HabitBase],
        name: Optional[str],
        target_count: Union[int, str, None],
    ) -> HabitBase:
        name_text = (name or "").strip()
        target_text = str(target_count).strip() if target_count is not None else ""
        if not name_text or not target_text:
            raise ValidationError(MISSING_FIELDS_MESSAGE)
        try:
            return schema(name=name_text, target_count=target_text)
        except PydanticValidationError as exc:
            fields = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
            if "target_count" in fields:
                raise ValidationError(INVALID_TARGET_MESSAGE) from exc
            raise ValidationError(MISSING_FIELDS_MESSAGE) from exc

    def roll_over_all(self) -> int:
        """Reset every habit whose progress belongs to an earlier day."""
        today = self.today()
        stale = [habit for habit in self.repository.get_all() if self._roll_over(habit, today)]
        if stale:
            self.repository.insert_all(stale)
            log_info("Daily habit progress reset", habits=len(stale), day=today)
        return len(stale)

    def list_habits(self) -> List[Habit]:
        self.roll_over_all()
        return self.repository.get_all()

    def get_habit(self, habit_id: str) -> Optional[Habit]:
        return self.repository.get_by_id(habit_id)

    def add_habit(self, name: Optional[str], target_count: Union[int, str, None]) -> Habit:
        data = self._parse_input(HabitCreate, name, target_count)
        habit = Habit(
            name=data.name,
            target_count=data.target_count,
            current_count=0,
            last_updated=self.today(),
        )
        self.repository.insert(habit)
        log_info(f"Habit created: {habit.id}", name=habit.name, target=habit.target_count)
        return habit

    def edit_habit(
        self,
        habit_id: str,
        name: Optional[str],
        target_count: Union[int, str, None],
    ) -> Optional[Habit]:
        """Rename or retarget a habit; its progress is kept. Unknown ids give None."""
        data = self._parse_input(HabitUpdate, name, target_count)
        habit = self.repository.get_by_id(habit_id)
        if habit is None:
            return None
        habit.name = data.name
        habit.target_count = data.target_count
        if not self.repository.update(habit):
            return None
        log_info(f"Habit updated: {habit.id}")
        return habit

    def delete_habit(self, habit_id: str) -> bool:
        habit = self.repository.get_by_id(habit_id)
        if habit is None:
            return False
        deleted = self.repository.delete(habit)
        if deleted:
            log_info(f"Habit deleted: {habit_id}")
        return deleted

    def increment(self, habit_id: str) -> Optional[IncrementResult]:
        """Add one to today's progress without going past the target."""
        habit = self.repository.get_by_id(habit_id)
        if habit is None:
            return None

        self._roll_over(habit, self.today())
        was_completed = habit.is_completed
        if habit.current_count < habit.target_count:
            habit.current_count += 1

        if not self.repository.update(habit):
            return None
        completed_now = habit.is_completed and not was_completed
        if completed_now:
            log_info(f"Habit completed: {habit.id}", name=habit.name)
        return IncrementResult(habit=habit, completed_now=completed_now)
