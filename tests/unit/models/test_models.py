from wellness.models.enums import MoodEmoji
from wellness.models.habit import Habit
from wellness.models.mood_entry import MoodEntry


def _habit(current: int, target: int) -> Habit:
    return Habit(name="Drink Water", target_count=target, current_count=current)


def test_completion_percentage_bounds_and_completion():
    for target in range(1, 12):
        for current in range(0, target + 3):
            habit = _habit(current, target)
            assert 0 <= habit.completion_percentage <= 100
            assert (habit.completion_percentage == 100) == habit.is_completed


def test_completion_percentage_rounds_half_up():
    assert _habit(1, 8).completion_percentage == 13
    assert _habit(1, 3).completion_percentage == 33
    assert _habit(2, 3).completion_percentage == 67


def test_almost_done_never_reads_as_complete():
    habit = _habit(199, 200)
    assert habit.is_completed is False
    assert habit.completion_percentage == 99


def test_zero_target_has_zero_percentage():
    habit = _habit(0, 0)
    assert habit.completion_percentage == 0


def test_new_habit_gets_unique_id_and_zero_count():
    first = Habit(name="Meditate", target_count=1)
    second = Habit(name="Meditate", target_count=1)
    assert first.id != second.id
    assert first.current_count == 0
    assert first.last_updated == ""


def _entry(emoji: str) -> MoodEntry:
    return MoodEntry(
        emoji=emoji,
        timestamp=0,
        date_string="2026-03-14",
        time_string="09:30",
    )


def test_mood_value_mapping():
    expected = {"😢": 1, "😞": 2, "😐": 3, "😊": 4, "😄": 5}
    for emoji, value in expected.items():
        assert _entry(emoji).mood_value == value
    assert [mood.score for mood in MoodEmoji] == [1, 2, 3, 4, 5]


def test_unknown_emoji_is_neutral():
    assert _entry("🤖").mood_value == 3
