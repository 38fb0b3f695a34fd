"""
Tests for mood logging, the share summary and the weekly trend.
"""
import pytest

from wellness.core.exceptions import ValidationError
from wellness.services.mood_service import (
    NO_ENTRIES_MESSAGE,
    MoodService,
    average_mood,
    mood_bucket,
)


@pytest.fixture
def service(mood_repository, clock) -> MoodService:
    return MoodService(mood_repository, clock=clock)


def _log_sequence(service, clock, emojis):
    entries = []
    for emoji in emojis:
        entries.append(service.log_mood(emoji))
        clock.advance(minutes=5)
    return entries


def test_entries_are_listed_newest_first(service, clock):
    logged = _log_sequence(service, clock, ["😢", "😊", "😄"])

    listed = service.list_entries()

    assert [entry.id for entry in listed] == [entry.id for entry in reversed(logged)]
    assert average_mood(listed) == pytest.approx(10 / 3)


def test_summary_for_mixed_moods_is_neutral(service, clock):
    _log_sequence(service, clock, ["😢", "😊", "😄"])

    summary = service.build_summary()

    assert summary.splitlines() == [
        "My Wellness Mood Summary",
        "",
        "Total entries: 3",
        "Average mood: neutral",
        "Latest mood: 😄",
    ]


def test_summary_without_entries_is_rejected(service):
    with pytest.raises(ValidationError, match=NO_ENTRIES_MESSAGE):
        service.build_summary()


@pytest.mark.parametrize(
    "average,label",
    [
        (5.0, "very positive"),
        (4.5, "very positive"),
        (4.49, "positive"),
        (3.5, "positive"),
        (3.0, "neutral"),
        (2.5, "neutral"),
        (2.0, "somewhat negative"),
        (1.5, "somewhat negative"),
        (1.0, "negative"),
    ],
)
def test_mood_bucket_bands(average, label):
    assert mood_bucket(average) == label


def test_log_mood_formats_local_projections(service, clock):
    entry = service.log_mood("😊", "  after a run ")

    assert entry.date_string == "2026-03-14"
    assert entry.time_string == "09:30"
    assert entry.note == "after a run"
    assert entry.timestamp == int(clock.now.timestamp() * 1000)
    assert entry.mood_value == 4


def test_log_mood_rejects_unknown_emoji(service, mood_repository):
    with pytest.raises(ValidationError):
        service.log_mood("🤖")

    assert mood_repository.get_all() == []


def test_weekly_trend_keeps_last_seven_days_oldest_first(service, clock):
    service.log_mood("😢")
    clock.advance(days=3)
    service.log_mood("😐")
    clock.advance(days=3)
    service.log_mood("😄")
    clock.advance(days=2)

    points = service.weekly_trend()

    assert [(point.label, point.value) for point in points] == [
        ("03-17", 3),
        ("03-20", 5),
    ]


def test_delete_entry(service):
    entry = service.log_mood("😐")

    assert service.delete_entry(entry.id) is True
    assert service.delete_entry(entry.id) is False
    assert service.list_entries() == []


def test_describe_entry_includes_note_only_when_present(service):
    plain = service.log_mood("😐")
    noted = service.log_mood("😊", "good day")

    assert "Note" not in service.describe_entry(plain)
    assert service.describe_entry(noted).endswith("Note: good day")
