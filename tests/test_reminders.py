from datetime import datetime

from dogcenter.models import DogRecord
from dogcenter.reminders import build_reminder, current_minute, dogs_due

DOGS = [
    DogRecord(1, "Buddy", "08:00"),
    DogRecord(2, "Max", "13:00"),
    DogRecord(3, "Bella", "18:00"),
    DogRecord(4, "Luna", "13:00"),
]


def test_current_minute_truncates_seconds():
    assert current_minute(datetime(2025, 1, 1, 8, 0, 59)) == "08:00"
    assert current_minute(datetime(2025, 1, 1, 23, 5, 1)) == "23:05"


def test_single_dog_due():
    assert build_reminder(DOGS, "08:00") == "Time to feed: Buddy"


def test_shared_slot_joined_in_list_order():
    assert [d.name for d in dogs_due(DOGS, "13:00")] == ["Max", "Luna"]
    assert build_reminder(DOGS, "13:00") == "Time to feed: Max, Luna"


def test_no_match_is_empty():
    assert build_reminder(DOGS, "08:01") == ""
    assert build_reminder([], "08:00") == ""


def test_exact_string_match_only():
    dogs = [DogRecord(1, "Rex", "8:00")]
    assert build_reminder(dogs, "08:00") == ""


def test_same_minute_same_output():
    first = build_reminder(DOGS, current_minute(datetime(2025, 1, 1, 13, 0, 5)))
    second = build_reminder(DOGS, current_minute(datetime(2025, 1, 1, 13, 0, 50)))
    assert first == second == "Time to feed: Max, Luna"
