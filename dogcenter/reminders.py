"""
Design (reminders.py)
- Purpose: Decide which dogs are due right now and phrase the reminder banner.
- Inputs: DogRecord list, local wall-clock time.
- Outputs: "" when nobody is due, else "Time to feed: <names>".
- Side effects: None.
- Thread-safety: Stateless; the monitor thread calls it with a Repo snapshot.
"""

from datetime import datetime
from typing import Iterable, List

from .config import REMINDER_PREFIX
from .models import DogRecord


def current_minute(now: datetime) -> str:
    """Local time truncated to the minute, in the same HH:mm form as stored feeding times."""
    return now.strftime("%H:%M")


def dogs_due(dogs: Iterable[DogRecord], hhmm: str) -> List[DogRecord]:
    # exact string match: a dog is due only during its one minute
    return [dog for dog in dogs if dog.feeding_time == hhmm]


def build_reminder(dogs: Iterable[DogRecord], hhmm: str) -> str:
    """
    Purpose: Join the names of every dog due at hhmm, in list order.
    Outputs: "" or e.g. "Time to feed: Max, Luna".
    """
    due = dogs_due(dogs, hhmm)
    if not due:
        return ""
    return REMINDER_PREFIX + ", ".join(dog.name for dog in due)
