"""
Design (repository.py)
- Purpose: Hold the in-memory view of the dog list and the current reminder behind a tiny API
           (and a lock), so UI and Monitor don't share bare lists across threads.
- Inputs: DogRecord lists (replaced wholesale after every store mutation) and reminder text.
- Outputs: Snapshots (copies) of the current dogs; the current reminder text.
- Side effects: Replaces internal state.
- Thread-safety: All methods take the internal lock; snapshot returns a copy.
"""

import threading
from typing import List

from .models import DogRecord


class Repo:
    """
    Design (Repo)
    - State:
        _dogs: [DogRecord] in store order, a read-only copy of the database rows
        _reminder: "" (no dog due) or "Time to feed: ..." from the last scan
        _lock: threading.Lock to protect all mutating/reading operations
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._dogs: List[DogRecord] = []
        self._reminder = ""

    # -------- Dog list --------

    def replace_dogs(self, dogs: List[DogRecord]) -> None:
        """
        Purpose: Swap in a freshly listed set of dogs (no incremental diffing).
        Side effects: Replaces _dogs.
        Thread-safety: Protected by _lock.
        """
        with self._lock:
            self._dogs = list(dogs)

    def get(self, dog_id: int) -> DogRecord | None:
        with self._lock:
            for dog in self._dogs:
                if dog.id == dog_id:
                    return dog
            return None

    def snapshot(self) -> List[DogRecord]:
        """
        Purpose: Return a copy of the dog list for safe iteration.
        Thread-safety: Protected by _lock; records are frozen so a shallow copy suffices.
        """
        with self._lock:
            return list(self._dogs)

    # -------- Reminder --------

    def set_reminder(self, text: str) -> bool:
        """Store the latest reminder. Returns True if it differs from the previous one."""
        with self._lock:
            changed = text != self._reminder
            self._reminder = text
            return changed

    @property
    def reminder(self) -> str:
        with self._lock:
            return self._reminder
