"""
Design (controller.py)
- Purpose: Turn user actions (add, delete, edit, save) into store calls and keep the
           repository snapshot fresh afterwards.
- Inputs: DogStore (persistence), Repo (snapshot), on_change listener.
- Outputs: None; ValidationError and DogNotFoundError propagate to the caller (UI shows them).
- Side effects: Writes the database, replaces the Repo dog list, fires on_change.
- Thread-safety: Main thread only; one action at a time.
"""

import logging
from typing import Callable, Optional

from .repository import Repo
from .storage import DogStore
from .validation import validate_dog

logger = logging.getLogger(__name__)


class DogNotFoundError(LookupError):
    """The dog being edited no longer exists (deleted while its dialog was open)."""

    def __init__(self, dog_id: int):
        self.dog_id = dog_id
        super().__init__("This dog no longer exists.")


class DogController:
    """
    Design (DogController)
    - State:
        editing_id / editing_name / editing_time: the dog being edited (None/"" when idle)
    - on_change is called after every refresh; main.py points it at FeedingMonitor.scan_now
      and the UI repaint.
    """

    def __init__(self, store: DogStore, repo: Repo, on_change: Optional[Callable[[], None]] = None):
        self.store = store
        self.repo = repo
        self.on_change = on_change
        self.editing_id: int | None = None
        self.editing_name = ""
        self.editing_time = ""

    def refresh(self) -> None:
        """Re-read every row from the store into the repo and announce the change."""
        self.repo.replace_dogs(self.store.list())
        if self.on_change is not None:
            self.on_change()

    # -------- Actions --------

    def add_dog(self, name: str, feeding_time: str) -> None:
        """Validate, insert and refresh. Raises ValidationError before any write."""
        name, feeding_time = validate_dog(name, feeding_time)
        self.store.add(name, feeding_time)
        logger.info("added %s at %s", name, feeding_time)
        self.refresh()

    def delete_dog(self, dog_id: int) -> None:
        if self.store.remove(dog_id):
            logger.info("removed dog %s", dog_id)
        else:
            logger.debug("remove dog %s: nothing deleted", dog_id)
        if self.editing_id == dog_id:
            self.cancel_editing()
        self.refresh()

    def start_editing(self, dog_id: int, name: str, feeding_time: str) -> None:
        self.editing_id = dog_id
        self.editing_name = name
        self.editing_time = feeding_time

    def cancel_editing(self, dog_id: int | None = None) -> None:
        """Leave edit mode. With dog_id, only if that dog is the one being edited."""
        if dog_id is not None and dog_id != self.editing_id:
            return
        self.editing_id = None
        self.editing_name = ""
        self.editing_time = ""

    def save_edit(self, dog_id: int, name: str, feeding_time: str) -> None:
        """
        Purpose: Validate and write the edited values, then leave edit mode.
        Raises: ValidationError (edit state is kept so the user can correct the input),
                DogNotFoundError if the dog was deleted meanwhile (edit mode ends).
        """
        self.editing_name = name
        self.editing_time = feeding_time
        name, feeding_time = validate_dog(name, feeding_time)
        if self.repo.get(dog_id) is None:
            self.cancel_editing(dog_id)
            raise DogNotFoundError(dog_id)
        self.store.update(dog_id, name, feeding_time)
        logger.info("updated dog %s to %s at %s", dog_id, name, feeding_time)
        self.cancel_editing()
        self.refresh()
