"""
Background reminder worker.

Design:
- Runs in its own thread so the UI stays responsive.
- Every cycle:
    1) Snapshot the dog list from the repository.
    2) Compare each feeding time with the current HH:mm.
    3) Store the reminder text in the repo and hand it to the UI.
    4) If the text changed to a non-empty value, fire a notification.
- Cycles run once at start, every REMINDER_INTERVAL_SEC seconds, and right away
  when scan_now() is called (the dog list changed).
- Methods:
    start(): begin the daemon thread
    scan_now(): wake the thread for an immediate scan
    stop(): signal the thread to stop and wake it so it exits promptly
    join(): wait for the thread to finish (tests; the UI must not block on it)
    scan(): one synchronous cycle (used by the thread and by tests)
- Thread-safety: Repo does its own locking; UI calls are posted back to main thread.
"""

import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from .repository import Repo
from .reminders import build_reminder, current_minute
from .config import REMINDER_INTERVAL_SEC

logger = logging.getLogger(__name__)


class FeedingMonitor:
    def __init__(
        self,
        repo: Repo,
        on_reminder: Callable[[str], None],
        notify: Optional[Callable[[str], None]] = None,
        clock: Callable[[], datetime] = datetime.now,
        interval: float = REMINDER_INTERVAL_SEC,
    ):
        self.repo = repo
        self.on_reminder = on_reminder
        self.notify = notify
        self.clock = clock
        self.interval = interval
        self._stop = threading.Event()
        self._wake = threading.Event()
        self._thread = threading.Thread(target=self._loop, name="feeding-monitor", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        self._wake.set()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread.is_alive():
            self._thread.join(timeout)

    def scan_now(self) -> None:
        self._wake.set()

    @property
    def running(self) -> bool:
        return self._thread.is_alive()

    def scan(self) -> str:
        """
        Purpose: Run one reminder check against the current repo snapshot.
        Outputs: The reminder text ("" when no dog is due).
        Side effects: Updates repo reminder, calls on_reminder and maybe notify.
        """
        hhmm = current_minute(self.clock())
        text = build_reminder(self.repo.snapshot(), hhmm)
        changed = self.repo.set_reminder(text)
        if changed:
            logger.info("reminder at %s: %s", hhmm, text or "(none)")
        self.on_reminder(text)
        if changed and text and self.notify is not None:
            self.notify(text)
        return text

    def _loop(self) -> None:
        while not self._stop.is_set():
            try:
                self.scan()
            except Exception:
                logger.exception("reminder scan failed")
            # a scan_now() during the wait cuts it short and restarts the interval
            self._wake.wait(self.interval)
            self._wake.clear()
