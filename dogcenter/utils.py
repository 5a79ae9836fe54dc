"""
Design (utils.py)
- Purpose: Reusable helpers: feeding-time entry formatting, desktop notifications, and a
           logging handler that feeds the in-app Logs panel.
- Inputs: Various helper parameters (entry text, reminder text, log records).
- Outputs: Helper results (strings).
- Side effects: send_notification talks to the OS notification backend via plyer.
- Thread-safety: Stateless helpers; UILogHandler hands lines to a thread-safe sink.
"""

import logging
from typing import Callable

from plyer import notification

from .config import FEEDING_TIME_MAX_LEN, NOTIFICATION_TITLE, NOTIFICATION_TIMEOUT_SEC

logger = logging.getLogger(__name__)


def format_time_input(value: str, previous: str) -> str:
    """
    Purpose: Auto-format the feeding-time entry while the user types.
    Inputs: value (new entry text), previous (text before the keystroke).
    Outputs: "08" -> "08:"; anything up to 5 chars is kept; longer input is refused
             (previous is returned).
    """
    if len(value) == 2 and ":" not in value:
        return value + ":"
    if len(value) <= FEEDING_TIME_MAX_LEN:
        return value
    return previous


def send_notification(message: str) -> None:
    """
    Purpose: Show a desktop notification for a feeding reminder.
    Side Effects: Calls plyer; backend failures are logged, the in-app banner still shows.
    """
    try:
        notification.notify(
            title=NOTIFICATION_TITLE,
            message=message,
            timeout=NOTIFICATION_TIMEOUT_SEC,
        )
    except Exception:
        logger.warning("desktop notification failed", exc_info=True)


class UILogHandler(logging.Handler):
    """Forward formatted log lines to a sink (the Logs panel's thread-safe append)."""

    def __init__(self, sink: Callable[[str], None], level: int = logging.INFO):
        super().__init__(level)
        self.sink = sink
        self.setFormatter(logging.Formatter("[%(asctime)s] %(message)s", "%Y-%m-%d %H:%M:%S"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.sink(self.format(record) + "\n")
        except Exception:
            self.handleError(record)
