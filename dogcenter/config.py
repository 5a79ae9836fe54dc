"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: None.
- Outputs: Constants (file names, seed rows, intervals, message texts).
- Side effects: None.
- Thread-safety: N/A (read-only constants).
"""

APP_TITLE = "Dog Center"

# maximum number of log lines kept in the Logs panel (oldest trimmed)
LOG_MAX_LINES = 1000

# Persistence: filename for the SQLite database (path resolved in storage module)
DB_FILENAME = "dogcenter.db"

# Rows inserted the first time the dogs table is created: (name, feedingTime)
SEED_DOGS = [
    ("Buddy", "08:00"),
    ("Max", "13:00"),
    ("Bella", "18:00"),
]

# Reminder scan cadence; an extra scan also runs whenever the dog list changes
REMINDER_INTERVAL_SEC = 60

REMINDER_PREFIX = "Time to feed: "
NOTIFICATION_TITLE = "Feeding Reminder"
NOTIFICATION_TIMEOUT_SEC = 5

# Feeding time: two digits, colon, two digits. Shape only, no hour/minute range check.
FEEDING_TIME_PATTERN = r"\d{2}:\d{2}"
FEEDING_TIME_MAX_LEN = 5

EMPTY_FIELD_TITLE = "Error"
EMPTY_FIELD_MESSAGE = "Please enter both dog name and feeding time."
MALFORMED_TIME_TITLE = "Invalid Time"
MALFORMED_TIME_MESSAGE = "Please enter feeding time in HH:mm format."
