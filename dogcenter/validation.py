"""
Design (validation.py)
- Purpose: Check a dog name / feeding time pair before any write to the store.
- Inputs: Raw entry text (name, feeding_time).
- Outputs: Trimmed (name, feeding_time) tuple, or ValidationError.
- Side effects: None.
- Thread-safety: Stateless; safe to call from any thread.
"""

import enum
import re
from typing import Tuple

from .config import (
    FEEDING_TIME_PATTERN,
    EMPTY_FIELD_TITLE,
    EMPTY_FIELD_MESSAGE,
    MALFORMED_TIME_TITLE,
    MALFORMED_TIME_MESSAGE,
)

# ASCII so that non-Latin digits (e.g. Arabic-Indic) are rejected like in the stored data
_TIME_RE = re.compile(FEEDING_TIME_PATTERN, re.ASCII)

# Characters removed around input: Unicode space separators, line terminators and the BOM.
# str.strip() alone keeps U+FEFF and drops U+001C..U+001F, which are not blank here.
_BLANK_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class ValidationErrorKind(enum.Enum):
    EMPTY_FIELD = "empty_field"
    MALFORMED_TIME = "malformed_time"


class ValidationError(ValueError):
    """
    Raised when user input cannot be written to the store.
    - kind: ValidationErrorKind
    - title: dialog title shown by the UI
    - str(err): dialog message
    """

    _TEXTS = {
        ValidationErrorKind.EMPTY_FIELD: (EMPTY_FIELD_TITLE, EMPTY_FIELD_MESSAGE),
        ValidationErrorKind.MALFORMED_TIME: (MALFORMED_TIME_TITLE, MALFORMED_TIME_MESSAGE),
    }

    def __init__(self, kind: ValidationErrorKind):
        self.kind = kind
        self.title, message = self._TEXTS[kind]
        super().__init__(message)


def is_feeding_time(value: str) -> bool:
    """True if value has the HH:mm shape (no range check, "99:99" passes)."""
    return _TIME_RE.fullmatch(value) is not None


def validate_dog(name: str, feeding_time: str) -> Tuple[str, str]:
    """
    Purpose: Validate input for both the add and the edit flow.
    Inputs: name, feeding_time (raw, may carry surrounding whitespace or be None).
    Outputs: (name, feeding_time) trimmed.
    Raises: ValidationError(EMPTY_FIELD) if either is blank after trimming,
            ValidationError(MALFORMED_TIME) if the time is not two digits, colon, two digits.
    """
    name = (name or "").strip(_BLANK_CHARS)
    feeding_time = (feeding_time or "").strip(_BLANK_CHARS)
    if not name or not feeding_time:
        raise ValidationError(ValidationErrorKind.EMPTY_FIELD)
    if not is_feeding_time(feeding_time):
        raise ValidationError(ValidationErrorKind.MALFORMED_TIME)
    return name, feeding_time
