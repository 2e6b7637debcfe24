from __future__ import annotations

import math
import re
from typing import Any

from ..core.constants import ROLL_NO_MAX_LENGTH
from ..core.exceptions import InvalidFormatError, ValidationError

ROLL_NO_PATTERN = re.compile(r"[A-Za-z0-9]{1,%d}" % ROLL_NO_MAX_LENGTH)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

INVALID_ROLL_NO_MESSAGE = "Invalid format. Use alphanumeric only."
INVALID_ROLL_NO_HINT = "Invalid characters"
INVALID_SCORE_MESSAGE = "Score must be a number."


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def is_valid_roll_no(value: Any) -> bool:
    """1-10 ASCII letters or digits, either case."""
    if not isinstance(value, str):
        return False
    return ROLL_NO_PATTERN.fullmatch(value) is not None


def require_valid_roll_no(value: Any) -> str:
    if not is_valid_roll_no(value):
        raise InvalidFormatError(INVALID_ROLL_NO_MESSAGE)
    return value


def roll_no_hint(value: Any) -> str:
    """Inline hint shown while the roll number is being typed."""
    return "" if is_valid_roll_no(value) else INVALID_ROLL_NO_HINT


def normalize_roll_no(value: str) -> str:
    """Canonical form used for uniqueness checks and lookups."""
    return str(value).strip().casefold()


def parse_score(value: Any) -> int:
    """Coerce user input into an integer score.

    Strings keep their leading integer ("85.9" -> 85, "12abc" -> 12), floats
    truncate toward zero. Anything without a leading integer is rejected rather
    than letting a NaN reach the averages.
    """
    if isinstance(value, bool):
        raise InvalidFormatError(INVALID_SCORE_MESSAGE)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise InvalidFormatError(INVALID_SCORE_MESSAGE)
        return int(value)
    if isinstance(value, str):
        m = _LEADING_INT.match(value)
        if m:
            return int(m.group(1))
    raise InvalidFormatError(INVALID_SCORE_MESSAGE)


def as_text(value: Any) -> str:
    """Form/JSON field as stripped text; JSON clients may send numbers."""
    if value is None:
        return ""
    return str(value).strip()
