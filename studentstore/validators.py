"""Field validators. Turn raw input lines into typed field values.

Every validator either returns the parsed value, returns None when an empty
line is allowed (the caller keeps the old value), or raises ValidationError
with a message suitable for showing to the user.
"""

from __future__ import annotations

import re
from typing import Optional

from studentstore.models import AGE_MAX, AGE_MIN, ID_MAX, ID_MIN, NAME_MAX, name_fits

# ASCII digits only; str.isdigit() also accepts things like superscripts
_DIGITS_RE = re.compile(r"[0-9]+")


class ValidationError(ValueError):
    """Raised when a line of input is not a valid field value."""


def parse_bounded_integer(text: str, minimum: int, maximum: int) -> int:
    """Parse a whole-string unsigned integer within [minimum, maximum].

    Signs, whitespace and trailing characters are all rejected.

    Raises:
        ValidationError: with a generic message; callers usually replace it
            with a field-specific one.
    """
    if not text or not _DIGITS_RE.fullmatch(text):
        raise ValidationError(f"Not an unsigned integer: {text!r}")
    # Too many digits to be in range; int() also refuses very long strings
    digits = text.lstrip("0") or "0"
    if len(digits) > len(str(maximum)):
        raise ValidationError(f"{text[:20]}... is outside {minimum}-{maximum}")
    value = int(digits)
    if value < minimum or value > maximum:
        raise ValidationError(f"{value} is outside {minimum}-{maximum}")
    return value


def validate_age(text: str, allow_empty: bool = False) -> Optional[int]:
    """Validate an age line. Returns None for an allowed empty line."""
    if text == "":
        if allow_empty:
            return None
        raise ValidationError("Age cannot be empty.")
    try:
        return parse_bounded_integer(text, AGE_MIN, AGE_MAX)
    except ValidationError:
        raise ValidationError(f"Please enter a number between {AGE_MIN} and {AGE_MAX}.") from None


def validate_name(text: str, allow_empty: bool = False) -> Optional[str]:
    """Validate a name line after trimming surrounding whitespace.

    Names longer than NAME_MAX characters, or whose UTF-8 form does not fit
    the fixed field, are rejected rather than truncated.
    """
    name = text.strip()
    if not name:
        if allow_empty:
            return None
        raise ValidationError("Name cannot be empty.")
    if "\x00" in name:
        raise ValidationError("Name contains invalid characters.")
    if not name_fits(name):
        raise ValidationError(f"Name must be at most {NAME_MAX} characters.")
    return name


def validate_id(text: str) -> int:
    """Validate a student id line."""
    if text == "":
        raise ValidationError("ID cannot be empty.")
    try:
        return parse_bounded_integer(text, ID_MIN, ID_MAX)
    except ValidationError:
        raise ValidationError("Please enter a positive integer.") from None
