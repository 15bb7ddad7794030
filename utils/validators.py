"""
utils/validators.py
-------------------
Input validation rules for student fields typed at the console.
"""

import re
from typing import Optional

MIN_AGE = 1
MAX_AGE = 150

# Optional sign, then ASCII digits only (no "1_0", no "1.0").
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def is_non_empty(text: Optional[str]) -> bool:
    """True if text has at least one non-whitespace character."""
    return bool(text and text.strip())


def is_valid_email(email: Optional[str]) -> bool:
    """
    Basic email check: contains '@' and '.', longer than 5 characters,
    and does not start or end with '@'.
    """
    if not email:
        return False
    return (
        "@" in email
        and "." in email
        and len(email) > 5
        and not email.startswith("@")
        and not email.endswith("@")
    )


def parse_int(text: Optional[str]) -> Optional[int]:
    """Parse a whole number, or None if text is not one."""
    if text is None:
        return None
    text = text.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


def parse_age(text: Optional[str]) -> Optional[int]:
    """Parse an age in [MIN_AGE, MAX_AGE], or None if invalid."""
    age = parse_int(text)
    if age is None or not MIN_AGE <= age <= MAX_AGE:
        return None
    return age


def is_confirmation(text: Optional[str]) -> bool:
    """True for 'y' or 'yes' (any case)."""
    return (text or "").strip().lower() in ("y", "yes")
