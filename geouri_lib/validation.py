# -*- coding: utf-8 -*-
"""Validation utilities for geo URI text.

This module provides the character classes of the RFC 5870 grammar and
validation functions for the label tokens (CRS labels, parameter names)
that the composer writes verbatim.

All classifiers are ASCII-only: a non-ASCII letter or digit is never
accepted, whatever the active locale says.
"""

import math
import re
from re import Pattern

from geouri_lib.constants import MARK_CHARS
from geouri_lib.constants import P_UNRESERVED_CHARS

# labeltext = 1*( alphanum / "-" )
LABELTEXT_PATTERN: Pattern[str] = re.compile(r"[A-Za-z0-9-]+")


def is_digit(ch: str) -> bool:
    """Check if ``ch`` is a decimal digit (0-9)."""
    return "0" <= ch <= "9"


def is_alpha(ch: str) -> bool:
    """Check if ``ch`` is an ASCII letter (A-Z / a-z)."""
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


def is_alphanum(ch: str) -> bool:
    return is_alpha(ch) or is_digit(ch)


def is_hexdigit(ch: str) -> bool:
    """Check if ``ch`` is a hexadecimal digit (0-9 / A-F / a-f)."""
    return is_digit(ch) or "A" <= ch <= "F" or "a" <= ch <= "f"


def is_mark(ch: str) -> bool:
    """Check if ``ch`` is one of ``-_.!~*'()``."""
    return ch in MARK_CHARS


def is_p_unreserved(ch: str) -> bool:
    """Check if ``ch`` is one of ``[]:&+$``."""
    return ch in P_UNRESERVED_CHARS


def is_unreserved(ch: str) -> bool:
    """Check if ``ch`` is alphanumeric or a mark."""
    return is_alphanum(ch) or is_mark(ch)


def is_labelchar(ch: str) -> bool:
    return is_alphanum(ch) or ch == "-"


def to_digit(ch: str, radix: int = 10) -> int:
    """Convert a character to its digit value in base ``radix``.

    Args:
        ch: Character to convert
        radix: Base between 2 and 36 inclusive

    Returns:
        Digit value, or -1 if ``ch`` is not a digit of that base
    """
    if radix < 2 or radix > 36:
        return -1

    if is_digit(ch):
        digit = ord(ch) - ord("0")
    elif "a" <= ch <= "z":
        digit = ord(ch) - ord("a") + 10
    elif "A" <= ch <= "Z":
        digit = ord(ch) - ord("A") + 10
    else:
        return -1

    return digit if digit < radix else -1


def ascii_lower(text: str) -> str:
    """Lowercase the ASCII letters of ``text`` and nothing else."""
    return "".join(
        chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in text
    )


def equals_ignorecase(a: str, b: str) -> bool:
    return ascii_lower(a) == ascii_lower(b)


def is_valid_labeltext(label: str) -> bool:
    """Check if a string is a valid ``labeltext`` token.

    Valid labels:
    - 1 or more characters
    - ASCII letters, digits and ``-`` only

    Args:
        label: Label to validate

    Returns:
        True if valid, False otherwise
    """
    if not label:
        return False
    return LABELTEXT_PATTERN.fullmatch(label) is not None


def validate_labeltext(label: str, what: str = "label") -> str:
    """Validate a labeltext token, raising an error if invalid.

    Args:
        label: Label to validate
        what: Name of the validated item, used in the error message

    Returns:
        The label, unchanged

    Raises:
        ValueError: If the label is invalid
    """
    if not is_valid_labeltext(label):
        # Escape non-printable characters for error message
        escaped = ""
        for char in label:
            if ord(char) < 0x20 or ord(char) > 0x7E:
                escaped += f"\\x{ord(char):02x}"
            else:
                escaped += char
        msg = f"Invalid {what}: `{escaped}` (expected 1*( ALPHA / DIGIT / '-' ))"
        raise ValueError(msg)
    return label


def validate_crs_label(label: str) -> str:
    return validate_labeltext(label, what="CRS label")


def validate_parameter_name(name: str) -> str:
    return validate_labeltext(name, what="parameter name")


def validate_finite(value: float, what: str = "value") -> float:
    """Reject NaN and infinities, which have no textual form in a geo URI."""
    if not math.isfinite(value):
        raise ValueError(f"Invalid {what}: {value} is not a finite number")
    return value
