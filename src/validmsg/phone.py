"""US phone number normalization.

Canonicalizes loosely formatted US phone numbers to E.164 (+1XXXXXXXXXX)
or national (XXXXXXXXXX) form. Pure functions; invalid input yields None
rather than an exception.

Patterns use [0-9] rather than \\d so non-ASCII digits never count.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import re

from validmsg.enums import PhoneFormat

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Patterns
    "US_PHONE_E164_PATTERN",
    "US_PHONE_NATIONAL_PATTERN",
    "US_PHONE_11_DIGIT_PATTERN",
    "NON_DIGITS",
    # Functions
    "normalize_us_phone",
    "phone_transform_and_validate",
    "phone_refine",
]

US_PHONE_E164_PATTERN: re.Pattern[str] = re.compile(r"\+1[0-9]{10}")
US_PHONE_NATIONAL_PATTERN: re.Pattern[str] = re.compile(r"[0-9]{10}")
US_PHONE_11_DIGIT_PATTERN: re.Pattern[str] = re.compile(r"1[0-9]{10}")
NON_DIGITS: re.Pattern[str] = re.compile(r"[^0-9]")


def normalize_us_phone(value: str, fmt: PhoneFormat = PhoneFormat.E164) -> str | None:
    """Normalize a US phone number.

    Rules, first match wins:
        1. Exactly 10 digits after stripping non-digits: domestic number
        2. Exactly 11 digits starting with 1: country code included
        3. Input itself is +1 followed by 10 digits: already E.164
        4. Anything else: None

    Args:
        value: Phone number in any common notation
        fmt: Output format

    Returns:
        Normalized number, or None if value is not a recognizable US number

    Example:
        >>> normalize_us_phone("(123) 456-7890")
        '+11234567890'
        >>> normalize_us_phone("+1 123 456 7890", PhoneFormat.NATIONAL)
        '1234567890'
        >>> normalize_us_phone("123") is None
        True
    """
    digits = NON_DIGITS.sub("", value)
    e164 = fmt == PhoneFormat.E164

    if US_PHONE_NATIONAL_PATTERN.fullmatch(digits):
        return f"+1{digits}" if e164 else digits
    if US_PHONE_11_DIGIT_PATTERN.fullmatch(digits):
        return f"+{digits}" if e164 else digits[1:]
    if US_PHONE_E164_PATTERN.fullmatch(value):
        return value if e164 else value.removeprefix("+1")
    return None


def phone_transform_and_validate(
    value: str | None, fmt: PhoneFormat = PhoneFormat.E164
) -> str | None:
    """Trim and normalize an optional phone field.

    Returns None when the field is absent (None or blank). A value that
    cannot be normalized is returned trimmed but otherwise unchanged, so a
    following phone_refine() check rejects it.

    Example:
        >>> phone_transform_and_validate("  123.456.7890 ")
        '+11234567890'
        >>> phone_transform_and_validate("   ") is None
        True
        >>> phone_transform_and_validate("12345")
        '12345'
    """
    if value is None:
        return None
    trimmed = value.strip()
    if not trimmed:
        return None
    normalized = normalize_us_phone(trimmed, fmt)
    return trimmed if normalized is None else normalized


def phone_refine(value: str | None, fmt: PhoneFormat = PhoneFormat.E164) -> bool:
    """Check that a value is already in canonical form; None (absent) passes."""
    if value is None:
        return True
    pattern = US_PHONE_E164_PATTERN if fmt == PhoneFormat.E164 else US_PHONE_NATIONAL_PATTERN
    return pattern.fullmatch(value) is not None
