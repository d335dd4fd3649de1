"""Locale code validation, normalization and Babel metadata.

Centralizes locale format handling used throughout the codebase. Registry
keys keep the caller's spelling; Babel lookups go through the POSIX form.

Python 3.12+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING

from validmsg.constants import MAX_LOCALE_CODE_LENGTH
from validmsg.diagnostics import Diagnostic, DiagnosticCode, LocaleNotFoundError

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LocaleInfo",
    "get_babel_locale",
    "get_locale_info",
    "normalize_locale",
    "validate_locale_code",
]


def validate_locale_code(locale_code: str) -> None:
    """Validate locale code format.

    Checks that the code is a non-empty string of alphanumeric segments
    separated by hyphens or underscores. Does not check that the locale
    exists; "xx" is well-formed.

    Args:
        locale_code: Locale code to validate

    Raises:
        ValueError: If locale code is empty, too long or has invalid format
    """
    if not isinstance(locale_code, str) or not locale_code:
        msg = "Locale code cannot be empty"
        raise ValueError(msg)

    if len(locale_code) > MAX_LOCALE_CODE_LENGTH:
        msg = f"Locale code exceeds {MAX_LOCALE_CODE_LENGTH} characters: '{locale_code[:20]}...'"
        raise ValueError(msg)

    segments = locale_code.replace("_", "-").split("-")
    if not all(segment.isascii() and segment.isalnum() for segment in segments):
        msg = f"Invalid locale code format: '{locale_code}'"
        raise ValueError(msg)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (es-MX), while Babel/POSIX uses underscores (es_MX).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("es-MX")
        'es_MX'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        LocaleNotFoundError: If Babel has no CLDR data for the locale
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415

    validate_locale_code(locale_code)
    try:
        return Locale.parse(normalize_locale(locale_code))
    except UnknownLocaleError as e:
        diagnostic = Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=f"Unknown locale '{locale_code}'",
            hint="Use a locale known to CLDR, e.g. 'en', 'es-MX'",
            locale=locale_code,
        )
        raise LocaleNotFoundError(locale_code, diagnostic) from e


@dataclass(frozen=True, slots=True)
class LocaleInfo:
    """Display metadata for a locale.

    Attributes:
        code: Locale code as requested
        name: English display name (e.g., "Spanish (Mexico)")
        native_name: Display name in the locale itself (e.g., "español (México)")
        rtl: True when the script is written right-to-left
    """

    code: str
    name: str
    native_name: str
    rtl: bool


def get_locale_info(locale_code: str) -> LocaleInfo:
    """Describe a locale using Babel's CLDR data.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        LocaleInfo with English and native display names

    Raises:
        LocaleNotFoundError: If Babel has no CLDR data for the locale
        ValueError: If locale format is invalid

    Example:
        >>> info = get_locale_info("de")
        >>> info.name, info.native_name, info.rtl
        ('German', 'Deutsch', False)
    """
    locale = get_babel_locale(locale_code)
    return LocaleInfo(
        code=locale_code,
        name=locale.get_display_name("en") or locale_code,
        native_name=locale.get_display_name() or locale_code,
        rtl=locale.character_order == "right-to-left",
    )
