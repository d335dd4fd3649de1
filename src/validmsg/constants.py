"""Shared constants for validmsg.

Centralizes configuration defaults used by the localization and formatting
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Locale defaults: Initial current/fallback locale of a registry
- Input limits: Size constraints on locale codes and message trees
- Fallback strings: Degraded output when a template cannot be found

Python 3.12+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "DEFAULT_FALLBACK_LOCALE",
    "LOCALE_ENV_VAR",
    # Input limits
    "MAX_LOCALE_CODE_LENGTH",
    "MAX_TREE_DEPTH",
    # Interpolation
    "FIELD_NAME_PARAM",
    # Fallback strings
    "FALLBACK_MISSING_MESSAGE",
    "FALLBACK_INVALID_FIELD",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used for lookups when the caller does not pass one.
DEFAULT_LOCALE: str = "en"

# Locale consulted when a key is missing from the requested locale.
# Must be loaded before lookups are expected to succeed.
DEFAULT_FALLBACK_LOCALE: str = "en"

# Environment variable read by validmsg.defaults for the initial locale
# of the process-wide registry.
LOCALE_ENV_VAR: str = "VALIDMSG_LOCALE"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# BCP-47 tags are rarely longer than 35 characters (RFC 5646 section 4.4.1).
# 64 leaves room for private-use extensions.
MAX_LOCALE_CODE_LENGTH: int = 64

# Message trees are shallow (group -> key -> examples -> value).
# Anything deeper than this is malformed input.
MAX_TREE_DEPTH: int = 16

# ============================================================================
# INTERPOLATION
# ============================================================================

# Implicit parameter carrying the caller's field label in FieldName mode.
FIELD_NAME_PARAM: str = "fieldName"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Returned by get_message() when a key is absent from every consulted locale.
# Format string - use .format(key=...)
FALLBACK_MISSING_MESSAGE: str = "{{{key}}}"  # e.g., {string.tooShort}

# Template used by the error formatter when no localized template exists.
# Interpolated like any other template, so {fieldName} is replaced.
FALLBACK_INVALID_FIELD: str = "{fieldName} is invalid"
