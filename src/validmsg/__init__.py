"""validmsg - Localized validation error messages.

Stores per-locale message templates, resolves them with fallback to a
default locale, and renders the user-facing error strings that validation
rules report. Also ships a US phone number normalizer.

Public API:
    LocaleRegistry - Per-locale message storage, async loading, fallback lookup
    ErrorMessageFormatter - Renders FormatRequest objects to error strings
    FormatRequest - What a validation rule asks to render
    MsgType - FIELD_NAME (label in a template) or MESSAGE (literal override)
    normalize_us_phone - Canonicalize US phone numbers (E.164 or national)
    PhoneFormat - E164 or NATIONAL

Exceptions:
    ValidMsgError - Base exception class
    LocaleNotFoundError - No message data for a locale
    LocaleLoadError - Loader failure or malformed locale data
    InvalidMessageTreeError - Message tree with unsupported shape
    InvalidRequestError - Malformed format request

Submodules:
    validmsg.localization - Registry, catalogs, loaders, interpolation
    validmsg.formatting - Error message formatter
    validmsg.phone - Phone normalization and validation helpers
    validmsg.diagnostics - Error types and structured diagnostics
    validmsg.locale_utils - Locale code validation and Babel metadata
    validmsg.defaults - Process-wide default registry and formatter
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    InvalidMessageTreeError,
    InvalidRequestError,
    LocaleLoadError,
    LocaleNotFoundError,
    ValidMsgError,
)
from .enums import MsgType, PhoneFormat
from .formatting import ErrorMessageFormatter, FormatRequest
from .localization import LocaleRegistry
from .phone import normalize_us_phone

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("validmsg")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ErrorMessageFormatter",
    "FormatRequest",
    "InvalidMessageTreeError",
    "InvalidRequestError",
    "LocaleLoadError",
    "LocaleNotFoundError",
    "LocaleRegistry",
    "MsgType",
    "PhoneFormat",
    "ValidMsgError",
    "__version__",
    "normalize_us_phone",
]
