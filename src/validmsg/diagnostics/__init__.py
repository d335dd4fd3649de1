"""Diagnostic system for validmsg errors.

Provides structured error diagnostics with codes and hints, and the
exception hierarchy raised by the localization and formatting layers.

Python 3.12+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InvalidMessageTreeError,
    InvalidRequestError,
    LocaleLoadError,
    LocaleNotFoundError,
    ValidMsgError,
)

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "InvalidMessageTreeError",
    "InvalidRequestError",
    "LocaleLoadError",
    "LocaleNotFoundError",
    "ValidMsgError",
]
