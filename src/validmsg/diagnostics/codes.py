"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages attached to
validmsg exceptions.

Python 3.12+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (missing locales, messages)
        2000-2999: Loading errors (loader failures, malformed trees)
        3000-3999: Request errors (malformed format requests, bad arguments)
    """

    # Lookup errors (1000-1999)
    LOCALE_NOT_FOUND = 1001
    MESSAGE_NOT_FOUND = 1002
    LOCALE_UNKNOWN = 1003

    # Loading errors (2000-2999)
    LOCALE_LOAD_FAILED = 2001
    LOCALE_BATCH_LOAD_FAILED = 2002
    MESSAGE_TREE_INVALID = 2003
    LOADER_NOT_CONFIGURED = 2004

    # Request errors (3000-3999)
    REQUEST_INVALID_MSG_TYPE = 3001
    REQUEST_INVALID_PARAMS = 3002
    LOCALE_CODE_INVALID = 3003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale: Locale involved in the error, if any
        key: Message key or tree path involved in the error, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale: str | None = None
    key: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[LOCALE_NOT_FOUND]: Locale 'xx' not found
              = locale: xx
              = help: Register messages for the locale or check the loader path

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.locale is not None:
            lines.append(f"  = locale: {_escape(self.locale)}")
        if self.key is not None:
            lines.append(f"  = key: {_escape(self.key)}")
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    """Escape control characters so untrusted input cannot forge extra lines."""
    return text.encode("unicode_escape").decode("ascii") if not text.isprintable() else text
