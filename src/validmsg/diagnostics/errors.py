"""validmsg exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error
information. Soft failures (missing keys, missing parameters) never raise;
only load failures and programmer errors do.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic, DiagnosticCode

if TYPE_CHECKING:
    from validmsg.localization.loading import LoadSummary

__all__ = [
    "InvalidMessageTreeError",
    "InvalidRequestError",
    "LocaleLoadError",
    "LocaleNotFoundError",
    "ValidMsgError",
]


class ValidMsgError(Exception):
    """Base exception for all validmsg errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ValidMsgError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LocaleNotFoundError(ValidMsgError, LookupError):
    """No message data exists for a locale.

    Raised by LocaleRegistry.load_locale() when the loader has nothing for
    the requested locale, and by locale_utils when Babel does not know it.

    Attributes:
        locale: The locale code that could not be found
    """

    def __init__(self, locale: str, message: str | Diagnostic | None = None) -> None:
        """Initialize LocaleNotFoundError.

        Args:
            locale: Locale code that could not be found
            message: Optional override for the default message
        """
        if message is None:
            message = Diagnostic(
                code=DiagnosticCode.LOCALE_NOT_FOUND,
                message=f"Locale '{locale}' not found",
                hint="Register messages for the locale or check the loader path",
                locale=locale,
            )
        super().__init__(message)
        self.locale = locale


class LocaleLoadError(ValidMsgError):
    """Loading one or more locales failed.

    For a single locale (load_locale) the original exception is chained as
    ``__cause__``. For a batch (load_locales) ``summary`` holds the result of
    every attempt and ``failed_locales`` lists the locales that did not load.

    Attributes:
        failed_locales: Locale codes that failed, in request order
        summary: Aggregate load results for batch loads, None otherwise
        locale: The failing locale for single-locale loads, None otherwise
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        failed_locales: tuple[str, ...] = (),
        summary: LoadSummary | None = None,
        locale: str | None = None,
    ) -> None:
        """Initialize LocaleLoadError.

        Args:
            message: Error message string OR Diagnostic object
            failed_locales: Locale codes that failed to load
            summary: Aggregate results when raised from a batch load
            locale: Locale code when a single locale failed
        """
        super().__init__(message)
        self.failed_locales = failed_locales
        self.summary = summary
        self.locale = locale


class InvalidMessageTreeError(ValidMsgError, ValueError):
    """Message tree has an unsupported shape.

    Trees must be mappings whose inner nodes are mappings and whose leaves
    are template strings.

    Attributes:
        locale: Locale the tree was registered for
        path: Dotted path of the offending node ("" for the root)
    """

    def __init__(self, message: str, *, locale: str, path: str = "") -> None:
        """Initialize InvalidMessageTreeError.

        Args:
            message: Description of the structural problem
            locale: Locale the tree was registered for
            path: Dotted path of the offending node
        """
        super().__init__(
            Diagnostic(
                code=DiagnosticCode.MESSAGE_TREE_INVALID,
                message=message,
                locale=locale,
                key=path or None,
            )
        )
        self.locale = locale
        self.path = path


class InvalidRequestError(ValidMsgError, TypeError):
    """A format request is malformed.

    Indicates a bug in the calling validation rule (for example an unknown
    msg_type), not bad end-user input. Never swallowed by the formatter.
    """
