"""Process-wide default registry and formatter.

Application-wiring boundary for code that does not want to thread a
LocaleRegistry through every call. Library code should accept a registry
or MessageFormatter explicitly instead of reaching for these.

The default registry is backed by the bundled locale files. It starts with
the fallback locale ('en') registered plus the locale named by the
VALIDMSG_LOCALE environment variable, when that variable is set and a
bundled file exists for it. Further bundled locales can be added with
``await get_default_registry().load_locale(code)``.

Python 3.12+.
"""

from __future__ import annotations

import logging
import os
import threading

from validmsg.constants import DEFAULT_FALLBACK_LOCALE, DEFAULT_LOCALE, LOCALE_ENV_VAR
from validmsg.formatting import ErrorMessageFormatter
from validmsg.locale_utils import validate_locale_code
from validmsg.localization import BundledMessageLoader, LocaleRegistry

__all__ = [
    "get_default_formatter",
    "get_default_registry",
    "reset_default_registry",
]

logger = logging.getLogger(__name__)

_DEFAULT_REGISTRY: LocaleRegistry | None = None
_DEFAULT_FORMATTER: ErrorMessageFormatter | None = None
_DEFAULT_LOCK = threading.Lock()


def _initial_locale() -> str:
    value = os.environ.get(LOCALE_ENV_VAR, "").strip()
    if not value:
        return DEFAULT_LOCALE
    try:
        validate_locale_code(value)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %s", LOCALE_ENV_VAR, value, DEFAULT_LOCALE)
        return DEFAULT_LOCALE
    return value


def _create_default_registry() -> LocaleRegistry:
    loader = BundledMessageLoader()
    locale = _initial_locale()
    registry = LocaleRegistry(loader, locale=locale, fallback_locale=DEFAULT_FALLBACK_LOCALE)

    # Bundled files load synchronously, so no event loop is needed here.
    registry.register_messages(DEFAULT_FALLBACK_LOCALE, loader.load(DEFAULT_FALLBACK_LOCALE))
    if locale != DEFAULT_FALLBACK_LOCALE:
        try:
            registry.register_messages(locale, loader.load(locale))
        except FileNotFoundError:
            logger.warning(
                "No bundled messages for %s=%s; lookups fall back to %s",
                LOCALE_ENV_VAR,
                locale,
                DEFAULT_FALLBACK_LOCALE,
            )
    return registry


def get_default_registry() -> LocaleRegistry:
    """Get the process-wide registry, creating it on first use.

    Returns:
        Shared LocaleRegistry backed by the bundled locale files

    Example:
        >>> registry = get_default_registry()
        >>> registry.get_message("string.required", {"fieldName": "Name"})
        'Name is required'
    """
    # pylint: disable=global-statement
    global _DEFAULT_REGISTRY  # noqa: PLW0603
    with _DEFAULT_LOCK:
        if _DEFAULT_REGISTRY is None:
            _DEFAULT_REGISTRY = _create_default_registry()
        return _DEFAULT_REGISTRY


def get_default_formatter() -> ErrorMessageFormatter:
    """Get the formatter bound to the process-wide registry.

    Example:
        >>> get_default_formatter().format("email", "mustBeValidEmail", "Email")
        'Email must be a valid email address'
    """
    global _DEFAULT_FORMATTER  # noqa: PLW0603
    registry = get_default_registry()
    with _DEFAULT_LOCK:
        if _DEFAULT_FORMATTER is None or _DEFAULT_FORMATTER.registry is not registry:
            _DEFAULT_FORMATTER = ErrorMessageFormatter(registry)
        return _DEFAULT_FORMATTER


def reset_default_registry() -> None:
    """Discard the process-wide registry and formatter.

    The next get_default_registry() call builds a fresh registry and
    re-reads VALIDMSG_LOCALE. Intended for tests.
    """
    global _DEFAULT_REGISTRY, _DEFAULT_FORMATTER  # noqa: PLW0603
    with _DEFAULT_LOCK:
        _DEFAULT_REGISTRY = None
        _DEFAULT_FORMATTER = None
