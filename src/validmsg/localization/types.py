"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating LocaleRegistry call sites.

Python 3.12+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "LocaleCode",
    "MessageKey",
    "MessageParams",
    "MessageTree",
]

type LocaleCode = str
"""BCP-47 locale code (e.g., 'en', 'es-MX')."""

type MessageKey = str
"""Dotted message path: '<group>.<messageKey>' (e.g., 'string.tooShort')."""

type MessageTree = Mapping[str, str | MessageTree]
"""One locale's messages, grouped by validation domain.

Inner nodes are mappings, leaves are template strings:
{"string": {"tooShort": "{fieldName} must be at least {min} characters"}}
"""

type MessageParams = Mapping[str, object]
"""Interpolation arguments keyed by placeholder name (without braces)."""
