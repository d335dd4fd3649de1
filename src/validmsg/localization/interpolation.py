"""Placeholder interpolation for message templates.

Templates reference parameters as ``{name}`` where name is one or more word
characters. Substitution is direct ``str(value)`` replacement; a placeholder
whose name is not supplied stays in the output verbatim.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from validmsg.localization.types import MessageParams

__all__ = [
    "PLACEHOLDER_PATTERN",
    "extract_variables",
    "interpolate",
]

PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"\{(\w+)\}")


def interpolate(template: str, params: MessageParams | None = None) -> str:
    """Replace ``{name}`` placeholders with parameter values.

    Replacement happens in a single pass, so values containing braces are
    never re-expanded.

    Args:
        template: Template string with optional placeholders
        params: Parameter values keyed by placeholder name

    Returns:
        Interpolated string

    Example:
        >>> interpolate("{fieldName} must be at least {min} characters",
        ...             {"fieldName": "Password", "min": 5})
        'Password must be at least 5 characters'
        >>> interpolate("between {min} and {max}", {"min": 1})
        'between 1 and {max}'
    """
    if not params:
        return template

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in params:
            return str(params[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_substitute, template)


def extract_variables(template: str) -> frozenset[str]:
    """Get placeholder names referenced by a template.

    Example:
        >>> sorted(extract_variables("{fieldName} must be {min}-{max}"))
        ['fieldName', 'max', 'min']
    """
    return frozenset(PLACEHOLDER_PATTERN.findall(template))
