"""Hypothesis strategies for validmsg property-based testing.

Strategies are organized by domain:

- localization: locale codes, message keys, templates, message trees
- phone: decorated US phone numbers

Usage:
    from tests.strategies import message_trees, templates
    from tests.strategies.phone import decorated_phone_numbers
"""

from .localization import (
    LOCALE_POOL,
    flatten_tree,
    key_segments,
    literal_text,
    locale_codes,
    message_keys,
    message_trees,
    param_names,
    templates,
)
from .phone import decorated_phone_numbers, ten_digits

__all__ = [
    "LOCALE_POOL",
    "decorated_phone_numbers",
    "flatten_tree",
    "key_segments",
    "literal_text",
    "locale_codes",
    "message_keys",
    "message_trees",
    "param_names",
    "ten_digits",
]
