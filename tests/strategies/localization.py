"""Hypothesis strategies for LocaleRegistry property-based testing.

Provides reusable strategies for generating localization test data:
- Locale codes from a realistic pool
- Message key segments and dotted keys
- Template text with and without {name} placeholders
- Nested message trees

Event-Emitting Strategies (HypoFuzz-Optimized):
- message_trees: Emits l10n_tree_depth=N
- templates: Emits l10n_template_placeholders=N

Python 3.12+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

LOCALE_POOL = [
    "en", "en-US", "en_GB",
    "de", "de-DE", "de_AT",
    "fr", "fr-FR", "fr_CA",
    "es", "es-ES", "es-MX",
    "ja", "ko", "zh",
    "pt", "pt-BR",
    "it", "nl", "ar",
]

_SEGMENT_FIRST_CHARS = string.ascii_letters
_SEGMENT_REST_CHARS = string.ascii_letters + string.digits


def locale_codes() -> SearchStrategy[str]:
    """Well-formed locale codes."""
    return st.sampled_from(LOCALE_POOL)


@st.composite
def key_segments(draw: DrawFn) -> str:
    """Generate a single key segment like 'tooShort' or 'e164'."""
    first = draw(st.sampled_from(_SEGMENT_FIRST_CHARS))
    rest = draw(st.text(alphabet=_SEGMENT_REST_CHARS, max_size=12))
    return first + rest


@st.composite
def message_keys(draw: DrawFn) -> str:
    """Generate dotted '<group>.<messageKey>' keys."""
    return f"{draw(key_segments())}.{draw(key_segments())}"


@st.composite
def param_names(draw: DrawFn) -> str:
    """Generate placeholder names that PLACEHOLDER_PATTERN recognizes."""
    return draw(key_segments())


def literal_text() -> SearchStrategy[str]:
    """Text without braces, so it contains no placeholders."""
    return st.text(
        alphabet=st.characters(exclude_characters="{}", exclude_categories=("Cs",)),
        max_size=30,
    )


@st.composite
def templates(draw: DrawFn) -> str:
    """Generate template text mixing literals and {name} placeholders.

    Events emitted:
    - l10n_template_placeholders=N
    """
    names = draw(st.lists(param_names(), max_size=4))
    parts = [draw(literal_text())]
    for name in names:
        parts.append(f"{{{name}}}")
        parts.append(draw(literal_text()))
    event(f"l10n_template_placeholders={len(names)}")
    return "".join(parts)


@st.composite
def message_trees(draw: DrawFn, max_depth: int = 3) -> dict[str, object]:
    """Generate a valid nested message tree.

    Events emitted:
    - l10n_tree_depth=N
    """
    depth = draw(st.integers(min_value=1, max_value=max_depth))

    def build(level: int) -> dict[str, object]:
        node: dict[str, object] = {}
        for name in draw(st.lists(key_segments(), min_size=1, max_size=4, unique=True)):
            if level < depth and draw(st.booleans()):
                node[name] = build(level + 1)
            else:
                node[name] = draw(templates())
        return node

    event(f"l10n_tree_depth={depth}")
    return build(1)


def flatten_tree(tree: dict[str, object], prefix: str = "") -> dict[str, str]:
    """Expected dotted-key view of a generated tree."""
    flat: dict[str, str] = {}
    for name, node in tree.items():
        if not prefix and name == "locale" and isinstance(node, str):
            continue
        path = f"{prefix}.{name}" if prefix else name
        if isinstance(node, dict):
            flat.update(flatten_tree(node, path))
        else:
            flat[path] = str(node)
    return flat
