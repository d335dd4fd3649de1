"""Immutable per-locale message catalogs.

A MessageCatalog is the validated, flattened form of one locale's message
tree. Trees are checked once at registration time; afterwards every lookup
is a single dict access that returns an explicit miss (None) for unknown
keys instead of relying on loosely-typed tree traversal.

Components:
    MessageTemplate - One (locale, key) -> template record
    MessageCatalog - Read-only mapping of dotted keys to MessageTemplate

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from validmsg.constants import MAX_TREE_DEPTH
from validmsg.diagnostics import InvalidMessageTreeError
from validmsg.localization.interpolation import extract_variables, interpolate
from validmsg.localization.types import LocaleCode, MessageKey, MessageParams, MessageTree

__all__ = [
    "LOCALE_METADATA_KEY",
    "MessageCatalog",
    "MessageTemplate",
]

# Top-level string entry naming the locale inside locale files.
# Metadata only; never registered as a message.
LOCALE_METADATA_KEY = "locale"


@dataclass(frozen=True, slots=True)
class MessageTemplate:
    """A single localized template.

    Attributes:
        locale: Locale the template belongs to
        key: Full dotted path (e.g., 'phone.examples.e164')
        template: Template text with optional {name} placeholders
        variables: Placeholder names referenced by the template
    """

    locale: LocaleCode
    key: MessageKey
    template: str
    variables: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "variables", extract_variables(self.template))

    @property
    def group(self) -> str:
        """Validation domain: first segment of the key ('string', 'phone')."""
        return self.key.partition(".")[0]

    @property
    def message_key(self) -> str:
        """Key within the group: everything after the first segment."""
        return self.key.partition(".")[2]

    def render(self, params: MessageParams | None = None) -> str:
        """Interpolate the template with params."""
        return interpolate(self.template, params)


class MessageCatalog:
    """Read-only message lookup table for one locale.

    Built via from_tree(); never mutated afterwards. Replacing a locale's
    messages means building a new catalog.

    Example:
        >>> catalog = MessageCatalog.from_tree("en", {
        ...     "string": {"required": "{fieldName} is required"},
        ...     "phone": {"examples": {"e164": "+11234567890"}},
        ... })
        >>> catalog.keys()
        ['string.required', 'phone.examples.e164']
        >>> catalog.get("string.missing") is None
        True
    """

    __slots__ = ("_locale", "_templates")

    def __init__(self, locale: LocaleCode, templates: Mapping[MessageKey, MessageTemplate]) -> None:
        """Initialize catalog from already-flattened templates.

        Args:
            locale: Locale code the templates belong to
            templates: Mapping of dotted key to template
        """
        self._locale = locale
        self._templates: Mapping[MessageKey, MessageTemplate] = MappingProxyType(dict(templates))

    @classmethod
    def from_tree(cls, locale: LocaleCode, tree: MessageTree) -> MessageCatalog:
        """Validate and flatten a nested message tree.

        Args:
            locale: Locale code the tree belongs to
            tree: Nested mapping of groups to templates

        Returns:
            New MessageCatalog

        Raises:
            InvalidMessageTreeError: If the tree is not a mapping, nests
                deeper than MAX_TREE_DEPTH, has empty or dotted keys, or
                contains leaves that are not strings
        """
        if not isinstance(tree, Mapping):
            msg = f"Message tree must be a mapping, got {type(tree).__name__}"
            raise InvalidMessageTreeError(msg, locale=locale)

        templates: dict[MessageKey, MessageTemplate] = {}
        for name, node in tree.items():
            if name == LOCALE_METADATA_KEY and isinstance(node, str):
                continue
            cls._flatten(locale, name, node, "", 1, templates)
        return cls(locale, templates)

    @classmethod
    def _flatten(
        cls,
        locale: LocaleCode,
        name: object,
        node: object,
        prefix: str,
        depth: int,
        out: dict[MessageKey, MessageTemplate],
    ) -> None:
        if not isinstance(name, str) or not name or "." in name:
            msg = f"Invalid message key {name!r}: keys must be non-empty strings without '.'"
            raise InvalidMessageTreeError(msg, locale=locale, path=prefix)

        path = f"{prefix}.{name}" if prefix else name
        if depth > MAX_TREE_DEPTH:
            msg = f"Message tree exceeds maximum depth of {MAX_TREE_DEPTH}"
            raise InvalidMessageTreeError(msg, locale=locale, path=path)

        match node:
            case str():
                out[path] = MessageTemplate(locale=locale, key=path, template=node)
            case Mapping():
                for child_name, child in node.items():
                    cls._flatten(locale, child_name, child, path, depth + 1, out)
            case _:
                msg = f"Unsupported value of type {type(node).__name__}: expected str or mapping"
                raise InvalidMessageTreeError(msg, locale=locale, path=path)

    @property
    def locale(self) -> LocaleCode:
        """Locale code of this catalog."""
        return self._locale

    def get(self, key: MessageKey) -> MessageTemplate | None:
        """Look up a template by dotted key; None when absent."""
        return self._templates.get(key)

    def keys(self) -> list[MessageKey]:
        """All dotted keys in tree order."""
        return list(self._templates)

    def __contains__(self, key: object) -> bool:
        return key in self._templates

    def __iter__(self) -> Iterator[MessageTemplate]:
        return iter(self._templates.values())

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"MessageCatalog(locale={self._locale!r}, messages={len(self._templates)})"
