"""Locale loading infrastructure for LocaleRegistry.

Provides the protocol for message-tree loaders, a filesystem implementation
with path-traversal security, a loader for the locale files bundled with
the package, an in-memory loader, and result/summary data structures for
tracking load attempts.

Components:
    MessageLoader - Protocol for loading message trees (structural typing)
    PathMessageLoader - JSON files on disk addressed by a path template
    BundledMessageLoader - JSON files shipped in validmsg/localization/locales
    MappingMessageLoader - Trees held in memory
    FallbackInfo - Immutable record of a locale fallback event
    LocaleLoadResult - Immutable result of a single locale load attempt
    LoadSummary - Immutable aggregate of a batch of load attempts

Python 3.12+.
"""

from __future__ import annotations

import json
from collections.abc import Awaitable, Iterable, Mapping
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from validmsg.diagnostics import LocaleNotFoundError
from validmsg.enums import LoadStatus
from validmsg.locale_utils import validate_locale_code
from validmsg.localization.types import LocaleCode, MessageKey, MessageTree

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "MessageLoader",
    # Concrete loaders
    "PathMessageLoader",
    "BundledMessageLoader",
    "MappingMessageLoader",
    # Fallback observability
    "FallbackInfo",
    # Load result types
    "LocaleLoadResult",
    "LoadSummary",
]


class MessageLoader(Protocol):
    """Protocol for loading one locale's message tree.

    load() may return the tree directly or an awaitable resolving to it, so
    both blocking file readers and async network fetchers fit.

    Implementations signal a missing locale by raising FileNotFoundError,
    KeyError or LocaleNotFoundError. Any other exception is reported as a
    load error.

    The optional describe_path() and list_locales() methods feed
    diagnostics and LocaleRegistry.get_supported_locales().

    Example:
        >>> class HttpLoader:
        ...     async def load(self, locale: str) -> dict:
        ...         async with session.get(f"{BASE}/{locale}.json") as resp:
        ...             if resp.status == 404:
        ...                 raise FileNotFoundError(locale)
        ...             return await resp.json()
        ...
        >>> registry = await LocaleRegistry.create(HttpLoader())
    """

    def load(self, locale: LocaleCode) -> MessageTree | Awaitable[MessageTree]:
        """Load the message tree for a locale.

        Args:
            locale: Locale code (e.g., 'en', 'es-MX')

        Returns:
            Message tree, or an awaitable resolving to one

        Raises:
            FileNotFoundError: If no data exists for this locale
            OSError: If data cannot be read
            ValueError: If data cannot be decoded
        """

    def describe_path(self, locale: LocaleCode) -> str:
        """Return human-readable source description for diagnostics.

        Default implementation returns the locale code itself.
        """
        return locale

    def list_locales(self) -> list[LocaleCode]:
        """Return locales this loader can supply.

        Default implementation returns an empty list (unknown).
        """
        return []


def _decode_tree(raw: str, source: str) -> MessageTree:
    """Parse JSON text and check the root is an object."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON in {source}: {e}"
        raise ValueError(msg) from e
    if not isinstance(data, dict):
        msg = f"Locale file {source} must contain a JSON object, got {type(data).__name__}"
        raise ValueError(msg)
    return data


@dataclass(frozen=True, slots=True)
class PathMessageLoader:
    """File system loader using a path template.

    Implements MessageLoader for JSON locale files on disk. Uses a
    {locale} placeholder in the path template for locale substitution.

    Security:
        Locale codes are validated (alphanumeric segments only), so they
        cannot contain path separators or "..". All resolved paths are
        verified against a fixed root directory.

    Example:
        >>> loader = PathMessageLoader("locales/{locale}.json")
        >>> tree = loader.load("es")
        # Loads from: locales/es.json

    Attributes:
        base_path: Path template with {locale} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
    """

    base_path: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template at initialization.

        Raises:
            ValueError: If base_path does not contain {locale} placeholder
        """
        # Without the placeholder every locale would read the same file.
        if "{locale}" not in self.base_path:
            msg = (
                f"base_path must contain '{{locale}}' placeholder for locale substitution, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            # "locales/{locale}.json" -> "locales"
            static_prefix = self.base_path.split("{locale}")[0]
            prefix_dir = static_prefix if static_prefix.endswith(("/", "\\")) else str(
                Path(static_prefix).parent
            )
            resolved = Path(prefix_dir).resolve() if prefix_dir else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    def _path_for(self, locale: LocaleCode) -> Path:
        return Path(self.base_path.replace("{locale}", locale)).resolve()

    def describe_path(self, locale: LocaleCode) -> str:
        """Return the locale-substituted path template."""
        return self.base_path.replace("{locale}", locale)

    def load(self, locale: LocaleCode) -> MessageTree:
        """Load and decode a JSON locale file.

        Raises:
            ValueError: If locale is malformed, the path escapes root_dir,
                or the file is not a JSON object
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
        """
        validate_locale_code(locale)
        full_path = self._path_for(locale)
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError as e:
            msg = f"Path traversal detected: resolved path escapes root directory. locale='{locale}'"
            raise ValueError(msg) from e

        return _decode_tree(full_path.read_text(encoding="utf-8"), self.describe_path(locale))

    def list_locales(self) -> list[LocaleCode]:
        """List locales with a file present.

        Supports templates with {locale} in the file name
        ("locales/{locale}.json") or as a whole directory name
        ("locales/{locale}/messages.json").
        """
        template = Path(self.base_path)
        found: list[LocaleCode] = []
        if "{locale}" in template.name:
            prefix, _, suffix = template.name.partition("{locale}")
            for path in sorted(template.parent.glob(template.name.replace("{locale}", "*"))):
                name = path.name
                candidate = name[len(prefix) : len(name) - len(suffix)]
                if path.is_file() and _is_locale_code(candidate):
                    found.append(candidate)
        elif template.parent.name == "{locale}":
            for path in sorted(template.parent.parent.glob("*")):
                if (path / template.name).is_file() and _is_locale_code(path.name):
                    found.append(path.name)
        return found


def _is_locale_code(candidate: str) -> bool:
    try:
        validate_locale_code(candidate)
    except ValueError:
        return False
    return True


@dataclass(frozen=True, slots=True)
class BundledMessageLoader:
    """Loader for the locale files shipped with validmsg.

    Reads ``validmsg/localization/locales/<locale>.json`` through
    importlib.resources, so it works from wheels and zip imports.

    Attributes:
        package: Package containing the ``locales`` directory
    """

    package: str = "validmsg.localization"

    def _locales_dir(self) -> Traversable:
        return resources.files(self.package) / "locales"

    def describe_path(self, locale: LocaleCode) -> str:
        """Return the package-relative resource name."""
        return f"{self.package}:locales/{locale}.json"

    def load(self, locale: LocaleCode) -> MessageTree:
        """Load a bundled locale file.

        Raises:
            FileNotFoundError: If no bundled file exists for the locale
            ValueError: If locale is malformed
        """
        validate_locale_code(locale)
        resource = self._locales_dir() / f"{locale}.json"
        if not resource.is_file():
            msg = f"No bundled messages for locale '{locale}'"
            raise FileNotFoundError(msg)
        return _decode_tree(resource.read_text(encoding="utf-8"), self.describe_path(locale))

    def list_locales(self) -> list[LocaleCode]:
        """List bundled locale codes."""
        return sorted(
            entry.name.removesuffix(".json")
            for entry in self._locales_dir().iterdir()
            if entry.name.endswith(".json")
        )


class MappingMessageLoader:
    """In-memory loader backed by a mapping of locale to message tree.

    Useful for tests and for applications that embed their messages.

    Example:
        >>> loader = MappingMessageLoader({"en": {"string": {"required": "{fieldName} is required"}}})
        >>> registry = LocaleRegistry(loader)
    """

    __slots__ = ("_trees",)

    def __init__(self, trees: Mapping[LocaleCode, MessageTree] | None = None) -> None:
        self._trees: dict[LocaleCode, MessageTree] = dict(trees or {})

    def describe_path(self, locale: LocaleCode) -> str:
        return f"<memory>/{locale}"

    def load(self, locale: LocaleCode) -> MessageTree:
        """Return the stored tree.

        Raises:
            LocaleNotFoundError: If no tree is stored for the locale
        """
        try:
            return self._trees[locale]
        except KeyError:
            raise LocaleNotFoundError(locale) from None

    def list_locales(self) -> list[LocaleCode]:
        return list(self._trees)


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when LocaleRegistry resolves a
    message from the fallback locale instead of the requested one.

    Attributes:
        requested_locale: The locale the lookup targeted
        resolved_locale: The locale that actually contained the message
        key: The dotted message key that was resolved

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"Fallback: {info.key} resolved from "
        ...           f"{info.resolved_locale} (requested {info.requested_locale})")
        >>> registry = LocaleRegistry(loader, on_fallback=log_fallback)
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    key: MessageKey


@dataclass(frozen=True, slots=True)
class LocaleLoadResult:
    """Result of loading a single locale.

    Attributes:
        locale: Locale code
        status: Load status (success, already_loaded, not_found, error)
        error: Exception if status is NOT_FOUND or ERROR, None otherwise
        source_path: Human-readable source description (if available)
        message_count: Number of templates registered (0 unless SUCCESS)
    """

    locale: LocaleCode
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None
    message_count: int = 0

    @property
    def is_success(self) -> bool:
        """Check if the locale is available after the attempt."""
        return self.status in (LoadStatus.SUCCESS, LoadStatus.ALREADY_LOADED)

    @property
    def is_not_found(self) -> bool:
        """Check if the loader had no data for the locale."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the load failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of locale load results.

    Returned by LocaleRegistry.load_locales() and attached to the
    LocaleLoadError it raises when any locale fails. All statistics are
    computed properties derived from the ``results`` tuple.

    Attributes:
        results: All individual load results in request order

    Example:
        >>> try:
        ...     await registry.load_locales(["es", "xx", "fr"])
        ... except LocaleLoadError as e:
        ...     for result in e.summary.get_failed():
        ...         print(f"Failed: {result.locale}: {result.error}")
    """

    results: tuple[LocaleLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of locales available after the batch."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of locales not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def failed_locales(self) -> tuple[LocaleCode, ...]:
        """Locales that are not available after the batch, in request order."""
        return tuple(r.locale for r in self.results if not r.is_success)

    def get_failed(self) -> tuple[LocaleLoadResult, ...]:
        """Get all results that were not found or errored."""
        return tuple(r for r in self.results if not r.is_success)

    def get_successful(self) -> tuple[LocaleLoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)

    def get_by_locale(self, locale: LocaleCode) -> LocaleLoadResult | None:
        """Get the result for a specific locale."""
        return next((r for r in self.results if r.locale == locale), None)

    @property
    def all_successful(self) -> bool:
        """Check if every requested locale is available."""
        return all(r.is_success for r in self.results)

    @classmethod
    def from_results(cls, results: Iterable[LocaleLoadResult]) -> LoadSummary:
        return cls(results=tuple(results))
