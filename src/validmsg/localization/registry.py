"""Locale registry: message ownership, loading and lookup with fallback.

LocaleRegistry owns one immutable MessageCatalog per loaded locale and
answers "what is the template for locale L and key K?" deterministically:
the requested (or current) locale first, then the fallback locale, then a
visible placeholder.

Key architectural decisions:
- Constructor-injected instance, no module-level singleton
  (the process-wide default lives in validmsg.defaults)
- Protocol-based MessageLoader (dependency inversion); loaders may be
  blocking or async
- Single-flight loading: concurrent load_locale() calls for one locale
  share one asyncio.Task and one result
- Whole-locale replacement: catalogs are immutable and swapped in with a
  single dict assignment, so readers see the old or the new catalog, never
  a mix
- Soft lookups: missing keys, locales and parameters degrade to visible
  placeholders; only loading and programmer errors raise

Locale entry lifecycle:
    Unregistered -> Loading -> Loaded

    Loading is only observable as an in-flight task shared by waiters.
    Loaded is terminal; catalogs are never evicted.

Python 3.12+.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import threading
from collections.abc import Callable, Iterable, Mapping

from validmsg.constants import DEFAULT_FALLBACK_LOCALE, DEFAULT_LOCALE, FALLBACK_MISSING_MESSAGE
from validmsg.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    InvalidRequestError,
    LocaleLoadError,
    LocaleNotFoundError,
)
from validmsg.enums import LoadStatus
from validmsg.locale_utils import LocaleInfo, get_locale_info, validate_locale_code
from validmsg.localization.catalog import MessageCatalog, MessageTemplate
from validmsg.localization.loading import (
    FallbackInfo,
    LoadSummary,
    LocaleLoadResult,
    MessageLoader,
)
from validmsg.localization.types import LocaleCode, MessageKey, MessageParams, MessageTree

__all__ = ["LocaleRegistry"]

logger = logging.getLogger(__name__)


class LocaleRegistry:
    """Process-local store of localized validation messages.

    Example - Bundled locale files:
        >>> registry = await LocaleRegistry.create(BundledMessageLoader())
        >>> registry.get_message("string.tooShort", {"fieldName": "Password", "min": 8})
        'Password must be at least 8 characters'

    Example - Direct registration:
        >>> registry = LocaleRegistry()
        >>> registry.register_messages("en", {"string": {"required": "{fieldName} is required"}})
        >>> registry.register_messages("es", {"string": {"required": "{fieldName} es obligatorio"}})
        >>> registry.get_message("string.required", {"fieldName": "Nombre"}, "es")
        'Nombre es obligatorio'

    Attributes:
        locale: Current locale used when a lookup names none
        fallback_locale: Locale consulted when the target locale lacks a key
    """

    __slots__ = (
        "_catalogs",
        "_fallback_locale",
        "_inflight",
        "_loader",
        "_locale",
        "_lock",
        "_on_fallback",
    )

    def __init__(
        self,
        loader: MessageLoader | None = None,
        *,
        locale: LocaleCode = DEFAULT_LOCALE,
        fallback_locale: LocaleCode = DEFAULT_FALLBACK_LOCALE,
        messages: Mapping[LocaleCode, MessageTree] | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize registry.

        Args:
            loader: Source of message trees for load_locale() (optional)
            locale: Initial current locale; need not be loaded yet
            fallback_locale: Locale consulted for keys missing elsewhere
            messages: Trees registered eagerly, keyed by locale
            on_fallback: Optional callback invoked when a lookup is answered
                        by the fallback locale instead of the target locale.
                        Useful for spotting missing translations.

        Raises:
            ValueError: If a locale code is malformed
            InvalidMessageTreeError: If an eager tree is malformed
        """
        validate_locale_code(locale)
        validate_locale_code(fallback_locale)

        self._loader = loader
        self._locale: LocaleCode = locale
        self._fallback_locale: LocaleCode = fallback_locale
        self._on_fallback = on_fallback

        # Only loaded locales have an entry; values are never mutated in place.
        self._catalogs: dict[LocaleCode, MessageCatalog] = {}

        # One task per locale currently being fetched (single-flight).
        self._inflight: dict[LocaleCode, asyncio.Task[LocaleLoadResult]] = {}

        # Guards catalog replacement only; never held across loader I/O.
        self._lock = threading.Lock()

        if messages:
            for code, tree in messages.items():
                self.register_messages(code, tree)

    @classmethod
    async def create(
        cls,
        loader: MessageLoader,
        *,
        locale: LocaleCode = DEFAULT_LOCALE,
        fallback_locale: LocaleCode = DEFAULT_FALLBACK_LOCALE,
        preload: Iterable[LocaleCode] = (),
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> LocaleRegistry:
        """Build a registry with the fallback and current locales loaded.

        Args:
            loader: Source of message trees
            locale: Initial current locale
            fallback_locale: Fallback locale, loaded before returning
            preload: Additional locales to load before returning
            on_fallback: Fallback observability callback

        Returns:
            Ready-to-use LocaleRegistry

        Raises:
            LocaleNotFoundError: If the fallback locale cannot be found
            LocaleLoadError: If any other requested locale fails to load
        """
        registry = cls(
            loader, locale=locale, fallback_locale=fallback_locale, on_fallback=on_fallback
        )
        await registry.load_locale(fallback_locale)
        others = [code for code in dict.fromkeys((locale, *preload)) if code != fallback_locale]
        if others:
            await registry.load_locales(others)
        return registry

    # ------------------------------------------------------------------
    # Locale selection
    # ------------------------------------------------------------------

    @property
    def locale(self) -> LocaleCode:
        """Current locale (read-only; use set_locale to change)."""
        return self._locale

    @property
    def fallback_locale(self) -> LocaleCode:
        """Fallback locale (read-only; use set_fallback_locale to change)."""
        return self._fallback_locale

    @property
    def loader(self) -> MessageLoader | None:
        """Configured message loader, if any."""
        return self._loader

    def set_locale(self, locale: LocaleCode) -> None:
        """Set the current locale.

        The locale does not have to be loaded; lookups fall back until it
        is. Use ensure_locale_loaded() to load it.

        Raises:
            ValueError: If the locale code is malformed
        """
        validate_locale_code(locale)
        self._locale = locale
        logger.debug("Current locale set to %s", locale)

    def get_locale(self) -> LocaleCode:
        """Get the current locale."""
        return self._locale

    def set_fallback_locale(self, locale: LocaleCode) -> None:
        """Set the fallback locale.

        Raises:
            ValueError: If the locale code is malformed
        """
        validate_locale_code(locale)
        self._fallback_locale = locale
        logger.debug("Fallback locale set to %s", locale)

    def get_fallback_locale(self) -> LocaleCode:
        """Get the fallback locale."""
        return self._fallback_locale

    # ------------------------------------------------------------------
    # Registration and loading
    # ------------------------------------------------------------------

    def register_messages(self, locale: LocaleCode, tree: MessageTree) -> None:
        """Insert or replace the full message tree for a locale.

        No partial merges: anything previously registered for the locale is
        discarded. Marks the locale as loaded.

        Args:
            locale: Locale code
            tree: Nested mapping of groups to templates

        Raises:
            ValueError: If the locale code is malformed
            InvalidMessageTreeError: If the tree is malformed (the previous
                catalog, if any, stays in place)
        """
        validate_locale_code(locale)
        catalog = MessageCatalog.from_tree(locale, tree)
        with self._lock:
            self._catalogs[locale] = catalog
        logger.debug("Registered %d messages for locale %s", len(catalog), locale)

    async def load_locale(self, locale: LocaleCode) -> None:
        """Load a locale through the configured loader.

        No-op if the locale is already loaded. Concurrent calls for the same
        locale share one fetch; every caller observes the same outcome.
        Cancelling the awaiting caller does not cancel the fetch; if it
        completes later it still registers.

        Raises:
            LocaleNotFoundError: If the loader has no data for the locale, or
                no loader is configured
            LocaleLoadError: If the loader fails or returns a malformed tree
        """
        result = await self._load_result(locale)
        self._raise_for_result(result)

    async def load_locales(self, locales: Iterable[LocaleCode]) -> LoadSummary:
        """Load several locales, attempting all of them.

        Failures do not stop the batch. Duplicate codes collapse to one
        attempt.

        Returns:
            LoadSummary with one result per distinct locale, in request order

        Raises:
            LocaleLoadError: If any locale failed; ``summary`` holds every
                result and ``failed_locales`` names the failures
        """
        requested = list(dict.fromkeys(locales))
        results = await asyncio.gather(*(self._load_result(code) for code in requested))
        summary = LoadSummary.from_results(results)

        if not summary.all_successful:
            for result in summary.get_failed():
                logger.warning("Failed to load locale %s: %s", result.locale, result.error)
            failed = summary.failed_locales
            diagnostic = Diagnostic(
                code=DiagnosticCode.LOCALE_BATCH_LOAD_FAILED,
                message=(
                    f"Failed to load {len(failed)} of {len(requested)} locales: "
                    f"{', '.join(failed)}"
                ),
            )
            raise LocaleLoadError(diagnostic, failed_locales=failed, summary=summary)
        return summary

    async def ensure_locale_loaded(self, locale: LocaleCode | None = None) -> None:
        """Load a locale (default: the current locale) unless already loaded.

        Raises:
            LocaleNotFoundError: If the locale cannot be found
            LocaleLoadError: If loading fails
        """
        target = self._locale if locale is None else locale
        if not self.has_locale(target):
            await self.load_locale(target)

    async def _load_result(self, locale: LocaleCode) -> LocaleLoadResult:
        if self.has_locale(locale):
            return LocaleLoadResult(locale=locale, status=LoadStatus.ALREADY_LOADED)

        task = self._inflight.get(locale)
        if task is None or task.done():
            task = asyncio.ensure_future(self._fetch(locale))
            self._inflight[locale] = task
            task.add_done_callback(lambda done: self._forget_inflight(locale, done))
        else:
            logger.debug("Joining in-flight load of locale %s", locale)

        # shield(): an abandoned waiter must not cancel the shared fetch.
        return await asyncio.shield(task)

    def _forget_inflight(self, locale: LocaleCode, task: asyncio.Task[LocaleLoadResult]) -> None:
        if self._inflight.get(locale) is task:
            del self._inflight[locale]

    async def _fetch(self, locale: LocaleCode) -> LocaleLoadResult:
        """Fetch, validate and register one locale. Never raises for load failures."""
        loader = self._loader
        if loader is None:
            diagnostic = Diagnostic(
                code=DiagnosticCode.LOADER_NOT_CONFIGURED,
                message=f"Locale '{locale}' not found: no message loader configured",
                hint="Pass a MessageLoader to LocaleRegistry or call register_messages()",
                locale=locale,
            )
            return LocaleLoadResult(
                locale=locale,
                status=LoadStatus.NOT_FOUND,
                error=LocaleNotFoundError(locale, diagnostic),
            )

        describe = getattr(loader, "describe_path", None)
        source_path = describe(locale) if describe is not None else locale
        logger.debug("Loading locale %s from %s", locale, source_path)

        try:
            validate_locale_code(locale)
            loaded = loader.load(locale)
            tree = await loaded if inspect.isawaitable(loaded) else loaded
            catalog = MessageCatalog.from_tree(locale, tree)
        except (FileNotFoundError, KeyError, LocaleNotFoundError) as e:
            return LocaleLoadResult(
                locale=locale, status=LoadStatus.NOT_FOUND, error=e, source_path=source_path
            )
        except (OSError, ValueError) as e:
            # Permission errors, malformed JSON, invalid trees, bad locale codes
            return LocaleLoadResult(
                locale=locale, status=LoadStatus.ERROR, error=e, source_path=source_path
            )
        except Exception as e:  # pylint: disable=broad-exception-caught
            return LocaleLoadResult(
                locale=locale, status=LoadStatus.ERROR, error=e, source_path=source_path
            )

        with self._lock:
            if locale in self._catalogs:
                # register_messages() won the race; explicit registration is newer.
                return LocaleLoadResult(
                    locale=locale, status=LoadStatus.ALREADY_LOADED, source_path=source_path
                )
            self._catalogs[locale] = catalog

        logger.debug("Loaded %d messages for locale %s", len(catalog), locale)
        return LocaleLoadResult(
            locale=locale,
            status=LoadStatus.SUCCESS,
            source_path=source_path,
            message_count=len(catalog),
        )

    @staticmethod
    def _raise_for_result(result: LocaleLoadResult) -> None:
        match result.status:
            case LoadStatus.SUCCESS | LoadStatus.ALREADY_LOADED:
                return
            case LoadStatus.NOT_FOUND:
                if isinstance(result.error, LocaleNotFoundError) and result.error.diagnostic:
                    raise LocaleNotFoundError(result.locale, result.error.diagnostic) from (
                        result.error
                    )
                raise LocaleNotFoundError(result.locale) from result.error
            case _:
                diagnostic = Diagnostic(
                    code=DiagnosticCode.LOCALE_LOAD_FAILED,
                    message=f"Failed to load locale '{result.locale}': {result.error}",
                    hint=f"Source: {result.source_path}" if result.source_path else None,
                    locale=result.locale,
                )
                raise LocaleLoadError(
                    diagnostic, failed_locales=(result.locale,), locale=result.locale
                ) from result.error

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_locale(self, locale: LocaleCode) -> bool:
        """Check if a locale is loaded."""
        return locale in self._catalogs

    def get_available_locales(self) -> list[LocaleCode]:
        """Get loaded locales in registration order."""
        return list(self._catalogs)

    def get_supported_locales(self) -> list[LocaleCode]:
        """Get locales that are loaded or that the loader can supply."""
        listed: list[LocaleCode] = []
        list_locales = getattr(self._loader, "list_locales", None)
        if list_locales is not None:
            listed = list(list_locales())
        return list(dict.fromkeys([*listed, *self._catalogs]))

    def get_catalog(self, locale: LocaleCode | None = None) -> MessageCatalog | None:
        """Get the catalog of one locale (default: current), None if not loaded."""
        return self._catalogs.get(self._locale if locale is None else locale)

    def get_locale_info(self, locale: LocaleCode | None = None) -> LocaleInfo:
        """Describe a locale (default: current) using Babel's CLDR data.

        Raises:
            LocaleNotFoundError: If Babel does not know the locale
        """
        return get_locale_info(self._locale if locale is None else locale)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _resolve(
        self, key: MessageKey, locale: LocaleCode | None
    ) -> tuple[MessageTemplate | None, LocaleCode]:
        target = self._locale if locale is None else locale
        catalogs = self._catalogs

        catalog = catalogs.get(target)
        if catalog is not None:
            template = catalog.get(key)
            if template is not None:
                return template, target

        fallback = self._fallback_locale
        if fallback != target:
            catalog = catalogs.get(fallback)
            if catalog is not None:
                return catalog.get(key), target

        return None, target

    def find_template(
        self, key: MessageKey, locale: LocaleCode | None = None
    ) -> MessageTemplate | None:
        """Resolve a key to its template without interpolating.

        Tries the target locale (default: current), then the fallback
        locale. Invokes on_fallback when the fallback locale answers.

        Returns:
            MessageTemplate, or None if no consulted locale defines the key
        """
        template, target = self._resolve(key, locale)
        if template is not None and template.locale != target:
            logger.debug(
                "Message '%s' resolved from fallback locale %s (requested %s)",
                key,
                template.locale,
                target,
            )
            if self._on_fallback is not None:
                self._on_fallback(
                    FallbackInfo(requested_locale=target, resolved_locale=template.locale, key=key)
                )
        return template

    def get_message(
        self,
        key: MessageKey,
        params: MessageParams | None = None,
        locale: LocaleCode | None = None,
    ) -> str:
        """Look up and interpolate a message.

        Never raises for missing data: a key absent from both the target
        and fallback locale yields the placeholder ``{<key>}``, and a
        placeholder whose parameter is not supplied stays in the output.

        Args:
            key: Dotted message key (e.g., 'string.tooShort')
            params: Interpolation parameters
            locale: Target locale (default: current)

        Returns:
            Interpolated message

        Raises:
            InvalidRequestError: If params is neither None nor a mapping

        Example:
            >>> registry.get_message("string.tooShort", {"fieldName": "Password", "min": 5})
            'Password must be at least 5 characters'
            >>> registry.get_message("nonexistent.key")
            '{nonexistent.key}'
        """
        self._check_params(params)
        template = self.find_template(key, locale)
        if template is None:
            logger.debug("Message '%s' not found in any consulted locale", key)
            return FALLBACK_MISSING_MESSAGE.format(key=key)
        return template.render(params)

    @staticmethod
    def _check_params(params: object) -> None:
        if params is not None and not isinstance(params, Mapping):
            diagnostic = Diagnostic(
                code=DiagnosticCode.REQUEST_INVALID_PARAMS,
                message=f"Invalid params type: expected Mapping or None, got {type(params).__name__}",
            )
            raise InvalidRequestError(diagnostic)

    def has_message(self, key: MessageKey, locale: LocaleCode | None = None) -> bool:
        """Check if a key resolves in the target locale or the fallback locale."""
        template, _ = self._resolve(key, locale)
        return template is not None

    def is_message_defined(self, key: MessageKey, locale: LocaleCode | None = None) -> bool:
        """Check if a key is defined in exactly one locale (default: current), without fallback."""
        catalog = self.get_catalog(locale)
        return catalog is not None and key in catalog

    def get_message_keys(self, locale: LocaleCode | None = None) -> list[MessageKey]:
        """Get all dotted keys of one locale (default: current); empty if not loaded."""
        catalog = self.get_catalog(locale)
        return catalog.keys() if catalog is not None else []

    def get_message_variables(
        self, key: MessageKey, locale: LocaleCode | None = None
    ) -> frozenset[str]:
        """Get placeholder names used by the template a key resolves to.

        Raises:
            KeyError: If the key is not defined in the target or fallback locale
        """
        template, _ = self._resolve(key, locale)
        if template is None:
            msg = f"Message '{key}' not found"
            raise KeyError(msg)
        return template.variables

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> LocaleRegistry(messages={"en": {}})
            LocaleRegistry(locale='en', fallback_locale='en', loaded=['en'])
        """
        return (
            f"LocaleRegistry(locale={self._locale!r}, "
            f"fallback_locale={self._fallback_locale!r}, "
            f"loaded={list(self._catalogs)!r})"
        )
