"""Locale-aware message storage for validation errors.

Provides the localization stack: type aliases, placeholder interpolation,
immutable per-locale catalogs, loader infrastructure, and the registry that
owns them.

Submodules:
    types         - PEP 695 type aliases (LocaleCode, MessageKey, MessageTree, MessageParams)
    interpolation - {name} placeholder substitution
    catalog       - MessageTemplate, MessageCatalog (validated, flattened trees)
    loading       - MessageLoader protocol, Path/Bundled/Mapping loaders,
                    FallbackInfo, LocaleLoadResult, LoadSummary
    registry      - LocaleRegistry (loading, fallback lookup)

Python 3.12+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from validmsg.enums import LoadStatus
from validmsg.localization.catalog import MessageCatalog, MessageTemplate
from validmsg.localization.interpolation import extract_variables, interpolate
from validmsg.localization.loading import (
    BundledMessageLoader,
    FallbackInfo,
    LoadSummary,
    LocaleLoadResult,
    MappingMessageLoader,
    MessageLoader,
    PathMessageLoader,
)
from validmsg.localization.registry import LocaleRegistry
from validmsg.localization.types import LocaleCode, MessageKey, MessageParams, MessageTree

__all__ = [
    # Registry
    "LocaleRegistry",
    # Catalogs
    "MessageCatalog",
    "MessageTemplate",
    # Loader protocol and implementations
    "MessageLoader",
    "PathMessageLoader",
    "BundledMessageLoader",
    "MappingMessageLoader",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "LocaleLoadResult",
    # Fallback observability
    "FallbackInfo",
    # Interpolation
    "interpolate",
    "extract_variables",
    # Type aliases for user code type annotations
    "LocaleCode",
    "MessageKey",
    "MessageParams",
    "MessageTree",
]
