"""Primary public API for emojindex."""

from __future__ import annotations

from emojindex.core.config import EmojindexConfig, load_config
from emojindex.core.exceptions import CatalogError, ConfigError, EmojindexError
from emojindex.emoji import (
    Catalog,
    EmojiRegistry,
    Identifier,
    JsonTranslationLoader,
    LegacyReaction,
    PreferenceStore,
    SearchIndex,
    SearchIndexBuilder,
    SearchIndexManager,
    SkinTone,
    Variant,
    VariantPreferences,
    build_registry,
    classify,
    is_renderable,
    normalize_language,
)
from emojindex.version import get_version


__version__ = get_version()

__all__ = [
    "Catalog",
    "CatalogError",
    "ConfigError",
    "EmojiRegistry",
    "EmojindexConfig",
    "EmojindexError",
    "Identifier",
    "JsonTranslationLoader",
    "LegacyReaction",
    "PreferenceStore",
    "SearchIndex",
    "SearchIndexBuilder",
    "SearchIndexManager",
    "SkinTone",
    "Variant",
    "VariantPreferences",
    "__version__",
    "build_registry",
    "classify",
    "get_version",
    "is_renderable",
    "load_config",
    "normalize_language",
]
