"""Emoji resolution façade: catalog, skin tone variants, and keyword search.

Architecture
: `Catalog` holds every base `Identifier` with its default sequence, sort key,
  and emoji version. Tone-capable identifiers carry a `ToneDeclaration`.
: `build_variant_table` expands the declarations into concrete rendered
  sequences and `build_reverse_index` flattens them back into a single
  ``rendered -> Variant`` lookup. `build_registry` bundles the three immutable
  tables so they can be shared by reference.
: `SearchIndexBuilder` joins per-language keyword resources with the registry,
  drops what the target platform cannot render, and merges English keywords
  as a fallback. `SearchIndexManager` memoises the result per language.
: Reaction helpers and `VariantPreferences` sit on top of the registry to pick
  toned reactions and remember recently used emoji.

Goal
: Turn any emoji string a user or a keyword file produces back into a stable
  identity, whatever its skin tones or presentation selector, and answer
  keyword searches only with emoji the platform can actually draw.
"""

from emojindex.emoji.availability import PlatformVersion, is_renderable, minimum_platform
from emojindex.emoji.catalog import Catalog, Identifier, ToneDeclaration, build_catalog
from emojindex.emoji.legacy import LegacyReaction, classify, legacy_sequence
from emojindex.emoji.preferences import PreferenceStore, VariantPreferences, preferred_variant
from emojindex.emoji.reactions import (
    base_reaction_variants,
    default_reaction_variants,
    display_value,
    has_non_legacy_reactions,
)
from emojindex.emoji.registry import EmojiRegistry, build_registry
from emojindex.emoji.search import SearchIndex, SearchIndexBuilder, SearchIndexManager
from emojindex.emoji.tones import SkinTone, ToneSequence
from emojindex.emoji.translations import (
    JsonTranslationLoader,
    MappingTranslationLoader,
    TranslationLoader,
    normalize_language,
)
from emojindex.emoji.variants import (
    ReverseIndex,
    Variant,
    VariantTable,
    build_reverse_index,
    build_variant_table,
)


__all__ = [
    "Catalog",
    "EmojiRegistry",
    "Identifier",
    "JsonTranslationLoader",
    "LegacyReaction",
    "MappingTranslationLoader",
    "PlatformVersion",
    "PreferenceStore",
    "ReverseIndex",
    "SearchIndex",
    "SearchIndexBuilder",
    "SearchIndexManager",
    "SkinTone",
    "ToneDeclaration",
    "ToneSequence",
    "TranslationLoader",
    "Variant",
    "VariantPreferences",
    "VariantTable",
    "base_reaction_variants",
    "build_catalog",
    "build_registry",
    "build_reverse_index",
    "build_variant_table",
    "classify",
    "default_reaction_variants",
    "display_value",
    "has_non_legacy_reactions",
    "is_renderable",
    "legacy_sequence",
    "minimum_platform",
    "normalize_language",
    "preferred_variant",
]
