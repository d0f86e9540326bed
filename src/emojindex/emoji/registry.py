"""Startup aggregate bundling the catalog, variant table, and reverse index."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .availability import PlatformVersion, is_renderable
from .catalog import Catalog, Identifier, build_catalog
from .tones import SkinTone
from .variants import ReverseIndex, Variant, VariantTable, build_reverse_index, build_variant_table


@dataclass(frozen=True, slots=True)
class EmojiRegistry:
    """Immutable lookup tables built once and shared by reference.

    Every member is read-only after construction, so one registry can serve
    any number of threads without locking.
    """

    catalog: Catalog
    variants: VariantTable
    index: ReverseIndex

    def resolve(self, text: str) -> Variant | None:
        return self.index.resolve(text)

    def identifier(self, name: str) -> Identifier | None:
        return self.catalog.get(name)

    def variant(
        self, name: str, tones: Iterable[SkinTone | str] | None = None
    ) -> Variant | None:
        """Return the variant of identifier ``name`` with ``tones`` applied."""
        identifier = self.catalog.get(name)
        if identifier is None:
            return None
        return self.variants.variant(identifier, tones)

    def is_renderable(
        self,
        variant: Variant | Identifier,
        platform_version: PlatformVersion | str | Sequence[int],
    ) -> bool:
        identifier = variant.base if isinstance(variant, Variant) else variant
        return is_renderable(identifier, platform_version)


def build_registry(catalog: Catalog | None = None) -> EmojiRegistry:
    """Build the lookup tables for ``catalog`` (the bundled catalog by default)."""
    catalog = catalog if catalog is not None else build_catalog()
    table = build_variant_table(catalog)
    index = build_reverse_index(catalog, table)
    return EmojiRegistry(catalog=catalog, variants=table, index=index)


__all__ = ["EmojiRegistry", "build_registry"]
