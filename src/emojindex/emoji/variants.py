"""Skin tone variant table and the reverse parser from rendered sequences.

The variant table expands every tone declaration of the catalog into concrete
rendered sequences. The reverse index flattens that table, plus one tone-less
entry per identifier, into a single ``rendered -> Variant`` mapping.

Collision rules while building the reverse index:

- tone variants are inserted in catalog declaration order and a later variant
  replaces an earlier one rendering the same sequence;
- default sequences are inserted afterwards and replace a colliding tone
  variant, while an earlier identifier's default keeps its slot against a later
  identifier sharing the same default.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from itertools import product
from types import MappingProxyType

from .catalog import Catalog, Identifier
from .tones import SkinTone, ToneSequence, encode_tones, tone_sequence


@dataclass(frozen=True, slots=True, eq=False)
class Variant:
    """A base identifier, an optional tone sequence, and the rendered result."""

    base: Identifier
    tones: ToneSequence | None
    rendered: str
    key: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", self.rendered + encode_tones(self.tones))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Variant):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return self.rendered

    @property
    def is_modified(self) -> bool:
        return bool(self.tones)


def bare_variant(identifier: Identifier) -> Variant:
    """Return the unmodified variant of ``identifier``."""
    return Variant(base=identifier, tones=None, rendered=identifier.sequence)


class VariantTable:
    """Identifier name -> tone sequence -> rendered sequence."""

    __slots__ = ("_catalog", "_table")

    def __init__(self, catalog: Catalog, table: Mapping[str, Mapping[ToneSequence, str]]) -> None:
        self._catalog = catalog
        self._table = MappingProxyType(
            {name: MappingProxyType(dict(entries)) for name, entries in table.items()}
        )

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __len__(self) -> int:
        return len(self._table)

    def entries(self, identifier: Identifier | str) -> Mapping[ToneSequence, str]:
        """Return the tone table for ``identifier`` (empty when it takes no tones)."""
        name = identifier if isinstance(identifier, str) else identifier.name
        return self._table.get(name, MappingProxyType({}))

    def render(
        self,
        identifier: Identifier,
        tones: Iterable[SkinTone | str] | None = None,
    ) -> str | None:
        """Return the rendered sequence, or ``None`` when the tones do not apply."""
        if tones is None:
            return identifier.sequence
        try:
            sequence = tone_sequence(tones)
        except ValueError:
            return None
        return self.entries(identifier).get(sequence)

    def variant(
        self,
        identifier: Identifier,
        tones: Iterable[SkinTone | str] | None = None,
    ) -> Variant | None:
        """Build the variant for ``identifier`` and ``tones`` when the table has it."""
        if tones is None:
            return bare_variant(identifier)
        try:
            sequence = tone_sequence(tones)
        except ValueError:
            return None
        rendered = self.entries(identifier).get(sequence)
        if rendered is None:
            return None
        return Variant(base=identifier, tones=sequence, rendered=rendered)

    def variants(self, identifier: Identifier) -> list[Variant]:
        """Return the bare variant followed by every tone variant in table order."""
        result = [bare_variant(identifier)]
        for tones, rendered in self.entries(identifier).items():
            result.append(Variant(base=identifier, tones=tones, rendered=rendered))
        return result

    def iter_variants(self) -> Iterator[Variant]:
        """Yield every tone variant, catalog declaration order first."""
        for identifier in self._catalog:
            for tones, rendered in self.entries(identifier).items():
                yield Variant(base=identifier, tones=tones, rendered=rendered)


def build_variant_table(catalog: Catalog) -> VariantTable:
    """Expand the catalog's tone declarations into concrete sequences."""
    ordered = SkinTone.ordered()
    table: dict[str, dict[ToneSequence, str]] = {}
    for identifier in catalog.tone_capable():
        declaration = catalog.declaration(identifier)
        if declaration is None:
            continue
        entries: dict[ToneSequence, str] = {}
        for tones in product(ordered, repeat=declaration.slots):
            template = declaration.template_for(tones)
            entries[tones] = template.format(*(tone.modifier for tone in tones))
        table[identifier.name] = entries
    return VariantTable(catalog, table)


class ReverseIndex:
    """Read-only ``rendered -> Variant`` lookup with soft failure."""

    __slots__ = ("_catalog", "_index")

    def __init__(self, catalog: Catalog, index: Mapping[str, Variant]) -> None:
        self._catalog = catalog
        self._index = MappingProxyType(dict(index))

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, rendered: object) -> bool:
        return rendered in self._index

    def items(self) -> Iterable[tuple[str, Variant]]:
        return self._index.items()

    def resolve(self, text: str) -> Variant | None:
        """Return the variant rendered as ``text``, or ``None`` for unknown input.

        Exact matches return a variant whose ``rendered`` equals ``text``.
        Otherwise ``text`` is tried as a bare identifier sequence, first as
        given and then ignoring emoji presentation selectors wherever they sit.
        """
        if not isinstance(text, str) or not text:
            return None
        found = self._index.get(text)
        if found is not None:
            return found
        identifier = self._catalog.from_sequence(text) or self._catalog.from_unqualified(text)
        if identifier is None:
            return None
        return bare_variant(identifier)


def build_reverse_index(catalog: Catalog, table: VariantTable | None = None) -> ReverseIndex:
    """Flatten the variant table and the catalog defaults into a reverse index."""
    table = table if table is not None else build_variant_table(catalog)
    index: dict[str, Variant] = {}
    for variant in table.iter_variants():
        index[variant.rendered] = variant

    claimed_by_default: set[str] = set()
    for identifier in catalog:
        if identifier.sequence in claimed_by_default:
            continue
        index[identifier.sequence] = bare_variant(identifier)
        claimed_by_default.add(identifier.sequence)
    return ReverseIndex(catalog, index)


__all__ = [
    "ReverseIndex",
    "Variant",
    "VariantTable",
    "bare_variant",
    "build_reverse_index",
    "build_variant_table",
]
