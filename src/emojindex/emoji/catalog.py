"""Immutable emoji catalog: identifiers, default sequences, sort keys, versions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from emojindex.core.exceptions import CatalogError

from .data import CATALOG_ENTRIES, CATALOG_VERSION


PRESENTATION_SELECTOR = "\ufe0f"


@dataclass(frozen=True, slots=True)
class Identifier:
    """One base emoji, independent of skin tone modification."""

    name: str
    sequence: str
    sort_order: int
    introduced: str | None = None

    def __str__(self) -> str:
        return self.sequence


@dataclass(frozen=True, slots=True)
class ToneDeclaration:
    """How an identifier accepts skin tones.

    ``slots`` is the number of people carrying a tone. Templates hold ``{0}``
    and ``{1}`` placeholders for the modifiers; ``uniform`` is preferred when
    both tones of a two-slot identifier are equal.
    """

    slots: int
    mixed: str
    uniform: str | None = None

    def template_for(self, tones: Sequence[Any]) -> str:
        if self.slots == 2 and self.uniform is not None and tones[0] == tones[1]:
            return self.uniform
        return self.mixed


def unqualified(sequence: str) -> str:
    """Return ``sequence`` without emoji presentation selectors."""
    return sequence.replace(PRESENTATION_SELECTOR, "")


def single_tone_template(sequence: str) -> str:
    """Insert a modifier slot after the first code point of ``sequence``.

    An emoji presentation selector right after the first code point is dropped,
    since the modifier already forces emoji presentation.
    """
    if not sequence:
        raise CatalogError("cannot derive a tone template from an empty sequence")
    rest = sequence[1:]
    if rest.startswith(PRESENTATION_SELECTOR):
        rest = rest[1:]
    return sequence[0] + "{0}" + rest


def _parse_declaration(name: str, sequence: str, raw: Any) -> ToneDeclaration | None:
    if raw is None:
        return None
    if raw == "single":
        return ToneDeclaration(slots=1, mixed=single_tone_template(sequence))
    if isinstance(raw, tuple) and len(raw) == 3 and raw[0] == "pair":
        _kind, uniform, mixed = raw
        if not isinstance(mixed, str) or "{0}" not in mixed or "{1}" not in mixed:
            raise CatalogError(f"'{name}': pair template needs both modifier slots")
        if uniform is not None and (not isinstance(uniform, str) or "{0}" not in uniform):
            raise CatalogError(f"'{name}': uniform template needs a modifier slot")
        return ToneDeclaration(slots=2, mixed=mixed, uniform=uniform)
    raise CatalogError(f"'{name}': unsupported tone declaration {raw!r}")


class Catalog:
    """Ordered, read-only collection of identifiers.

    Declaration order is preserved for iteration; ``sort_order`` gives the
    presentation order and must be unique across the catalog.
    """

    __slots__ = (
        "_by_name",
        "_by_sequence",
        "_by_unqualified",
        "_declarations",
        "_identifiers",
        "version",
    )

    def __init__(
        self,
        identifiers: Iterable[Identifier],
        declarations: dict[str, ToneDeclaration] | None = None,
        *,
        version: str | None = None,
    ) -> None:
        self._identifiers: tuple[Identifier, ...] = tuple(identifiers)
        self._declarations = dict(declarations or {})
        self.version = version

        by_name: dict[str, Identifier] = {}
        by_sequence: dict[str, Identifier] = {}
        by_unqualified: dict[str, Identifier] = {}
        sort_orders: set[int] = set()
        for identifier in self._identifiers:
            if identifier.name in by_name:
                raise CatalogError(f"duplicate identifier '{identifier.name}'")
            if identifier.sort_order in sort_orders:
                raise CatalogError(
                    f"duplicate sort order {identifier.sort_order} for '{identifier.name}'"
                )
            by_name[identifier.name] = identifier
            sort_orders.add(identifier.sort_order)
            by_sequence.setdefault(identifier.sequence, identifier)
            by_unqualified.setdefault(unqualified(identifier.sequence), identifier)
        unknown = set(self._declarations) - set(by_name)
        if unknown:
            raise CatalogError(f"tone declarations for unknown identifiers: {sorted(unknown)}")
        self._by_name = by_name
        self._by_sequence = by_sequence
        self._by_unqualified = by_unqualified

    def __iter__(self) -> Iterator[Identifier]:
        return iter(self._identifiers)

    def __len__(self) -> int:
        return len(self._identifiers)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Identifier | None:
        return self._by_name.get(name)

    def __getitem__(self, name: str) -> Identifier:
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"unknown emoji identifier '{name}'") from None

    def from_sequence(self, sequence: str) -> Identifier | None:
        """Return the identifier whose default sequence is exactly ``sequence``."""
        return self._by_sequence.get(sequence)

    def from_unqualified(self, sequence: str) -> Identifier | None:
        """Return the identifier whose default matches ``sequence`` ignoring U+FE0F.

        Minimally qualified and unqualified forms, such as CLDR keyword keys,
        carry fewer presentation selectors than the fully qualified default.
        """
        stripped = unqualified(sequence)
        if not stripped:
            return None
        return self._by_unqualified.get(stripped)

    def declaration(self, identifier: Identifier | str) -> ToneDeclaration | None:
        name = identifier if isinstance(identifier, str) else identifier.name
        return self._declarations.get(name)

    def tone_capable(self) -> Iterator[Identifier]:
        """Yield identifiers supporting skin tones, in declaration order."""
        for identifier in self._identifiers:
            if identifier.name in self._declarations:
                yield identifier

    def sorted(self, identifiers: Iterable[Identifier] | None = None) -> list[Identifier]:
        """Sort ``identifiers`` (or the whole catalog) by sort order."""
        source = self._identifiers if identifiers is None else identifiers
        return sorted(source, key=lambda identifier: identifier.sort_order)


def build_catalog(
    entries: Iterable[Sequence[Any]] = CATALOG_ENTRIES,
    *,
    version: str | None = None,
) -> Catalog:
    """Create a catalog from rows of ``(name, sequence, sort_order, version, tones)``."""
    identifiers: list[Identifier] = []
    declarations: dict[str, ToneDeclaration] = {}
    for row in entries:
        if len(row) != 5:
            raise CatalogError(f"catalog rows hold five fields, got {len(row)}: {row!r}")
        name, sequence, sort_order, introduced, tones = row
        if not name or not sequence:
            raise CatalogError(f"catalog row without name or sequence: {row!r}")
        identifiers.append(
            Identifier(name=name, sequence=sequence, sort_order=int(sort_order), introduced=introduced)
        )
        declaration = _parse_declaration(name, sequence, tones)
        if declaration is not None:
            declarations[name] = declaration
    if version is None and entries is CATALOG_ENTRIES:
        version = CATALOG_VERSION
    return Catalog(identifiers, declarations, version=version)


__all__ = [
    "Catalog",
    "Identifier",
    "ToneDeclaration",
    "build_catalog",
    "single_tone_template",
    "unqualified",
]
