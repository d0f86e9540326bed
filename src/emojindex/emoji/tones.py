"""Skin tone modifiers and tone sequences."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from functools import total_ordering


@total_ordering
class SkinTone(Enum):
    """The five Fitzpatrick-based modifiers, ordered light to dark by rank."""

    LIGHT = "light"
    MEDIUM_LIGHT = "medium-light"
    MEDIUM = "medium"
    MEDIUM_DARK = "medium-dark"
    DARK = "dark"

    @property
    def modifier(self) -> str:
        return _MODIFIERS[self]

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SkinTone):
            return NotImplemented
        return self.rank < other.rank

    @classmethod
    def ordered(cls) -> tuple[SkinTone, ...]:
        """Return every tone sorted by rank."""
        return tuple(sorted(cls))

    @classmethod
    def from_modifier(cls, char: str) -> SkinTone | None:
        return _BY_MODIFIER.get(char)

    @classmethod
    def parse(cls, value: str) -> SkinTone | None:
        """Accept a tone value, an enum name, or the modifier character."""
        text = value.strip()
        if not text:
            return None
        by_modifier = _BY_MODIFIER.get(text)
        if by_modifier is not None:
            return by_modifier
        normalized = text.lower().replace("_", "-")
        for tone in cls:
            if tone.value == normalized:
                return tone
        return None


_MODIFIERS = {
    SkinTone.LIGHT: "\U0001f3fb",
    SkinTone.MEDIUM_LIGHT: "\U0001f3fc",
    SkinTone.MEDIUM: "\U0001f3fd",
    SkinTone.MEDIUM_DARK: "\U0001f3fe",
    SkinTone.DARK: "\U0001f3ff",
}
_RANKS = {
    SkinTone.LIGHT: 0,
    SkinTone.MEDIUM_LIGHT: 1,
    SkinTone.MEDIUM: 2,
    SkinTone.MEDIUM_DARK: 3,
    SkinTone.DARK: 4,
}
_BY_MODIFIER = {modifier: tone for tone, modifier in _MODIFIERS.items()}

ToneSequence = tuple[SkinTone, ...]
"""One tone per person, left to right. Always one or two entries."""


def tone_sequence(tones: Iterable[SkinTone | str]) -> ToneSequence:
    """Coerce ``tones`` into a validated tone sequence.

    Raises ``ValueError`` for unknown tone names or a length outside 1..2.
    """
    result: list[SkinTone] = []
    for entry in tones:
        tone = entry if isinstance(entry, SkinTone) else SkinTone.parse(entry)
        if tone is None:
            raise ValueError(f"unknown skin tone '{entry}'")
        result.append(tone)
    if not 1 <= len(result) <= 2:
        raise ValueError(f"tone sequences hold one or two tones, got {len(result)}")
    return tuple(result)


def encode_tones(tones: ToneSequence | None) -> str:
    """Return the raw encoding of a tone sequence used in variant identity keys."""
    if not tones:
        return ""
    return "".join(tone.value for tone in tones)


__all__ = ["SkinTone", "ToneSequence", "encode_tones", "tone_sequence"]
