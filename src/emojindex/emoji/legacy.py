"""Mapping of thumbs up / thumbs down onto the two-valued legacy reaction."""

from __future__ import annotations

from enum import Enum


THUMBS_UP = "\U0001f44d"
THUMBS_DOWN = "\U0001f44e"


class LegacyReaction(Enum):
    """Reaction values understood by clients predating emoji reactions."""

    POSITIVE = "positive"
    NEGATIVE = "negative"


_BY_CODE_POINT = {
    THUMBS_UP: LegacyReaction.POSITIVE,
    THUMBS_DOWN: LegacyReaction.NEGATIVE,
}


def classify(text: str) -> LegacyReaction | None:
    """Classify ``text`` by its first code point only.

    Skin tone modifiers and anything else after the first code point are
    ignored, so every thumbs up variant maps to ``POSITIVE``.
    """
    if not isinstance(text, str) or not text:
        return None
    return _BY_CODE_POINT.get(text[0])


def legacy_sequence(reaction: LegacyReaction) -> str:
    """Return the unmodified emoji sent for ``reaction``."""
    return THUMBS_UP if reaction is LegacyReaction.POSITIVE else THUMBS_DOWN


__all__ = ["LegacyReaction", "THUMBS_DOWN", "THUMBS_UP", "classify", "legacy_sequence"]
