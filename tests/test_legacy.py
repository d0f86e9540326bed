from __future__ import annotations

import pytest

from emojindex.emoji.legacy import (
    THUMBS_DOWN,
    THUMBS_UP,
    LegacyReaction,
    classify,
    legacy_sequence,
)
from emojindex.emoji.tones import SkinTone


@pytest.mark.parametrize("tone", [None, *SkinTone.ordered()])
def test_thumbs_map_regardless_of_tone(tone: SkinTone | None) -> None:
    suffix = tone.modifier if tone is not None else ""
    assert classify(THUMBS_UP + suffix) is LegacyReaction.POSITIVE
    assert classify(THUMBS_DOWN + suffix) is LegacyReaction.NEGATIVE


@pytest.mark.parametrize("text", ["", "\u2764\ufe0f", "\U0001f600", "x", "\ufe0f\U0001f44d"])
def test_everything_else_is_unmapped(text: str) -> None:
    assert classify(text) is None


def test_legacy_sequence_is_unmodified() -> None:
    assert legacy_sequence(LegacyReaction.POSITIVE) == "\U0001f44d"
    assert legacy_sequence(LegacyReaction.NEGATIVE) == "\U0001f44e"
    for reaction in LegacyReaction:
        assert classify(legacy_sequence(reaction)) is reaction
