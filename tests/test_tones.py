from __future__ import annotations

import pytest

from emojindex.emoji.tones import SkinTone, encode_tones, tone_sequence


def test_tones_are_ordered_by_rank() -> None:
    assert SkinTone.ordered() == (
        SkinTone.LIGHT,
        SkinTone.MEDIUM_LIGHT,
        SkinTone.MEDIUM,
        SkinTone.MEDIUM_DARK,
        SkinTone.DARK,
    )
    assert SkinTone.LIGHT < SkinTone.DARK
    assert max(SkinTone) is SkinTone.DARK
    assert [tone.rank for tone in SkinTone.ordered()] == [0, 1, 2, 3, 4]


def test_modifiers_cover_fitzpatrick_range() -> None:
    assert [ord(tone.modifier) for tone in SkinTone.ordered()] == list(range(0x1F3FB, 0x1F400))
    assert SkinTone.from_modifier("\U0001f3fd") is SkinTone.MEDIUM
    assert SkinTone.from_modifier("x") is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("medium-dark", SkinTone.MEDIUM_DARK),
        ("MEDIUM_DARK", SkinTone.MEDIUM_DARK),
        (" light ", SkinTone.LIGHT),
        ("\U0001f3ff", SkinTone.DARK),
        ("purple", None),
        ("", None),
    ],
)
def test_parse_accepts_values_names_and_modifiers(raw: str, expected: SkinTone | None) -> None:
    assert SkinTone.parse(raw) is expected


def test_tone_sequence_validates_length_and_names() -> None:
    assert tone_sequence(["light", SkinTone.DARK]) == (SkinTone.LIGHT, SkinTone.DARK)
    with pytest.raises(ValueError):
        tone_sequence([])
    with pytest.raises(ValueError):
        tone_sequence(["light", "light", "light"])
    with pytest.raises(ValueError):
        tone_sequence(["purple"])


def test_encode_tones_joins_values() -> None:
    assert encode_tones(None) == ""
    assert encode_tones((SkinTone.LIGHT, SkinTone.DARK)) == "lightdark"
