from __future__ import annotations

import pytest

from emojindex.emoji.preferences import VariantPreferences
from emojindex.emoji.reactions import (
    REPLACEMENT_CHARACTER,
    base_reaction_variants,
    default_reaction_variants,
    display_value,
    has_non_legacy_reactions,
)
from emojindex.emoji.registry import build_registry
from emojindex.emoji.tones import SkinTone


PHOENIX = "\U0001f426\u200d\U0001f525"


@pytest.fixture(scope="module")
def registry():
    return build_registry()


def test_base_reactions_without_preferences(registry) -> None:
    picked = base_reaction_variants(registry)

    assert [variant.base.name for variant in picked] == ["thumbs_up", "thumbs_down"]
    assert all(variant.tones is None for variant in picked)


def test_reactions_apply_preferred_tones(registry) -> None:
    preferences = VariantPreferences(
        tones={
            "thumbs_up": SkinTone.DARK,
            "folded_hands": SkinTone.MEDIUM,
            "red_heart": SkinTone.LIGHT,
        }
    )

    base = base_reaction_variants(registry, preferences)
    defaults = default_reaction_variants(registry, preferences)

    assert base[0].rendered == "\U0001f44d\U0001f3ff"
    assert base[1].tones is None
    assert [variant.base.name for variant in defaults] == [
        "red_heart",
        "face_with_tears_of_joy",
        "crying_face",
        "folded_hands",
    ]
    assert defaults[0].tones is None
    assert defaults[3].rendered == "\U0001f64f\U0001f3fd"


def test_display_value_hides_unrenderable_reactions(registry) -> None:
    assert display_value(registry, "\U0001f44d", "18.4") == "\U0001f44d"
    assert display_value(registry, "\U0001f44d\U0001f3fb", "18.4") == "\U0001f44d\U0001f3fb"
    assert display_value(registry, PHOENIX, "17.4") == PHOENIX
    assert display_value(registry, PHOENIX, "17.3") == REPLACEMENT_CHARACTER
    assert display_value(registry, "\U0001fabe", "26.0") == REPLACEMENT_CHARACTER
    assert display_value(registry, "abc", "18.4") == REPLACEMENT_CHARACTER


@pytest.mark.parametrize(
    ("reactions", "expected"),
    [
        ([], False),
        (["\U0001f44d"], False),
        (["\U0001f44d", "\U0001f44e"], False),
        (["\U0001f44d\U0001f3fd"], True),
        (["\U0001f44d", "\u2764\ufe0f"], True),
        (["\U0001f44d\U0001f44d"], True),
    ],
)
def test_has_non_legacy_reactions(registry, reactions: list[str], expected: bool) -> None:
    assert has_non_legacy_reactions(registry, reactions) is expected
