from __future__ import annotations

import pytest

from emojindex.emoji.catalog import Identifier, build_catalog
from emojindex.emoji.registry import build_registry
from emojindex.emoji.tones import SkinTone
from emojindex.emoji.variants import (
    Variant,
    bare_variant,
    build_reverse_index,
    build_variant_table,
)


LIGHT = "\U0001f3fb"
MEDIUM = "\U0001f3fd"
DARK = "\U0001f3ff"


@pytest.fixture(scope="module")
def registry():
    return build_registry()


def test_table_covers_every_tone_capable_identifier(registry) -> None:
    capable = list(registry.catalog.tone_capable())
    assert len(registry.variants) == len(capable)
    for identifier in capable:
        slots = registry.catalog.declaration(identifier).slots
        assert len(registry.variants.entries(identifier)) == 5**slots


def test_single_tone_rendering(registry) -> None:
    thumbs_up = registry.identifier("thumbs_up")
    victory = registry.identifier("victory_hand")

    assert registry.variants.render(thumbs_up, [SkinTone.DARK]) == "\U0001f44d" + DARK
    assert registry.variants.render(thumbs_up, ["light"]) == "\U0001f44d" + LIGHT
    assert registry.variants.render(victory, ["medium"]) == "\u270c" + MEDIUM
    assert registry.variants.render(thumbs_up) == "\U0001f44d"


def test_two_person_rendering_prefers_uniform_template(registry) -> None:
    handshake = registry.identifier("handshake")
    people = registry.identifier("people_holding_hands")

    assert registry.variants.render(handshake, ["light", "light"]) == "\U0001f91d" + LIGHT
    assert (
        registry.variants.render(handshake, ["light", "dark"])
        == "\U0001faf1" + LIGHT + "\u200d\U0001faf2" + DARK
    )
    assert (
        registry.variants.render(people, ["medium", "medium"])
        == "\U0001f9d1" + MEDIUM + "\u200d\U0001f91d\u200d\U0001f9d1" + MEDIUM
    )


def test_render_rejects_tones_that_do_not_apply(registry) -> None:
    thumbs_up = registry.identifier("thumbs_up")
    handshake = registry.identifier("handshake")
    red_heart = registry.identifier("red_heart")

    assert registry.variants.render(thumbs_up, ["light", "dark"]) is None
    assert registry.variants.render(handshake, ["light"]) is None
    assert registry.variants.render(red_heart, ["light"]) is None
    assert registry.variants.render(thumbs_up, ["purple"]) is None
    assert registry.variants.variant(red_heart, ["dark"]) is None


def test_variants_list_bare_first(registry) -> None:
    thumbs_up = registry.identifier("thumbs_up")
    variants = registry.variants.variants(thumbs_up)

    assert len(variants) == 6
    assert variants[0] == bare_variant(thumbs_up)
    assert variants[0].tones is None
    assert [variant.tones for variant in variants[1:]] == [(tone,) for tone in SkinTone.ordered()]


def test_variant_identity_uses_rendered_and_tones(registry) -> None:
    thumbs_up = registry.identifier("thumbs_up")
    first = registry.variants.variant(thumbs_up, ["dark"])
    second = Variant(base=thumbs_up, tones=(SkinTone.DARK,), rendered="\U0001f44d" + DARK)

    assert first == second
    assert hash(first) == hash(second)
    assert first.key == "\U0001f44d" + DARK + "dark"
    assert first != bare_variant(thumbs_up)
    assert len({first, second, bare_variant(thumbs_up)}) == 2
    assert str(first) == "\U0001f44d" + DARK
    assert first.is_modified
    assert not bare_variant(thumbs_up).is_modified


def test_round_trip_for_every_variant(registry) -> None:
    for identifier in registry.catalog:
        for variant in registry.variants.variants(identifier):
            resolved = registry.resolve(variant.rendered)
            assert resolved == variant, variant.base.name
            assert resolved.base == identifier


def test_resolve_returns_none_for_unknown_input(registry) -> None:
    assert registry.resolve("") is None
    assert registry.resolve("abc") is None
    assert registry.resolve("\U0001f44d" + "\U0001f44d") is None


def test_resolve_normalises_presentation_selector(registry) -> None:
    unqualified_heart = registry.resolve("\u2764")
    over_qualified = registry.resolve("\U0001f44d\ufe0f")
    smiling = registry.resolve("\u263a")

    assert unqualified_heart.base.name == "red_heart"
    assert unqualified_heart.tones is None
    assert unqualified_heart.rendered == "\u2764\ufe0f"
    assert over_qualified.base.name == "thumbs_up"
    assert smiling.base.name == "smiling_face"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("\U0001f642\u200d\u2194", "head_shaking_horizontally"),
        ("\U0001f3cc\u200d\u2642", "man_golfing"),
        ("\U0001f3cc\ufe0f\u200d\u2642", "man_golfing"),
        ("\U0001f441\u200d\U0001f5e8", "eye_in_speech_bubble"),
        ("\U0001f3f3\u200d\U0001f308", "rainbow_flag"),
    ],
)
def test_resolve_accepts_minimally_qualified_sequences(registry, text: str, expected: str) -> None:
    variant = registry.resolve(text)

    assert variant.base.name == expected
    assert variant.tones is None
    assert variant.rendered == registry.identifier(expected).sequence


def test_resolve_tone_variants(registry) -> None:
    variant = registry.resolve("\U0001faf1" + MEDIUM + "\u200d\U0001faf2" + LIGHT)

    assert variant.base.name == "handshake"
    assert variant.tones == (SkinTone.MEDIUM, SkinTone.LIGHT)


def test_rebuilding_is_deterministic() -> None:
    first = build_registry()
    second = build_registry()

    assert list(first.index.items()) == list(second.index.items())
    assert len(first.index) == len(second.index)


def test_default_sequences_take_precedence_over_tone_variants() -> None:
    catalog = build_catalog(
        [
            ("alpha", "A", 1, "1.0", "single"),
            ("beta", "A" + LIGHT, 2, "1.0", None),
            ("gamma", "A" + LIGHT, 3, "1.0", None),
        ]
    )
    index = build_reverse_index(catalog)

    resolved = index.resolve("A" + LIGHT)
    assert resolved.base.name == "beta"
    assert resolved.tones is None
    assert index.resolve("A" + DARK).base.name == "alpha"


def test_later_tone_variant_wins_a_variant_collision() -> None:
    catalog = build_catalog(
        [
            ("delta", "B", 1, "1.0", ("pair", "X{0}", "X{0}{1}")),
            ("epsilon", "X", 2, "1.0", "single"),
        ]
    )
    index = build_reverse_index(catalog, build_variant_table(catalog))

    resolved = index.resolve("X" + LIGHT)
    assert resolved.base.name == "epsilon"
    assert resolved.tones == (SkinTone.LIGHT,)
    assert index.resolve("X" + LIGHT + DARK).base.name == "delta"


def test_registry_helpers(registry) -> None:
    assert registry.variant("thumbs_up", ["dark"]).rendered == "\U0001f44d" + DARK
    assert registry.variant("missing") is None
    assert registry.variant("red_heart").rendered == "\u2764\ufe0f"
    assert registry.is_renderable(registry.variant("thumbs_up"), "1.0")
    assert not registry.is_renderable(Identifier("future_face", "F", 1, "17.0"), "18.4")
    assert not registry.is_renderable(registry.identifier("phoenix"), "17.3")
