from __future__ import annotations

import pytest

from emojindex.core.exceptions import CatalogError
from emojindex.emoji.catalog import (
    PRESENTATION_SELECTOR,
    Catalog,
    Identifier,
    build_catalog,
    single_tone_template,
)
from emojindex.emoji.data import CATALOG_ENTRIES, CATALOG_VERSION


def test_bundled_catalog_loads() -> None:
    catalog = build_catalog()

    assert len(catalog) == len(CATALOG_ENTRIES)
    assert catalog.version == CATALOG_VERSION == "15.1"
    assert catalog["thumbs_up"].sequence == "\U0001f44d"
    assert catalog.get("missing") is None
    assert "red_heart" in catalog


def test_sort_orders_are_unique() -> None:
    catalog = build_catalog()
    orders = [identifier.sort_order for identifier in catalog]
    assert len(orders) == len(set(orders))


def test_names_and_sequences_are_unique_in_bundled_data() -> None:
    names = [row[0] for row in CATALOG_ENTRIES]
    sequences = [row[1] for row in CATALOG_ENTRIES]
    assert len(names) == len(set(names))
    assert len(sequences) == len(set(sequences))


def test_getitem_raises_key_error_for_unknown_name() -> None:
    with pytest.raises(KeyError):
        build_catalog()["no_such_emoji"]


def test_from_sequence_requires_exact_default() -> None:
    catalog = build_catalog()
    assert catalog.from_sequence("\u2764\ufe0f").name == "red_heart"
    assert catalog.from_sequence("\u2764") is None


def test_from_unqualified_ignores_every_presentation_selector() -> None:
    catalog = build_catalog()

    assert catalog.from_unqualified("\u2764").name == "red_heart"
    assert catalog.from_unqualified("\U0001f3cc\u200d\u2642\ufe0f").name == "man_golfing"
    assert catalog.from_unqualified("\ufe0f") is None
    assert catalog.from_unqualified("") is None


@pytest.mark.parametrize(
    ("name", "slots", "uniform"),
    [
        ("person", 1, None),
        ("man", 1, None),
        ("woman", 1, None),
        ("person_red_hair", 1, None),
        ("man_beard", 1, None),
        ("kiss", 2, "\U0001f48f{0}"),
        ("couple_with_heart", 2, "\U0001f491{0}"),
        ("kiss_woman_man", 2, None),
        ("people_holding_hands", 2, None),
    ],
)
def test_bundled_tone_declarations(name: str, slots: int, uniform: str | None) -> None:
    declaration = build_catalog().declaration(name)

    assert declaration is not None
    assert declaration.slots == slots
    assert declaration.uniform == uniform


def test_bundled_catalog_keeps_keycap_symbols_apart() -> None:
    catalog = build_catalog()

    assert catalog["keycap_number_sign"].sequence == "#\ufe0f\u20e3"
    assert catalog["keycap_asterisk"].sequence == "*\ufe0f\u20e3"


def test_tone_capable_identifiers_follow_declaration_order() -> None:
    catalog = build_catalog()
    names = [identifier.name for identifier in catalog.tone_capable()]

    assert names[0] == "waving_hand"
    assert "handshake" in names
    assert "red_heart" not in names
    assert catalog.declaration("handshake").slots == 2
    assert catalog.declaration("thumbs_up").slots == 1


def test_sorted_uses_sort_order() -> None:
    catalog = build_catalog()
    picked = [catalog["pizza"], catalog["grinning_face"], catalog["thumbs_up"]]
    assert [identifier.name for identifier in catalog.sorted(picked)] == [
        "grinning_face",
        "thumbs_up",
        "pizza",
    ]


def test_single_tone_template_drops_presentation_selector() -> None:
    assert single_tone_template("\U0001f44d") == "\U0001f44d{0}"
    assert single_tone_template("\u270c" + PRESENTATION_SELECTOR) == "\u270c{0}"
    # Only a selector right after the first code point is removed.
    assert (
        single_tone_template("\U0001f6b6\u200d\u27a1\ufe0f")
        == "\U0001f6b6{0}\u200d\u27a1\ufe0f"
    )


def test_duplicate_names_are_rejected() -> None:
    with pytest.raises(CatalogError, match="duplicate identifier"):
        build_catalog([("a", "A", 1, "1.0", None), ("a", "B", 2, "1.0", None)])


def test_duplicate_sort_orders_are_rejected() -> None:
    with pytest.raises(CatalogError, match="duplicate sort order"):
        build_catalog([("a", "A", 1, "1.0", None), ("b", "B", 1, "1.0", None)])


@pytest.mark.parametrize(
    "tones",
    [
        ("pair", None, "X{0}"),
        ("pair", "Y", "X{0}{1}"),
        "double",
    ],
)
def test_invalid_tone_declarations_are_rejected(tones: object) -> None:
    with pytest.raises(CatalogError):
        build_catalog([("a", "A", 1, "1.0", tones)])


def test_rows_need_five_fields() -> None:
    with pytest.raises(CatalogError, match="five fields"):
        build_catalog([("a", "A", 1, "1.0")])


def test_declarations_for_unknown_identifiers_are_rejected() -> None:
    from emojindex.emoji.catalog import ToneDeclaration

    with pytest.raises(CatalogError, match="unknown identifiers"):
        Catalog(
            [Identifier("a", "A", 1)],
            {"b": ToneDeclaration(slots=1, mixed="B{0}")},
        )


def test_custom_catalog_has_no_version_by_default() -> None:
    catalog = build_catalog([("a", "A", 1, None, None)])
    assert catalog.version is None
    assert catalog["a"].introduced is None
