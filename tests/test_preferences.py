from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from emojindex.core.user_dir import user_dir_context
from emojindex.emoji.preferences import (
    PreferenceStore,
    VariantPreferences,
    preferred_variant,
)
from emojindex.emoji.registry import build_registry
from emojindex.emoji.tones import SkinTone


@pytest.fixture(scope="module")
def registry():
    return build_registry()


def test_preferred_variant_applies_single_tone(registry) -> None:
    preferences = VariantPreferences(tones={"waving_hand": SkinTone.MEDIUM_LIGHT})

    variant = preferred_variant(registry, "waving_hand", preferences)

    assert variant.tones == (SkinTone.MEDIUM_LIGHT,)
    assert variant.rendered == "\U0001f44b\U0001f3fc"


def test_preferred_variant_uses_one_tone_for_both_people(registry) -> None:
    preferences = VariantPreferences(tones={"handshake": SkinTone.MEDIUM})

    variant = preferred_variant(registry, registry.identifier("handshake"), preferences)

    assert variant.tones == (SkinTone.MEDIUM, SkinTone.MEDIUM)
    assert variant.rendered == "\U0001f91d\U0001f3fd"


def test_preferred_variant_falls_back_to_bare(registry) -> None:
    assert preferred_variant(registry, "thumbs_up", None).tones is None
    assert preferred_variant(registry, "thumbs_up", VariantPreferences()).tones is None
    assert (
        preferred_variant(registry, "pizza", VariantPreferences(tones={"pizza": SkinTone.DARK}))
        .tones
        is None
    )
    assert preferred_variant(registry, "missing", None) is None


def test_set_tone_and_clear() -> None:
    preferences = VariantPreferences()
    preferences.set_tone("thumbs_up", SkinTone.DARK)
    assert preferences.tone_for("thumbs_up") is SkinTone.DARK

    preferences.set_tone("thumbs_up", None)
    assert preferences.tone_for("thumbs_up") is None


def test_record_recent_moves_to_front_and_truncates() -> None:
    preferences = VariantPreferences()
    for item in ("a", "b", "c"):
        preferences.record_recent(item, limit=3)
    preferences.record_recent("a", limit=3)
    assert preferences.recent == ["a", "c", "b"]

    preferences.record_recent("d", limit=2)
    assert preferences.recent == ["d", "a"]

    preferences.record_recent("", limit=2)
    assert preferences.recent == ["d", "a"]

    with pytest.raises(ValueError):
        preferences.record_recent("e", limit=0)


def test_ordered_recent_drops_unknown_sequences(registry) -> None:
    preferences = VariantPreferences(
        recent=["\U0001f355", "abc", "\U0001f44d\U0001f3ff", "\u2764", "\u2764\ufe0f"]
    )

    names = [variant.base.name for variant in preferences.ordered_recent(registry)]

    assert names == ["pizza", "thumbs_up", "red_heart"]


def test_store_round_trip(tmp_path: Path) -> None:
    store = PreferenceStore(tmp_path / "nested" / "prefs.json")
    preferences = VariantPreferences(
        tones={"thumbs_up": SkinTone.MEDIUM_DARK}, recent=["\U0001f355"]
    )

    path = store.save(preferences)
    payload = json.loads(path.read_text(encoding="utf-8"))

    assert payload == {"tones": {"thumbs_up": "medium-dark"}, "recent": ["\U0001f355"]}
    assert store.load() == preferences


def test_store_defaults_to_user_directory(tmp_path: Path) -> None:
    with user_dir_context(tmp_path):
        store = PreferenceStore()
    assert store.path == tmp_path / "preferences.json"
    assert store.load() == VariantPreferences()


def test_store_ignores_invalid_files(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "prefs.json"
    path.write_text("[1, 2", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="emojindex.emoji.preferences"):
        assert PreferenceStore(path).load() == VariantPreferences()
    assert caplog.records

    path.write_text(json.dumps({"tones": []}), encoding="utf-8")
    assert PreferenceStore(path).load() == VariantPreferences()


def test_store_skips_unknown_tones(tmp_path: Path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text(
        json.dumps({"tones": {"thumbs_up": "purple", "ok_hand": "light"}, "extra": 1}),
        encoding="utf-8",
    )

    assert PreferenceStore(path).load().tones == {"ok_hand": SkinTone.LIGHT}
