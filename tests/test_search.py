from __future__ import annotations

from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pytest

from emojindex.emoji.registry import build_registry
from emojindex.emoji.search import (
    SearchIndex,
    SearchIndexBuilder,
    SearchIndexManager,
    merge_with_fallback,
)
from emojindex.emoji.translations import MappingTranslationLoader


THUMBS_UP = "\U0001f44d"
PIZZA = "\U0001f355"
FIRE = "\U0001f525"
PHOENIX = "\U0001f426\u200d\U0001f525"
LEAFLESS_TREE = "\U0001fabe"


class RecordingEmitter:
    debug_enabled = False

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        pass

    def error(self, message: str, exc: BaseException | None = None) -> None:
        pass

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))


class CountingLoader(MappingTranslationLoader):
    def __init__(self, languages) -> None:
        super().__init__(languages)
        self.calls: list[str] = []

    def load(self, language: str):
        self.calls.append(language)
        return super().load(language)


@pytest.fixture(scope="module")
def registry():
    return build_registry()


def _builder(registry, languages, **kwargs) -> SearchIndexBuilder:
    return SearchIndexBuilder(registry, MappingTranslationLoader(languages), **kwargs)


def test_native_keywords_come_before_english_ones(registry) -> None:
    builder = _builder(
        registry,
        {
            "de": {THUMBS_UP: ["x"]},
            "en": {THUMBS_UP: ["y"], PIZZA: ["z"]},
        },
    )
    index = builder.build("de")
    thumbs_up = registry.variant("thumbs_up")
    pizza = registry.variant("pizza")

    assert index.language == "de"
    assert index.fallback_language == "en"
    assert dict(index) == {thumbs_up: ["x", "y"], pizza: ["z"]}
    assert list(index) == [thumbs_up, pizza]


def test_english_is_not_merged_with_itself(registry) -> None:
    index = _builder(registry, {"en": {THUMBS_UP: ["y"]}}).build("en-GB")

    assert index.language == "en"
    assert index.fallback_language is None
    assert index[registry.variant("thumbs_up")] == ["y"]


def test_unsupported_languages_use_english(registry) -> None:
    index = _builder(registry, {"en": {PIZZA: ["pizza"]}}).build("ja")

    assert index.language == "en"
    assert len(index) == 1


def test_unrenderable_and_unknown_entries_are_dropped(registry) -> None:
    emitter = RecordingEmitter()
    builder = _builder(
        registry,
        {"en": {LEAFLESS_TREE: ["leafless"], THUMBS_UP: ["up"], "abc": ["nothing"]}},
        emitter=emitter,
    )
    index = builder.build("en")

    assert [variant.base.name for variant in index] == ["thumbs_up"]
    assert emitter.events[0] == (
        "translations_loaded",
        {"language": "en", "entries": 1, "dropped": 2},
    )


def test_platform_version_gates_entries(registry) -> None:
    languages = {"en": {PHOENIX: ["phoenix"]}}

    older = _builder(registry, languages, platform_version="17.3").build("en")
    newer = _builder(registry, languages, platform_version="17.4").build("en")

    assert len(older) == 0
    assert [variant.base.name for variant in newer] == ["phoenix"]


def test_tone_variants_are_indexed_separately(registry) -> None:
    toned = THUMBS_UP + "\U0001f3fd"
    index = _builder(registry, {"en": {THUMBS_UP: ["up"], toned: ["up medium"]}}).build("en")

    assert index[registry.variant("thumbs_up", ["medium"])] == ["up medium"]
    assert index[registry.variant("thumbs_up")] == ["up"]


def test_sequences_resolving_to_one_variant_are_concatenated(registry) -> None:
    index = _builder(
        registry, {"en": {"\u2764\ufe0f": ["red heart"], "\u2764": ["valentine"]}}
    ).build("en")

    assert index[registry.variant("red_heart")] == ["red heart", "valentine"]


def test_missing_primary_language_fails(registry) -> None:
    assert _builder(registry, {"en": {PIZZA: ["pizza"]}}).build("de") is None
    assert _builder(registry, {}).build("en") is None


def test_missing_fallback_language_is_tolerated(registry) -> None:
    index = _builder(registry, {"fr": {PIZZA: ["pizza"]}}).build("fr")

    assert index.fallback_language is None
    assert index[registry.variant("pizza")] == ["pizza"]


def test_build_emits_summary_events(registry) -> None:
    emitter = RecordingEmitter()
    _builder(
        registry,
        {"de": {THUMBS_UP: ["x"]}, "en": {PIZZA: ["z"]}},
        emitter=emitter,
    ).build("de")

    names = [name for name, _payload in emitter.events]
    assert names == ["translations_loaded", "translations_loaded", "search_index_built"]
    assert emitter.events[-1][1] == {"language": "de", "size": 2, "fallback": "en"}


def test_merge_with_fallback_keeps_inputs_untouched(registry) -> None:
    thumbs_up = registry.variant("thumbs_up")
    primary = {thumbs_up: ["x"]}
    fallback = {thumbs_up: ["y"]}

    assert merge_with_fallback(primary, fallback) == {thumbs_up: ["x", "y"]}
    assert primary == {thumbs_up: ["x"]}


def test_index_values_cannot_be_mutated(registry) -> None:
    index = SearchIndex("en", {registry.variant("pizza"): ["pizza"]})
    index[registry.variant("pizza")].append("mutated")

    assert index[registry.variant("pizza")] == ["pizza"]


def test_search_ranks_by_keyword_position_then_sort_order(registry) -> None:
    index = _builder(
        registry,
        {"en": {PIZZA: ["pizza", "fire-baked"], FIRE: ["fire", "flame"]}},
    ).build("en")

    assert [variant.base.name for variant in index.search("fire")] == ["fire", "pizza"]
    assert [variant.base.name for variant in index.search("PIZ")] == ["pizza"]
    assert index.search("  ") == []
    assert index.search("zzz") == []
    assert len(index.search("f", limit=1)) == 1


def test_search_matches_word_prefixes(registry) -> None:
    index = _builder(registry, {"en": {"\U0001fa75": ["light blue heart"]}}).build("en")

    assert [variant.base.name for variant in index.search("blue")] == ["light_blue_heart"]
    assert index.search("lue") == []


def test_packaged_german_index_includes_english_fallback(registry) -> None:
    index = SearchIndexBuilder(registry).build("de-CH")

    assert index.language == "de"
    assert [variant.base.name for variant in index.search("daumen")] == [
        "thumbs_up",
        "thumbs_down",
    ]
    assert [variant.base.name for variant in index.search("hund")] == [
        "hundred_points",
        "dog_face",
    ]
    assert index[registry.variant("thumbs_up")][:2] == ["Daumen hoch", "Daumen"]
    assert "thumbs up" in index[registry.variant("thumbs_up")]


def test_packaged_english_index_counts(registry) -> None:
    emitter = RecordingEmitter()
    SearchIndexBuilder(registry, emitter=emitter).build("en")

    assert emitter.events[0] == (
        "translations_loaded",
        {"language": "en", "entries": 54, "dropped": 0},
    )


def test_manager_memoises_per_normalised_language(registry) -> None:
    loader = CountingLoader({"de": {THUMBS_UP: ["x"]}, "en": {PIZZA: ["z"]}})
    manager = SearchIndexManager(SearchIndexBuilder(registry, loader))

    first = manager.get("de")
    second = manager.get("de_AT")

    assert first is second
    assert loader.calls == ["de", "en"]

    manager.clear()
    assert manager.get("de") is not first
    assert loader.calls == ["de", "en", "de", "en"]


def test_manager_retries_failed_builds(registry) -> None:
    loader = CountingLoader({"en": {PIZZA: ["z"]}})
    manager = SearchIndexManager(SearchIndexBuilder(registry, loader))

    assert manager.get("fr") is None
    assert manager.get("fr") is None
    assert loader.calls == ["fr", "fr"]


def test_manager_shares_one_build_across_threads(registry) -> None:
    loader = CountingLoader({"en": {PIZZA: ["z"]}})
    manager = SearchIndexManager(SearchIndexBuilder(registry, loader))

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(manager.get, ["en"] * 32))

    assert all(result is results[0] for result in results)
    assert loader.calls == ["en"]
