from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from emojindex.emoji.translations import (
    JsonTranslationLoader,
    MappingTranslationLoader,
    SUPPORTED_LANGUAGES,
    TranslationLoader,
    normalize_language,
    validate_translations,
)


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("de", "de"),
        ("de_CH", "de"),
        ("fr-CA", "fr"),
        ("Es-419", "es"),
        ("EN", "en"),
        ("gsw", "de"),
        ("gsw-CH", "de"),
        ("lb", "de"),
        ("ja", "en"),
        ("pt-BR", "en"),
        ("", "en"),
        (None, "en"),
    ],
)
def test_normalize_language(code: str | None, expected: str) -> None:
    assert normalize_language(code) == expected


def test_normalized_codes_are_always_supported() -> None:
    for code in ("it-CH", "nds", "zz", "x-klingon"):
        assert normalize_language(code) in SUPPORTED_LANGUAGES


def test_validate_translations_rejects_malformed_payloads() -> None:
    assert validate_translations({"a": ["x", "y"]}) == {"a": ["x", "y"]}
    assert validate_translations([]) is None
    assert validate_translations({"a": "x"}) is None
    assert validate_translations({"a": ["x", 1]}) is None
    assert validate_translations({"a": ["x"], "b": None}) is None


def test_packaged_resources_exist_for_every_language() -> None:
    loader = JsonTranslationLoader()
    assert isinstance(loader, TranslationLoader)
    for language in SUPPORTED_LANGUAGES:
        translations = loader.load(language)
        assert translations, language
    assert loader.load("de")["\U0001f44d"][0] == "Daumen hoch"


def test_directory_loader_reads_json(tmp_path: Path) -> None:
    payload = {"\U0001f355": ["pizza", "slice"]}
    (tmp_path / "en.json").write_text(json.dumps(payload), encoding="utf-8")

    assert JsonTranslationLoader(tmp_path).load("en") == payload


def test_missing_resource_logs_and_returns_none(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="emojindex.emoji.translations"):
        assert JsonTranslationLoader(tmp_path).load("fr") is None
    assert any("fr" in record.getMessage() for record in caplog.records)


def test_invalid_json_logs_and_returns_none(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    (tmp_path / "it.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "es.json").write_text('{"a": "b"}', encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="emojindex.emoji.translations"):
        assert JsonTranslationLoader(tmp_path).load("it") is None
        assert JsonTranslationLoader(tmp_path).load("es") is None
    assert len(caplog.records) == 2


def test_mapping_loader_returns_copies() -> None:
    loader = MappingTranslationLoader({"en": {"a": ["x"]}})
    first = loader.load("en")
    first["a"].append("mutated")

    assert loader.load("en") == {"a": ["x"]}
    assert loader.load("de") is None
