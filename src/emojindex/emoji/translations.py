"""Language normalisation and keyword resource loading.

Keyword files are JSON objects mapping a rendered emoji sequence to an ordered
list of keywords, one file per supported language (``<code>.json``). Loaders
never raise for a missing or malformed file: they log the problem and return
``None`` so callers can treat the language as unavailable.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from importlib import resources
import json
import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "de", "fr", "it", "es")

# Languages without their own resources that read best with a parent language.
DIALECT_ALIASES: dict[str, str] = {
    "gsw": "de",
    "bar": "de",
    "ksh": "de",
    "nds": "de",
    "lb": "de",
}

Translations = dict[str, list[str]]


def normalize_language(code: str | None) -> str:
    """Map ``code`` onto a supported language, falling back to English.

    >>> normalize_language("de_CH")
    'de'
    >>> normalize_language("gsw")
    'de'
    >>> normalize_language("ja")
    'en'
    """
    if not code:
        return DEFAULT_LANGUAGE
    normalized = code.strip().lower().replace("_", "-")
    if normalized in SUPPORTED_LANGUAGES:
        return normalized
    if normalized in DIALECT_ALIASES:
        return DIALECT_ALIASES[normalized]
    primary = normalized.split("-", 1)[0]
    if primary in SUPPORTED_LANGUAGES:
        return primary
    if primary in DIALECT_ALIASES:
        return DIALECT_ALIASES[primary]
    return DEFAULT_LANGUAGE


@runtime_checkable
class TranslationLoader(Protocol):
    """Source of keyword maps for a normalised language code."""

    def load(self, language: str) -> Translations | None: ...


def validate_translations(payload: Any) -> Translations | None:
    """Return ``payload`` as a keyword map, or ``None`` when its shape is wrong.

    The whole payload is rejected on the first malformed entry so callers never
    observe a partial map.
    """
    if not isinstance(payload, Mapping):
        return None
    result: Translations = {}
    for key, keywords in payload.items():
        if not isinstance(key, str):
            return None
        if isinstance(keywords, str) or not isinstance(keywords, Sequence):
            return None
        if not all(isinstance(keyword, str) for keyword in keywords):
            return None
        result[key] = list(keywords)
    return result


class JsonTranslationLoader:
    """Read ``<language>.json`` from a directory or the packaged resources."""

    def __init__(self, directory: Path | None = None) -> None:
        self.directory = directory

    def _read_text(self, language: str) -> str | None:
        filename = f"{language}.json"
        try:
            if self.directory is not None:
                return (self.directory / filename).read_text(encoding="utf-8")
            resource = resources.files("emojindex.emoji") / "resources" / "translations" / filename
            return resource.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning("No emoji keywords available for language '%s'.", language)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Unable to read emoji keywords for '%s': %s", language, exc)
        return None

    def load(self, language: str) -> Translations | None:
        raw_text = self._read_text(language)
        if raw_text is None:
            return None
        try:
            payload = json.loads(raw_text)
        except json.JSONDecodeError as exc:
            logger.warning("Emoji keywords for '%s' are not valid JSON: %s", language, exc)
            return None
        translations = validate_translations(payload)
        if translations is None:
            logger.warning(
                "Emoji keywords for '%s' must map sequences to lists of strings.", language
            )
        return translations


class MappingTranslationLoader:
    """In-memory loader, handy for embedding and tests."""

    def __init__(self, languages: Mapping[str, Mapping[str, Sequence[str]]]) -> None:
        self._languages = {
            language: {key: list(values) for key, values in entries.items()}
            for language, entries in languages.items()
        }

    def load(self, language: str) -> Translations | None:
        entries = self._languages.get(language)
        if entries is None:
            logger.warning("No emoji keywords available for language '%s'.", language)
            return None
        return {key: list(values) for key, values in entries.items()}


__all__ = [
    "DEFAULT_LANGUAGE",
    "DIALECT_ALIASES",
    "SUPPORTED_LANGUAGES",
    "JsonTranslationLoader",
    "MappingTranslationLoader",
    "TranslationLoader",
    "Translations",
    "normalize_language",
    "validate_translations",
]
