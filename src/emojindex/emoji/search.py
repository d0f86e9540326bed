"""Language-aware keyword index with English fallback."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from threading import RLock

from emojindex.core.config import DEFAULT_PLATFORM_VERSION
from emojindex.core.diagnostics import DiagnosticEmitter, ensure_emitter

from .availability import PlatformVersion, is_renderable
from .registry import EmojiRegistry
from .translations import (
    DEFAULT_LANGUAGE,
    JsonTranslationLoader,
    TranslationLoader,
    normalize_language,
)
from .variants import Variant


KeywordMap = dict[Variant, list[str]]


class SearchIndex(Mapping[Variant, list[str]]):
    """Read-only ``Variant -> keywords`` mapping for one resolved language.

    Iteration follows insertion order: entries of the requested language first,
    then the variants only the fallback language knows about.
    """

    __slots__ = ("_entries", "fallback_language", "language")

    def __init__(
        self,
        language: str,
        entries: Mapping[Variant, Sequence[str]],
        *,
        fallback_language: str | None = None,
    ) -> None:
        self.language = language
        self.fallback_language = fallback_language
        self._entries: dict[Variant, tuple[str, ...]] = {
            variant: tuple(keywords) for variant, keywords in entries.items()
        }

    def __getitem__(self, variant: Variant) -> list[str]:
        return list(self._entries[variant])

    def __iter__(self) -> Iterator[Variant]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SearchIndex(language={self.language!r}, size={len(self)})"

    def search(self, term: str, *, limit: int | None = None) -> list[Variant]:
        """Return variants with a keyword starting with ``term``.

        A keyword matches when it, or one of its words, starts with the
        case-folded term. Results are ranked by the position of the first
        matching keyword, then by catalog sort order.
        """
        needle = term.strip().casefold()
        if not needle:
            return []
        ranked: list[tuple[int, int, Variant]] = []
        for variant, keywords in self._entries.items():
            position = _first_match(keywords, needle)
            if position is not None:
                ranked.append((position, variant.base.sort_order, variant))
        ranked.sort(key=lambda item: (item[0], item[1]))
        results = [variant for _position, _order, variant in ranked]
        return results if limit is None else results[: max(limit, 0)]


def _first_match(keywords: Sequence[str], needle: str) -> int | None:
    for position, keyword in enumerate(keywords):
        folded = keyword.casefold()
        if folded.startswith(needle):
            return position
        if any(word.startswith(needle) for word in folded.split()):
            return position
    return None


def merge_with_fallback(primary: KeywordMap, fallback: KeywordMap) -> KeywordMap:
    """Append fallback keywords after native ones and add fallback-only variants."""
    merged: KeywordMap = {variant: list(keywords) for variant, keywords in primary.items()}
    for variant, keywords in fallback.items():
        if variant in merged:
            merged[variant] = merged[variant] + list(keywords)
        else:
            merged[variant] = list(keywords)
    return merged


class SearchIndexBuilder:
    """Build search indexes from a translation loader and the emoji registry."""

    def __init__(
        self,
        registry: EmojiRegistry,
        loader: TranslationLoader | None = None,
        *,
        platform_version: PlatformVersion | str | Sequence[int] = DEFAULT_PLATFORM_VERSION,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.registry = registry
        self.loader = loader if loader is not None else JsonTranslationLoader()
        self.platform_version = PlatformVersion.parse(platform_version)
        self.emitter = ensure_emitter(emitter)

    def keywords_for(self, language: str) -> KeywordMap | None:
        """Load ``language`` and keep the entries that resolve and render.

        Several raw sequences resolving to the same variant have their keywords
        concatenated in file order.
        """
        raw = self.loader.load(language)
        if raw is None:
            return None
        entries: KeywordMap = {}
        dropped = 0
        for raw_sequence, keywords in raw.items():
            variant = self.registry.resolve(raw_sequence)
            if variant is None or not is_renderable(variant.base, self.platform_version):
                dropped += 1
                continue
            entries.setdefault(variant, []).extend(keywords)
        self.emitter.event(
            "translations_loaded",
            {"language": language, "entries": len(entries), "dropped": dropped},
        )
        return entries

    def build(self, requested_language: str | None) -> SearchIndex | None:
        """Return the index for ``requested_language`` or ``None`` if it cannot load."""
        language = normalize_language(requested_language)
        primary = self.keywords_for(language)
        if primary is None:
            return None

        fallback_language: str | None = None
        merged = primary
        if language != DEFAULT_LANGUAGE:
            fallback = self.keywords_for(DEFAULT_LANGUAGE)
            if fallback is not None:
                merged = merge_with_fallback(primary, fallback)
                fallback_language = DEFAULT_LANGUAGE

        index = SearchIndex(language, merged, fallback_language=fallback_language)
        self.emitter.event(
            "search_index_built",
            {"language": language, "size": len(index), "fallback": fallback_language},
        )
        return index


@dataclass(slots=True)
class SearchIndexManager:
    """Memoise search indexes per normalised language.

    Builds run under a lock so concurrent callers asking for the same language
    share one build. Failed builds are not cached and are retried on the next
    request.
    """

    builder: SearchIndexBuilder
    _cache: dict[str, SearchIndex] = field(default_factory=dict, init=False, repr=False)
    _lock: RLock = field(default_factory=RLock, init=False, repr=False)

    def get(self, language: str | None) -> SearchIndex | None:
        key = normalize_language(language)
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                return cached
            index = self.builder.build(key)
            if index is not None:
                self._cache[key] = index
            return index

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()


__all__ = [
    "SearchIndex",
    "SearchIndexBuilder",
    "SearchIndexManager",
    "merge_with_fallback",
]
