"""Persisted skin tone preferences and recently used emoji.

The preferences file is a small JSON document::

    {
      "tones": {"thumbs_up": "medium-dark"},
      "recent": ["\\ud83d\\udc4d\\ud83c\\udffe", "\\u2764\\ufe0f"]
    }

``tones`` maps identifier names to a skin tone value and ``recent`` lists
rendered sequences, most recent first. Unknown identifiers, unknown tones and
sequences that no longer resolve are ignored when the file is read back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from emojindex.core.user_dir import get_user_dir

from .catalog import Identifier
from .registry import EmojiRegistry
from .tones import SkinTone
from .variants import Variant, bare_variant


logger = logging.getLogger(__name__)

DEFAULT_RECENT_LIMIT = 30


class PreferencesFile(BaseModel):
    """On-disk schema of the preferences document."""

    model_config = ConfigDict(extra="ignore")

    tones: dict[str, str] = Field(default_factory=dict)
    recent: list[str] = Field(default_factory=list)


@dataclass(slots=True)
class VariantPreferences:
    """Preferred tone per identifier name and recently used sequences."""

    tones: dict[str, SkinTone] = field(default_factory=dict)
    recent: list[str] = field(default_factory=list)

    def tone_for(self, identifier: Identifier | str) -> SkinTone | None:
        name = identifier if isinstance(identifier, str) else identifier.name
        return self.tones.get(name)

    def set_tone(self, identifier: Identifier | str, tone: SkinTone | None) -> None:
        name = identifier if isinstance(identifier, str) else identifier.name
        if tone is None:
            self.tones.pop(name, None)
        else:
            self.tones[name] = tone

    def record_recent(self, rendered: str, limit: int = DEFAULT_RECENT_LIMIT) -> None:
        """Move ``rendered`` to the front of the recent list, keeping ``limit`` items."""
        if not rendered:
            return
        if limit < 1:
            raise ValueError("recent limit must be at least 1")
        if rendered in self.recent:
            self.recent.remove(rendered)
        self.recent.insert(0, rendered)
        del self.recent[limit:]

    def ordered_recent(self, registry: EmojiRegistry) -> list[Variant]:
        """Resolve the recent list, dropping sequences the registry does not know."""
        resolved: list[Variant] = []
        seen: set[Variant] = set()
        for rendered in self.recent:
            variant = registry.resolve(rendered)
            if variant is None or variant in seen:
                continue
            seen.add(variant)
            resolved.append(variant)
        return resolved

    def to_payload(self) -> PreferencesFile:
        return PreferencesFile(
            tones={name: tone.value for name, tone in self.tones.items()},
            recent=list(self.recent),
        )

    @classmethod
    def from_payload(cls, payload: PreferencesFile) -> VariantPreferences:
        tones: dict[str, SkinTone] = {}
        for name, value in payload.tones.items():
            tone = SkinTone.parse(value)
            if tone is None:
                logger.debug("Ignoring unknown skin tone %r for '%s'.", value, name)
                continue
            tones[name] = tone
        return cls(tones=tones, recent=[item for item in payload.recent if item])


def preferred_variant(
    registry: EmojiRegistry,
    identifier: Identifier | str,
    preferences: VariantPreferences | None,
) -> Variant | None:
    """Return ``identifier`` with the preferred tone applied.

    Two-person identifiers use the preferred tone for both people. Without a
    preference, or when the identifier takes no tones, the bare variant is
    returned.
    """
    base = registry.identifier(identifier) if isinstance(identifier, str) else identifier
    if base is None:
        return None
    tone = preferences.tone_for(base) if preferences is not None else None
    if tone is not None:
        declaration = registry.catalog.declaration(base)
        if declaration is not None:
            variant = registry.variants.variant(base, (tone,) * declaration.slots)
            if variant is not None:
                return variant
    return bare_variant(base)


class PreferenceStore:
    """Load and save :class:`VariantPreferences` as JSON."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else get_user_dir().preferences_path

    def load(self) -> VariantPreferences:
        """Read the preferences, returning empty ones when the file is absent or invalid."""
        if not self.path.exists():
            return VariantPreferences()
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            document = PreferencesFile.model_validate(payload)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Ignoring unreadable preferences at %s: %s", self.path, exc)
            return VariantPreferences()
        return VariantPreferences.from_payload(document)

    def save(self, preferences: VariantPreferences) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = preferences.to_payload().model_dump()
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        return self.path


__all__ = [
    "DEFAULT_RECENT_LIMIT",
    "PreferenceStore",
    "PreferencesFile",
    "VariantPreferences",
    "preferred_variant",
]
