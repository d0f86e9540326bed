"""Reaction pickers and the compatibility check against legacy reactions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .availability import PlatformVersion, is_renderable
from .legacy import classify
from .preferences import VariantPreferences, preferred_variant
from .registry import EmojiRegistry
from .variants import Variant


REPLACEMENT_CHARACTER = "\ufffd"

BASE_REACTIONS: tuple[str, ...] = ("thumbs_up", "thumbs_down")

DEFAULT_REACTIONS: tuple[str, ...] = (
    "red_heart",
    "face_with_tears_of_joy",
    "crying_face",
    "folded_hands",
)


def _pick(
    registry: EmojiRegistry,
    names: Iterable[str],
    preferences: VariantPreferences | None,
) -> list[Variant]:
    picked: list[Variant] = []
    for name in names:
        variant = preferred_variant(registry, name, preferences)
        if variant is not None:
            picked.append(variant)
    return picked


def base_reaction_variants(
    registry: EmojiRegistry, preferences: VariantPreferences | None = None
) -> list[Variant]:
    """Thumbs up and thumbs down, toned with the user's preference."""
    return _pick(registry, BASE_REACTIONS, preferences)


def default_reaction_variants(
    registry: EmojiRegistry, preferences: VariantPreferences | None = None
) -> list[Variant]:
    """The quick reactions offered next to the base pair."""
    return _pick(registry, DEFAULT_REACTIONS, preferences)


def display_value(
    registry: EmojiRegistry,
    text: str,
    platform_version: PlatformVersion | str | Sequence[int],
) -> str:
    """Return ``text`` when it resolves and renders on ``platform_version``.

    Anything else is shown as U+FFFD so that unknown or too-recent reactions
    never render as tofu.
    """
    variant = registry.resolve(text)
    if variant is None or not is_renderable(variant.base, platform_version):
        return REPLACEMENT_CHARACTER
    return text


def has_non_legacy_reactions(registry: EmojiRegistry, reactions: Iterable[str]) -> bool:
    """Return ``True`` when a reaction cannot be sent as a legacy reaction.

    Only the bare thumbs up and thumbs down sequences map losslessly; toned
    thumbs and every other emoji need reaction support on the receiving side.
    """
    for reaction in reactions:
        if classify(reaction) is None:
            return True
        variant = registry.resolve(reaction)
        if variant is None or variant.is_modified:
            return True
    return False


__all__ = [
    "BASE_REACTIONS",
    "DEFAULT_REACTIONS",
    "REPLACEMENT_CHARACTER",
    "base_reaction_variants",
    "default_reaction_variants",
    "display_value",
    "has_non_legacy_reactions",
]
