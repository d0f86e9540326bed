"""Formatting and argument helpers shared by CLI commands."""

from __future__ import annotations

import typer

from emojindex.emoji.availability import PlatformVersion
from emojindex.emoji.tones import ToneSequence

from .state import emit_error


def format_code_points(text: str) -> str:
    """Return ``text`` as space-separated ``U+XXXX`` code points."""
    return " ".join(f"U+{ord(char):04X}" for char in text)


def format_tones(tones: ToneSequence | None) -> str:
    if not tones:
        return "-"
    return ", ".join(tone.value for tone in tones)


def parse_platform(value: str) -> PlatformVersion:
    """Parse a platform version option, exiting with an error when malformed."""
    try:
        return PlatformVersion.parse(value)
    except ValueError as exc:
        emit_error(f"Invalid platform version '{value}'.", exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["format_code_points", "format_tones", "parse_platform"]
