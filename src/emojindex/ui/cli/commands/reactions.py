"""CLI commands for reaction pickers and skin tone preferences."""

from __future__ import annotations

from typing import Annotated

from rich import box
from rich.table import Table
import typer

from emojindex.emoji.preferences import PreferenceStore
from emojindex.emoji.reactions import base_reaction_variants, default_reaction_variants
from emojindex.emoji.tones import SkinTone

from ..state import emit_error, get_cli_state
from ..utils import format_tones


def _store() -> PreferenceStore:
    return PreferenceStore(get_cli_state().settings.preferences_path)


def reactions() -> None:
    """Show the reaction picker with the preferred skin tones applied."""
    state = get_cli_state()
    preferences = _store().load()
    table = Table(box=box.SIMPLE, header_style="bold cyan")
    table.add_column("Group", style="cyan")
    table.add_column("Emoji")
    table.add_column("Name", style="magenta")
    table.add_column("Tones")
    for group, picked in (
        ("base", base_reaction_variants(state.registry, preferences)),
        ("default", default_reaction_variants(state.registry, preferences)),
    ):
        for variant in picked:
            table.add_row(group, variant.rendered, variant.base.name, format_tones(variant.tones))
    state.console.print(table)

    recent = preferences.ordered_recent(state.registry)
    if recent:
        state.console.print("recent: " + " ".join(variant.rendered for variant in recent))


def prefer(
    name: Annotated[str, typer.Argument(help="Identifier name, e.g. thumbs_up.")],
    tone: Annotated[
        str | None,
        typer.Argument(help="Skin tone (light ... dark); omit to clear the preference."),
    ] = None,
) -> None:
    """Store the preferred skin tone for an emoji."""
    state = get_cli_state()
    identifier = state.registry.identifier(name)
    if identifier is None:
        emit_error(f"Unknown emoji '{name}'.")
        raise typer.Exit(code=1)
    if state.registry.catalog.declaration(identifier) is None:
        emit_error(f"'{name}' does not take skin tones.")
        raise typer.Exit(code=1)

    selected: SkinTone | None = None
    if tone is not None:
        selected = SkinTone.parse(tone)
        if selected is None:
            choices = ", ".join(item.value for item in SkinTone.ordered())
            emit_error(f"Unknown skin tone '{tone}'. Choose one of: {choices}.")
            raise typer.Exit(code=1)

    store = _store()
    preferences = store.load()
    preferences.set_tone(identifier, selected)
    path = store.save(preferences)
    label = selected.value if selected is not None else "cleared"
    state.console.print(f"{identifier.name}: {label} ({path})")


def use(
    text: Annotated[str, typer.Argument(help="Emoji string to mark as recently used.")],
) -> None:
    """Record an emoji at the front of the recently used list."""
    state = get_cli_state()
    variant = state.registry.resolve(text)
    if variant is None:
        emit_error(f"No emoji matches '{text}'.")
        raise typer.Exit(code=1)
    store = _store()
    preferences = store.load()
    preferences.record_recent(variant.rendered, state.settings.recent_limit)
    store.save(preferences)
    state.console.print(f"{variant.base.name}: recorded")


__all__ = ["prefer", "reactions", "use"]
