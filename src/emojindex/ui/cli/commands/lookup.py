"""CLI commands resolving emoji strings and listing skin tone variants."""

from __future__ import annotations

from typing import Annotated

import emoji
from rich import box
from rich.table import Table
import typer

from emojindex.emoji.availability import is_renderable
from emojindex.emoji.catalog import Identifier
from emojindex.emoji.legacy import classify as classify_reaction

from .._options import PlatformOption
from ..state import emit_error, get_cli_state
from ..utils import format_code_points, format_tones, parse_platform


def _unknown_text_message(text: str) -> str:
    code_points = format_code_points(text)
    if text and emoji.is_emoji(text):
        label = emoji.demojize(text).strip(":").replace("_", " ")
        return f"No emoji matches '{text}' ({code_points}): {label} is not in the catalog."
    return f"No emoji matches '{text}' ({code_points})."


def resolve(
    text: Annotated[str, typer.Argument(help="Emoji string to identify.")],
    platform: PlatformOption = None,
) -> None:
    """Identify an emoji string and report its base identifier and skin tones."""
    state = get_cli_state()
    platform_version = parse_platform(platform or state.settings.platform_version)
    variant = state.registry.resolve(text)
    if variant is None:
        emit_error(_unknown_text_message(text))
        raise typer.Exit(code=1)

    identifier = variant.base
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("name", identifier.name)
    table.add_row("emoji", variant.rendered)
    table.add_row("code points", format_code_points(variant.rendered))
    table.add_row("tones", format_tones(variant.tones))
    table.add_row("sort order", str(identifier.sort_order))
    table.add_row("introduced", identifier.introduced or "-")
    table.add_row(
        f"renders on {platform_version}",
        "yes" if is_renderable(identifier, platform_version) else "no",
    )
    state.console.print(table)


def _lookup_identifier(query: str) -> Identifier | None:
    registry = get_cli_state().registry
    identifier = registry.identifier(query.strip().lower().replace(" ", "_"))
    if identifier is not None:
        return identifier
    variant = registry.resolve(query)
    return variant.base if variant is not None else None


def variants(
    name: Annotated[
        str, typer.Argument(help="Identifier name (e.g. thumbs_up) or an emoji string.")
    ],
) -> None:
    """List the default sequence and every skin tone variant of an emoji."""
    state = get_cli_state()
    identifier = _lookup_identifier(name)
    if identifier is None:
        emit_error(f"Unknown emoji '{name}'.")
        raise typer.Exit(code=1)

    table = Table(
        title=identifier.name,
        box=box.SQUARE,
        header_style="bold cyan",
    )
    table.add_column("Tones", style="magenta")
    table.add_column("Emoji")
    table.add_column("Code points", style="green")
    for variant in state.registry.variants.variants(identifier):
        table.add_row(
            format_tones(variant.tones),
            variant.rendered,
            format_code_points(variant.rendered),
        )
    state.console.print(table)


def classify(
    text: Annotated[str, typer.Argument(help="Reaction emoji to classify.")],
) -> None:
    """Print the legacy reaction an emoji maps to, or 'unmapped'."""
    reaction = classify_reaction(text)
    get_cli_state().console.print(reaction.value if reaction is not None else "unmapped")


__all__ = ["classify", "resolve", "variants"]
