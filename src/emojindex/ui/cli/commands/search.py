"""CLI command searching emoji by localised keyword."""

from __future__ import annotations

from typing import Annotated

from rich import box
from rich.table import Table
import typer

from emojindex.emoji.search import SearchIndexBuilder
from emojindex.emoji.translations import JsonTranslationLoader, normalize_language

from .._options import LanguageOption, LimitOption, PlatformOption
from ..diagnostics import CliEmitter
from ..state import emit_error, emit_warning, get_cli_state
from ..utils import parse_platform


_KEYWORDS_SHOWN = 4


def search(
    term: Annotated[str, typer.Argument(help="Keyword or keyword prefix to look for.")],
    language: LanguageOption = None,
    platform: PlatformOption = None,
    limit: LimitOption = None,
) -> None:
    """Search emoji whose keywords start with TERM."""
    state = get_cli_state()
    settings = state.settings
    platform_version = parse_platform(platform or settings.platform_version)
    requested = language or settings.language

    builder = SearchIndexBuilder(
        state.registry,
        JsonTranslationLoader(settings.translations_dir),
        platform_version=platform_version,
        emitter=CliEmitter(state),
    )
    index = builder.build(requested)
    if index is None:
        emit_error(f"No emoji keywords available for '{normalize_language(requested)}'.")
        raise typer.Exit(code=1)

    results = index.search(term, limit=limit)
    if not results:
        emit_warning(f"No emoji match '{term}'.")
        return

    table = Table(box=box.SIMPLE, header_style="bold cyan")
    table.add_column("Emoji")
    table.add_column("Name", style="magenta")
    table.add_column("Keywords")
    for variant in results:
        keywords = index[variant][:_KEYWORDS_SHOWN]
        table.add_row(variant.rendered, variant.base.name, ", ".join(keywords))
    state.console.print(table)


__all__ = ["search"]
