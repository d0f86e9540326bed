"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


LOOKUP_PANEL = "Lookup"
PLATFORM_PANEL = "Platform"

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML settings file (language, platform version, resource paths).",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
]

LanguageOption = Annotated[
    str | None,
    typer.Option(
        "--language",
        "-l",
        help="Keyword language, e.g. 'de' or 'fr-CH'. Defaults to the configured language.",
        rich_help_panel=LOOKUP_PANEL,
    ),
]

PlatformOption = Annotated[
    str | None,
    typer.Option(
        "--platform",
        "-p",
        help="Target platform version used to hide emoji it cannot render (e.g. 17.4).",
        rich_help_panel=PLATFORM_PANEL,
    ),
]

LimitOption = Annotated[
    int | None,
    typer.Option(
        "--limit",
        "-n",
        min=1,
        help="Maximum number of results to print.",
        rich_help_panel=LOOKUP_PANEL,
    ),
]


__all__ = [
    "ConfigOption",
    "LanguageOption",
    "LimitOption",
    "PlatformOption",
]
