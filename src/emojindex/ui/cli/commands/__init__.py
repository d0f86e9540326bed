"""CLI command implementations exposed via `emojindex.ui.cli`.

The Typer application in `emojindex.ui.cli.app` registers these functions as
subcommands; importing them from here keeps dotted paths short for
documentation tools.
"""

from __future__ import annotations

from .lookup import classify, resolve, variants
from .reactions import prefer, reactions, use
from .search import search


__all__ = ["classify", "prefer", "reactions", "resolve", "search", "use", "variants"]
