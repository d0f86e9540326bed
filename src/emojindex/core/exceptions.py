"""Custom exception hierarchy for emoji resolution and indexing."""

from __future__ import annotations


class EmojindexError(RuntimeError):
    """Base exception for emojindex failures."""


class CatalogError(EmojindexError):
    """Raised when a catalog table is inconsistent (duplicate keys, bad tone slots)."""


class ConfigError(EmojindexError):
    """Raised when configuration files or overrides cannot be validated."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "CatalogError",
    "ConfigError",
    "EmojindexError",
    "exception_hint",
    "exception_messages",
]
