"""Configuration, diagnostics, and error types shared across emojindex."""

from __future__ import annotations

from .config import EmojindexConfig, load_config
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import CatalogError, ConfigError, EmojindexError
from .user_dir import EmojindexUserDir, get_user_dir, user_dir_context


__all__ = [
    "CatalogError",
    "ConfigError",
    "DiagnosticEmitter",
    "EmojindexConfig",
    "EmojindexError",
    "EmojindexUserDir",
    "LoggingEmitter",
    "NullEmitter",
    "get_user_dir",
    "load_config",
    "user_dir_context",
]
