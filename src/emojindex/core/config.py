"""Configuration model for emoji resolution and search.

EmojindexConfig

`language` (`str`)
: Requested search language. Codes outside the supported set fall back to
  English when the search index is built.

`platform_version` (`str`)
: Platform release used by the availability gate, e.g. ``"17.4"``. Emoji
  introduced in a Unicode revision the release cannot draw are hidden.

`translations_dir` (`Path | None`)
: Directory holding ``<language>.json`` keyword files. The packaged
  resources are used when omitted.

`preferences_path` (`Path | None`)
: JSON file storing preferred skin tones and recently used emoji. Defaults to
  ``preferences.json`` under the user directory.

`recent_limit` (`int`)
: Maximum number of recently used emoji kept in the preferences file.

Environment overrides: ``EMOJINDEX_LANGUAGE`` and ``EMOJINDEX_PLATFORM_VERSION``
take precedence over values read from the YAML file.
"""

from __future__ import annotations

import os
from pathlib import Path
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from .exceptions import ConfigError


DEFAULT_LANGUAGE = "en"
DEFAULT_PLATFORM_VERSION = "18.4"

_VERSION_PATTERN = re.compile(r"^\d+(\.\d+){0,2}$")
_ENV_OVERRIDES = {
    "language": "EMOJINDEX_LANGUAGE",
    "platform_version": "EMOJINDEX_PLATFORM_VERSION",
}


class EmojindexConfig(BaseModel):
    """Settings shared by the CLI and library entry points."""

    model_config = ConfigDict(extra="forbid")

    language: str = Field(default=DEFAULT_LANGUAGE, min_length=1)
    platform_version: str = DEFAULT_PLATFORM_VERSION
    translations_dir: Path | None = None
    preferences_path: Path | None = None
    recent_limit: int = Field(default=30, ge=1)

    @field_validator("language")
    @classmethod
    def _strip_language(cls, value: str) -> str:
        return value.strip()

    @field_validator("platform_version", mode="before")
    @classmethod
    def _check_platform_version(cls, value: Any) -> str:
        if isinstance(value, float):
            raise ValueError("quote the platform version in YAML, e.g. '17.10'")
        text = str(value).strip()
        if not _VERSION_PATTERN.match(text):
            raise ValueError(f"invalid platform version '{text}'")
        return text


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file '{path}'.") from exc
    try:
        payload = yaml.safe_load(raw_text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Configuration file '{path}' is not valid YAML.") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"Configuration file '{path}' must contain a mapping.")
    # Allow the settings to live under a top-level ``emojindex`` key.
    nested = payload.get("emojindex")
    return dict(nested) if isinstance(nested, dict) else dict(payload)


def load_config(path: Path | None = None, *, environ: dict[str, str] | None = None) -> EmojindexConfig:
    """Load settings from ``path`` (optional) and apply environment overrides."""
    data: dict[str, Any] = _read_yaml(path) if path is not None else {}
    env = os.environ if environ is None else environ
    for key, variable in _ENV_OVERRIDES.items():
        value = env.get(variable, "").strip()
        if value:
            data[key] = value
    try:
        return EmojindexConfig.model_validate(data)
    except ValidationError as exc:
        source = f"'{path}'" if path is not None else "environment"
        raise ConfigError(f"Invalid emojindex configuration in {source}.") from exc


__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_PLATFORM_VERSION",
    "EmojindexConfig",
    "load_config",
]
