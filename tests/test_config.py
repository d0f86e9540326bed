from __future__ import annotations

from pathlib import Path

import pytest

from emojindex.core.config import EmojindexConfig, load_config
from emojindex.core.exceptions import ConfigError


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "emojindex.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_without_file() -> None:
    config = load_config(environ={})

    assert config == EmojindexConfig()
    assert config.language == "en"
    assert config.platform_version == "18.4"
    assert config.translations_dir is None
    assert config.recent_limit == 30


def test_values_are_read_from_yaml(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "language: de-CH\n"
        "platform_version: '17.10'\n"
        f"translations_dir: {tmp_path}\n"
        "recent_limit: 12\n",
    )

    config = load_config(path, environ={})

    assert config.language == "de-CH"
    assert config.platform_version == "17.10"
    assert config.translations_dir == tmp_path
    assert config.recent_limit == 12


def test_settings_may_be_nested(tmp_path: Path) -> None:
    path = _write(tmp_path, "emojindex:\n  language: fr\n")
    assert load_config(path, environ={}).language == "fr"


def test_environment_overrides_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "language: de\nplatform_version: '17.4'\n")

    config = load_config(
        path,
        environ={"EMOJINDEX_LANGUAGE": "it", "EMOJINDEX_PLATFORM_VERSION": "18.0"},
    )

    assert config.language == "it"
    assert config.platform_version == "18.0"


def test_environment_is_read_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMOJINDEX_LANGUAGE", "es")
    monkeypatch.delenv("EMOJINDEX_PLATFORM_VERSION", raising=False)
    assert load_config().language == "es"


@pytest.mark.parametrize(
    "text",
    [
        "platform_version: latest\n",
        "platform_version: 17.10\n",
        "recent_limit: 0\n",
        "unknown_key: 1\n",
        "language: ''\n",
    ],
)
def test_invalid_settings_raise_config_error(tmp_path: Path, text: str) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, text), environ={})


def test_invalid_yaml_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not valid YAML"):
        load_config(_write(tmp_path, "language: [unclosed\n"), environ={})


def test_non_mapping_yaml_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="mapping"):
        load_config(_write(tmp_path, "- a\n- b\n"), environ={})


def test_unreadable_file_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Unable to read"):
        load_config(tmp_path / "missing.yml", environ={})


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    assert load_config(_write(tmp_path, ""), environ={}) == EmojindexConfig()
