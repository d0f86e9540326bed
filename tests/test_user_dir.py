from __future__ import annotations

from pathlib import Path

import pytest

from emojindex.core.user_dir import get_user_dir, resolve_user_root, user_dir_context


def test_explicit_root_wins(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("EMOJINDEX_HOME", str(tmp_path / "env"))
    assert resolve_user_root(tmp_path / "explicit") == (tmp_path / "explicit", True)


def test_user_dir_respects_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("EMOJINDEX_HOME", str(tmp_path / "home-root"))
    assert get_user_dir().root == tmp_path / "home-root"

    monkeypatch.setenv("EMOJINDEX_HOME", str(tmp_path / "other-root"))
    assert get_user_dir().root == tmp_path / "other-root"


def test_xdg_data_home_is_used(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("EMOJINDEX_HOME", raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
    assert resolve_user_root() == (tmp_path / "xdg" / "emojindex", True)


def test_home_directory_fallback(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("EMOJINDEX_HOME", raising=False)
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert resolve_user_root() == (tmp_path / ".emojindex", False)


def test_context_pins_and_restores(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("EMOJINDEX_HOME", str(tmp_path / "env"))

    with user_dir_context(tmp_path / "pinned") as user_dir:
        monkeypatch.setenv("EMOJINDEX_HOME", str(tmp_path / "changed"))
        assert get_user_dir() is user_dir
        assert user_dir.is_explicit
        assert user_dir.preferences_path == tmp_path / "pinned" / "preferences.json"

    assert get_user_dir().root == tmp_path / "changed"


def test_data_path_creates_parents(tmp_path: Path) -> None:
    with user_dir_context(tmp_path) as user_dir:
        target = user_dir.data_path("cache", "index.json")
        assert target == tmp_path / "cache" / "index.json"
        assert target.parent.is_dir()
        assert not (tmp_path / "other").exists()
        user_dir.data_path("other", "file.json", create=False)
        assert not (tmp_path / "other").exists()
