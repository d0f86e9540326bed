"""Resolution of the per-user directory holding emoji preferences."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
import os
from pathlib import Path
from threading import RLock


__all__ = [
    "EmojindexUserDir",
    "get_user_dir",
    "resolve_user_root",
    "user_dir_context",
]

PREFERENCES_FILENAME = "preferences.json"

_USER_DIR: EmojindexUserDir | None = None
_PINNED = False
_LOCK: RLock = RLock()


def resolve_user_root(root: str | Path | None = None) -> tuple[Path, bool]:
    """Return the user root and whether it was chosen explicitly.

    Precedence: the ``root`` argument, ``EMOJINDEX_HOME``, ``XDG_DATA_HOME``,
    then ``~/.emojindex``.
    """
    if root is not None:
        return Path(root).expanduser(), True
    env_root = os.environ.get("EMOJINDEX_HOME")
    if env_root:
        return Path(env_root).expanduser(), True
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data).expanduser() / "emojindex", True
    return Path.home() / ".emojindex", False


@dataclass(frozen=True, slots=True)
class EmojindexUserDir:
    """Resolved user root plus path helpers."""

    root: Path
    is_explicit: bool = False

    def data_path(self, *parts: str | Path, create: bool = True) -> Path:
        """Return a path under the user root, creating parent directories if needed."""
        target = self.root.joinpath(*parts)
        if create:
            target.parent.mkdir(parents=True, exist_ok=True)
        return target

    @property
    def preferences_path(self) -> Path:
        return self.data_path(PREFERENCES_FILENAME, create=False)


def get_user_dir() -> EmojindexUserDir:
    """Return the user dir, re-resolving when the environment changed underneath."""
    global _USER_DIR
    with _LOCK:
        if _PINNED and _USER_DIR is not None:
            return _USER_DIR
        root, explicit = resolve_user_root()
        if _USER_DIR is None or _USER_DIR.root != root:
            _USER_DIR = EmojindexUserDir(root=root, is_explicit=explicit)
        return _USER_DIR


@contextmanager
def user_dir_context(root: str | Path | None = None) -> Iterator[EmojindexUserDir]:
    """Temporarily pin the user dir, restoring the previous one on exit."""
    global _USER_DIR, _PINNED
    resolved, _explicit = resolve_user_root(root)
    with _LOCK:
        previous = (_USER_DIR, _PINNED)
        _USER_DIR = EmojindexUserDir(root=resolved, is_explicit=True)
        _PINNED = True
        current = _USER_DIR
    try:
        yield current
    finally:
        with _LOCK:
            _USER_DIR, _PINNED = previous
