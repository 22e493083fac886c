from __future__ import annotations

import os
from pathlib import Path
from typing import MutableMapping, Optional, Sequence, Tuple, Union

Pathish = Union[str, Path]
FinderCache = MutableMapping[Tuple[str, Tuple[str, ...]], Optional[str]]


def _to_path(value: Pathish | None) -> Optional[Path]:
    if value is None:
        return None
    try:
        return Path(value)
    except (TypeError, ValueError):
        return None


def clean_path(path: Optional[str]) -> str:
    """
    Translate a leading `~` to the user's home directory and replace every
    environment variable reference with its current value.
    Returns an empty string for None or empty input.
    """
    if not path:
        return ""
    expanded = os.path.expandvars(os.path.expanduser(path))
    return os.path.normpath(expanded)


def is_directory(path: Pathish | None) -> bool:
    candidate = _to_path(path)
    if candidate is None:
        return False
    try:
        return candidate.is_dir()
    except OSError:
        return False


def find_cached(
    start_dir: Pathish,
    names: Union[str, Sequence[str]],
    cache: Optional[FinderCache] = None,
) -> Optional[str]:
    """
    Walk from `start_dir` up to the filesystem root and return the first
    existing `<dir>/<name>`, checking `names` in order within each directory.
    Names may contain separators (e.g. ``node_modules/eslint``).
    """
    if isinstance(names, str):
        names = (names,)
    names = tuple(names)
    directory = Path(os.path.abspath(start_dir))

    key = (str(directory), names)
    if cache is not None and key in cache:
        return cache[key]

    found: Optional[str] = None
    while True:
        for name in names:
            candidate = directory / name
            if candidate.exists():
                found = str(candidate)
                break
        if found is not None or directory.parent == directory:
            break
        directory = directory.parent

    if cache is not None:
        cache[key] = found
    return found


def relative_path(path: Pathish, root: Pathish) -> str:
    """`path` relative to `root`, in the platform's native separator style."""
    return os.path.relpath(os.path.abspath(path), os.path.abspath(root))


def safe_relative_path(path: Pathish | None, root: Path) -> Optional[str]:
    """
    Convert `path` to a POSIX-style string relative to `root` when possible.
    Falls back to the original string when `path` lies outside `root`.
    """
    if path is None:
        return None

    candidate = _to_path(path)
    if candidate is None:
        return str(path)
    if not candidate.is_absolute():
        return candidate.as_posix()

    try:
        return candidate.resolve().relative_to(Path(root).resolve()).as_posix()
    except ValueError:
        return candidate.as_posix()
