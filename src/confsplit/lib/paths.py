"""Filesystem path helpers for config includes and cache locations."""

from __future__ import annotations

import os
from pathlib import Path


def mkdir_parents(path: str | os.PathLike[str], mode: int = 0o755) -> Path:
    """Create *path* and any missing ancestors. Existing directories are fine."""
    target = Path(path)
    target.mkdir(mode=mode, parents=True, exist_ok=True)
    return target


def resolve_tilde(path: str) -> str:
    """Expand a leading ``~`` or ``~/`` to the user's home directory.

    ``~user`` forms and tildes elsewhere in the path are left alone.
    """
    if path == "~" or path.startswith("~/"):
        return os.path.expanduser("~") + path[1:]
    return path


def resolve_relative(reference: str | os.PathLike[str], fname: str) -> str:
    """Resolve *fname* against the directory containing *reference*.

    Absolute names are returned unchanged.
    """
    if os.path.isabs(fname):
        return fname
    return os.path.join(os.path.dirname(os.fspath(reference)), fname)
