# mediaforge/common/path/safe.py
from __future__ import annotations

import os
from pathlib import Path


def resolve_root(root: Path | str) -> Path:
    """Resolve a base/media root directory."""
    return Path(root).expanduser().resolve()


def resolve_against(base: Path | str, path: str | None) -> str:
    """
    Resolve a client-supplied path against the base directory.

    Absolute paths pass through untouched; empty values stay empty so that
    callers can still derive a default (e.g. an output name).
    """
    if not path:
        return ""
    if os.path.isabs(path):
        return path
    return os.path.join(str(base), path)
