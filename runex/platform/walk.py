"""Deterministic filesystem traversal.

``os.walk`` yields entries in whatever order the filesystem returns them. The
resolver promises "first match wins", so traversal here is lexical: siblings
are visited in sorted order, files before subdirectories.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

__all__ = ["iter_dirs", "iter_files"]


def _walk(root: Path) -> Iterator[tuple[Path, list[str], list[str]]]:
    for dirpath, dirnames, filenames in os.walk(root):
        # In-place prune and sort so os.walk descends deterministically.
        dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
        yield Path(dirpath), dirnames, sorted(filenames)


def iter_files(root: Path) -> Iterator[Path]:
    """Yield every file under ``root`` in lexical order, skipping hidden dirs."""
    for dirpath, _, filenames in _walk(root):
        for name in filenames:
            yield dirpath / name


def iter_dirs(root: Path) -> Iterator[Path]:
    """Yield every directory under ``root`` in lexical order, skipping hidden dirs."""
    for dirpath, dirnames, _ in _walk(root):
        for name in dirnames:
            yield dirpath / name
