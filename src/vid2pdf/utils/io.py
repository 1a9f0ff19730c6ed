"""Filesystem helpers: sorted listings, tree removal, empty-parent pruning."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from vid2pdf.core.errors import FilesystemError

logger = logging.getLogger(__name__)


def list_files(directory: Path, suffixes: tuple[str, ...] | None = None) -> list[Path]:
    """Return the regular files in ``directory`` sorted by name.

    ``suffixes`` filters by lower-cased extension (".png", ...).
    """
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise FilesystemError(f"Cannot list {directory}: {exc}", directory) from exc
    files = [p for p in entries if p.is_file()]
    if suffixes is not None:
        files = [p for p in files if p.suffix.lower() in suffixes]
    return files


def ensure_dir(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(f"Cannot create {path}: {exc}", path) from exc
    return path


def remove_tree(path: Path) -> bool:
    """Remove a file or directory tree. Returns False if it did not exist."""
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        elif path.exists() or path.is_symlink():
            path.unlink()
        else:
            return False
    except OSError as exc:
        raise FilesystemError(f"Cannot remove {path}: {exc}", path) from exc
    return True


def prune_empty_parents(path: Path, stop_at: Path) -> list[Path]:
    """Remove empty ancestors of ``path`` up to, but not including, ``stop_at``.

    Stops at the first ancestor that is not empty. Returns removed directories.
    """
    removed: list[Path] = []
    stop_at = stop_at.resolve()
    parent = path.parent
    while parent.resolve() != stop_at and stop_at in parent.resolve().parents:
        try:
            if not parent.is_dir() or any(parent.iterdir()):
                break
            parent.rmdir()
        except OSError as exc:
            raise FilesystemError(f"Cannot remove {parent}: {exc}", parent) from exc
        logger.debug(f"Pruned empty directory {parent}")
        removed.append(parent)
        parent = parent.parent
    return removed
