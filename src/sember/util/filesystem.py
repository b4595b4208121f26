"""
Filesystem helpers shared by the site builder.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from filelock import FileLock

logger = logging.getLogger(__name__)


def ensure_directory(path: Path | str) -> Path:
    """
    Ensure a directory exists, returning the resolved Path.
    """
    resolved = Path(path).expanduser().resolve()
    resolved.mkdir(parents=True, exist_ok=True)
    return resolved


def _ensure_parent(target: Path) -> None:
    """Ensure the parent directory for target exists."""
    if target.parent and not target.parent.exists():
        target.parent.mkdir(parents=True, exist_ok=True)


def is_relative_to(path: Path, base: Path) -> bool:
    """Return True if path is under base."""
    try:
        path.relative_to(base)
    except ValueError:
        return False
    return True


def remove_tree(path: Path | str) -> bool:
    """
    Remove a directory tree, best-effort.

    Returns:
        True if something was removed, False if the path did not exist or
        could not be removed.
    """
    target = Path(path).expanduser().resolve()
    if not target.exists():
        logger.debug("Nothing to remove at %s", target)
        return False
    try:
        if target.is_dir():
            shutil.rmtree(target)
        else:
            target.unlink()
    except OSError as exc:
        logger.warning("Could not remove %s (%s); writing over it", target, exc)
        return False
    logger.debug("Removed %s", target)
    return True


@contextmanager
def build_lock(path: Path | str) -> Iterator[None]:
    """Hold a lock file beside ``path`` (``<path>.lock``) for the duration of the block."""
    target = Path(path).expanduser().resolve()
    lock_path = target.with_name(f"{target.name}.lock")
    _ensure_parent(lock_path)
    with FileLock(str(lock_path)):
        yield


def _atomic_write(target: Path, data: bytes) -> None:
    """Write bytes atomically by staging a temp file and renaming."""
    _ensure_parent(target)
    fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, target)
    finally:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass


def write_text_file(path: Path | str, content: str, encoding: str = "utf-8") -> Path:
    """
    Write text to a file, creating parent directories as needed.
    """
    target = Path(path).expanduser().resolve()
    _atomic_write(target, content.encode(encoding))
    return target


def write_bytes_file(path: Path | str, data: bytes) -> Path:
    """
    Write bytes verbatim to a file, creating parent directories as needed.
    """
    target = Path(path).expanduser().resolve()
    _atomic_write(target, data)
    return target
