"""
Shared filesystem helpers.
"""

from .filesystem import (
    build_lock,
    ensure_directory,
    is_relative_to,
    remove_tree,
    write_bytes_file,
    write_text_file,
)

__all__ = [
    "build_lock",
    "ensure_directory",
    "is_relative_to",
    "remove_tree",
    "write_bytes_file",
    "write_text_file",
]
