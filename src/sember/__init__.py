"""
Sember: a small static-site generator for personal landing and résumé pages.
"""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("sember")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
