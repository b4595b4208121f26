"""
Web output: write rendered pages and copy static files.
"""

from .builder import BuildReport, build_site, copy_photo, copy_static_assets

__all__ = ["BuildReport", "build_site", "copy_photo", "copy_static_assets"]
