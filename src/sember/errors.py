"""
Exception hierarchy shared by the config, render and site layers.
"""

from __future__ import annotations


class SemberError(RuntimeError):
    """Base class for every error that should stop a build."""


class ConfigError(SemberError):
    """Raised when the site configuration cannot be loaded or validated."""


class AssetError(SemberError):
    """Raised when a bundled template or static asset is missing (a packaging defect)."""


class TemplateLookupError(AssetError):
    """Raised when a template is requested by a logical name that is not bundled."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Bundled template not found: {name}")
        self.name = name


class RenderError(SemberError):
    """Raised when a top-level page template fails to render."""

    def __init__(self, page: str, reason: str) -> None:
        super().__init__(f"Failed to render page '{page}': {reason}")
        self.page = page


class BuildError(SemberError):
    """Raised when the site builder refuses an output operation."""
