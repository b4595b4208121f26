"""
Configuration helpers for Sember sites.
"""

from ..errors import ConfigError
from .models import (
    AboutConfig,
    Config,
    EducationConfig,
    JobConfig,
    LinkConfig,
    SiteSettings,
    load_config,
    parse_config,
)
from .settings import BuildSettings, get_settings

__all__ = [
    "AboutConfig",
    "Config",
    "EducationConfig",
    "JobConfig",
    "LinkConfig",
    "SiteSettings",
    "ConfigError",
    "load_config",
    "parse_config",
    "BuildSettings",
    "get_settings",
]
