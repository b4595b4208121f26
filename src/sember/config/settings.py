"""
Process-level settings read from the environment and an optional .env file.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .models import DEFAULT_CONFIG_FILENAME

DEFAULT_OUTPUT_DIR = "public"


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class BuildSettings(BaseModel):
    """
    Defaults for the CLI, overridable per invocation.

    Attributes:
        config_path: Location of the site configuration file.
        output_dir: Directory the generated site is written to.
        log_level: Optional log level that wins over ``--log-level``.
    """
    config_path: Path = Field(default=Path(DEFAULT_CONFIG_FILENAME), alias="SEMBER_CONFIG")
    output_dir: Path = Field(default=Path(DEFAULT_OUTPUT_DIR), alias="SEMBER_OUTPUT")
    log_level: Optional[str] = Field(default=None, alias="SEMBER_LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
    }


@lru_cache(maxsize=1)
def get_settings() -> BuildSettings:
    """
    Load settings from environment/.env exactly once.
    """
    values = {}
    for field in BuildSettings.model_fields.values():
        value = os.getenv(field.alias)
        if value:
            values[field.alias] = value
    return BuildSettings(**values)
