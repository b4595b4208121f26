"""
Pydantic models for validating and hashing the site configuration file.
"""

from __future__ import annotations

import hashlib
import json
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from ..errors import ConfigError

DEFAULT_CONFIG_FILENAME = "sember.toml"


class SiteSettings(BaseModel):
    """
    Site-wide presentation options.

    Attributes:
        accent: CSS colour used for links and highlights.
        show_cv: Whether the landing page links to the résumé page.
    """
    accent: Optional[str] = None
    show_cv: Optional[bool] = None


class AboutConfig(BaseModel):
    """
    Personal details shown on every page.

    Attributes:
        name: Display name (the only required field in the whole config).
        email: Contact address, rendered as a mailto link.
        photo: Path to a portrait, relative to the config file.
        location: Free-form location string.
        description: Short tagline for the landing page.
        description_long: Longer introduction for the résumé page.
        skills: Ordered list of skills.
    """
    name: str
    email: Optional[str] = None
    photo: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    description_long: Optional[str] = None
    skills: Optional[List[str]] = None


class LinkConfig(BaseModel):
    label: str
    url: str


class JobConfig(BaseModel):
    """
    A single employment entry. `from`/`to` are display strings, never parsed.
    """
    company: str
    url: Optional[str] = None
    position: str
    location: str
    description: str
    from_: str = Field(alias="from")
    to: str

    model_config = {
        "populate_by_name": True,
    }


class EducationConfig(BaseModel):
    name: str
    url: Optional[str] = None
    degree: str
    field_of_study: str
    from_: str = Field(alias="from")
    to: str

    model_config = {
        "populate_by_name": True,
    }


class Config(BaseModel):
    """
    Top-level configuration for a Sember site.

    Attributes:
        site: Optional presentation options.
        about: Personal details.
        links: Ordered list of external profile links.
        jobs: Ordered employment history.
        education: Ordered education history.
    """
    site: Optional[SiteSettings] = None
    about: AboutConfig
    links: Optional[List[LinkConfig]] = None
    jobs: Optional[List[JobConfig]] = None
    education: Optional[List[EducationConfig]] = None

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @property
    def hash(self) -> str:
        """
        Deterministic hash of the normalized config, used to detect changes.
        """
        payload = self.model_dump(mode="json", by_alias=True, round_trip=True)
        blob = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
        return hashlib.sha256(blob).hexdigest()

    def template_data(self) -> Dict[str, Any]:
        """
        Plain mapping handed to templates as ``config``.

        Aliases are applied so templates read ``job["from"]`` rather than the
        Python-side ``from_`` attribute.
        """
        return self.model_dump(mode="json", by_alias=True)


def parse_config(raw_text: str) -> Config:
    """
    Parse TOML text into a validated Config.

    Args:
        raw_text: Contents of a ``sember.toml`` file.

    Returns:
        A validated Config object.

    Raises:
        ConfigError: If the text is not valid TOML or does not match the schema.
    """
    try:
        raw_data: Dict[str, Any] = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in configuration file: {exc}") from exc

    try:
        return Config.model_validate(raw_data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def load_config(path: Path | str) -> Config:
    """
    Load and validate a TOML config file into a Config instance.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")
    if not config_path.is_file():
        raise ConfigError(f"Configuration path is not a file: {config_path}")

    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Unable to read configuration file: {exc}") from exc

    return parse_config(raw_text)
