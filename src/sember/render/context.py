"""
Per-page template variables derived from the site configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, TypeVar, Union

from ..config import Config

DEFAULT_ACCENT = "#000"
DEFAULT_SHOW_CV = False
CV_TITLE_SUFFIX = " — Résumé"

# The only value types a page context may carry.
TemplateValue = Union[str, bool]

T = TypeVar("T", str, bool)


@dataclass(frozen=True)
class PageContext:
    """
    Variables every template sees under ``page``.

    Attributes:
        name: Page identifier, e.g. "index" or "cv".
        title: Document title for the page.
        accent: Resolved accent colour.
        show_cv: Whether the résumé page is linked.
    """
    name: str
    title: str
    accent: str
    show_cv: bool

    def as_template_vars(self) -> Dict[str, TemplateValue]:
        return {
            "name": self.name,
            "title": self.title,
            "accent": self.accent,
            "show_cv": self.show_cv,
        }


def site_option(config: Config, key: str, default: T) -> T:
    """
    Return ``config.site.<key>`` or ``default`` when the block or the key is absent.
    """
    if config.site is None:
        return default
    value = getattr(config.site, key, None)
    return default if value is None else value


def page_title(page_name: str, config: Config) -> str:
    name = config.about.name
    if page_name == "index":
        return name
    if page_name == "cv":
        return f"{name}{CV_TITLE_SUFFIX}"
    return ""


def build_page_context(page_name: str, config: Config) -> PageContext:
    """
    Build the page context for ``page_name``. Total over every page name.
    """
    return PageContext(
        name=page_name,
        title=page_title(page_name, config),
        accent=site_option(config, "accent", DEFAULT_ACCENT),
        show_cv=site_option(config, "show_cv", DEFAULT_SHOW_CV),
    )
