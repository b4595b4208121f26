"""
Template composition: page contexts, partial fragments and full pages.
"""

from .context import DEFAULT_ACCENT, PageContext, TemplateValue, build_page_context
from .page import PAGE_NAMES, render_page
from .partials import PARTIAL_NAMES, PartialSet, compose_partials
from .templates import TemplateStore

__all__ = [
    "DEFAULT_ACCENT",
    "PageContext",
    "TemplateValue",
    "build_page_context",
    "PAGE_NAMES",
    "render_page",
    "PARTIAL_NAMES",
    "PartialSet",
    "compose_partials",
    "TemplateStore",
]
