"""
Pre-render the head/nav/foot fragments that every page embeds.
"""

from __future__ import annotations

import logging
from typing import Dict

from ..config import Config
from ..errors import TemplateLookupError
from .context import build_page_context
from .templates import TemplateStore

logger = logging.getLogger(__name__)

PARTIAL_NAMES = ("head", "nav", "foot")

PartialSet = Dict[str, str]


def partial_placeholder(name: str) -> str:
    return f"Failed to render partial: {name}"


def render_partial(name: str, page_name: str, config: Config, store: TemplateStore) -> str:
    """
    Render one fragment with ``config`` and a fresh ``page`` context.

    Raises:
        TemplateLookupError: If the fragment is not bundled.
        Exception: Whatever the fragment raises while compiling or rendering.
    """
    template = store.load(f"partials/{name}")
    page = build_page_context(page_name, config)
    return template.render(config=config.template_data(), page=page.as_template_vars())


def compose_partials(page_name: str, config: Config, store: TemplateStore) -> PartialSet:
    """
    Render every fragment for ``page_name`` in a fixed order.

    A fragment that fails to render is replaced with a short placeholder naming
    it, and the remaining fragments are still rendered. A missing fragment
    template is not recoverable and propagates.

    Returns:
        Mapping of fragment name to HTML; always contains every name in PARTIAL_NAMES.
    """
    partials: PartialSet = {}
    for name in PARTIAL_NAMES:
        try:
            partials[name] = render_partial(name, page_name, config, store)
        except TemplateLookupError:
            raise
        except Exception as exc:
            logger.error("Partial '%s' failed for page '%s': %s", name, page_name, exc)
            partials[name] = partial_placeholder(name)
    return partials
