"""
Render top-level pages with their pre-rendered partials injected.
"""

from __future__ import annotations

import logging
from typing import Optional

from jinja2 import TemplateError
from markupsafe import Markup

from ..config import Config
from ..errors import RenderError, TemplateLookupError
from .context import build_page_context
from .partials import compose_partials
from .templates import TemplateStore

logger = logging.getLogger(__name__)

PAGE_NAMES = ("index", "cv")


def render_page(page_name: str, config: Config, store: Optional[TemplateStore] = None) -> str:
    """
    Render the page template named ``page_name`` to HTML.

    The template sees ``config``, ``page`` and ``partials`` (keyed by fragment
    name). Unlike fragments, a page that fails to render has no fallback.

    Raises:
        TemplateLookupError: If the page (or one of its fragments) is not bundled.
        RenderError: If the page template fails to compile or render.
    """
    store = store or TemplateStore()
    try:
        template = store.load(page_name)
    except TemplateError as exc:
        raise RenderError(page_name, str(exc)) from exc

    page = build_page_context(page_name, config)
    partials = {
        name: Markup(markup)
        for name, markup in compose_partials(page_name, config, store).items()
    }

    try:
        html = template.render(
            config=config.template_data(),
            page=page.as_template_vars(),
            partials=partials,
        )
    except TemplateLookupError:
        raise
    except Exception as exc:
        raise RenderError(page_name, str(exc)) from exc

    logger.debug("Rendered page '%s' (%d bytes)", page_name, len(html))
    return html
