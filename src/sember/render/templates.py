"""
Bundled Jinja2 templates addressed by logical name.
"""

from __future__ import annotations

from typing import Optional

from jinja2 import BaseLoader, Environment, PackageLoader, StrictUndefined, Template, TemplateNotFound, select_autoescape

from ..errors import TemplateLookupError

TEMPLATE_SUFFIX = ".html.j2"


def template_filename(name: str) -> str:
    """Map a logical name such as ``partials/head`` to its file name."""
    return f"{name}{TEMPLATE_SUFFIX}"


def create_environment(loader: Optional[BaseLoader] = None) -> Environment:
    return Environment(
        loader=loader or PackageLoader("sember", "views"),
        autoescape=select_autoescape(["html", "j2"], default_for_string=True),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class TemplateStore:
    """
    Read-only table of templates, looked up by exact logical name.

    Any miss raises :class:`~sember.errors.TemplateLookupError`; the templates
    ship with the package, so a miss is a packaging defect rather than a user error.
    """

    def __init__(self, loader: Optional[BaseLoader] = None) -> None:
        self.env = create_environment(loader)

    def load(self, name: str) -> Template:
        """
        Return the compiled template for ``name``.

        Raises:
            TemplateLookupError: If no template is bundled under that name.
            jinja2.TemplateSyntaxError: If the template source does not compile.
        """
        try:
            return self.env.get_template(template_filename(name))
        except TemplateNotFound as exc:
            raise TemplateLookupError(name) from exc
