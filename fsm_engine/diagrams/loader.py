"""
Jinja2 loader for the packaged diagram templates.

Templates ship inside ``fsm_engine/diagrams/templates`` and are read through
the package loader, so rendering works from a wheel as well as a checkout.
A missing template is reported at import time rather than on first render.
"""

import logging
from functools import lru_cache

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from .templates import TEMPLATE_SUFFIX, Template

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_environment() -> Environment:
    """Create and cache the Jinja2 environment."""
    # Diagram text is not HTML; escaping would corrupt names like "a<b".
    return Environment(
        loader=PackageLoader("fsm_engine.diagrams", "templates"),
        autoescape=select_autoescape(default=False),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def _check_templates() -> None:
    shipped = set(_get_environment().list_templates(extensions=[TEMPLATE_SUFFIX.lstrip(".")]))
    missing = [name for name in Template.all() if name + TEMPLATE_SUFFIX not in shipped]
    if missing:
        raise FileNotFoundError(f"Diagram templates missing from package: {missing}")


_check_templates()


def render(template_name: str, **context) -> str:
    """
    Render the packaged template ``template_name`` with ``context``.

    Raises:
        jinja2.UndefinedError: The template uses a variable not in ``context``.
    """
    logger.debug(f"Rendering diagram template '{template_name}'")
    template = _get_environment().get_template(template_name + TEMPLATE_SUFFIX)
    return template.render(**context)
