"""Autoescaping Jinja2 environment for SVG and HTML output."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from markupsafe import Markup

from ttframe.ingest.normalizer import format_signed_pnl, pnl_color, strip_xml_invalid

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _finalize(value: object) -> object:
    if isinstance(value, Markup):
        return Markup(strip_xml_invalid(value))
    if isinstance(value, str):
        return strip_xml_invalid(value)
    return value


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Build the shared template environment.

    Autoescaping is on for every template regardless of extension, so caller
    supplied values are always encoded before they reach SVG or HTML markup,
    and code points XML cannot carry are dropped from every expression.
    """

    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=True,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        finalize=_finalize,
    )
    env.filters["signed_pnl"] = format_signed_pnl
    env.filters["pnl_color"] = pnl_color
    return env


def render_template(name: str, **context: object) -> str:
    return get_environment().get_template(name).render(**context)
