"""Jinja2 filters for rendering elements inside templates."""

from __future__ import annotations

from jinja2 import Environment
from markupsafe import Markup

from .element import HtmlElement
from .encoding import (
    render_attribute_encoding,
    render_body_encoding,
    render_style_encoding,
)


def render_tag(element: HtmlElement) -> Markup:
    # Already encoded by the element's own rules.
    return Markup(element.render())


def register(env: Environment) -> Environment:
    """Install the eztag filters on ``env`` and return it."""

    env.filters["tag"] = render_tag
    env.filters["attr_encode"] = render_attribute_encoding
    env.filters["body_encode"] = render_body_encoding
    env.filters["style_encode"] = render_style_encoding
    return env


__all__ = ["register", "render_tag"]
