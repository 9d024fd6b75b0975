"""Literal string encoders for attribute, body and style contexts."""

from __future__ import annotations

from typing import Optional


def render_attribute_encoding(value: Optional[str]) -> str:
    """Encode a value for use inside a double-quoted attribute."""

    buffer = "" if value is None else value
    buffer = buffer.replace("&", "&amp;")
    # "<", ">", "'" and backslashes are left as-is.
    buffer = buffer.replace('"', "&quot;")
    return buffer


def render_body_encoding(value: Optional[str]) -> str:
    """Encode text for an element body, keeping whitespace and line breaks visible."""

    buffer = render_attribute_encoding(value)
    buffer = buffer.replace(" ", "&nbsp;")
    buffer = buffer.replace("\t", "&nbsp;")
    buffer = buffer.replace("\n", "<br>")
    return buffer


def render_style_encoding(value: Optional[str]) -> str:
    buffer = "" if value is None else value
    if ";" in buffer:
        return f'"{buffer}"'
    return buffer


__all__ = [
    "render_attribute_encoding",
    "render_body_encoding",
    "render_style_encoding",
]
