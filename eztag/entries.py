"""Buildable tag parts: attributes, body text and inline styles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from .encoding import render_attribute_encoding, render_body_encoding
from .values import TagValue, TagValueUnit


def _strip(name: Optional[str]) -> Optional[str]:
    return name.strip() if name is not None else None


@dataclass
class TagAttribute:
    """A single ``name`` or ``name="value"`` attribute."""

    name: Optional[str]
    value: Optional[TagValue] = None

    def __post_init__(self) -> None:
        self.name = _strip(self.name)

    def set_value(self, value: Any, unit: Union[TagValueUnit, str, None] = None) -> None:
        self.value = value if isinstance(value, TagValue) else TagValue(value, unit)

    def build(self) -> str:
        if not self.name:
            return ""
        if self.value is None:
            return self.name
        return f'{self.name}="{render_attribute_encoding(self.value.build())}"'

    def clone(self) -> "TagAttribute":
        return TagAttribute(self.name, None if self.value is None else self.value.clone())


@dataclass
class TagText:
    """Body text, optionally passed through the body encoder."""

    text: Optional[str] = None
    escape: bool = False

    def build(self) -> str:
        if self.escape:
            return render_body_encoding(self.text)
        return self.text or ""

    def clone(self) -> "TagText":
        return TagText(self.text, self.escape)

    def __str__(self) -> str:
        return self.text or ""


@dataclass
class TagStyle:
    """One ``name: value;`` declaration of an inline style."""

    name: Optional[str]
    value: Optional[TagValue] = None
    important: bool = False

    def __post_init__(self) -> None:
        self.name = _strip(self.name)

    def set_value(self, value: Any, unit: Union[TagValueUnit, str, None] = None) -> None:
        self.value = value if isinstance(value, TagValue) else TagValue(value, unit)

    def build(self) -> str:
        if not self.name:
            return ""
        if self.value is None or self.value.is_empty():
            return ""
        declaration = f"{self.name}: {self.value.build()}"
        if self.important:
            declaration += " !important"
        return declaration + ";"

    def clone(self) -> "TagStyle":
        return TagStyle(
            self.name,
            None if self.value is None else self.value.clone(),
            self.important,
        )


__all__ = ["TagAttribute", "TagStyle", "TagText"]
