"""Builders that assemble attributes, styles and whole tags into strings."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Union

from .encoding import render_body_encoding
from .entries import TagAttribute, TagStyle
from .values import TagValue, TagValueUnit

UnitLike = Union[TagValueUnit, str, None]

_NO_VALUE = object()


def _key(name: Optional[str]) -> Optional[str]:
    if name is None or not name.strip():
        return None
    return name.strip()


class TagStyleBuilder:
    """Ordered collection of inline style declarations."""

    def __init__(self) -> None:
        self._entries: Dict[str, TagStyle] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _key(name) in self._entries

    def __iter__(self) -> Iterator[TagStyle]:
        return iter(self._entries.values())

    def put(
        self,
        name: Optional[str],
        value: Any,
        unit: UnitLike = None,
        important: bool = False,
    ) -> None:
        key = _key(name)
        if key is None:
            return
        if isinstance(value, TagStyle):
            self._entries[key] = value
            return
        tag_value = value if isinstance(value, TagValue) else TagValue(value, unit)
        self._entries[key] = TagStyle(key, tag_value, important)

    def get(self, name: Optional[str]) -> Optional[TagStyle]:
        key = _key(name)
        return None if key is None else self._entries.get(key)

    def remove(self, name: Optional[str]) -> bool:
        key = _key(name)
        if key is None:
            return False
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def build(self) -> str:
        return "".join(entry.build() for entry in self._entries.values()).strip()

    def clone(self) -> "TagStyleBuilder":
        clone = TagStyleBuilder()
        for key, entry in self._entries.items():
            clone._entries[key] = entry.clone()
        return clone

    def __str__(self) -> str:
        return self.build()


class TagAttributeBuilder:
    """Ordered attributes plus the special ``class`` and ``style`` attributes.

    ``class`` values are kept as a de-duplicated list of names and ``style``
    values are parsed into a :class:`TagStyleBuilder`; both are rendered after
    the plain attributes, ``class`` first.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, TagAttribute] = {}
        self.style = TagStyleBuilder()
        self.classes: List[str] = []

    def __len__(self) -> int:
        size = len(self._entries)
        size += 1 if len(self.style) else 0
        size += 1 if self.classes else 0
        return size

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        key = _key(name)
        if key is None:
            return False
        if key in self._entries:
            return True
        if key.lower() == "style" and len(self.style):
            return True
        if key.lower() == "class" and self.classes:
            return True
        return False

    def put(self, name: Optional[str], value: Any = _NO_VALUE, unit: UnitLike = None) -> None:
        """Set an attribute; without a value the attribute renders as a bare name."""

        key = _key(name)
        if key is None:
            return
        lowered = key.lower()
        if lowered == "style":
            self._put_style_text(None if value is _NO_VALUE else value)
        elif lowered == "class":
            self._put_class_text(None if value is _NO_VALUE else value)
        elif value is _NO_VALUE:
            self._entries[key] = TagAttribute(key)
        else:
            tag_value = value if isinstance(value, TagValue) else TagValue(value, unit)
            self._entries[key] = TagAttribute(key, tag_value)

    def put_attr(self, attribute: Optional[TagAttribute]) -> None:
        if attribute is None or attribute.name is None:
            return
        lowered = attribute.name.lower()
        if lowered in ("style", "class"):
            value = None if attribute.value is None else attribute.value.build()
            self.put(attribute.name, value)
        else:
            self._entries[attribute.name] = attribute

    def get(self, name: Optional[str]) -> Optional[TagAttribute]:
        key = _key(name)
        return None if key is None else self._entries.get(key)

    def remove(self, name: Optional[str]) -> None:
        key = _key(name)
        if key is None:
            return
        lowered = key.lower()
        if lowered == "style":
            self.style.clear()
        elif lowered == "class":
            self.classes.clear()
        else:
            self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()
        self.style.clear()
        self.classes.clear()

    def clear_attrs(self) -> None:
        self._entries.clear()

    def put_style(
        self, name: Optional[str], value: Any, unit: UnitLike = None, important: bool = False
    ) -> None:
        self.style.put(name, value, unit, important)

    def remove_style(self, name: Optional[str]) -> None:
        self.style.remove(name)

    def contains_style(self, name: Optional[str]) -> bool:
        return name in self.style

    def put_class(self, name: Optional[str]) -> None:
        key = _key(name)
        if key is None or key in self.classes:
            return
        self.classes.append(key)

    def remove_class(self, name: Optional[str]) -> None:
        key = _key(name)
        if key in self.classes:
            self.classes.remove(key)

    def contains_class(self, name: Optional[str]) -> bool:
        return _key(name) in self.classes

    def _put_style_text(self, value: Any) -> None:
        text = "" if value is None else str(value)
        if not text.strip():
            self.style.clear()
            return
        for token in text.strip().split(";"):
            if token.find(":") <= 0:
                continue
            style_name, _, style_value = token.partition(":")
            self.style.put(style_name.strip(), style_value.strip())

    def _put_class_text(self, value: Any) -> None:
        text = "" if value is None else str(value)
        if not text.strip():
            self.classes.clear()
            return
        for token in text.split():
            self.put_class(token)

    def build(self) -> str:
        parts = [entry.build() for entry in self._entries.values()]
        if self.classes:
            parts.append(TagAttribute("class", TagValue(" ".join(self.classes))).build())
        if len(self.style):
            parts.append(TagAttribute("style", TagValue(self.style.build())).build())
        return " ".join(part for part in parts if part).strip()

    def clone(self) -> "TagAttributeBuilder":
        clone = TagAttributeBuilder()
        clone.style = self.style.clone()
        clone.classes = list(self.classes)
        for key, entry in self._entries.items():
            clone._entries[key] = entry.clone()
        return clone

    def __str__(self) -> str:
        return self.build()


class TagBuilder:
    """Renders one tag with its attributes, body text and child tags."""

    def __init__(self, name: str) -> None:
        if name is None:
            raise TypeError("name is required")
        if not name.strip():
            raise ValueError("name is empty")
        self.name = name.strip()
        self.text: Optional[str] = None
        self.closable = True
        self.escape_text = True
        self.children: List["TagBuilder"] = []
        self.attribute = TagAttributeBuilder()

    def put_text(self, text: Optional[str]) -> None:
        self.text = text

    def remove_text(self) -> None:
        self.text = None

    def add_child(self, child: "TagBuilder") -> None:
        self.children.append(child)

    def build_start(self) -> str:
        attrs = self.attribute.build()
        parts = [f"<{self.name}"]
        if attrs:
            parts.append(f" {attrs}")
        parts.append(">")
        if self.text:
            parts.append(render_body_encoding(self.text) if self.escape_text else self.text)
        for child in self.children:
            parts.append(child.build())
        return "".join(parts)

    def build_end(self) -> str:
        return f"</{self.name}>" if self.closable else ""

    def build(self) -> str:
        return self.build_start() + self.build_end()

    def clone(self) -> "TagBuilder":
        clone = TagBuilder(self.name)
        clone.attribute = self.attribute.clone()
        clone.text = self.text
        clone.closable = self.closable
        clone.escape_text = self.escape_text
        clone.children = [child.clone() for child in self.children]
        return clone

    def __str__(self) -> str:
        return self.build()


__all__ = ["TagAttributeBuilder", "TagBuilder", "TagStyleBuilder"]
