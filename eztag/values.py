"""Attribute and style values with optional unit suffixes."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class TagValueUnit:
    """Unit suffix appended to a rendered value (e.g. ``px``)."""

    unit: str

    @classmethod
    def of(cls, unit: Union[str, "TagValueUnit", None]) -> Optional["TagValueUnit"]:
        if unit is None or isinstance(unit, TagValueUnit):
            return unit
        key = unit.strip()
        if not key:
            return None
        return cls(key)

    def __str__(self) -> str:
        return self.unit


PX = TagValueUnit("px")
EM = TagValueUnit("em")


def _format_number(value: numbers.Real) -> str:
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


@dataclass
class TagValue(Generic[T]):
    value: Optional[T] = None
    unit: Union[TagValueUnit, str, None] = None

    def __post_init__(self) -> None:
        self.unit = TagValueUnit.of(self.unit)

    def build(self) -> str:
        if self.value is None:
            return ""
        value: Any = self.value
        if isinstance(value, bool):
            text = "true" if value else "false"
        elif isinstance(value, numbers.Real):
            text = _format_number(value)
        else:
            text = str(value)
        if self.unit is not None:
            text += str(self.unit)
        return text

    def is_empty(self) -> bool:
        if self.value is None:
            return True
        if isinstance(self.value, str):
            return self.value == ""
        return False

    def clone(self) -> "TagValue[T]":
        """Copy the wrapper; the value itself is copied only if it knows how."""

        if self.value is None or isinstance(self.value, type):
            return TagValue(self.value, self.unit)
        copier = getattr(self.value, "clone", None) or getattr(self.value, "copy", None)
        value = copier() if callable(copier) else self.value
        return TagValue(value, self.unit)

    def __str__(self) -> str:
        return self.build()


__all__ = ["EM", "PX", "TagValue", "TagValueUnit"]
