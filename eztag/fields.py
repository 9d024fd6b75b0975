"""Declarative field markers and the per-type field descriptor table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union


class ElementDefinitionError(ValueError):
    """An element class is declared in a way that cannot be rendered."""


class MissingTagDescriptorError(ElementDefinitionError):
    pass


class ConflictingFieldMetadataError(ElementDefinitionError):
    pass


class DuplicateTextFieldError(ElementDefinitionError):
    pass


@dataclass(frozen=True)
class TagDescriptor:
    """Tag name and whether a closing tag is emitted."""

    name: str
    closable: bool


@dataclass(frozen=True)
class Attr:
    """Marks a field as the attribute ``name``."""

    name: str


@dataclass(frozen=True)
class Text:
    """Marks a field as the element body."""

    escape: bool


Marker = Union[Attr, Text]


@dataclass(frozen=True)
class FieldSpec:
    field_name: str
    marker: Marker

    @property
    def is_text(self) -> bool:
        return isinstance(self.marker, Text)


def _inherited_marker(model: Any, field_name: str) -> Optional[Marker]:
    for base in model.__mro__[1:]:
        for spec in base.__dict__.get("__markup_fields__", ()):
            if spec.field_name == field_name:
                return spec.marker
    return None


def collect_field_specs(model: Any) -> Tuple[FieldSpec, ...]:
    """Build the descriptor table for a pydantic model class.

    Fields are listed in declaration order, inherited fields first. A field
    redeclared by a subclass keeps the position it had in the base class, and
    keeps the base marker when the redeclaration carries none.
    """

    specs: list[FieldSpec] = []
    for field_name, info in model.model_fields.items():
        markers = [item for item in info.metadata if isinstance(item, (Attr, Text))]
        if not markers:
            inherited = _inherited_marker(model, field_name)
            if inherited is None:
                continue
            markers = [inherited]
        if len(markers) > 1:
            kinds = ", ".join(repr(marker) for marker in markers)
            raise ConflictingFieldMetadataError(
                f"{model.__name__}.{field_name} has more than one markup marker: {kinds}"
            )
        specs.append(FieldSpec(field_name, markers[0]))

    text_fields = [spec.field_name for spec in specs if spec.is_text]
    if len(text_fields) > 1:
        raise DuplicateTextFieldError(
            f"{model.__name__} declares more than one text field: {', '.join(text_fields)}"
        )
    return tuple(specs)


__all__ = [
    "Attr",
    "ConflictingFieldMetadataError",
    "DuplicateTextFieldError",
    "ElementDefinitionError",
    "FieldSpec",
    "MissingTagDescriptorError",
    "TagDescriptor",
    "Text",
    "collect_field_specs",
]
