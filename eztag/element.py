"""Element base class and the generic field-to-markup mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .builders import TagBuilder
from .encoding import render_attribute_encoding
from .entries import TagText
from .fields import (
    Attr,
    FieldSpec,
    MissingTagDescriptorError,
    TagDescriptor,
    collect_field_specs,
)
from .values import TagValue


@dataclass
class MappedElement:
    """Structured form of an element, ready for tag assembly."""

    tag_name: str
    closable: bool
    attributes: List[Tuple[str, str]] = field(default_factory=list)
    text: Optional[str] = None


class HtmlElement(BaseModel):
    """Base for elements whose fields are marked with :class:`Attr` / :class:`Text`.

    Subclasses set ``tag`` and declare fields as
    ``Annotated[Optional[str], Attr("name")]``. The field table is built once
    when the subclass is created.
    """

    tag: ClassVar[Optional[TagDescriptor]] = None
    __markup_fields__ = ()

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls.__markup_fields__ = collect_field_specs(cls)

    @classmethod
    def descriptor(cls) -> TagDescriptor:
        if cls.tag is None:
            raise MissingTagDescriptorError(f"{cls.__name__} has no tag descriptor")
        return cls.tag

    @classmethod
    def markup_fields(cls) -> Tuple[FieldSpec, ...]:
        return cls.__markup_fields__

    @classmethod
    def tag_name(cls) -> str:
        return cls.descriptor().name

    @classmethod
    def is_tag_closable(cls) -> bool:
        return cls.descriptor().closable

    def _walk(self) -> Tuple[List[Tuple[str, Any]], Optional[TagText]]:
        attributes: List[Tuple[str, Any]] = []
        text: Optional[TagText] = None
        for spec in self.markup_fields():
            value = getattr(self, spec.field_name)
            if isinstance(spec.marker, Attr):
                if value is not None:
                    attributes.append((spec.marker.name, value))
            elif value is None:
                text = None
            else:
                text = TagText(str(value), spec.marker.escape)
        return attributes, text

    def builder(self) -> TagBuilder:
        descriptor = self.descriptor()
        builder = TagBuilder(descriptor.name)
        builder.closable = descriptor.closable
        attributes, text = self._walk()
        for name, value in attributes:
            builder.attribute.put(name, value)
        if text is not None:
            builder.escape_text = text.escape
            builder.put_text(text.text)
        return builder

    def to_markup(self) -> MappedElement:
        return map_element_to_markup(self)

    def render(self) -> str:
        return self.builder().build()

    def clone(self) -> "HtmlElement":
        return self.model_copy(deep=True)


def map_element_to_markup(element: HtmlElement) -> MappedElement:
    """Map an element's marked fields to its tag name, attributes and body.

    Attributes with a ``None`` value are skipped and keep declaration order;
    same-named attributes are not merged. A ``None`` text field leaves the
    body absent rather than empty.
    """

    descriptor = element.descriptor()
    raw_attributes, text = element._walk()
    attributes = [
        (name, render_attribute_encoding(TagValue(value).build()))
        for name, value in raw_attributes
    ]
    return MappedElement(
        tag_name=descriptor.name,
        closable=descriptor.closable,
        attributes=attributes,
        text=None if text is None else text.build(),
    )


__all__ = ["HtmlElement", "MappedElement", "map_element_to_markup"]
