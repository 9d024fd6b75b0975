"""Declarative HTML element serialization."""

__version__ = "0.1.0"

from .builders import TagAttributeBuilder, TagBuilder, TagStyleBuilder
from .element import HtmlElement, MappedElement, map_element_to_markup
from .encoding import (
    render_attribute_encoding,
    render_body_encoding,
    render_style_encoding,
)
from .entries import TagAttribute, TagStyle, TagText
from .fields import (
    Attr,
    ConflictingFieldMetadataError,
    DuplicateTextFieldError,
    ElementDefinitionError,
    MissingTagDescriptorError,
    TagDescriptor,
    Text,
)
from .html import Link, LinkStyleSheet, Meta, Script, ScriptJavaScript, Title
from .values import EM, PX, TagValue, TagValueUnit

__all__ = [
    "EM",
    "PX",
    "Attr",
    "ConflictingFieldMetadataError",
    "DuplicateTextFieldError",
    "ElementDefinitionError",
    "HtmlElement",
    "Link",
    "LinkStyleSheet",
    "MappedElement",
    "Meta",
    "MissingTagDescriptorError",
    "Script",
    "ScriptJavaScript",
    "TagAttribute",
    "TagAttributeBuilder",
    "TagBuilder",
    "TagDescriptor",
    "TagStyle",
    "TagStyleBuilder",
    "TagText",
    "TagValue",
    "TagValueUnit",
    "Text",
    "Title",
    "map_element_to_markup",
    "render_attribute_encoding",
    "render_body_encoding",
    "render_style_encoding",
]
