from typing import Annotated, ClassVar, Optional

import pytest
from pydantic import ValidationError

from eztag.element import HtmlElement, MappedElement, map_element_to_markup
from eztag.encoding import render_body_encoding
from eztag.fields import (
    Attr,
    ConflictingFieldMetadataError,
    DuplicateTextFieldError,
    MissingTagDescriptorError,
    TagDescriptor,
    Text,
)
from eztag.html import Link, Meta, Title


class Card(HtmlElement):
    tag: ClassVar[TagDescriptor] = TagDescriptor("div", closable=True)

    ident: Annotated[Optional[str], Attr("id")] = None
    label: Annotated[Optional[str], Attr("title")] = None
    body: Annotated[Optional[str], Text(escape=True)] = None


class FancyCard(Card):
    role: Annotated[Optional[str], Attr("role")] = None


class Untagged(HtmlElement):
    label: Annotated[Optional[str], Attr("title")] = None


def test_meta_charset_scenario():
    mapped = map_element_to_markup(Meta(charset="UTF-8"))
    assert mapped == MappedElement(
        tag_name="meta",
        closable=False,
        attributes=[("charset", "UTF-8")],
        text=None,
    )


def test_title_scenario():
    mapped = map_element_to_markup(Title("A & B"))
    assert mapped.tag_name == "title"
    assert mapped.closable is True
    assert mapped.attributes == []
    assert mapped.text == render_body_encoding("A & B")
    assert mapped.text == "A&nbsp;&amp;&nbsp;B"


def test_null_attribute_is_omitted():
    mapped = Card(ident="c1").to_markup()
    assert [name for name, _ in mapped.attributes] == ["id"]


def test_null_text_is_absent_not_empty():
    assert Card(ident="c1").to_markup().text is None
    assert Card(body="").to_markup().text == ""


def test_attribute_values_are_encoded():
    mapped = Card(label='say "hi" & go').to_markup()
    assert mapped.attributes == [("title", "say &quot;hi&quot; &amp; go")]


def test_mapping_is_idempotent():
    card = Card(ident="c1", label="x", body="hello world")
    assert card.to_markup() == card.to_markup()
    assert card.render() == card.render()


def test_inherited_fields_come_first():
    card = FancyCard(role="note", ident="c1", label="x")
    names = [name for name, _ in card.to_markup().attributes]
    assert names == ["id", "title", "role"]
    assert card.render() == '<div id="c1" title="x" role="note"></div>'


def test_field_table_built_once_per_type():
    assert [spec.field_name for spec in Card.markup_fields()] == ["ident", "label", "body"]
    assert FancyCard.markup_fields()[-1].field_name == "role"
    assert FancyCard.tag_name() == "div"


def test_setting_text_to_none_clears_body():
    card = Card(body="hello")
    assert card.render() == "<div>hello</div>"
    card.body = None
    assert card.render() == "<div></div>"
    assert card.to_markup().text is None


def test_builder_matches_mapped_output():
    card = Card(ident="c1", label="a&b", body="x y")
    builder = card.builder()
    mapped = card.to_markup()
    assert builder.name == mapped.tag_name
    assert builder.closable == mapped.closable
    attrs = " ".join(f'{name}="{value}"' for name, value in mapped.attributes)
    assert builder.build() == f"<{mapped.tag_name} {attrs}>{mapped.text}</{mapped.tag_name}>"


def test_same_named_attributes_are_not_merged():
    class Doubled(HtmlElement):
        tag: ClassVar[TagDescriptor] = TagDescriptor("span", closable=True)

        first: Annotated[Optional[str], Attr("data-v")] = None
        second: Annotated[Optional[str], Attr("data-v")] = None

    mapped = Doubled(first="1", second="2").to_markup()
    assert mapped.attributes == [("data-v", "1"), ("data-v", "2")]


def test_missing_tag_descriptor_fails_on_render():
    element = Untagged(label="x")
    with pytest.raises(MissingTagDescriptorError, match="Untagged"):
        element.to_markup()
    with pytest.raises(MissingTagDescriptorError):
        element.render()
    with pytest.raises(MissingTagDescriptorError):
        Untagged.tag_name()


def test_field_with_both_markers_is_rejected():
    with pytest.raises(ConflictingFieldMetadataError, match="value"):

        class Broken(HtmlElement):
            tag: ClassVar[TagDescriptor] = TagDescriptor("p", closable=True)

            value: Annotated[Optional[str], Attr("value"), Text(escape=True)] = None


def test_two_text_fields_are_rejected():
    with pytest.raises(DuplicateTextFieldError):

        class Broken(HtmlElement):
            tag: ClassVar[TagDescriptor] = TagDescriptor("p", closable=True)

            first: Annotated[Optional[str], Text(escape=True)] = None
            second: Annotated[Optional[str], Text(escape=False)] = None


def test_assignment_is_validated():
    card = Card()
    with pytest.raises(ValidationError):
        card.ident = ["not", "a", "string"]  # type: ignore[assignment]
    with pytest.raises(ValidationError):
        Card(unknown="x")  # type: ignore[call-arg]


def test_clone_is_independent():
    card = Card(ident="c1", body="hello")
    clone = card.clone()
    clone.ident = "c2"
    assert isinstance(clone, Card)
    assert card.ident == "c1"
    assert clone.body == "hello"


def test_redeclared_field_keeps_inherited_marker():
    class AlternateLink(Link):
        rel: Optional[str] = "alternate"

    assert [spec.field_name for spec in AlternateLink.markup_fields()][:2] == ["rel", "type"]
    assert AlternateLink(href="/x").render() == '<link rel="alternate" href="/x">'


def test_redeclared_text_field_keeps_escape_flag():
    class PlainCard(Card):
        body: Optional[str] = "a b"

    assert PlainCard().to_markup().text == "a&nbsp;b"
