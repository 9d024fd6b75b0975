"""Concrete head elements."""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Dict, Optional, Type

from .element import HtmlElement
from .fields import Attr, TagDescriptor, Text


class Title(HtmlElement):
    tag: ClassVar[TagDescriptor] = TagDescriptor("title", closable=True)

    title: Annotated[Optional[str], Text(escape=True)] = None

    def __init__(self, title: Optional[str] = None, **data: Any) -> None:
        super().__init__(title=title, **data)


class Meta(HtmlElement):
    tag: ClassVar[TagDescriptor] = TagDescriptor("meta", closable=False)

    name: Annotated[Optional[str], Attr("name")] = None
    http_equiv: Annotated[Optional[str], Attr("http-equiv")] = None
    content: Annotated[Optional[str], Attr("content")] = None
    charset: Annotated[Optional[str], Attr("charset")] = None

    @classmethod
    def create_charset(cls, charset: str) -> "Meta":
        return cls(charset=charset)

    @classmethod
    def create_http_equiv(cls, http_equiv: str, content: str) -> "Meta":
        return cls(http_equiv=http_equiv, content=content)

    @classmethod
    def create_meta(cls, name: str, content: str) -> "Meta":
        return cls(name=name, content=content)


class Link(HtmlElement):
    tag: ClassVar[TagDescriptor] = TagDescriptor("link", closable=False)

    rel: Annotated[Optional[str], Attr("rel")] = None
    type: Annotated[Optional[str], Attr("type")] = None
    href: Annotated[Optional[str], Attr("href")] = None
    charset: Annotated[Optional[str], Attr("charset")] = None
    media: Annotated[Optional[str], Attr("media")] = None


class LinkStyleSheet(Link):
    """``<link rel="stylesheet" type="text/css">`` pointing at ``href``."""

    rel: Annotated[Optional[str], Attr("rel")] = "stylesheet"
    type: Annotated[Optional[str], Attr("type")] = "text/css"

    def __init__(
        self,
        href: Optional[str] = None,
        charset: Optional[str] = None,
        media: Optional[str] = None,
        **data: Any,
    ) -> None:
        super().__init__(href=href, charset=charset, media=media, **data)


class Script(HtmlElement):
    tag: ClassVar[TagDescriptor] = TagDescriptor("script", closable=True)

    type: Annotated[Optional[str], Attr("type")] = None
    src: Annotated[Optional[str], Attr("src")] = None
    charset: Annotated[Optional[str], Attr("charset")] = None
    # Inline source is emitted verbatim.
    code: Annotated[Optional[str], Text(escape=False)] = None


class ScriptJavaScript(Script):
    type: Annotated[Optional[str], Attr("type")] = "text/javascript"

    def __init__(
        self,
        src: Optional[str] = None,
        charset: Optional[str] = None,
        **data: Any,
    ) -> None:
        super().__init__(src=src, charset=charset, **data)


ELEMENT_TYPES: Dict[str, Type[HtmlElement]] = {
    "title": Title,
    "meta": Meta,
    "link": Link,
    "stylesheet": LinkStyleSheet,
    "script": Script,
    "javascript": ScriptJavaScript,
}


__all__ = [
    "ELEMENT_TYPES",
    "Link",
    "LinkStyleSheet",
    "Meta",
    "Script",
    "ScriptJavaScript",
    "Title",
]
