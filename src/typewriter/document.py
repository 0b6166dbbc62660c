# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Callable, Iterable
from typing import Self

from .attribute import Attribute, AttributeValue
from .errors import SelfJoinError
from .escape import escape
from .vocabulary import ELEMENTS, ElementShape, method_name
from .writer import Content, RawContent, Writer

DOCTYPE = "<!DOCTYPE html>"


class Document(Writer):
    """
    A reusable HTML builder with one method per HTML element.

    Each element call appends to the document's buffer; render() returns the
    HTML and empties the buffer, so the same document can build many pages.

        class Greeting(Document):
            def call(self, name: str) -> Self:
                self.doctype()
                return self.html(content=lambda: self.h1(content=lambda: self.text(name)))

        Greeting().call("Ben").render()
        # <!DOCTYPE html><html><h1>Ben</h1></html>

    For bodies longer than one expression, element() is a context manager:

        with doc.element("ul"):
            for item in items:
                doc.li(content=lambda: doc.text(item))
    """

    @classmethod
    def start(cls, configure: Callable[[Self], object] | None = None, *, minify: bool = False) -> Self:
        """Build a document without subclassing."""
        document = cls(minify=minify)
        if configure:
            configure(document)
        return document

    def join(self, documents: Iterable[Document]) -> Self:
        """Append the rendered output of each document, draining them."""
        documents = list(documents)

        if any(document is self for document in documents):
            raise SelfJoinError

        for document in documents:
            self._buffer.write(document.render())

        return self

    def text(self, value: object) -> Self:
        """The only way to add a caller's string to the document; it is always escaped."""
        self._buffer.write(escape(str(value)))
        return self

    def comment(self, value: object | None = None) -> Self:
        self._buffer.write("<!--", escape("" if value is None else str(value)), "-->")
        return self

    def doctype(self) -> Self:
        self._buffer.write(DOCTYPE)
        return self

    def attr(
        self,
        configure: Callable[[Attribute], object] | None = None,
        /,
        **attributes: AttributeValue,
    ) -> Attribute:
        """A new Attribute, independent of this document."""
        return Attribute(configure, **attributes)

    def page(  # noqa: PLR0913
        self,
        title: str,
        content: Content | None = None,
        *,
        lang: str = "en",
        styles: Iterable[str] = (),
        scripts: Iterable[str] = (),
        body: Attribute | None = None,
    ) -> Self:
        """Write a complete page: doctype, head with metadata, stylesheets and module scripts, then the body."""

        def head() -> None:
            self.open_void("meta", Attribute(charset="utf-8"))
            self.open_void("meta", Attribute(name="viewport", content="width=device-width, initial-scale=1"))
            self.open("title", content=lambda: self.text(title))
            for style in styles:
                self.open_void("link", Attribute(rel="stylesheet", href=style))
            for script in scripts:
                self.open_raw("script", Attribute(type="module", async_=True, defer=True, src=script))

        def html() -> None:
            self.open("head", content=head)
            self.open("body", body, content)

        self.doctype()
        return self.open("html", Attribute(lang=lang), html)


def _container(tag: str) -> Callable[..., Document]:
    def element(self: Document, attr: Attribute | None = None, content: Content | None = None) -> Document:
        return self.open(tag, attr, content)

    return element


def _void(tag: str) -> Callable[..., Document]:
    def element(self: Document, attr: Attribute | None = None) -> Document:
        return self.open_void(tag, attr)

    return element


def _raw(tag: str) -> Callable[..., Document]:
    def element(self: Document, attr: Attribute | None = None, content: RawContent | None = None) -> Document:
        return self.open_raw(tag, attr, content)

    return element


_FACTORIES = {
    ElementShape.CONTAINER: _container,
    ElementShape.VOID: _void,
    ElementShape.RAW: _raw,
}

for _tag, _shape in ELEMENTS.items():
    _method = _FACTORIES[_shape](_tag)
    _method.__name__ = method_name(_tag)  # type: ignore[attr-defined]
    _method.__qualname__ = f"Document.{_method.__name__}"  # type: ignore[attr-defined]
    _method.__doc__ = f"Write a <{_tag}> element."
    setattr(Document, _method.__name__, _method)


__all__ = ["DOCTYPE", "Document"]
