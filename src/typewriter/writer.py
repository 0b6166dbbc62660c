# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Callable, Iterator
from typing import Self

import contextlib

import rcssmin  # type: ignore[import-untyped]
import rjsmin  # type: ignore[import-untyped]

from .attribute import Attribute

Content = Callable[[], object]
RawContent = str | Callable[[], str]

_MINIFIERS: dict[str, Callable[[str], str]] = {
    "script": rjsmin.jsmin,
    "style": rcssmin.cssmin,
}


class Buffer:
    """Append-only text accumulator; take() returns everything written and empties it."""

    _parts: list[str]

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts = []

    def write(self, *parts: str) -> None:
        self._parts.extend(parts)

    def take(self) -> str:
        parts, self._parts = self._parts, []
        return "".join(parts)

    def mark(self) -> int:
        return len(self._parts)

    def rewind(self, mark: int) -> None:
        """Drop everything written since mark()."""
        del self._parts[mark:]


class Writer:
    """
    Writes tags into a single buffer.

    Nested content is produced by calling back into the same writer between
    the opening and closing tags, so the output order is the call order.
    Nothing is returned to the caller until render() drains the buffer.
    """

    _buffer: Buffer
    _minify: bool

    def __init__(self, *, minify: bool = False) -> None:
        self._buffer = Buffer()
        self._minify = minify

    def render(self) -> str:
        """Return the HTML written so far and reset to an empty buffer."""
        return self._buffer.take()

    def open(self, tag: str, attr: Attribute | None = None, content: Content | None = None) -> Self:
        with self._rewind_on_error():
            self._buffer.write("<", tag, Attribute.to_html(attr), ">")

            if content is not None:
                content()

            self._buffer.write("</", tag, ">")

        return self

    def open_void(self, tag: str, attr: Attribute | None = None) -> Self:
        self._buffer.write("<", tag, Attribute.to_html(attr), "/>")
        return self

    def open_raw(self, tag: str, attr: Attribute | None = None, content: RawContent | None = None) -> Self:
        """
        Write an element whose body is inserted without escaping.

        Only for payloads that are not HTML text, such as script and style
        bodies. The caller is responsible for the body not containing
        untrusted markup.
        """
        with self._rewind_on_error():
            self._buffer.write("<", tag, Attribute.to_html(attr), ">")

            body = content() if callable(content) else content
            if body is not None:
                body = str(body)
                if self._minify and tag in _MINIFIERS:
                    body = _MINIFIERS[tag](body)
                self._unsafe_text(body)

            self._buffer.write("</", tag, ">")

        return self

    @contextlib.contextmanager
    def element(self, tag: str, attr: Attribute | None = None) -> Iterator[Self]:
        with self._rewind_on_error():
            self._buffer.write("<", tag, Attribute.to_html(attr), ">")
            yield self
            self._buffer.write("</", tag, ">")

    @contextlib.contextmanager
    def _rewind_on_error(self) -> Iterator[None]:
        """An element that fails part way leaves nothing of itself in the buffer."""
        mark = self._buffer.mark()
        try:
            yield
        except BaseException:
            self._buffer.rewind(mark)
            raise

    def _unsafe_text(self, value: str) -> Self:
        self._buffer.write(value)
        return self


__all__ = ["Buffer", "Content", "RawContent", "Writer"]
