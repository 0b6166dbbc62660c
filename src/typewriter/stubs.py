# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""
Type stubs for the generated vocabulary methods.

Attribute and Document gain their per-attribute and per-element methods at
import time, which static type checkers can not see. This module writes
attribute.pyi and document.pyi declaring every one of them with a parameter
type matching its value kind.
"""

from __future__ import annotations as _future_annotations

from collections.abc import Iterable

import logging
import pathlib

from .errors import UnsupportedValueKind
from .vocabulary import ATTRIBUTES, ELEMENTS, EVENT_ATTRIBUTES, AttributeInfo, ElementShape, ValueKind, method_name

_logger = logging.getLogger("typewriter.stubs")

_HEADER = "# Generated by `python -m typewriter stubs`; do not edit.\n"

_TEMPORAL = "datetime.date | datetime.time"

_ATTRIBUTE_PREAMBLE = '''
from collections.abc import Callable, Mapping
from typing import Literal, Self

import datetime

from .vocabulary import ValueKind

AttributeValue = str | int | float | bool | datetime.date | datetime.time

class Attribute:
    def __init__(
        self,
        configure: Callable[[Attribute], object] | None = None,
        /,
        **attributes: AttributeValue,
    ) -> None: ...
    @staticmethod
    def to_html(attr: Attribute | None) -> str: ...
    def set(self, name: str, value: AttributeValue, kind: ValueKind = ...) -> Self: ...
    def attribute(self, name: str, value: AttributeValue) -> Self: ...
    def namespaced(self, prefix: str, suffix: str, value: AttributeValue) -> Self: ...
    def data(self, suffix: str, value: AttributeValue) -> Self: ...
    def class_(self, value: AttributeValue) -> Self: ...
    def klass(self, value: AttributeValue) -> Self: ...
    def classes(self, flags: Mapping[str, bool]) -> Self: ...
    def merge(self, other: Attribute) -> Attribute: ...
    def render(self) -> str: ...
'''

_DOCUMENT_PREAMBLE = '''
from collections.abc import Callable, Iterable
from typing import Self

from .attribute import Attribute, AttributeValue
from .writer import Content, RawContent, Writer

DOCTYPE: str

class Document(Writer):
    @classmethod
    def start(cls, configure: Callable[[Self], object] | None = None, *, minify: bool = False) -> Self: ...
    def join(self, documents: Iterable[Document]) -> Self: ...
    def text(self, value: object) -> Self: ...
    def comment(self, value: object | None = None) -> Self: ...
    def doctype(self) -> Self: ...
    def attr(
        self,
        configure: Callable[[Attribute], object] | None = None,
        /,
        **attributes: AttributeValue,
    ) -> Attribute: ...
    def page(
        self,
        title: str,
        content: Content | None = None,
        *,
        lang: str = "en",
        styles: Iterable[str] = (),
        scripts: Iterable[str] = (),
        body: Attribute | None = None,
    ) -> Self: ...
'''


def value_annotation(info: AttributeInfo) -> str:
    match info.kind:
        case ValueKind.BOOLEAN:
            return "bool"
        case ValueKind.BOOLEAN_OR_STRING:
            return "bool | str"
        case ValueKind.NUMBER:
            return "int | float"
        case ValueKind.NUMBER_OR_STRING:
            return "int | float | str"
        case ValueKind.DATETIME:
            return f"str | {_TEMPORAL}"
        case ValueKind.NUMBER_OR_DATETIME:
            return f"int | float | str | {_TEMPORAL}"
        case ValueKind.ENUM if info.values:
            return "Literal[" + ", ".join(repr(value) for value in info.values) + "]"
        case ValueKind.COLOR | ValueKind.ENUM | ValueKind.STRING | ValueKind.URL:
            return "str"
        case _:
            raise UnsupportedValueKind(info.kind)


def attribute_stub(infos: Iterable[AttributeInfo] | None = None) -> str:
    if infos is None:
        infos = (*ATTRIBUTES.values(), *EVENT_ATTRIBUTES.values())

    lines = [_HEADER, _ATTRIBUTE_PREAMBLE.lstrip("\n")]
    for info in infos:
        lines.append(f"    # {info.description}\n" if info.description else "")
        lines.append(f"    def {info.method_name}(self, value: {value_annotation(info)}) -> Self: ...\n")

    return "".join(lines)


def document_stub(elements: dict[str, ElementShape] | None = None) -> str:
    lines = [_HEADER, _DOCUMENT_PREAMBLE.lstrip("\n")]

    for tag, shape in (elements or ELEMENTS).items():
        name = method_name(tag)
        match shape:
            case ElementShape.CONTAINER:
                params = "attr: Attribute | None = None, content: Content | None = None"
            case ElementShape.VOID:
                params = "attr: Attribute | None = None"
            case ElementShape.RAW:
                params = "attr: Attribute | None = None, content: RawContent | None = None"
        lines.append(f"    def {name}(self, {params}) -> Self: ...\n")

    return "".join(lines)


def write_stubs(directory: pathlib.Path) -> list[pathlib.Path]:
    directory.mkdir(parents=True, exist_ok=True)

    written = []
    for filename, content in (("attribute.pyi", attribute_stub()), ("document.pyi", document_stub())):
        path = directory / filename
        path.write_text(content, encoding="utf-8")
        _logger.info("Wrote stub %s", path, extra={"bytes": len(content)})
        written.append(path)

    return written


__all__ = ["attribute_stub", "document_stub", "value_annotation", "write_stubs"]
