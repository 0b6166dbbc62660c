# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Callable, Mapping
from typing import Self

import datetime
import re

from .errors import InvalidAttributeSuffix, UnsupportedValueKind
from .escape import escape
from .vocabulary import ATTRIBUTES, EVENT_ATTRIBUTES, AttributeInfo, ValueKind, attribute_info

AttributeValue = str | int | float | bool | datetime.date | datetime.time

_SUFFIX = re.compile(r"[a-z-]+")


class Attribute:
    """
    The attributes of one element, each name printed at most once.

    Setting a name that is already present replaces its value but keeps its
    original position, so the output order is the order in which names were
    first set. Every value is escaped as it is stored.

    Attributes can be set by keyword, through a configure callable, or by
    chaining the generated per-attribute methods:

        Attribute(id="one", class_="big")
        Attribute(lambda a: a.id("one").class_("big"))
        Attribute().id("one").class_("big")

    Boolean attributes print their bare name when true and nothing when false.
    """

    _fragments: dict[str, str]

    __slots__ = ("_fragments",)

    def __init__(
        self,
        configure: Callable[[Attribute], object] | None = None,
        /,
        **attributes: AttributeValue,
    ) -> None:
        self._fragments = {}

        for key, value in attributes.items():
            name = key.strip("_").replace("_", "-")
            info = attribute_info(name)
            self.set(name, value, info.kind if info else ValueKind.STRING)

        if configure:
            configure(self)

    @staticmethod
    def to_html(attr: Attribute | None) -> str:
        if attr is None:
            return ""

        if not isinstance(attr, Attribute):
            raise TypeError(f"Expected an Attribute, got {type(attr).__name__}")

        return attr.render()

    def set(self, name: str, value: AttributeValue, kind: ValueKind = ValueKind.STRING) -> Self:
        match kind:
            case ValueKind.BOOLEAN:
                return self._write_boolean(name, bool(value))
            case ValueKind.BOOLEAN_OR_STRING if isinstance(value, bool):
                return self._write_boolean(name, value)
            case ValueKind.DATETIME | ValueKind.NUMBER_OR_DATETIME if isinstance(
                value,
                datetime.date | datetime.time,
            ):
                return self._write(name, value.isoformat())
            case (
                ValueKind.BOOLEAN_OR_STRING
                | ValueKind.COLOR
                | ValueKind.DATETIME
                | ValueKind.ENUM
                | ValueKind.NUMBER
                | ValueKind.NUMBER_OR_DATETIME
                | ValueKind.NUMBER_OR_STRING
                | ValueKind.STRING
                | ValueKind.URL
            ):
                return self._write(name, str(value))
            case _:
                raise UnsupportedValueKind(kind)

    def attribute(self, name: str, value: AttributeValue) -> Self:
        """Set an attribute that has no method of its own."""
        return self._write(name, str(value))

    def namespaced(self, prefix: str, suffix: str, value: AttributeValue) -> Self:
        if not _SUFFIX.fullmatch(suffix):
            raise InvalidAttributeSuffix(suffix)

        return self._write(f"{prefix}-{suffix}", str(value))

    def data(self, suffix: str, value: AttributeValue) -> Self:
        """Custom data attribute: data("turbo", "false") gives data-turbo="false"."""
        return self.namespaced("data", suffix, value)

    def class_(self, value: AttributeValue) -> Self:
        return self._write("class", str(value))

    klass = class_

    def classes(self, flags: Mapping[str, bool]) -> Self:
        """Set class to the names whose flag is True, in mapping order."""
        return self.class_(" ".join(name for name, enabled in flags.items() if enabled is True))

    def merge(self, other: Attribute) -> Attribute:
        """New collection with other's values winning; neither input is changed."""
        if not isinstance(other, Attribute):
            raise TypeError(f"Can only merge an Attribute, got {type(other).__name__}")

        merged = Attribute()
        merged._fragments = {**self._fragments, **other._fragments}  # noqa: SLF001
        return merged

    def render(self) -> str:
        return "".join(self._fragments.values())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<Attribute{self.render()}>"

    def _write(self, name: str, text: str) -> Self:
        self._fragments[name] = f' {name}="{escape(text)}"'
        return self

    def _write_boolean(self, name: str, enabled: bool) -> Self:  # noqa: FBT001
        self._fragments[name] = f" {name}" if enabled else ""
        return self


def _setter(info: AttributeInfo) -> Callable[[Attribute, AttributeValue], Attribute]:
    def setter(self: Attribute, value: AttributeValue) -> Attribute:
        return self.set(info.name, value, info.kind)

    setter.__name__ = info.method_name
    setter.__qualname__ = f"Attribute.{info.method_name}"
    setter.__doc__ = info.description
    return setter


for _info in (*ATTRIBUTES.values(), *EVENT_ATTRIBUTES.values()):
    setattr(Attribute, _info.method_name, _setter(_info))


__all__ = ["Attribute", "AttributeValue"]
