# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from typing import Self

import dataclasses
import logging
import time

from .attribute import Attribute
from .document import Document

_logger = logging.getLogger("typewriter.bench")

NAVIGATION = (("/", "Home"), ("/about", "About"), ("/contact", "Contact"))


class Layout(Document):
    """A small but typical page: navigation list, heading and a table of repeated cells."""

    def call(self) -> Self:
        self.page(
            "Example",
            self._body,
            styles=["/assets/tailwind.css"],
            body=Attribute(class_="bg-zinc-100"),
        )
        return self

    def _body(self) -> None:
        item = Attribute(class_="p-5")

        with self.element("nav", Attribute(class_="p-5", id="main_nav")), self.element("ul"):
            for href, label in NAVIGATION:
                with self.element("li", item), self.element("a", item.merge(Attribute(href=href))):
                    self.text(label)

        self.open("h1", content=lambda: self.text("Hi"))

        cell = Attribute().set("id", "test1").set("id", "a")

        with self.element("table", Attribute(id="test")), self.element("tr"):
            for _ in range(5):
                self.open("td", cell, lambda: self.open("span", content=lambda: self.text("Hi")))


@dataclasses.dataclass(frozen=True)
class BenchResult:
    iterations: int
    seconds: float
    size: int

    @property
    def per_second(self) -> float:
        return self.iterations / self.seconds if self.seconds else float("inf")


def run(iterations: int = 10_000) -> BenchResult:
    if iterations < 1:
        raise ValueError("iterations must be at least 1")

    layout = Layout()
    size = 0

    started = time.perf_counter()
    for _ in range(iterations):
        size = len(layout.call().render())
    elapsed = time.perf_counter() - started

    result = BenchResult(iterations, elapsed, size)
    _logger.info(
        "Rendered %d pages in %.3fs",
        iterations,
        elapsed,
        extra={"per_second": round(result.per_second, 1), "bytes": size},
    )
    return result


__all__ = ["BenchResult", "Layout", "run"]
