# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from typing import Any


class TypewriterError(Exception):
    pass


class InvalidAttributeSuffix(TypewriterError, ValueError):
    suffix: str

    def __init__(self, suffix: str) -> None:
        self.suffix = suffix
        super().__init__(
            f"suffix ({suffix!r}) must be lowercase and only contain 'a' to 'z' or hyphens.",
        )


class SelfJoinError(TypewriterError, ValueError):
    def __init__(self) -> None:
        super().__init__(
            "A document can not be joined into itself; "
            "only join documents which were built separately.",
        )


class UnsupportedValueKind(TypewriterError, TypeError):
    kind: Any

    def __init__(self, kind: Any) -> None:  # noqa: ANN401 the kind is unknown by definition.
        self.kind = kind
        super().__init__(f"No formatter for attribute value kind {kind!r}")


__all__ = [
    "InvalidAttributeSuffix",
    "SelfJoinError",
    "TypewriterError",
    "UnsupportedValueKind",
]
