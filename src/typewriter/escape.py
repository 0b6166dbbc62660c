# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    },
)


def escape(text: str) -> str:
    """Make text safe to place in an HTML text node or a quoted attribute value."""
    return text.translate(_ESCAPES)


__all__ = ["escape"]
