# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Generate escaped HTML and attributes into a reusable buffer."""

from __future__ import annotations as _future_annotations

from .attribute import Attribute, AttributeValue
from .document import DOCTYPE, Document
from .errors import InvalidAttributeSuffix, SelfJoinError, TypewriterError, UnsupportedValueKind
from .escape import escape
from .vocabulary import ElementShape, ValueKind

__all__ = [
    "DOCTYPE",
    "Attribute",
    "AttributeValue",
    "Document",
    "ElementShape",
    "InvalidAttributeSuffix",
    "SelfJoinError",
    "TypewriterError",
    "UnsupportedValueKind",
    "ValueKind",
    "escape",
]
