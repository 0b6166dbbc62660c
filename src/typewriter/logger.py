# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from types import TracebackType
from typing import Any

import logging
import traceback

from pythonjsonlogger.json import JsonFormatter as _JsonFormatter

_SysExcInfoType = (
    tuple[type[BaseException], BaseException, TracebackType | None] | tuple[None, None, None]
)


class JsonFormatter(_JsonFormatter):
    def add_fields(
        self,
        log_data: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_data, record, message_dict)
        log_data.setdefault("level", record.levelname)
        log_data.setdefault("logger", record.name)

    def formatException(self, ei: _SysExcInfoType) -> dict[str, Any] | None:  # type: ignore[override]
        _, exc_value, _ = ei
        if exc_value is None:
            return None

        return _describe(exc_value)


def _describe(exc: BaseException) -> dict[str, Any]:
    return {
        "type": type(exc).__name__,
        "message": str(exc),
        "traceback": [
            f"{frame.filename}:{frame.lineno} in {frame.name}"
            for frame in reversed(traceback.extract_tb(exc.__traceback__))
        ],
        "cause": _describe(exc.__cause__) if exc.__cause__ else None,
    }


def configure(level: int | str = logging.INFO, *, indent: int | None = None) -> logging.Logger:
    """Send the typewriter loggers to stderr as JSON lines."""
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter(json_indent=indent))
    handler.setLevel(level)

    logger = logging.getLogger("typewriter")
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


__all__ = ["JsonFormatter", "configure"]
