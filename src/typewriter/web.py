# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Awaitable, Callable, Iterable

import logging

import aiohttp.web
import brotli  # type: ignore[import-untyped]
import multidict

from .document import Document

_logger = logging.getLogger("typewriter.web")

DocumentBuilder = Callable[[aiohttp.web.Request], Awaitable[Document]]
Handler = Callable[[aiohttp.web.Request], Awaitable[aiohttp.web.StreamResponse]]


def document_response(
    document: Document,
    request: aiohttp.web.BaseRequest | None = None,
    *,
    status: int = 200,
    preload: Iterable[tuple[str, str]] = (),
) -> aiohttp.web.Response:
    """
    Render a document into an uncached HTML response.

    The document's buffer is drained. The body is brotli compressed when the
    request accepts it, and each (href, type) in preload becomes a Link header
    entry so the browser can fetch it early.
    """
    content = document.render().encode("utf-8")

    headers = multidict.CIMultiDict(
        {
            "Content-Type": "text/html; charset=utf-8",
            "Cache-Control": "must-revalidate, no-cache, no-store, private",
            "Vary": "accept-encoding",
        },
    )

    links = [_preload_string(href, as_type) for href, as_type in preload]
    if links:
        headers["Link"] = ", ".join(links)

    if request is not None and "br" in request.headers.get("Accept-Encoding", ""):
        content = brotli.compress(content)
        headers["Content-Encoding"] = "br"

    _logger.debug(
        "Rendered document response",
        extra={"status": status, "bytes": len(content), "encoding": headers.get("Content-Encoding")},
    )

    return aiohttp.web.Response(body=content, status=status, headers=headers)


def document_handler(build: DocumentBuilder, *, status: int = 200) -> Handler:
    """Wrap a coroutine that builds a document into an aiohttp request handler."""

    async def handler(request: aiohttp.web.Request) -> aiohttp.web.StreamResponse:
        return document_response(await build(request), request, status=status)

    return handler


def _preload_string(href: str, as_type: str) -> str:
    return f'<{href}>; rel="preload"; as="{as_type}"; crossorigin="anonymous"'


__all__ = ["document_handler", "document_response"]
