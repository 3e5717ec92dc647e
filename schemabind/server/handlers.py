"""
Request handlers serving the generated document.

Each endpoint owns a :class:`DocumentCache`: the document is built and
serialized on the first request only. A failure is cached as well, and
every later request gets the same fixed 500 response.
"""

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aiohttp import web

logger = logging.getLogger("schemabind.server")

JSON_CONTENT_TYPE = "application/json"
YAML_CONTENT_TYPE = "application/x-yaml"
HTML_CONTENT_TYPE = "text/html"

JSON_ERROR_MESSAGE = "failed to serialize OpenAPI spec as JSON"
YAML_ERROR_MESSAGE = "failed to serialize OpenAPI spec as YAML"


class DocumentCache:
    """
    Compute-once holder for a rendered document.

    Example:
        cache = DocumentCache(lambda: spec.build(source).to_json())
        body = cache.get()  # builds on first call, then reuses
    """

    def __init__(self, render: Callable[[], str]) -> None:
        """
        Initialize the cache.

        Args:
            render: Produces the document text. Called at most once.
        """
        self._render = render
        self._lock = threading.Lock()
        self._done = False
        self._data: bytes = b""
        self._error: Exception | None = None

    def get(self) -> bytes:
        """
        Return the rendered document.

        Raises:
            Exception: The error raised by the first render, on every call.
        """
        if not self._done:
            with self._lock:
                if not self._done:
                    try:
                        self._data = self._render().encode("utf-8")
                    except Exception as e:
                        logger.exception("Failed to render OpenAPI document")
                        self._error = e
                    self._done = True
        if self._error is not None:
            raise self._error
        return self._data

    @property
    def error(self) -> Exception | None:
        return self._error


def document_handler(
    cache: DocumentCache, content_type: str, error_message: str
) -> Callable[["web.Request"], "web.Response"]:
    """Create a handler serving a cached document."""

    async def handler(request: "web.Request") -> "web.Response":
        from aiohttp import web

        try:
            body = cache.get()
        except Exception:
            return web.Response(status=500, text=error_message)
        return web.Response(body=body, content_type=content_type)

    return handler


def docs_page_handler(render: Callable[[], str]) -> Callable[["web.Request"], "web.Response"]:
    """Create a handler serving the documentation page, rendered once."""
    page: list[str] = []

    async def handler(request: "web.Request") -> "web.Response":
        from aiohttp import web

        if not page:
            page.append(render())
        return web.Response(text=page[0], content_type=HTML_CONTENT_TYPE, charset="utf-8")

    return handler
