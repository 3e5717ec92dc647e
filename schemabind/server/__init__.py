"""
aiohttp integration for SchemaBind.

Serves generated documents and a documentation UI, and adapts aiohttp
routers as route sources.
"""

from schemabind.server.app import (
    SPEC_APP_KEY,
    create_app,
    mount_docs,
    run_server,
)
from schemabind.server.handlers import DocumentCache
from schemabind.server.routes import AiohttpRouteSource, resource_template
from schemabind.server.templates import render_docs_page

__all__ = [
    "SPEC_APP_KEY",
    "create_app",
    "mount_docs",
    "run_server",
    "DocumentCache",
    "AiohttpRouteSource",
    "resource_template",
    "render_docs_page",
]
