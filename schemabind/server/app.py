"""
Serving generated documents from an aiohttp application.

Example:
    Documenting and serving an application::

        from aiohttp import web
        from schemabind import APISpec, Info, mount_docs

        app = web.Application()
        spec = APISpec(Info(title="Users API", version="1.0.0"))
        spec.route(app.router.add_get("/users/{id}", get_user)).response(200, User)
        mount_docs(app, spec)
        run_server(app)
"""

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aiohttp import web

from schemabind.config.schema import DocsConfig
from schemabind.routing import RouteSource
from schemabind.serialization import to_json, to_yaml
from schemabind.server.handlers import (
    JSON_CONTENT_TYPE,
    JSON_ERROR_MESSAGE,
    YAML_CONTENT_TYPE,
    YAML_ERROR_MESSAGE,
    DocumentCache,
    docs_page_handler,
    document_handler,
)
from schemabind.server.routes import AiohttpRouteSource
from schemabind.server.templates import render_docs_page
from schemabind.spec.builder import APISpec

logger = logging.getLogger("schemabind.server")

SPEC_APP_KEY = "schemabind_spec"
SOURCE_APP_KEY = "schemabind_route_source"


def mount_docs(
    app: "web.Application",
    spec: APISpec,
    config: DocsConfig | None = None,
    source: RouteSource | None = None,
) -> dict[str, str]:
    """
    Register document and documentation UI endpoints on an application.

    The document is built from the application's own routes the first time
    one of the endpoints is requested, so routes added after this call are
    still documented. Must be called before the application starts.

    Args:
        app: The aiohttp application.
        spec: Registrations to build the document from.
        config: Paths, UI choice and title. Defaults to ``DocsConfig()``.
        source: Route source to build from. Defaults to the application's
            router.

    Returns:
        The mounted paths, keyed by "json", "yaml" and "docs".
    """
    if config is None:
        config = DocsConfig()
    if source is None:
        source = AiohttpRouteSource(app)
    app[SPEC_APP_KEY] = spec
    app[SOURCE_APP_KEY] = source

    mounted: dict[str, str] = {}
    base_path = config.base_path.rstrip("/")

    json_path = config.json_path
    if json_path:
        cache = DocumentCache(lambda: to_json(spec.build(source), indent=2))
        app.router.add_get(
            json_path, document_handler(cache, JSON_CONTENT_TYPE, JSON_ERROR_MESSAGE)
        )
        mounted["json"] = json_path

    yaml_path = config.yaml_path
    if yaml_path:
        cache = DocumentCache(lambda: to_yaml(spec.build(source)))
        app.router.add_get(
            yaml_path, document_handler(cache, YAML_CONTENT_TYPE, YAML_ERROR_MESSAGE)
        )
        mounted["yaml"] = yaml_path

    spec_url = json_path or yaml_path
    if not config.disable_docs and spec_url:
        handler = docs_page_handler(
            lambda: render_docs_page(
                config.ui,
                config.title or spec.info.title,
                spec_url,
                config.swagger_ui_config,
            )
        )
        if base_path:
            app.router.add_get(base_path, handler)
            app.router.add_get(base_path + "/", handler)
        else:
            app.router.add_get("/", handler)
        mounted["docs"] = base_path or "/"

    logger.debug("Mounted OpenAPI endpoints: %s", mounted)
    return mounted


def create_app(
    spec: APISpec,
    config: DocsConfig | None = None,
    middlewares: list[Any] | None = None,
) -> "web.Application":
    """
    Create an aiohttp application with the documentation endpoints mounted.

    Args:
        spec: Registrations to build the document from.
        config: Docs configuration.
        middlewares: aiohttp middlewares for the application.

    Returns:
        Configured aiohttp Application. Routes added to it later are
        included in the document.
    """
    from aiohttp import web

    app = web.Application(middlewares=middlewares or [])
    mount_docs(app, spec, config)
    return app


def run_server(
    app: "web.Application",
    host: str = "127.0.0.1",
    port: int = 8080,
) -> None:
    """
    Run an application (blocking).

    Args:
        app: The aiohttp application.
        host: Host address to bind to.
        port: Port number to listen on.
    """
    from aiohttp import web

    logger.info("Starting server on http://%s:%d", host, port)

    web.run_app(
        app,
        host=host,
        port=port,
        print=lambda msg: logger.info(msg),
    )
