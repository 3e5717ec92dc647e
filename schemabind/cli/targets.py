"""
Resolution of ``module:attribute`` targets named on the command line.
"""

import importlib
import logging
from typing import Any

from schemabind.exceptions import LoadError
from schemabind.models.document import Document
from schemabind.spec.builder import APISpec

logger = logging.getLogger("schemabind.cli")


def load_target(target: str) -> Any:
    """
    Import the object named by ``module:attribute``.

    The attribute part may be dotted (``module:factory.attr``). When it is
    omitted, ``app`` is used.

    Raises:
        LoadError: If the module cannot be imported or has no such attribute.
    """
    module_name, _, attribute = target.partition(":")
    if not module_name:
        raise LoadError(f"Invalid target: {target!r}", {"expected": "module:attribute"})
    attribute = attribute or "app"

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise LoadError(f"Cannot import module {module_name!r}: {e}") from e

    obj: Any = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise LoadError(
                f"Module {module_name!r} has no attribute {attribute!r}"
            ) from e

    logger.debug("Loaded target %s -> %r", target, obj)
    return obj


def _is_application(obj: Any) -> bool:
    from aiohttp import web

    return isinstance(obj, web.Application)


def _call_factory(obj: Any, target: str) -> Any:
    if _is_application(obj) or isinstance(obj, (Document, tuple)) or not callable(obj):
        return obj
    logger.debug("Calling factory %s", target)
    return obj()


def _route_source(source: Any) -> Any:
    from schemabind.server.routes import AiohttpRouteSource

    if _is_application(source):
        return AiohttpRouteSource(source)
    return source


def _spec_pair(obj: Any) -> bool:
    return isinstance(obj, tuple) and len(obj) == 2 and isinstance(obj[0], APISpec)


def resolve_document(target: str) -> Document:
    """
    Load a target and build its document.

    The target may be a Document, an aiohttp application with a mounted
    APISpec, an ``(APISpec, route_source)`` pair where the route source may
    also be an aiohttp application, or a zero-argument callable returning
    one of these.

    Raises:
        LoadError: If the target is none of the above.
    """
    from schemabind.server.app import SOURCE_APP_KEY, SPEC_APP_KEY

    obj = _call_factory(load_target(target), target)

    if isinstance(obj, Document):
        return obj
    if _is_application(obj):
        spec = obj.get(SPEC_APP_KEY)
        if not isinstance(spec, APISpec):
            raise LoadError(
                f"Application {target!r} has no mounted spec",
                {"hint": "call mount_docs(app, spec) when creating the application"},
            )
        source = obj.get(SOURCE_APP_KEY)
        if source is None:
            source = obj
        return spec.build(_route_source(source))
    if _spec_pair(obj):
        spec, source = obj
        return spec.build(_route_source(source))

    raise LoadError(
        f"Target {target!r} did not resolve to a document",
        {"type": type(obj).__name__},
    )


def resolve_application(target: str, docs_config: Any = None) -> Any:
    """
    Load a target that is (or whose factory returns) an aiohttp application.

    An ``(APISpec, application)`` pair is accepted too: the documentation
    endpoints are mounted on the application using ``docs_config``.

    Raises:
        LoadError: If the target is not an application.
    """
    from schemabind.server.app import SPEC_APP_KEY, mount_docs

    obj = _call_factory(load_target(target), target)
    if _spec_pair(obj) and _is_application(obj[1]):
        spec, app = obj
        if SPEC_APP_KEY not in app:
            mounted = mount_docs(app, spec, docs_config)
            logger.info("Mounted documentation for %s at %s", target, mounted)
        return app
    if not _is_application(obj):
        raise LoadError(
            f"Target {target!r} is not an aiohttp application",
            {"type": type(obj).__name__},
        )
    return obj
