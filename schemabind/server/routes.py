"""
aiohttp router adapter.

Exposes the routes of an aiohttp application as a route source. Variables
registered with a macro's regular expression (see
:func:`schemabind.routing.expand_macros`) are reported back in
``{name:macro}`` form so path parameters get their types.
"""

import logging
import re
from collections.abc import Iterator
from typing import Any

from schemabind.routing import MACRO_PATTERNS, RouteInfo

logger = logging.getLogger("schemabind.server.routes")

_PATTERN_MACROS = {pattern: macro for macro, pattern in MACRO_PATTERNS.items()}

_GROUP_START = re.compile(r"\(\?P<([_a-zA-Z][_a-zA-Z0-9]*)>")
_FORMATTER_VARIABLE = re.compile(r"\{([_a-zA-Z][_a-zA-Z0-9]*)\}")


def _group_patterns(pattern: str) -> dict[str, str]:
    """Map each named group of a compiled route pattern to its regex."""
    groups = {}
    for match in _GROUP_START.finditer(pattern):
        depth = 1
        index = match.end()
        escaped = False
        in_class = False
        while index < len(pattern) and depth:
            ch = pattern[index]
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif in_class:
                in_class = ch != "]"
            elif ch == "[":
                in_class = True
            elif ch == "(":
                depth += 1
            elif ch == ")":
                depth -= 1
            index += 1
        groups[match.group(1)] = pattern[match.end() : index - 1]
    return groups


def resource_template(resource: Any) -> str | None:
    """
    Path template of an aiohttp resource.

    Returns:
        The template, or None for resources without one (static files,
        sub-applications).
    """
    info = resource.get_info()
    if "path" in info:
        return info["path"]
    if "formatter" not in info:
        return None

    groups = _group_patterns(info["pattern"].pattern)

    def replace(match: re.Match) -> str:
        name = match.group(1)
        macro = _PATTERN_MACROS.get(groups.get(name, ""))
        if macro:
            return "{%s:%s}" % (name, macro)
        return match.group(0)

    return _FORMATTER_VARIABLE.sub(replace, info["formatter"])


class AiohttpRouteSource:
    """
    Route source over an aiohttp router.

    Each method route is reported separately, with the route object as
    identity, so ``spec.route(app.router.add_get(...))`` documents exactly
    that route. Wildcard-method routes are skipped, and so are HEAD routes
    unless ``include_head`` is set (``add_get`` adds one implicitly).
    """

    def __init__(self, app_or_router: Any, include_head: bool = False) -> None:
        self._router = getattr(app_or_router, "router", app_or_router)
        self._include_head = include_head

    def walk(self) -> Iterator[RouteInfo]:
        from aiohttp import hdrs

        for route in self._router.routes():
            method = route.method.upper()
            if method == hdrs.METH_ANY:
                continue
            if method == hdrs.METH_HEAD and not self._include_head:
                continue
            resource = route.resource
            if resource is None:
                continue
            template = resource_template(resource)
            if template is None:
                logger.debug("Skipping route without a path template: %r", resource)
                continue
            yield RouteInfo(
                identity=route,
                path_template=template,
                methods=(method,),
                name=resource.name or "",
            )
