"""
Router collaborator contract.

The document builder does not route requests. It walks a route source
once per build and reads, for each route, a stable identity, the raw path
template (``{name}`` or ``{name:macro}`` variables), the HTTP methods and
an optional name. Any object with a ``walk()`` method yielding
:class:`RouteInfo` works; :class:`RouteTable` is a small in-memory one and
:mod:`schemabind.server.routes` adapts aiohttp routers.
"""

import re
from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, runtime_checkable

# Regular expressions matched by each path macro.
MACRO_PATTERNS = {
    "uuid": "[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}",
    "int": "[0-9]+",
    "float": r"[0-9]*\.?[0-9]+",
    "slug": "[a-zA-Z0-9]+(?:-[a-zA-Z0-9]+)*",
    "alpha": "[a-zA-Z]+",
    "alphanum": "[a-zA-Z0-9]+",
    "date": "[0-9]{4}-[0-9]{2}-[0-9]{2}",
    "hex": "[0-9a-fA-F]+",
    "domain": r"(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)*[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?",
}

_MACRO_VARIABLE = re.compile(r"\{([_a-zA-Z][_a-zA-Z0-9]*):([a-z]+)\}")


def expand_macros(template: str) -> str:
    """
    Rewrite ``{name:macro}`` variables as ``{name:regex}``.

    The result is a path an aiohttp router accepts. Unknown macros are
    left as written.
    """

    def replace(match: re.Match) -> str:
        name, macro = match.groups()
        pattern = MACRO_PATTERNS.get(macro)
        if pattern is None:
            return match.group(0)
        return "{%s:%s}" % (name, pattern)

    return _MACRO_VARIABLE.sub(replace, template)


@dataclass(frozen=True)
class RouteInfo:
    """
    One documented route as seen by the builder.

    Attributes:
        identity: Stable, hashable identity used to find the route's
            operation builder.
        path_template: Raw template, e.g. ``/users/{id:uuid}``.
        methods: Upper-case HTTP methods served by the route.
        name: Optional declared name, used for builder lookup and as the
            default operation id.
    """

    identity: Hashable
    path_template: str
    methods: tuple[str, ...]
    name: str = ""


@runtime_checkable
class RouteSource(Protocol):
    """Anything that can enumerate its routes."""

    def walk(self) -> Iterator[RouteInfo]: ...


@dataclass(eq=False)
class Route:
    """A route registered in a :class:`RouteTable`. Identity is the object."""

    path_template: str
    methods: list[str] = field(default_factory=list)
    name: str = ""
    handler: Callable[..., Any] | None = None


class RouteTable:
    """
    In-memory route source.

    Example:
        table = RouteTable()
        users = table.add("/users/{id:uuid}", "GET", name="getUser")
        spec.route(users).summary("Fetch a user")
        document = spec.build(table)
    """

    def __init__(self) -> None:
        self._routes: list[Route] = []

    def add(
        self,
        path_template: str,
        *methods: str,
        name: str = "",
        handler: Callable[..., Any] | None = None,
    ) -> Route:
        """Register a route and return it."""
        route = Route(
            path_template=path_template,
            methods=[m.upper() for m in methods],
            name=name,
            handler=handler,
        )
        self._routes.append(route)
        return route

    @property
    def routes(self) -> list[Route]:
        return list(self._routes)

    def walk(self) -> Iterator[RouteInfo]:
        for route in self._routes:
            yield RouteInfo(
                identity=route,
                path_template=route.path_template,
                methods=tuple(route.methods),
                name=route.name,
            )

    def __len__(self) -> int:
        return len(self._routes)
