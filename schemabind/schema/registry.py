"""
Canonical naming and storage of component schemas.

The registry maps record type identities to unique component names and
holds the finished schemas. Reservation and population are separate steps:
a type is reserved and claimed before its fields are compiled, so a field
that leads back to the same type finds the name already taken by itself and
becomes a reference.
"""

import logging
import re
from collections.abc import Hashable

from schemabind.models.schema import Schema

logger = logging.getLogger("schemabind.schema")

# Generic argument heads that add a "List" suffix to the sanitized name.
SEQUENCE_NAMES = frozenset(
    {
        "list",
        "List",
        "tuple",
        "Tuple",
        "set",
        "Set",
        "frozenset",
        "FrozenSet",
        "Sequence",
        "MutableSequence",
        "AbstractSet",
        "MutableSet",
        "Collection",
        "Iterable",
        "deque",
        "Deque",
    }
)

_NON_NAME_CHARS = re.compile(r"[^0-9A-Za-z_]")


def module_prefix(module: str) -> str:
    """
    Prefix derived from a module path: last segment, capitalized.

    ``app.models`` gives ``Models``, ``svc.user-api`` gives ``User_api``.
    """
    if not module:
        return ""
    segment = _NON_NAME_CHARS.sub("_", module.rsplit(".", 1)[-1])
    return segment[:1].upper() + segment[1:]


def _split_arguments(text: str) -> list[str]:
    parts = []
    depth = 0
    current = []
    for ch in text:
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        if ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    tail = "".join(current).strip()
    if tail:
        parts.append(tail)
    return parts


def _strip_qualifier(name: str) -> str:
    return name.rsplit(".", 1)[-1]


def _argument_simple_name(part: str) -> str:
    if part == "...":
        return ""
    start = part.find("[")
    if start < 0 or not part.endswith("]"):
        return _strip_qualifier(part)
    head = _strip_qualifier(part[:start])
    if head in SEQUENCE_NAMES:
        inner = _split_arguments(part[start + 1 : -1])
        return "".join(_argument_simple_name(p) for p in inner) + "List"
    return sanitize_schema_name(head + part[start:])


def sanitize_schema_name(name: str) -> str:
    """
    Turn a generic display name into a component name.

    The base name is followed by each argument's simple name; an argument
    that is a sequence contributes its element name plus ``List``.

    Examples:
        ``Wrapper[app.User]`` becomes ``WrapperUser``;
        ``Wrapper[list[app.User]]`` becomes ``WrapperUserList``.
    """
    start = name.find("[")
    if start < 0 or not name.endswith("]"):
        return name
    result = name[:start]
    for part in _split_arguments(name[start + 1 : -1]):
        result += _argument_simple_name(part)
    return _NON_NAME_CHARS.sub("", result)


class SchemaRegistry:
    """
    Component schema table for one build.

    Not shared between builds; each build creates its own registry.
    """

    def __init__(self) -> None:
        self._names: dict[Hashable, str] = {}
        self._owners: dict[str, Hashable] = {}
        self._claimed: set[Hashable] = set()
        self._schemas: dict[str, Schema] = {}

    def reserve(self, identity: Hashable, bare_name: str, namespace: str = "") -> str:
        """
        Return the canonical name for a type, assigning one on first sight.

        Resolution order: existing name for the identity, the bare name,
        the module-prefixed name, then the prefixed name with a numeric
        suffix starting at 2.

        Args:
            identity: Stable identity of the type.
            bare_name: The type's simple (sanitized) name.
            namespace: Module the type comes from.

        Returns:
            The canonical name, or "" when the type has no usable name and
            should be inlined.
        """
        existing = self._names.get(identity)
        if existing is not None:
            return existing
        if not bare_name:
            return ""

        name = bare_name
        if name in self._owners:
            name = module_prefix(namespace) + bare_name
            if name in self._owners:
                base = name
                suffix = 2
                while f"{base}{suffix}" in self._owners:
                    suffix += 1
                name = f"{base}{suffix}"
            logger.debug(
                "Schema name %r taken, using %r for %r", bare_name, name, identity
            )

        self._names[identity] = name
        self._owners[name] = identity
        return name

    def claim(self, identity: Hashable) -> bool:
        """
        Mark a type as being generated.

        Returns:
            True the first time a type is claimed, False afterwards.
        """
        if identity in self._claimed:
            return False
        self._claimed.add(identity)
        return True

    def populate(self, name: str, schema: Schema) -> None:
        """Store the finished schema for a reserved name."""
        self._schemas[name] = schema

    def name_of(self, identity: Hashable) -> str | None:
        return self._names.get(identity)

    def get(self, name: str) -> Schema | None:
        return self._schemas.get(name)

    @property
    def schemas(self) -> dict[str, Schema]:
        """Finished component schemas by canonical name."""
        return self._schemas

    def __contains__(self, identity: Hashable) -> bool:
        return identity in self._names

    def __len__(self) -> int:
        return len(self._schemas)
