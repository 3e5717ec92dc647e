"""
Base serialization for OpenAPI object dataclasses.

Every object in the document tree is a dataclass whose fields map onto
OpenAPI keys. Field metadata controls the mapping:

    key:  output key when it differs from the attribute name ("$ref", "in")
    omit: "empty" (default) drops None, False, "" and empty containers;
          "none" drops only None (examples, constants, explicit security);
          "never" always emits the value (required OpenAPI keys)
"""

import dataclasses
from typing import Any

from schemabind.serialization import to_jsonable

OMIT_EMPTY = "empty"
OMIT_NONE = "none"
OMIT_NEVER = "never"


def spec_field(
    key: str = "", omit: str = OMIT_EMPTY, **kwargs: Any
) -> Any:
    """Declare an object field with its output key and omission rule."""
    metadata = {"omit": omit}
    if key:
        metadata["key"] = key
    return dataclasses.field(metadata=metadata, **kwargs)


def is_empty(value: Any) -> bool:
    """
    Return True when a value counts as unset for omission purposes.

    Zero is a meaningful value (``minimum: 0``) and is never empty.
    """
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    if hasattr(value, "is_empty"):
        return value.is_empty()
    return False


def serialize_value(value: Any) -> Any:
    """
    Serialize a single value of the document tree.

    Args:
        value: Object, container or payload value.

    Returns:
        JSON-compatible representation of the value.
    """
    if isinstance(value, SpecObject):
        return value.to_dict()
    if hasattr(value, "to_value"):
        return value.to_value()
    if isinstance(value, dict):
        return {str(k): serialize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    return to_jsonable(value)


class SpecObject:
    """
    Mixin for dataclasses that render as OpenAPI objects.

    Not a dataclass itself, so subclasses may be frozen or not.
    """

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the object to its OpenAPI representation.

        Returns:
            Dictionary keyed by OpenAPI field names, in declaration order,
            with unset fields omitted.
        """
        result: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            rule = f.metadata.get("omit", OMIT_EMPTY)
            if rule == OMIT_EMPTY and is_empty(value):
                continue
            if rule == OMIT_NONE and value is None:
                continue
            result[f.metadata.get("key", f.name)] = serialize_value(value)
        return result
