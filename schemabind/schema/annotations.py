"""
Field constraint annotations.

An annotation is a comma-separated list of ``key=value`` pairs and bare
flags, for example::

    "description=Account balance,minimum=0,example=12.5"
    "enum=draft|published|archived,example=draft"
    "readOnly,format=email"

Keys and values are trimmed. Unknown keys, and numeric values that do not
parse, are ignored. Values cannot contain commas.
"""

import logging
import re
from typing import Any

from schemabind.models.schema import Schema

logger = logging.getLogger("schemabind.schema")

_INTEGER = re.compile(r"[+-]?\d+")

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

FLOAT_KEYS = {
    "minimum": "minimum",
    "maximum": "maximum",
    "exclusiveMinimum": "exclusive_minimum",
    "exclusiveMaximum": "exclusive_maximum",
    "multipleOf": "multiple_of",
}

INT_KEYS = {
    "minLength": "min_length",
    "maxLength": "max_length",
    "minItems": "min_items",
    "maxItems": "max_items",
    "minProperties": "min_properties",
    "maxProperties": "max_properties",
}

TEXT_KEYS = {
    "description": "description",
    "format": "format",
    "title": "title",
    "pattern": "pattern",
}

FLAG_KEYS = {
    "deprecated": "deprecated",
    "readOnly": "read_only",
    "writeOnly": "write_only",
    "uniqueItems": "unique_items",
}


def parse_int(value: str) -> int | None:
    """Parse a base-10 integer, or None."""
    if _INTEGER.fullmatch(value):
        return int(value)
    return None


def parse_float(value: str) -> float | None:
    try:
        return float(value)
    except ValueError:
        return None


def parse_bool(value: str) -> bool | None:
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return None


def coerce_value(schema: Schema, value: str) -> Any:
    """
    Convert annotation text using the schema's first type name.

    integer parses as int, number as float, boolean as bool; anything
    else, and text that fails to parse, stays a string.
    """
    kind = schema.type.first()
    parsed: Any = None
    if kind == "integer":
        parsed = parse_int(value)
    elif kind == "number":
        parsed = parse_float(value)
    elif kind == "boolean":
        parsed = parse_bool(value)
    return value if parsed is None else parsed


def apply_annotations(schema: Schema, annotation: str) -> Schema:
    """
    Apply an annotation string to a schema node in place.

    Args:
        schema: Node to update. Its type should already be set so that
            example, const and enum values can be coerced.
        annotation: The annotation string.

    Returns:
        The same schema node.
    """
    if not annotation:
        return schema
    for part in annotation.split(","):
        key, _, value = part.partition("=")
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if key in TEXT_KEYS:
            setattr(schema, TEXT_KEYS[key], value)
        elif key in FLOAT_KEYS:
            number = parse_float(value)
            if number is not None:
                setattr(schema, FLOAT_KEYS[key], number)
        elif key in INT_KEYS:
            count = parse_int(value)
            if count is not None:
                setattr(schema, INT_KEYS[key], count)
        elif key in FLAG_KEYS:
            setattr(schema, FLAG_KEYS[key], True)
        elif key == "example":
            schema.example = coerce_value(schema, value)
        elif key == "const":
            schema.const = coerce_value(schema, value)
        elif key == "enum":
            schema.enum = [coerce_value(schema, v) for v in value.split("|")]
        else:
            logger.debug("Ignoring unknown annotation key %r", key)
    return schema
