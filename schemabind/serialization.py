"""
Encoding of documents and embedded payload values.

Documents are plain trees once ``to_dict`` has run; the only values that
need care are the ones users attach as examples, constants and defaults.
Those go through :func:`to_jsonable`, which mirrors how records are
described by the schema compiler (field renames, skipped fields, inline
records) so that an example always matches its schema's shape.
"""

import base64
import dataclasses
import json
from collections.abc import Mapping
from datetime import date, datetime, time
from enum import Enum
from typing import Any
from uuid import UUID

import yaml

from schemabind.exceptions import SerializationError
from schemabind.fields import field_options, is_exported


def _is_empty_value(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def _encode_record(value: Any) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for f in dataclasses.fields(value):
        if not is_exported(f.name):
            continue
        opts = field_options(f)
        if opts.skip:
            continue
        item = getattr(value, f.name)
        if opts.inline and not opts.name and dataclasses.is_dataclass(item):
            result.update(_encode_record(item))
            continue
        if opts.inline and not opts.name and item is None:
            continue
        if opts.omitempty and _is_empty_value(item):
            continue
        encoded = to_jsonable(item)
        if opts.as_string and isinstance(encoded, (bool, int, float)):
            encoded = json.dumps(encoded)
        result[opts.name or f.name] = encoded
    return result


def _encode_key(key: Any) -> str:
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, str):
        return key
    if isinstance(key, (int, UUID)) and not isinstance(key, bool):
        return str(key)
    raise SerializationError(
        "Mapping key cannot be encoded as a string",
        details={"key_type": type(key).__name__},
    )


def to_jsonable(value: Any) -> Any:
    """
    Convert an arbitrary payload value into JSON-compatible data.

    Args:
        value: Example, constant or default value.

    Returns:
        Data made only of dicts, lists, strings, numbers, booleans and None.

    Raises:
        SerializationError: If the value has no JSON representation.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Enum):
        return to_jsonable(value.value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if hasattr(value, "to_dict") and callable(value.to_dict):
        return value.to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _encode_record(value)
    if isinstance(value, Mapping):
        return {_encode_key(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_jsonable(item) for item in value]
    raise SerializationError(
        "Value cannot be encoded",
        details={"type": type(value).__name__},
    )


def to_json(document: Any, indent: int | None = 2) -> str:
    """
    Serialize a document to JSON.

    Args:
        document: A :class:`~schemabind.models.document.Document` or any
            object with ``to_dict``.
        indent: Indentation width, or None for compact output.

    Raises:
        SerializationError: If the document holds unencodable values.
    """
    data = document.to_dict()
    try:
        return json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(
            "Failed to encode document as JSON", details={"error": str(e)}
        ) from e


def to_yaml(document: Any) -> str:
    """
    Serialize a document to YAML, keeping key insertion order.

    Raises:
        SerializationError: If the document holds unencodable values.
    """
    data = document.to_dict()
    try:
        return yaml.safe_dump(
            data, sort_keys=False, allow_unicode=True, default_flow_style=False
        )
    except yaml.YAMLError as e:
        raise SerializationError(
            "Failed to encode document as YAML", details={"error": str(e)}
        ) from e
