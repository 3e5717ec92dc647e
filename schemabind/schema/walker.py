"""
Classification of typing annotations.

The walker looks at an annotation and says what kind of schema it needs,
without building anything. It never recurses into element types; the
compiler does that with the arguments recorded on the returned TypeInfo.
"""

import dataclasses
import types
from collections.abc import Collection, Iterable, Mapping, Sequence, Set
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Annotated, Any, Literal, TypeVar, Union, get_args, get_origin
from uuid import UUID

NONE_TYPE = type(None)

# Checked in order; datetime subclasses date.
FORMATTED_TYPES = (
    (datetime, "date-time"),
    (date, "date"),
    (time, "time"),
    (UUID, "uuid"),
)


class TypeKind(Enum):
    """Schema kinds an annotation can classify as."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    BYTES = "bytes"
    FORMATTED = "formatted"
    SEQUENCE = "sequence"
    FIXED_SEQUENCE = "fixed_sequence"
    MAPPING = "mapping"
    NULLABLE = "nullable"
    UNION = "union"
    ENUM = "enum"
    ANY = "any"
    RECORD = "record"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class TypeInfo:
    """
    Result of classifying an annotation.

    Attributes:
        kind: The schema kind.
        annotation: The annotation with Annotated and NewType layers removed.
            For records this is the registry identity.
        args: Kind-specific arguments: element type for sequences, element
            types for fixed sequences, (key, value) for mappings, the wrapped
            type for nullables, members for unions, values for enums.
        format: Fixed string format for FORMATTED kinds.
        nullable: For unions, whether None was one of the members.
        record: For records, the dataclass (the origin of a generic alias).
    """

    kind: TypeKind
    annotation: Any
    args: tuple[Any, ...] = ()
    format: str = ""
    nullable: bool = False
    record: type | None = None


def strip_annotation(annotation: Any) -> Any:
    """Remove Annotated and NewType layers."""
    while True:
        if get_origin(annotation) is Annotated:
            annotation = get_args(annotation)[0]
        elif hasattr(annotation, "__supertype__"):
            annotation = annotation.__supertype__
        else:
            return annotation


def unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    """
    Split ``X | None`` into ``(X, True)``.

    Anything else, including multi-member unions, comes back unchanged
    with False.
    """
    tp = strip_annotation(annotation)
    if _is_union(get_origin(tp)):
        args = get_args(tp)
        members = [a for a in args if a is not NONE_TYPE]
        if len(members) == 1 and len(args) == 2:
            return members[0], True
    return tp, False


def classify(annotation: Any) -> TypeInfo:
    """
    Classify an annotation.

    Args:
        annotation: Any runtime type handle: a class, a typing construct or a
            parameterised generic.

    Returns:
        The TypeInfo describing which schema the annotation needs.
    """
    tp = strip_annotation(annotation)
    if tp is Any or tp is object:
        return TypeInfo(TypeKind.ANY, tp)
    if isinstance(tp, TypeVar):
        if tp.__bound__ is not None:
            return classify(tp.__bound__)
        return TypeInfo(TypeKind.ANY, tp)

    origin = get_origin(tp)
    if _is_union(origin):
        return _classify_union(tp, get_args(tp))
    if origin is Literal:
        return TypeInfo(TypeKind.ENUM, tp, args=get_args(tp))
    if origin is not None:
        return _classify_generic(tp, origin, get_args(tp))
    if isinstance(tp, type):
        return _classify_class(tp)
    return TypeInfo(TypeKind.UNSUPPORTED, tp)


def _is_union(origin: Any) -> bool:
    return origin is Union or origin is types.UnionType


def _classify_union(tp: Any, args: tuple[Any, ...]) -> TypeInfo:
    members = tuple(a for a in args if a is not NONE_TYPE)
    nullable = len(members) != len(args)
    if nullable and len(members) == 1:
        return TypeInfo(TypeKind.NULLABLE, tp, args=members)
    return TypeInfo(TypeKind.UNION, tp, args=members, nullable=nullable)


def _classify_class(tp: type) -> TypeInfo:
    if issubclass(tp, Enum):
        return TypeInfo(TypeKind.ENUM, tp, args=tuple(m.value for m in tp))
    if issubclass(tp, bool):
        return TypeInfo(TypeKind.BOOLEAN, tp)
    if issubclass(tp, int):
        return TypeInfo(TypeKind.INTEGER, tp)
    if issubclass(tp, float):
        return TypeInfo(TypeKind.NUMBER, tp)
    if issubclass(tp, str):
        return TypeInfo(TypeKind.STRING, tp)
    if issubclass(tp, (bytes, bytearray)):
        return TypeInfo(TypeKind.BYTES, tp)
    for cls, fmt in FORMATTED_TYPES:
        if issubclass(tp, cls):
            return TypeInfo(TypeKind.FORMATTED, tp, format=fmt)
    if dataclasses.is_dataclass(tp):
        return TypeInfo(TypeKind.RECORD, tp, record=tp)
    if issubclass(tp, Mapping):
        return TypeInfo(TypeKind.MAPPING, tp, args=(Any, Any))
    if issubclass(tp, (Sequence, Set)):
        return TypeInfo(TypeKind.SEQUENCE, tp, args=(Any,))
    return TypeInfo(TypeKind.UNSUPPORTED, tp)


def _classify_generic(tp: Any, origin: Any, args: tuple[Any, ...]) -> TypeInfo:
    if not isinstance(origin, type):
        return TypeInfo(TypeKind.UNSUPPORTED, tp)
    if dataclasses.is_dataclass(origin):
        return TypeInfo(TypeKind.RECORD, tp, record=origin)
    if issubclass(origin, tuple):
        if len(args) == 2 and args[1] is Ellipsis:
            return TypeInfo(TypeKind.SEQUENCE, tp, args=(args[0],))
        return TypeInfo(TypeKind.FIXED_SEQUENCE, tp, args=args)
    if issubclass(origin, Mapping):
        key, value = args if len(args) == 2 else (Any, Any)
        return TypeInfo(TypeKind.MAPPING, tp, args=(key, value))
    if issubclass(origin, (str, bytes, bytearray)):
        return _classify_class(origin)
    if issubclass(origin, (Sequence, Set)) or origin in (Iterable, Collection):
        return TypeInfo(TypeKind.SEQUENCE, tp, args=(args[0] if args else Any,))
    return TypeInfo(TypeKind.UNSUPPORTED, tp)


def is_textual_key(annotation: Any) -> bool:
    """Whether a mapping key type renders as a JSON object key."""
    info = classify(annotation)
    if info.kind is TypeKind.STRING:
        return True
    if info.kind is TypeKind.ENUM:
        return bool(info.args) and all(isinstance(v, str) for v in info.args)
    return False


def type_display_name(annotation: Any) -> str:
    """
    Qualified display name of a type, including generic arguments.

    ``Wrapper[list[User]]`` renders as
    ``Wrapper[list[app.models.User]]``; the record itself keeps its bare
    name, arguments keep their module.
    """
    tp = strip_annotation(annotation)
    origin = get_origin(tp)
    if origin is not None and isinstance(origin, type) and dataclasses.is_dataclass(origin):
        inner = ", ".join(_argument_name(a) for a in get_args(tp))
        return f"{origin.__name__}[{inner}]"
    if isinstance(tp, type):
        return tp.__name__
    return _argument_name(tp)


def _argument_name(annotation: Any) -> str:
    tp = strip_annotation(annotation)
    if tp is Ellipsis:
        return "..."
    origin = get_origin(tp)
    if origin is not None:
        base = getattr(origin, "__name__", None) or getattr(origin, "_name", None) or "Union"
        inner = ", ".join(_argument_name(a) for a in get_args(tp))
        return f"{base}[{inner}]"
    if isinstance(tp, type):
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return getattr(tp, "__name__", None) or repr(tp)


def type_namespace(info: TypeInfo) -> str:
    """Module a record type was defined in."""
    if info.record is None:
        return ""
    return info.record.__module__ or ""
