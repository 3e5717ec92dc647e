"""
Schema compiler.

Turns annotations into schema trees. Dataclass records become component
schemas in the registry and are referenced by ``$ref``; everything else is
inlined. Compilation is recursive and terminates on cyclic record graphs
because a record is reserved and claimed before its fields are compiled.
"""

import dataclasses
import logging
import types
import typing
from typing import Any, Protocol, TypeVar, get_args, get_origin, runtime_checkable

from schemabind.fields import external_name, field_options, is_exported
from schemabind.models.schema import Schema, SchemaType
from schemabind.schema.annotations import apply_annotations
from schemabind.schema.registry import SchemaRegistry, sanitize_schema_name
from schemabind.schema.walker import (
    TypeInfo,
    TypeKind,
    classify,
    is_textual_key,
    strip_annotation,
    type_display_name,
    type_namespace,
    unwrap_optional,
)

logger = logging.getLogger("schemabind.schema")


@runtime_checkable
class Exampler(Protocol):
    """
    Capability of a record type to supply its own example.

    The value returned by ``openapi_example`` becomes the ``example`` of the
    record's component schema.
    """

    @classmethod
    def openapi_example(cls) -> Any: ...


def provides_example(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, Exampler)


def make_nullable(schema: Schema | None) -> Schema | None:
    """
    Widen a schema to also accept null.

    References become ``anyOf: [ref, {type: null}]``; inline nodes get
    "null" added to their type set. Unconstrained nodes already accept null.
    """
    if schema is None:
        return None
    if schema.is_reference():
        return Schema(any_of=[schema, Schema(type="null")])
    schema.type = schema.type.with_null()
    return schema


def apply_string_encoding(schema: Schema) -> None:
    """Force a string type for values encoded as strings."""
    if schema.is_reference() or schema.any_of or schema.type.is_empty():
        return
    if schema.type.includes("null"):
        schema.type = SchemaType.of("string", "null")
    else:
        schema.type = SchemaType.of("string")


def _enum_type(values: tuple[Any, ...]) -> SchemaType:
    if not values:
        return SchemaType()
    if all(isinstance(v, bool) for v in values):
        return SchemaType.of("boolean")
    if all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return SchemaType.of("integer")
    if all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in values):
        return SchemaType.of("number")
    if all(isinstance(v, str) for v in values):
        return SchemaType.of("string")
    return SchemaType()


def _substitute(tp: Any, mapping: dict[Any, Any]) -> Any:
    """Replace type variables inside an annotation."""
    if isinstance(tp, TypeVar):
        return mapping.get(tp, tp)
    origin = get_origin(tp)
    args = get_args(tp)
    if origin is None or not args or origin is typing.Literal:
        return tp
    if origin is typing.Annotated:
        return typing.Annotated[(_substitute(args[0], mapping), *args[1:])]
    new_args = tuple(
        a if a is Ellipsis else _substitute(a, mapping) for a in args
    )
    if new_args == args:
        return tp
    if origin is typing.Union or origin is types.UnionType:
        return typing.Union[new_args]
    if hasattr(tp, "copy_with"):
        return tp.copy_with(new_args)
    return origin[new_args]


def _is_type_handle(value: Any) -> bool:
    return (
        isinstance(value, (type, TypeVar))
        or get_origin(value) is not None
        or value is Any
    )


def _type_arguments(annotation: Any, record: type) -> dict[Any, Any]:
    params = getattr(record, "__parameters__", ())
    args = get_args(annotation)
    if not params or len(params) != len(args):
        return {}
    return dict(zip(params, args))


def _resolved_hints(record: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(record, include_extras=True)
    except (NameError, TypeError) as e:
        logger.warning(
            "Could not resolve annotations of %s: %s", record.__qualname__, e
        )
        return {}


class SchemaCompiler:
    """
    Compiles annotations and values into schemas.

    One compiler, with its registry, serves a single document build.

    Example:
        compiler = SchemaCompiler()
        ref = compiler.generate(User)          # {"$ref": ".../User"}
        compiler.schemas["User"]               # the User component
    """

    def __init__(self, registry: SchemaRegistry | None = None) -> None:
        self._registry = registry if registry is not None else SchemaRegistry()

    @property
    def registry(self) -> SchemaRegistry:
        return self._registry

    @property
    def schemas(self) -> dict[str, Schema]:
        return self._registry.schemas

    def generate(self, value: Any) -> Schema | None:
        """
        Compile the schema for a value or a type.

        Args:
            value: A type handle, or an instance whose type is compiled.

        Returns:
            The schema, or None for None and for types with no schema.
        """
        if value is None:
            return None
        if _is_type_handle(value):
            return self.compile(value)
        return self.compile(type(value))

    def compile(self, annotation: Any) -> Schema | None:
        """Compile the schema for a type handle."""
        info = classify(annotation)
        if info.kind is TypeKind.NULLABLE:
            return make_nullable(self.compile(info.args[0]))
        if info.kind is TypeKind.RECORD:
            return self._compile_record(info)
        return self._compile_inline(info)

    def _compile_record(self, info: TypeInfo) -> Schema:
        identity = info.annotation
        bare_name = sanitize_schema_name(type_display_name(identity))
        name = self._registry.reserve(identity, bare_name, type_namespace(info))
        if not name:
            return self._record_schema(info)
        if self._registry.claim(identity):
            schema = self._record_schema(info)
            if provides_example(info.record):
                schema.example = info.record.openapi_example()
            self._registry.populate(name, schema)
        return Schema.reference(name)

    def _compile_inline(self, info: TypeInfo) -> Schema | None:
        kind = info.kind
        if kind is TypeKind.BOOLEAN:
            return Schema(type="boolean")
        if kind is TypeKind.INTEGER:
            return Schema(type="integer")
        if kind is TypeKind.NUMBER:
            return Schema(type="number")
        if kind is TypeKind.STRING:
            return Schema(type="string")
        if kind is TypeKind.BYTES:
            return Schema(type="string", format="byte")
        if kind is TypeKind.FORMATTED:
            return Schema(type="string", format=info.format)
        if kind is TypeKind.SEQUENCE:
            return Schema(type="array", items=self.compile(info.args[0]))
        if kind is TypeKind.FIXED_SEQUENCE:
            return self._fixed_sequence(info)
        if kind is TypeKind.MAPPING:
            key, value = info.args
            if is_textual_key(key):
                return Schema(type="object", additional_properties=self.compile(value))
            return Schema(type="object")
        if kind is TypeKind.ENUM:
            return Schema(type=_enum_type(info.args), enum=list(info.args))
        if kind is TypeKind.UNION:
            members = [self.compile(m) for m in info.args]
            any_of = [m for m in members if m is not None]
            if info.nullable:
                any_of.append(Schema(type="null"))
            return Schema(any_of=any_of)
        if kind is TypeKind.ANY:
            return Schema()
        if kind is TypeKind.RECORD:
            return self._record_schema(info)
        logger.debug("No schema for unsupported type %r", info.annotation)
        return None

    def _fixed_sequence(self, info: TypeInfo) -> Schema:
        elements = [strip_annotation(a) for a in info.args]
        if elements and all(e == elements[0] for e in elements):
            return Schema(type="array", items=self.compile(elements[0]))
        prefix = [self.compile(e) or Schema() for e in elements]
        return Schema(type="array", prefix_items=prefix)

    def _record_schema(self, info: TypeInfo) -> Schema:
        schema = Schema(type="object")
        self._collect_fields(info, schema, all_optional=False, inlining=(info.annotation,))
        return schema

    def _collect_fields(
        self,
        info: TypeInfo,
        schema: Schema,
        all_optional: bool,
        inlining: tuple[Any, ...],
    ) -> None:
        record = info.record
        hints = _resolved_hints(record)
        type_args = _type_arguments(info.annotation, record)

        for f in dataclasses.fields(record):
            if not is_exported(f.name):
                continue
            opts = field_options(f)
            if opts.skip:
                continue
            annotation = _substitute(hints.get(f.name, f.type), type_args)

            if opts.inline and not opts.name:
                embedded, optional = unwrap_optional(annotation)
                embedded_info = classify(embedded)
                if embedded_info.kind is TypeKind.RECORD:
                    if embedded_info.annotation not in inlining:
                        self._collect_fields(
                            embedded_info,
                            schema,
                            all_optional or optional,
                            inlining + (embedded_info.annotation,),
                        )
                        continue
                    # Embedding cycle: keep it as a named field.
                    logger.debug("Not inlining %s twice", embedded_info.record.__qualname__)

            name = external_name(f)
            field_schema = self.compile(annotation)
            if field_schema is None:
                logger.debug(
                    "Skipping field %s.%s: no schema for %r",
                    record.__qualname__,
                    f.name,
                    annotation,
                )
                continue
            apply_annotations(field_schema, opts.openapi)
            if opts.as_string:
                apply_string_encoding(field_schema)

            schema.properties[name] = field_schema
            if not opts.omitempty and not all_optional:
                schema.required.append(name)
