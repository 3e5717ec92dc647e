"""
Type-to-schema compilation for SchemaBind.

This package turns Python annotations into JSON Schema nodes:

- walker: classifies annotations into schema kinds
- registry: canonical component names and collision resolution
- annotations: the per-field constraint mini-language
- compiler: recursive, cycle-safe compilation with ``$ref`` deduplication
"""

from schemabind.schema.annotations import apply_annotations, coerce_value
from schemabind.schema.compiler import (
    Exampler,
    SchemaCompiler,
    apply_string_encoding,
    make_nullable,
)
from schemabind.schema.registry import (
    SchemaRegistry,
    module_prefix,
    sanitize_schema_name,
)
from schemabind.schema.walker import TypeInfo, TypeKind, classify

__all__ = [
    "apply_annotations",
    "coerce_value",
    "Exampler",
    "SchemaCompiler",
    "apply_string_encoding",
    "make_nullable",
    "SchemaRegistry",
    "module_prefix",
    "sanitize_schema_name",
    "TypeInfo",
    "TypeKind",
    "classify",
]
