"""
Operation metadata and document assembly for SchemaBind.
"""

from schemabind.spec.builder import APISpec, assign_operation
from schemabind.spec.group import RouteGroup
from schemabind.spec.operation import (
    DEFAULT_STATUS,
    JSON_CONTENT_TYPE,
    OperationBuilder,
    merge_parameters,
    resolve_schema,
    response_description,
)
from schemabind.spec.paths import MACRO_TYPES, parse_path

__all__ = [
    "APISpec",
    "assign_operation",
    "RouteGroup",
    "DEFAULT_STATUS",
    "JSON_CONTENT_TYPE",
    "OperationBuilder",
    "merge_parameters",
    "resolve_schema",
    "response_description",
    "MACRO_TYPES",
    "parse_path",
]
