"""
SchemaBind: OpenAPI 3.1 documents from routes and Python types.

SchemaBind builds an OpenAPI 3.1.0 document from three inputs: the routes
an application already has, per-route operation metadata declared with a
fluent builder, and the Python types used as request and response bodies.
Record types are compiled to JSON Schema 2020-12 and deduplicated into
``components.schemas``.

Example:
    Documenting an aiohttp application::

        from aiohttp import web
        from schemabind import APISpec, Info, expand_macros, mount_docs

        app = web.Application()
        spec = APISpec(Info(title="Users API", version="1.0.0"))

        route = app.router.add_get(expand_macros("/users/{id:int}"), get_user)
        spec.route(route).summary("Get a user").response(200, User)

        mount_docs(app, spec)  # /docs, /docs/schema.json, /docs/schema.yaml

Public API:
    Version:
        __version__: The package version string

    Exceptions:
        SchemaBindError: Base exception for all SchemaBind errors
        ConfigurationError: Configuration-related errors
        SerializationError: Values that cannot be encoded
        LoadError: CLI targets that cannot be imported or resolved

    Building:
        APISpec: Document-level registrations and ``build``
        RouteGroup: Shared operation defaults
        OperationBuilder: Fluent per-operation metadata
        RouteTable: Framework-neutral route source
        schema_field: Field options for record types

    Serving (via schemabind.server):
        mount_docs: Register document and UI endpoints on an aiohttp app
"""

from schemabind.exceptions import (
    ConfigurationError,
    LoadError,
    SchemaBindError,
    SerializationError,
)
from schemabind.fields import FieldOptions, schema_field
from schemabind.models import (
    Components,
    Contact,
    Document,
    Example,
    ExternalDocs,
    Header,
    Info,
    License,
    Link,
    MediaType,
    Operation,
    Parameter,
    PathItem,
    RequestBody,
    Response,
    Schema,
    SchemaType,
    SecurityScheme,
    Server,
    ServerVariable,
    Tag,
)
from schemabind.routing import RouteInfo, RouteSource, RouteTable, expand_macros
from schemabind.schema import Exampler, SchemaCompiler
from schemabind.server import mount_docs
from schemabind.spec import APISpec, OperationBuilder, RouteGroup
from schemabind.version import __version__

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "SchemaBindError",
    "ConfigurationError",
    "SerializationError",
    "LoadError",
    # Building
    "APISpec",
    "RouteGroup",
    "OperationBuilder",
    "SchemaCompiler",
    "Exampler",
    "FieldOptions",
    "schema_field",
    # Routing
    "RouteInfo",
    "RouteSource",
    "RouteTable",
    "expand_macros",
    # Models
    "Components",
    "Contact",
    "Document",
    "Example",
    "ExternalDocs",
    "Header",
    "Info",
    "License",
    "Link",
    "MediaType",
    "Operation",
    "Parameter",
    "PathItem",
    "RequestBody",
    "Response",
    "Schema",
    "SchemaType",
    "SecurityScheme",
    "Server",
    "ServerVariable",
    "Tag",
    # Serving
    "mount_docs",
]
