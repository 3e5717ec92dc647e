"""
OpenAPI 3.1 object model for SchemaBind.

Objects are dataclasses that render themselves with ``to_dict``.
"""

from schemabind.models.base import SpecObject, serialize_value, spec_field
from schemabind.models.document import (
    HTTP_METHODS,
    OPENAPI_VERSION,
    Callback,
    Components,
    Contact,
    Document,
    Encoding,
    Example,
    Header,
    Info,
    License,
    Link,
    MediaType,
    OAuthFlow,
    OAuthFlows,
    Operation,
    Parameter,
    PathItem,
    RequestBody,
    Response,
    SecurityRequirement,
    SecurityScheme,
    Server,
    ServerVariable,
    Tag,
)
from schemabind.models.schema import (
    REF_PREFIX,
    XML,
    Discriminator,
    ExternalDocs,
    Schema,
    SchemaType,
)

__all__ = [
    # Base
    "SpecObject",
    "serialize_value",
    "spec_field",
    # Schema
    "REF_PREFIX",
    "Schema",
    "SchemaType",
    "Discriminator",
    "XML",
    "ExternalDocs",
    # Document
    "HTTP_METHODS",
    "OPENAPI_VERSION",
    "Callback",
    "Components",
    "Contact",
    "Document",
    "Encoding",
    "Example",
    "Header",
    "Info",
    "License",
    "Link",
    "MediaType",
    "OAuthFlow",
    "OAuthFlows",
    "Operation",
    "Parameter",
    "PathItem",
    "RequestBody",
    "Response",
    "SecurityRequirement",
    "SecurityScheme",
    "Server",
    "ServerVariable",
    "Tag",
]
