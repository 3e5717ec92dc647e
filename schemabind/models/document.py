"""
OpenAPI 3.1.0 object model.

Each class mirrors one OpenAPI object. Field order is output order. See
:mod:`schemabind.models.base` for the omission rules.
"""

from dataclasses import dataclass, field
from typing import Any

from schemabind.models.base import OMIT_NEVER, OMIT_NONE, SpecObject, spec_field
from schemabind.models.schema import ExternalDocs, Schema
from schemabind.serialization import to_json, to_yaml

OPENAPI_VERSION = "3.1.0"

# Path item method slots in output order.
HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

SecurityRequirement = dict[str, list[str]]


@dataclass
class Contact(SpecObject):
    name: str = ""
    url: str = ""
    email: str = ""


@dataclass
class License(SpecObject):
    name: str = spec_field(omit=OMIT_NEVER, default="")
    identifier: str = ""
    url: str = ""


@dataclass
class Info(SpecObject):
    """API metadata. ``title`` and ``version`` are always emitted."""

    title: str = spec_field(omit=OMIT_NEVER, default="")
    summary: str = ""
    description: str = ""
    terms_of_service: str = spec_field(key="termsOfService", default="")
    contact: Contact | None = None
    license: License | None = None
    version: str = spec_field(omit=OMIT_NEVER, default="")


@dataclass
class ServerVariable(SpecObject):
    enum: list[str] = field(default_factory=list)
    default: str = spec_field(omit=OMIT_NEVER, default="")
    description: str = ""


@dataclass
class Server(SpecObject):
    url: str = spec_field(omit=OMIT_NEVER, default="")
    description: str = ""
    variables: dict[str, ServerVariable] = field(default_factory=dict)


@dataclass
class Example(SpecObject):
    summary: str = ""
    description: str = ""
    value: Any = spec_field(omit=OMIT_NONE, default=None)
    external_value: str = spec_field(key="externalValue", default="")


@dataclass
class Header(SpecObject):
    description: str = ""
    required: bool = False
    deprecated: bool = False
    schema: Schema | None = None
    example: Any = spec_field(omit=OMIT_NONE, default=None)
    examples: dict[str, Example] = field(default_factory=dict)


@dataclass
class Encoding(SpecObject):
    content_type: str = spec_field(key="contentType", default="")
    headers: dict[str, Header] = field(default_factory=dict)
    style: str = ""
    explode: bool = False
    allow_reserved: bool = spec_field(key="allowReserved", default=False)


@dataclass
class MediaType(SpecObject):
    """
    Content for one media type.

    A media type registered without a body has no schema and renders as an
    empty object, which is different from the media type being absent.
    """

    schema: Schema | None = None
    example: Any = spec_field(omit=OMIT_NONE, default=None)
    examples: dict[str, Example] = field(default_factory=dict)
    encoding: dict[str, Encoding] = field(default_factory=dict)


@dataclass
class Parameter(SpecObject):
    """A path, query, header or cookie parameter. Identity is name + in."""

    name: str = spec_field(omit=OMIT_NEVER, default="")
    in_: str = spec_field(key="in", omit=OMIT_NEVER, default="")
    description: str = ""
    required: bool = False
    deprecated: bool = False
    allow_empty_value: bool = spec_field(key="allowEmptyValue", default=False)
    style: str = ""
    explode: bool = False
    allow_reserved: bool = spec_field(key="allowReserved", default=False)
    schema: Schema | None = None
    example: Any = spec_field(omit=OMIT_NONE, default=None)
    examples: dict[str, Example] = field(default_factory=dict)
    content: dict[str, MediaType] = field(default_factory=dict)


@dataclass
class RequestBody(SpecObject):
    description: str = ""
    content: dict[str, MediaType] = spec_field(omit=OMIT_NEVER, default_factory=dict)
    required: bool = False


@dataclass
class Link(SpecObject):
    operation_ref: str = spec_field(key="operationRef", default="")
    operation_id: str = spec_field(key="operationId", default="")
    parameters: dict[str, Any] = field(default_factory=dict)
    request_body: Any = spec_field(key="requestBody", omit=OMIT_NONE, default=None)
    description: str = ""
    server: Server | None = None


@dataclass
class Response(SpecObject):
    """A response. ``description`` is always emitted; ``content`` only when set."""

    description: str = spec_field(omit=OMIT_NEVER, default="")
    headers: dict[str, Header] = field(default_factory=dict)
    content: dict[str, MediaType] = field(default_factory=dict)
    links: dict[str, Link] = field(default_factory=dict)


@dataclass(frozen=True)
class Operation(SpecObject):
    """
    An immutable operation, produced once per builder at build time.

    ``security`` is None to inherit the document default; an empty list
    marks the operation as public and is emitted as ``[]``.
    """

    tags: list[str] = field(default_factory=list)
    summary: str = ""
    description: str = ""
    external_docs: ExternalDocs | None = spec_field(key="externalDocs", default=None)
    operation_id: str = spec_field(key="operationId", default="")
    parameters: list[Parameter] = field(default_factory=list)
    request_body: RequestBody | None = spec_field(key="requestBody", default=None)
    responses: dict[str, Response] = field(default_factory=dict)
    callbacks: dict[str, dict[str, "PathItem"]] = field(default_factory=dict)
    deprecated: bool = False
    security: list[SecurityRequirement] | None = spec_field(
        omit=OMIT_NONE, default=None
    )
    servers: list[Server] = field(default_factory=list)


@dataclass
class PathItem(SpecObject):
    ref: str = spec_field(key="$ref", default="")
    summary: str = ""
    description: str = ""
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    servers: list[Server] = field(default_factory=list)
    parameters: list[Parameter] = field(default_factory=list)

    def operations(self) -> list[Operation]:
        """Assigned operations in method-slot order."""
        return [
            getattr(self, method)
            for method in HTTP_METHODS
            if getattr(self, method) is not None
        ]


Callback = dict[str, PathItem]


@dataclass
class Tag(SpecObject):
    name: str = spec_field(omit=OMIT_NEVER, default="")
    description: str = ""
    external_docs: ExternalDocs | None = spec_field(key="externalDocs", default=None)


@dataclass
class OAuthFlow(SpecObject):
    authorization_url: str = spec_field(key="authorizationUrl", default="")
    token_url: str = spec_field(key="tokenUrl", default="")
    refresh_url: str = spec_field(key="refreshUrl", default="")
    scopes: dict[str, str] = spec_field(omit=OMIT_NEVER, default_factory=dict)


@dataclass
class OAuthFlows(SpecObject):
    implicit: OAuthFlow | None = None
    password: OAuthFlow | None = None
    client_credentials: OAuthFlow | None = spec_field(
        key="clientCredentials", default=None
    )
    authorization_code: OAuthFlow | None = spec_field(
        key="authorizationCode", default=None
    )


@dataclass
class SecurityScheme(SpecObject):
    type: str = spec_field(omit=OMIT_NEVER, default="")
    description: str = ""
    name: str = ""
    in_: str = spec_field(key="in", default="")
    scheme: str = ""
    bearer_format: str = spec_field(key="bearerFormat", default="")
    flows: OAuthFlows | None = None
    open_id_connect_url: str = spec_field(key="openIdConnectUrl", default="")


@dataclass
class Components(SpecObject):
    schemas: dict[str, Schema] = field(default_factory=dict)
    responses: dict[str, Response] = field(default_factory=dict)
    parameters: dict[str, Parameter] = field(default_factory=dict)
    examples: dict[str, Example] = field(default_factory=dict)
    request_bodies: dict[str, RequestBody] = spec_field(
        key="requestBodies", default_factory=dict
    )
    headers: dict[str, Header] = field(default_factory=dict)
    security_schemes: dict[str, SecurityScheme] = spec_field(
        key="securitySchemes", default_factory=dict
    )
    links: dict[str, Link] = field(default_factory=dict)
    callbacks: dict[str, Callback] = field(default_factory=dict)
    path_items: dict[str, PathItem] = spec_field(key="pathItems", default_factory=dict)

    def is_empty(self) -> bool:
        return not any(
            (
                self.schemas,
                self.responses,
                self.parameters,
                self.examples,
                self.request_bodies,
                self.headers,
                self.security_schemes,
                self.links,
                self.callbacks,
                self.path_items,
            )
        )


@dataclass
class Document(SpecObject):
    """Root of an OpenAPI document."""

    openapi: str = spec_field(omit=OMIT_NEVER, default=OPENAPI_VERSION)
    info: Info = spec_field(omit=OMIT_NEVER, default_factory=Info)
    json_schema_dialect: str = spec_field(key="jsonSchemaDialect", default="")
    servers: list[Server] = field(default_factory=list)
    paths: dict[str, PathItem] = field(default_factory=dict)
    webhooks: dict[str, PathItem] = field(default_factory=dict)
    components: Components | None = None
    security: list[SecurityRequirement] | None = spec_field(
        omit=OMIT_NONE, default=None
    )
    tags: list[Tag] = field(default_factory=list)
    external_docs: ExternalDocs | None = spec_field(key="externalDocs", default=None)

    def to_json(self, indent: int | None = 2) -> str:
        return to_json(self, indent)

    def to_yaml(self) -> str:
        return to_yaml(self)
