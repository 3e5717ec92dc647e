"""
JSON Schema (draft 2020-12) node used inside OpenAPI 3.1 documents.
"""

from dataclasses import dataclass, field
from typing import Any

from schemabind.models.base import OMIT_NONE, SpecObject, spec_field

REF_PREFIX = "#/components/schemas/"


@dataclass(frozen=True)
class SchemaType:
    """
    The set of primitive type names of a schema node.

    Serializes as a bare string when it holds one name and as a list when
    it holds several. An empty set is omitted from the output.
    """

    names: tuple[str, ...] = ()

    @classmethod
    def of(cls, *names: str) -> "SchemaType":
        """Build a type set from names, in order."""
        return cls(tuple(names))

    @classmethod
    def from_value(cls, value: Any) -> "SchemaType":
        """Accept a single name, a sequence of names or an existing set."""
        if isinstance(value, SchemaType):
            return value
        if value is None or value == "":
            return cls()
        if isinstance(value, str):
            return cls((value,))
        return cls(tuple(value))

    def is_empty(self) -> bool:
        return not self.names

    def first(self) -> str:
        """First type name, or "" when the set is empty."""
        return self.names[0] if self.names else ""

    def includes(self, name: str) -> bool:
        return name in self.names

    def with_null(self) -> "SchemaType":
        """Widen the set with "null". An empty set stays unconstrained."""
        if not self.names or "null" in self.names:
            return self
        return SchemaType(self.names + ("null",))

    def to_value(self) -> str | list[str]:
        if len(self.names) == 1:
            return self.names[0]
        return list(self.names)


@dataclass
class Discriminator(SpecObject):
    """Hint for polymorphic payloads."""

    property_name: str = spec_field(key="propertyName", omit="never", default="")
    mapping: dict[str, str] = field(default_factory=dict)


@dataclass
class XML(SpecObject):
    """XML representation metadata."""

    name: str = ""
    namespace: str = ""
    prefix: str = ""
    attribute: bool = False
    wrapped: bool = False


@dataclass
class ExternalDocs(SpecObject):
    """Reference to external documentation."""

    url: str = spec_field(omit="never", default="")
    description: str = ""


@dataclass
class Schema(SpecObject):
    """
    A schema node.

    A node with a non-empty ``ref`` is a leaf: the compiler never sets other
    structural fields on it.
    """

    ref: str = spec_field(key="$ref", default="")
    schema: str = spec_field(key="$schema", default="")
    id: str = spec_field(key="$id", default="")
    anchor: str = spec_field(key="$anchor", default="")
    defs: dict[str, "Schema"] = spec_field(key="$defs", default_factory=dict)
    comment: str = spec_field(key="$comment", default="")

    type: SchemaType = field(default_factory=SchemaType)
    format: str = ""
    title: str = ""
    description: str = ""
    default: Any = spec_field(omit=OMIT_NONE, default=None)
    example: Any = spec_field(omit=OMIT_NONE, default=None)
    examples: list[Any] = field(default_factory=list)
    deprecated: bool = False
    read_only: bool = spec_field(key="readOnly", default=False)
    write_only: bool = spec_field(key="writeOnly", default=False)

    enum: list[Any] = field(default_factory=list)
    const: Any = spec_field(omit=OMIT_NONE, default=None)

    multiple_of: float | None = spec_field(key="multipleOf", default=None)
    minimum: float | None = None
    maximum: float | None = None
    exclusive_minimum: float | None = spec_field(key="exclusiveMinimum", default=None)
    exclusive_maximum: float | None = spec_field(key="exclusiveMaximum", default=None)

    min_length: int | None = spec_field(key="minLength", default=None)
    max_length: int | None = spec_field(key="maxLength", default=None)
    pattern: str = ""
    content_encoding: str = spec_field(key="contentEncoding", default="")
    content_media_type: str = spec_field(key="contentMediaType", default="")

    items: "Schema | None" = None
    prefix_items: list["Schema"] = spec_field(key="prefixItems", default_factory=list)
    contains: "Schema | None" = None
    min_items: int | None = spec_field(key="minItems", default=None)
    max_items: int | None = spec_field(key="maxItems", default=None)
    unique_items: bool = spec_field(key="uniqueItems", default=False)

    properties: dict[str, "Schema"] = field(default_factory=dict)
    pattern_properties: dict[str, "Schema"] = spec_field(
        key="patternProperties", default_factory=dict
    )
    additional_properties: "Schema | None" = spec_field(
        key="additionalProperties", default=None
    )
    property_names: "Schema | None" = spec_field(key="propertyNames", default=None)
    required: list[str] = field(default_factory=list)
    min_properties: int | None = spec_field(key="minProperties", default=None)
    max_properties: int | None = spec_field(key="maxProperties", default=None)
    dependent_required: dict[str, list[str]] = spec_field(
        key="dependentRequired", default_factory=dict
    )

    all_of: list["Schema"] = spec_field(key="allOf", default_factory=list)
    any_of: list["Schema"] = spec_field(key="anyOf", default_factory=list)
    one_of: list["Schema"] = spec_field(key="oneOf", default_factory=list)
    not_: "Schema | None" = spec_field(key="not", default=None)
    if_: "Schema | None" = spec_field(key="if", default=None)
    then: "Schema | None" = None
    else_: "Schema | None" = spec_field(key="else", default=None)

    discriminator: Discriminator | None = None
    xml: XML | None = None
    external_docs: ExternalDocs | None = spec_field(key="externalDocs", default=None)

    def __post_init__(self) -> None:
        self.type = SchemaType.from_value(self.type)

    @classmethod
    def reference(cls, name: str) -> "Schema":
        """Reference to a component schema by canonical name."""
        return cls(ref=REF_PREFIX + name)

    def is_reference(self) -> bool:
        return bool(self.ref)
