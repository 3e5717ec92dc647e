"""
Tests for value encoding and document serialization.
"""

import json
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID

import pytest
import yaml

from schemabind import SerializationError, schema_field
from schemabind.models import (
    Components,
    Document,
    Info,
    MediaType,
    Operation,
    Parameter,
    PathItem,
    Response,
    Schema,
    SchemaType,
)
from schemabind.serialization import to_json, to_jsonable, to_yaml
from tests.fixtures.models import Audit, Status


@dataclass
class Invoice:
    number: int = schema_field(name="invoiceNumber")
    total: float = schema_field(as_string=True)
    note: str = schema_field(default="", omitempty=True)
    internal: str = schema_field(default="x", skip=True)
    audit: Audit | None = schema_field(default=None, inline=True)
    _draft: bool = field(default=False)


class TestToJsonable:
    """Tests for example, const and default values."""

    def test_scalars_pass_through(self) -> None:
        assert to_jsonable(None) is None
        assert to_jsonable(3) == 3
        assert to_jsonable("x") == "x"

    def test_formatted_values(self) -> None:
        assert to_jsonable(datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)) == (
            "2024-01-02T03:04:05+00:00"
        )
        assert to_jsonable(date(2024, 1, 2)) == "2024-01-02"
        uuid = UUID("12345678-1234-5678-1234-567812345678")
        assert to_jsonable(uuid) == "12345678-1234-5678-1234-567812345678"

    def test_enum_and_bytes(self) -> None:
        assert to_jsonable(Status.ACTIVE) == "active"
        assert to_jsonable(b"hi") == "aGk="

    def test_collections(self) -> None:
        assert to_jsonable((1, 2)) == [1, 2]
        assert to_jsonable({"a": {1: Status.DISABLED}}) == {"a": {"1": "disabled"}}

    def test_record_field_options(self) -> None:
        invoice = Invoice(number=7, total=9.5)
        assert to_jsonable(invoice) == {"invoiceNumber": 7, "total": "9.5"}

    def test_inline_record(self) -> None:
        invoice = Invoice(number=1, total=1.0, note="n", audit=Audit("a", "b"))
        assert to_jsonable(invoice) == {
            "invoiceNumber": 1,
            "total": "1.0",
            "note": "n",
            "created_by": "a",
            "updated_by": "b",
        }

    def test_unencodable_value(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            to_jsonable(object())
        assert exc_info.value.details["type"] == "object"

    def test_unencodable_key(self) -> None:
        with pytest.raises(SerializationError):
            to_jsonable({(1, 2): "x"})


class TestSchemaSerialization:
    """Tests for schema node output."""

    def test_type_single_and_multiple(self) -> None:
        assert SchemaType.of("string").to_value() == "string"
        assert SchemaType.of("string", "null").to_value() == ["string", "null"]

    def test_type_from_value(self) -> None:
        assert Schema(type="integer").type == SchemaType.of("integer")
        assert Schema(type=["integer", "null"]).type.includes("null")
        assert Schema().type.is_empty()

    def test_unset_fields_omitted(self) -> None:
        assert Schema().to_dict() == {}
        assert "required" not in Schema(type="object").to_dict()

    def test_zero_is_kept(self) -> None:
        assert Schema(type="integer", minimum=0).to_dict() == {"type": "integer", "minimum": 0}

    def test_falsy_example_is_kept(self) -> None:
        assert Schema(type="boolean", example=False).to_dict() == {
            "type": "boolean",
            "example": False,
        }

    def test_reference(self) -> None:
        assert Schema.reference("User").to_dict() == {"$ref": "#/components/schemas/User"}


class TestObjectSerialization:
    """Tests for document objects."""

    def test_response_description_never_omitted(self) -> None:
        assert Response().to_dict() == {"description": ""}

    def test_media_type_without_schema(self) -> None:
        response = Response(description="OK", content={"text/plain": MediaType()})
        assert response.to_dict() == {"description": "OK", "content": {"text/plain": {}}}

    def test_parameter_keys(self) -> None:
        param = Parameter(name="id", in_="path", required=True, schema=Schema(type="string"))
        assert param.to_dict() == {
            "name": "id",
            "in": "path",
            "required": True,
            "schema": {"type": "string"},
        }

    def test_explicit_empty_security(self) -> None:
        assert Operation(security=[]).to_dict() == {"security": []}
        assert Operation().to_dict() == {}

    def test_empty_components(self) -> None:
        assert Components().is_empty()
        assert not Components(schemas={"A": Schema()}).is_empty()


class TestDocumentSerialization:
    """Tests for to_json and to_yaml."""

    @pytest.fixture
    def document(self) -> Document:
        return Document(
            info=Info(title="Zoo", version="1"),
            paths={"/b": PathItem(get=Operation(summary="b")), "/a": PathItem()},
        )

    def test_json(self, document: Document) -> None:
        data = json.loads(to_json(document))
        assert data["openapi"] == "3.1.0"
        assert data["info"] == {"title": "Zoo", "version": "1"}
        assert list(data["paths"]) == ["/b", "/a"]
        assert "components" not in data

    def test_json_compact(self, document: Document) -> None:
        assert "\n" not in document.to_json(indent=None)

    def test_yaml_keeps_order(self, document: Document) -> None:
        text = to_yaml(document)
        assert text.index("openapi") < text.index("info") < text.index("paths")
        assert list(yaml.safe_load(text)["paths"]) == ["/b", "/a"]

    def test_non_finite_number(self) -> None:
        document = Document(
            info=Info(title="t", version="1"),
            components=Components(schemas={"A": Schema(type="number", example=float("nan"))}),
        )
        with pytest.raises(SerializationError):
            to_json(document)

    def test_unencodable_example(self) -> None:
        document = Document(
            components=Components(schemas={"A": Schema(example=object())}),
        )
        with pytest.raises(SerializationError):
            document.to_yaml()
