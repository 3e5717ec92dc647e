"""
Tests for type-to-schema compilation.
"""

import logging
from typing import Optional

import pytest

from schemabind.models.schema import REF_PREFIX, Schema
from schemabind.schema.compiler import (
    Exampler,
    SchemaCompiler,
    apply_string_encoding,
    make_nullable,
)
from schemabind.schema.registry import SchemaRegistry
from tests.fixtures import models
from tests.fixtures.models import (
    Account,
    Chain,
    Gadget,
    Money,
    Node,
    Resource,
    Stamped,
    User,
    Wrapper,
)
from tests.fixtures.v2 import models as v2_models


class TestScalars:
    """Tests for inline schemas."""

    def test_primitives(self, compiler: SchemaCompiler) -> None:
        assert compiler.compile(int).to_dict() == {"type": "integer"}
        assert compiler.compile(str).to_dict() == {"type": "string"}
        assert compiler.compile(bool).to_dict() == {"type": "boolean"}
        assert compiler.compile(float).to_dict() == {"type": "number"}

    def test_nullable_primitive(self, compiler: SchemaCompiler) -> None:
        assert compiler.compile(Optional[int]).to_dict() == {"type": ["integer", "null"]}

    def test_list(self, compiler: SchemaCompiler) -> None:
        assert compiler.compile(list[str]).to_dict() == {
            "type": "array",
            "items": {"type": "string"},
        }

    def test_no_schema_for_none(self, compiler: SchemaCompiler) -> None:
        assert compiler.generate(None) is None

    def test_unsupported(self, compiler: SchemaCompiler) -> None:
        assert compiler.compile(complex) is None


class TestRecords:
    """Tests for record compilation and deduplication."""

    def test_record_becomes_reference(self, compiler: SchemaCompiler) -> None:
        ref = compiler.compile(User)
        assert ref.to_dict() == {"$ref": REF_PREFIX + "User"}
        assert list(compiler.schemas) == ["User"]

    def test_record_schema(self, compiler: SchemaCompiler) -> None:
        compiler.compile(User)
        user = compiler.schemas["User"].to_dict()
        assert user["type"] == "object"
        assert user["properties"]["id"] == {
            "type": "integer",
            "description": "User ID",
            "example": 42,
            "minimum": 1,
        }
        assert user["properties"]["name"] == {"type": "string", "example": "Ada", "minLength": 1}
        assert user["properties"]["email"] == {"type": ["string", "null"], "format": "email"}
        assert user["properties"]["status"] == {
            "type": "string",
            "enum": ["active", "disabled"],
        }
        assert user["required"] == ["id", "name", "status"]

    def test_compiling_twice_reuses_component(self, compiler: SchemaCompiler) -> None:
        first = compiler.compile(User)
        second = compiler.generate(User(id=1, name="Ada"))
        assert first.ref == second.ref
        assert len(compiler.schemas) == 1

    def test_nullable_record(self, compiler: SchemaCompiler) -> None:
        compiler.compile(Account)
        owner = compiler.schemas["Account"].to_dict()["properties"]["owner"]
        assert owner == {"anyOf": [{"$ref": REF_PREFIX + "User"}, {"type": "null"}]}

    def test_self_reference_terminates(self, compiler: SchemaCompiler) -> None:
        ref = compiler.compile(Node)
        assert ref.ref == REF_PREFIX + "Node"
        assert list(compiler.schemas) == ["Node"]
        node = compiler.schemas["Node"].to_dict()
        assert node["properties"]["children"] == {
            "type": "array",
            "items": {"$ref": REF_PREFIX + "Node"},
        }
        assert node["properties"]["parent"]["anyOf"][0] == {"$ref": REF_PREFIX + "Node"}
        assert node["required"] == ["value", "children", "parent"]

    def test_skip_and_private_fields(self, compiler: SchemaCompiler) -> None:
        compiler.compile(Account)
        account = compiler.schemas["Account"]
        assert "secret" not in account.properties
        assert "_cache" not in account.properties

    def test_string_encoding_keeps_annotations(self, compiler: SchemaCompiler) -> None:
        compiler.compile(Account)
        limit = compiler.schemas["Account"].properties["limit"]
        assert limit.to_dict() == {"type": "string", "example": 100}

    def test_zero_bound_is_kept(self, compiler: SchemaCompiler) -> None:
        compiler.compile(Account)
        balance = compiler.schemas["Account"].properties["balance"].to_dict()
        assert balance == {"type": "number", "example": 12.5, "minimum": 0}

    def test_exampler(self, compiler: SchemaCompiler) -> None:
        assert issubclass(Money, Exampler)
        assert not issubclass(User, Exampler)
        compiler.compile(Money)
        assert compiler.schemas["Money"].example == {"amount": 100, "currency": "EUR"}


class TestEmbedding:
    """Tests for inlined (embedded) records."""

    def test_optional_embedding_makes_fields_optional(self, compiler: SchemaCompiler) -> None:
        compiler.compile(Resource)
        resource = compiler.schemas["Resource"]
        assert list(resource.properties) == ["created_by", "updated_by", "title"]
        assert resource.required == ["title"]
        assert "Audit" not in compiler.schemas

    def test_plain_embedding_keeps_requiredness(self, compiler: SchemaCompiler) -> None:
        compiler.compile(Stamped)
        assert compiler.schemas["Stamped"].required == ["created_by", "updated_by", "note"]

    def test_self_embedding_becomes_reference(self, compiler: SchemaCompiler) -> None:
        assert compiler.compile(Chain).ref == REF_PREFIX + "Chain"
        chain = compiler.schemas["Chain"].to_dict()
        assert list(chain["properties"]) == ["label", "previous"]
        assert chain["properties"]["previous"] == {
            "anyOf": [{"$ref": REF_PREFIX + "Chain"}, {"type": "null"}]
        }


class TestGenerics:
    """Tests for parameterised records."""

    def test_sanitized_names(self, compiler: SchemaCompiler) -> None:
        listed = compiler.compile(Wrapper[list[User]])
        direct = compiler.compile(Wrapper[User])
        assert listed.ref == REF_PREFIX + "WrapperUserList"
        assert direct.ref == REF_PREFIX + "WrapperUser"

    def test_type_arguments_are_substituted(self, compiler: SchemaCompiler) -> None:
        compiler.compile(Wrapper[list[User]])
        wrapper = compiler.schemas["WrapperUserList"].to_dict()
        assert wrapper["properties"]["data"] == {
            "type": "array",
            "items": {"$ref": REF_PREFIX + "User"},
        }
        assert wrapper["properties"]["count"] == {"type": "integer"}
        assert set(compiler.schemas) == {"WrapperUserList", "User"}


class TestCollisions:
    """Tests for records sharing a simple name."""

    def test_second_user_is_prefixed(self, compiler: SchemaCompiler) -> None:
        first = compiler.compile(models.User)
        second = compiler.compile(v2_models.User)
        assert first.ref == REF_PREFIX + "User"
        assert second.ref == REF_PREFIX + "ModelsUser"
        assert compiler.compile(v2_models.User).ref == second.ref

    def test_preseeded_prefixed_name(self) -> None:
        registry = SchemaRegistry()
        registry.reserve("seed", "ModelsUser")
        compiler = SchemaCompiler(registry)
        assert compiler.registry is registry
        compiler.compile(models.User)
        assert compiler.compile(v2_models.User).ref == REF_PREFIX + "ModelsUser2"


class TestGadget:
    """Tests for the remaining field kinds."""

    @pytest.fixture
    def gadget(self, compiler: SchemaCompiler) -> dict:
        compiler.compile(Gadget)
        return compiler.schemas["Gadget"].to_dict()["properties"]

    def test_bytes(self, gadget: dict) -> None:
        assert gadget["serial"] == {"type": "string", "format": "byte"}

    def test_formatted(self, gadget: dict) -> None:
        assert gadget["made_at"] == {"type": "string", "format": "date-time"}
        assert gadget["token"] == {"type": "string", "format": "uuid"}

    def test_mappings(self, gadget: dict) -> None:
        assert gadget["labels"] == {
            "type": "object",
            "additionalProperties": {"type": "integer"},
        }
        assert gadget["by_code"] == {"type": "object"}

    def test_tuples(self, gadget: dict) -> None:
        assert gadget["point"] == {"type": "array", "items": {"type": "integer"}}
        assert gadget["pair"] == {
            "type": "array",
            "prefixItems": [{"type": "string"}, {"type": "integer"}],
        }
        assert gadget["tags"] == {"type": "array", "items": {"type": "string"}}

    def test_any(self, gadget: dict) -> None:
        assert gadget["extra"] == {}

    def test_enums(self, gadget: dict) -> None:
        assert gadget["level"] == {"type": "string", "enum": ["low", "high"]}
        assert gadget["priority"] == {"type": "integer", "enum": [1, 2]}

    def test_union(self, gadget: dict) -> None:
        assert gadget["value"] == {"anyOf": [{"type": "integer"}, {"type": "string"}]}

    def test_unsupported_field_is_skipped(
        self, compiler: SchemaCompiler, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="schemabind.schema"):
            compiler.compile(Gadget)
        assert "ratio" not in compiler.schemas["Gadget"].properties
        assert "ratio" in caplog.text


class TestHelpers:
    """Tests for schema helpers."""

    def test_make_nullable_reference(self) -> None:
        schema = make_nullable(Schema.reference("User"))
        assert schema.to_dict() == {
            "anyOf": [{"$ref": REF_PREFIX + "User"}, {"type": "null"}]
        }

    def test_make_nullable_unconstrained(self) -> None:
        assert make_nullable(Schema()).to_dict() == {}

    def test_string_encoding_nullable(self) -> None:
        schema = Schema(type=["integer", "null"])
        apply_string_encoding(schema)
        assert schema.to_dict() == {"type": ["string", "null"]}
