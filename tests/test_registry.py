"""
Tests for component naming and the schema registry.
"""

import pytest

from schemabind.models.schema import Schema
from schemabind.schema.registry import (
    SchemaRegistry,
    module_prefix,
    sanitize_schema_name,
)


class TestSanitizeSchemaName:
    """Tests for generic name sanitization."""

    @pytest.mark.parametrize(
        "display,expected",
        [
            ("User", "User"),
            ("Wrapper[app.models.User]", "WrapperUser"),
            ("Wrapper[list[app.models.User]]", "WrapperUserList"),
            ("Wrapper[typing.Sequence[app.User]]", "WrapperUserList"),
            ("Pair[app.User, app.Group]", "PairUserGroup"),
            ("Wrapper[int]", "Wrapperint"),
            ("Page[Wrapper[app.User]]", "PageWrapperUser"),
        ],
    )
    def test_sanitize(self, display: str, expected: str) -> None:
        assert sanitize_schema_name(display) == expected

    def test_list_and_direct_arguments_differ(self) -> None:
        assert sanitize_schema_name("Wrapper[list[a.User]]") != sanitize_schema_name(
            "Wrapper[a.User]"
        )


class TestModulePrefix:
    """Tests for namespace prefixes."""

    def test_last_segment_capitalized(self) -> None:
        assert module_prefix("app.models") == "Models"

    def test_separators_folded(self) -> None:
        assert module_prefix("svc.user-api") == "User_api"

    def test_empty(self) -> None:
        assert module_prefix("") == ""


class TestSchemaRegistry:
    """Tests for reservation and collision resolution."""

    def test_bare_name_first(self) -> None:
        registry = SchemaRegistry()
        assert registry.reserve("a.User", "User", "a") == "User"

    def test_reserve_is_idempotent(self) -> None:
        registry = SchemaRegistry()
        first = registry.reserve("a.User", "User", "a")
        registry.reserve("b.User", "User", "app.b")
        assert registry.reserve("a.User", "User", "a") == first

    def test_collision_uses_prefix(self) -> None:
        registry = SchemaRegistry()
        registry.reserve("one", "User", "app.accounts")
        assert registry.reserve("two", "User", "app.models") == "ModelsUser"

    def test_prefixed_collision_uses_suffix(self) -> None:
        registry = SchemaRegistry()
        registry.reserve("seed", "ModelsUser", "")
        registry.reserve("one", "User", "app.models")
        assert registry.reserve("two", "User", "app.models") == "ModelsUser2"
        assert registry.reserve("three", "User", "lib.models") == "ModelsUser3"

    def test_names_are_distinct(self) -> None:
        registry = SchemaRegistry()
        names = [registry.reserve(i, "User", "x.models") for i in range(5)]
        assert len(set(names)) == 5
        assert all(names)

    def test_empty_bare_name(self) -> None:
        registry = SchemaRegistry()
        assert registry.reserve("anon", "", "x") == ""
        assert "anon" not in registry

    def test_claim_once(self) -> None:
        registry = SchemaRegistry()
        registry.reserve("a", "A")
        assert registry.claim("a") is True
        assert registry.claim("a") is False

    def test_populate_and_lookup(self) -> None:
        registry = SchemaRegistry()
        name = registry.reserve("a", "A")
        registry.populate(name, Schema(type="object"))
        assert registry.get("A") is not None
        assert registry.name_of("a") == "A"
        assert len(registry) == 1
        assert list(registry.schemas) == ["A"]
