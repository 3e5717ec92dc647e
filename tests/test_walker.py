"""
Tests for annotation classification.
"""

from datetime import date, datetime, time
from typing import Annotated, Any, Literal, NewType, Optional
from uuid import UUID

import pytest

from schemabind.schema.walker import (
    TypeKind,
    classify,
    is_textual_key,
    strip_annotation,
    type_display_name,
    unwrap_optional,
)
from tests.fixtures.models import Priority, Status, User, Wrapper

UserId = NewType("UserId", int)


class TestClassifyScalars:
    """Tests for primitive and formatted types."""

    @pytest.mark.parametrize(
        "annotation,kind",
        [
            (bool, TypeKind.BOOLEAN),
            (int, TypeKind.INTEGER),
            (float, TypeKind.NUMBER),
            (str, TypeKind.STRING),
            (bytes, TypeKind.BYTES),
            (bytearray, TypeKind.BYTES),
            (Any, TypeKind.ANY),
            (object, TypeKind.ANY),
            (complex, TypeKind.UNSUPPORTED),
        ],
    )
    def test_kind(self, annotation: Any, kind: TypeKind) -> None:
        assert classify(annotation).kind is kind

    @pytest.mark.parametrize(
        "annotation,fmt",
        [(datetime, "date-time"), (date, "date"), (time, "time"), (UUID, "uuid")],
    )
    def test_formatted(self, annotation: Any, fmt: str) -> None:
        """Fixed-representation types carry their string format."""
        info = classify(annotation)
        assert info.kind is TypeKind.FORMATTED
        assert info.format == fmt

    def test_annotated_and_newtype_are_stripped(self) -> None:
        assert classify(Annotated[int, "meta"]).kind is TypeKind.INTEGER
        assert classify(UserId).kind is TypeKind.INTEGER
        assert strip_annotation(Annotated[UserId, "meta"]) is int


class TestClassifyContainers:
    """Tests for sequences, mappings and unions."""

    def test_list(self) -> None:
        info = classify(list[int])
        assert info.kind is TypeKind.SEQUENCE
        assert info.args == (int,)

    def test_variadic_tuple_is_sequence(self) -> None:
        info = classify(tuple[str, ...])
        assert info.kind is TypeKind.SEQUENCE
        assert info.args == (str,)

    def test_fixed_tuple(self) -> None:
        info = classify(tuple[int, str])
        assert info.kind is TypeKind.FIXED_SEQUENCE
        assert info.args == (int, str)

    def test_set_is_sequence(self) -> None:
        assert classify(set[str]).kind is TypeKind.SEQUENCE

    def test_mapping(self) -> None:
        info = classify(dict[str, int])
        assert info.kind is TypeKind.MAPPING
        assert info.args == (str, int)

    def test_bare_dict(self) -> None:
        info = classify(dict)
        assert info.kind is TypeKind.MAPPING
        assert info.args == (Any, Any)

    def test_optional_is_nullable(self) -> None:
        info = classify(Optional[int])
        assert info.kind is TypeKind.NULLABLE
        assert info.args == (int,)

    def test_pipe_optional_is_nullable(self) -> None:
        assert classify(User | None).kind is TypeKind.NULLABLE

    def test_union(self) -> None:
        info = classify(int | str | None)
        assert info.kind is TypeKind.UNION
        assert info.args == (int, str)
        assert info.nullable is True


class TestClassifyNamedTypes:
    """Tests for records and enumerations."""

    def test_record(self) -> None:
        info = classify(User)
        assert info.kind is TypeKind.RECORD
        assert info.record is User

    def test_generic_record(self) -> None:
        info = classify(Wrapper[User])
        assert info.kind is TypeKind.RECORD
        assert info.record is Wrapper
        assert info.annotation == Wrapper[User]

    def test_enum(self) -> None:
        info = classify(Status)
        assert info.kind is TypeKind.ENUM
        assert info.args == ("active", "disabled")

    def test_literal(self) -> None:
        info = classify(Literal["a", "b"])
        assert info.kind is TypeKind.ENUM
        assert info.args == ("a", "b")


class TestHelpers:
    """Tests for walker helper functions."""

    def test_unwrap_optional(self) -> None:
        assert unwrap_optional(Optional[User]) == (User, True)
        assert unwrap_optional(User) == (User, False)

    def test_unwrap_optional_leaves_wide_unions(self) -> None:
        tp, optional = unwrap_optional(int | str | None)
        assert optional is False
        assert tp == (int | str | None)

    def test_textual_keys(self) -> None:
        assert is_textual_key(str) is True
        assert is_textual_key(Status) is True
        assert is_textual_key(int) is False
        assert is_textual_key(Priority) is False

    def test_display_name_plain(self) -> None:
        assert type_display_name(User) == "User"

    def test_display_name_generic(self) -> None:
        assert type_display_name(Wrapper[User]) == "Wrapper[tests.fixtures.models.User]"
        assert (
            type_display_name(Wrapper[list[User]])
            == "Wrapper[list[tests.fixtures.models.User]]"
        )
