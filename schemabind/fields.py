"""
Field-level external representation options for dataclass records.

A record field can rename itself, be dropped from the external form, be
encoded as a string, or have its own fields flattened into the enclosing
record. Those options live in the dataclass field metadata so that both
the schema compiler and the value encoder read the same declaration.

Example:
    @dataclass
    class User:
        id: int = schema_field(openapi="description=User ID,minimum=1")
        display_name: str = schema_field(name="displayName")
        nickname: str | None = schema_field(default=None, omitempty=True)
        _cache: dict = schema_field(default_factory=dict)  # never exposed
"""

import dataclasses
from dataclasses import dataclass
from typing import Any

METADATA_KEY = "schemabind"


@dataclass(frozen=True)
class FieldOptions:
    """
    External representation options for one record field.

    Attributes:
        name: External name. Empty means the field's own name.
        omitempty: The field may be absent, so it is not listed in
            ``required`` and empty values are dropped when encoding.
        as_string: The value is encoded as a string regardless of its
            declared type.
        skip: The field is not part of the external representation.
        inline: The field's record type is flattened into the enclosing
            record. Only honoured when ``name`` is empty.
        openapi: Constraint annotation string, see
            :func:`schemabind.schema.annotations.apply_annotations`.
    """

    name: str = ""
    omitempty: bool = False
    as_string: bool = False
    skip: bool = False
    inline: bool = False
    openapi: str = ""


DEFAULT_OPTIONS = FieldOptions()


def schema_field(
    *,
    name: str = "",
    omitempty: bool = False,
    as_string: bool = False,
    skip: bool = False,
    inline: bool = False,
    openapi: str = "",
    **kwargs: Any,
) -> Any:
    """
    Declare a dataclass field with external representation options.

    Remaining keyword arguments (``default``, ``default_factory``, ``repr``
    and so on) are passed through to :func:`dataclasses.field`.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[METADATA_KEY] = FieldOptions(
        name=name,
        omitempty=omitempty,
        as_string=as_string,
        skip=skip,
        inline=inline,
        openapi=openapi,
    )
    return dataclasses.field(metadata=metadata, **kwargs)


def field_options(f: dataclasses.Field) -> FieldOptions:
    """Return the options declared for a dataclass field."""
    return f.metadata.get(METADATA_KEY, DEFAULT_OPTIONS)


def is_exported(field_name: str) -> bool:
    """Underscore-prefixed fields are private to the record."""
    return not field_name.startswith("_")


def external_name(f: dataclasses.Field) -> str:
    """Name under which a field appears in the external representation."""
    return field_options(f).name or f.name
