"""
Exception classes for SchemaBind.

This module defines the exception hierarchy used throughout SchemaBind.
All custom exceptions inherit from SchemaBindError so callers can catch
any SchemaBind-specific failure with a single except clause.

The document builder itself is forgiving: malformed
annotation tokens, unknown path macros and registrations that never match
a route are ignored rather than raised. The exceptions below cover the
boundaries around it (configuration, serialization and CLI loading).
"""

from typing import Any


class SchemaBindError(Exception):
    """
    Base exception for all SchemaBind errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


class ConfigurationError(SchemaBindError):
    """
    Raised when there is an error in SchemaBind configuration.

    Examples:
        - Missing configuration file
        - Invalid YAML syntax in configuration
        - Configuration value out of allowed range
        - Environment override that cannot be converted
    """

    pass


class SerializationError(SchemaBindError):
    """
    Raised when a generated document cannot be encoded.

    The document tree is built from in-memory structures and is always
    well-formed; what can fail is encoding user-supplied payloads such as
    examples, constants and defaults.

    Examples:
        - Example value of a type with no JSON representation
        - Non-finite float (NaN, Infinity) in an example
        - Mapping with keys that cannot be rendered as strings
    """

    pass


class LoadError(SchemaBindError):
    """
    Raised when a CLI target cannot be imported or resolved.

    Examples:
        - Target not in "module:attribute" form
        - Module import failure
        - Attribute resolving to something that is not a document source
    """

    pass
