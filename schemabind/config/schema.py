"""
Configuration schema definitions for SchemaBind.

This module defines the configuration structure using dataclasses.
Each section validates itself in ``__post_init__``.
"""

from dataclasses import dataclass, field
from typing import Any

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_DOCS_UIS = ["swagger", "rapidoc", "redoc"]
VALID_OUTPUT_FORMATS = ["json", "yaml"]

# Filename value that disables a document endpoint.
DISABLED = "-"


@dataclass
class LoggingConfig:
    """
    Logging configuration options.

    Attributes:
        level: Minimum log level. One of: DEBUG, INFO, WARNING, ERROR,
            CRITICAL.
        format: Log message format string.
        output_path: Log file path. Empty means stderr.
    """

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    output_path: str = ""

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"level must be one of: {VALID_LOG_LEVELS}")


@dataclass
class DocsConfig:
    """
    Options for the served document and documentation UI.

    Attributes:
        base_path: Path under which the endpoints are mounted.
        ui: Documentation UI: swagger, rapidoc or redoc.
        title: Page title. Empty uses the document's info title.
        json_filename: JSON document location. Relative names are joined to
            ``base_path``, absolute ones are used as-is, "-" disables it.
        yaml_filename: YAML document location, same rules.
        disable_docs: Do not serve the documentation UI.
        swagger_ui_config: Extra options passed to Swagger UI.
    """

    base_path: str = "/docs"
    ui: str = "swagger"
    title: str = ""
    json_filename: str = "schema.json"
    yaml_filename: str = "schema.yaml"
    disable_docs: bool = False
    swagger_ui_config: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.ui not in VALID_DOCS_UIS:
            raise ValueError(f"ui must be one of: {VALID_DOCS_UIS}")
        if self.base_path and not self.base_path.startswith("/"):
            raise ValueError("base_path must start with '/'")
        if not self.json_filename or not self.yaml_filename:
            raise ValueError("filenames must not be empty; use '-' to disable")

    def resolve(self, filename: str) -> str:
        """
        Absolute path for a document filename, or "" when disabled.
        """
        if filename == DISABLED:
            return ""
        if filename.startswith("/"):
            return filename
        return self.base_path.rstrip("/") + "/" + filename

    @property
    def json_path(self) -> str:
        return self.resolve(self.json_filename)

    @property
    def yaml_path(self) -> str:
        return self.resolve(self.yaml_filename)


@dataclass
class ServerConfig:
    """
    HTTP server configuration options.

    Attributes:
        host: Host address to bind the server to.
        port: Port number to listen on.
    """

    host: str = "127.0.0.1"
    port: int = 8080

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.port < 1 or self.port > 65535:
            raise ValueError("port must be between 1 and 65535")


@dataclass
class OutputConfig:
    """
    Options for writing generated documents.

    Attributes:
        format: json or yaml.
        indent: JSON indentation width.
        path: Output file. Empty means stdout.
    """

    format: str = "json"
    indent: int = 2
    path: str = ""

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.format not in VALID_OUTPUT_FORMATS:
            raise ValueError(f"format must be one of: {VALID_OUTPUT_FORMATS}")
        if self.indent < 0:
            raise ValueError("indent must be non-negative")


@dataclass
class SchemaBindConfig:
    """
    Root configuration object for SchemaBind.

    Attributes:
        logging: Logging configuration options.
        docs: Served document and UI options.
        server: HTTP server configuration options.
        output: Document generation output options.
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    docs: DocsConfig = field(default_factory=DocsConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "output_path": self.logging.output_path,
            },
            "docs": {
                "base_path": self.docs.base_path,
                "ui": self.docs.ui,
                "title": self.docs.title,
                "json_filename": self.docs.json_filename,
                "yaml_filename": self.docs.yaml_filename,
                "disable_docs": self.docs.disable_docs,
                "swagger_ui_config": dict(self.docs.swagger_ui_config),
            },
            "server": {
                "host": self.server.host,
                "port": self.server.port,
            },
            "output": {
                "format": self.output.format,
                "indent": self.output.indent,
                "path": self.output.path,
            },
        }
