"""
Default configuration values for SchemaBind.

These defaults can be overridden by YAML configuration files and/or
environment variables.
"""

from schemabind.config.schema import (
    DocsConfig,
    LoggingConfig,
    OutputConfig,
    SchemaBindConfig,
    ServerConfig,
)

DEFAULT_LOGGING = LoggingConfig(
    level="INFO",
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    output_path="",  # stderr
)

DEFAULT_DOCS = DocsConfig(
    base_path="/docs",
    ui="swagger",
    title="",  # document title
    json_filename="schema.json",
    yaml_filename="schema.yaml",
    disable_docs=False,
)

DEFAULT_SERVER = ServerConfig(
    host="127.0.0.1",
    port=8080,
)

DEFAULT_OUTPUT = OutputConfig(
    format="json",
    indent=2,
    path="",  # stdout
)


def get_default_config() -> SchemaBindConfig:
    """
    Get the default configuration.

    Returns:
        SchemaBindConfig with default values, sharing no mutable state with
        the module-level defaults.
    """
    return SchemaBindConfig(
        logging=LoggingConfig(
            level=DEFAULT_LOGGING.level,
            format=DEFAULT_LOGGING.format,
            output_path=DEFAULT_LOGGING.output_path,
        ),
        docs=DocsConfig(
            base_path=DEFAULT_DOCS.base_path,
            ui=DEFAULT_DOCS.ui,
            title=DEFAULT_DOCS.title,
            json_filename=DEFAULT_DOCS.json_filename,
            yaml_filename=DEFAULT_DOCS.yaml_filename,
            disable_docs=DEFAULT_DOCS.disable_docs,
            swagger_ui_config=DEFAULT_DOCS.swagger_ui_config.copy(),
        ),
        server=ServerConfig(
            host=DEFAULT_SERVER.host,
            port=DEFAULT_SERVER.port,
        ),
        output=OutputConfig(
            format=DEFAULT_OUTPUT.format,
            indent=DEFAULT_OUTPUT.indent,
            path=DEFAULT_OUTPUT.path,
        ),
    )
