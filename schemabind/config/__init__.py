"""
Configuration system for SchemaBind.

Configuration can be loaded from YAML files with environment variable
overrides.
"""

from schemabind.config.loader import ConfigLoader, load_config
from schemabind.config.schema import (
    DocsConfig,
    LoggingConfig,
    OutputConfig,
    SchemaBindConfig,
    ServerConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "SchemaBindConfig",
    "DocsConfig",
    "LoggingConfig",
    "OutputConfig",
    "ServerConfig",
]
