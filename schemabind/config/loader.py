"""
Configuration loader for SchemaBind.

This module provides the ConfigLoader class for loading configuration
from YAML files with environment variable overrides.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from schemabind.config.defaults import get_default_config
from schemabind.config.schema import (
    DocsConfig,
    LoggingConfig,
    OutputConfig,
    SchemaBindConfig,
    ServerConfig,
)
from schemabind.exceptions import ConfigurationError

logger = logging.getLogger("schemabind.config")


class ConfigLoader:
    """
    Loads and validates SchemaBind configuration.

    Sources are applied in order, later ones overriding earlier ones:
    1. Default values
    2. A YAML configuration file
    3. Environment variables (SCHEMABIND_ prefix)

    Example:
        loader = ConfigLoader()
        config = loader.load("schemabind.yaml")
    """

    ENV_PREFIX = "SCHEMABIND_"

    def __init__(self) -> None:
        """Initialize the configuration loader."""
        self._config: SchemaBindConfig | None = None

    def load(self, config_path: str | Path | None = None) -> SchemaBindConfig:
        """
        Load configuration from file and environment.

        Args:
            config_path: Path to a YAML configuration file. If None, only
                defaults and environment variables are used.

        Returns:
            A validated SchemaBindConfig object.

        Raises:
            ConfigurationError: If configuration is invalid or file not found.
        """
        config = get_default_config()

        if config_path:
            file_config = self._load_yaml(config_path)
            try:
                config = self._merge_config(config, file_config)
            except (ValueError, TypeError) as e:
                raise ConfigurationError(
                    f"Invalid configuration: {e}",
                    details={"path": str(config_path)},
                ) from e
            logger.debug("Loaded configuration from %s", config_path)

        config = self._apply_env_overrides(config)
        self._validate(config)

        self._config = config
        return config

    def _load_yaml(self, path: str | Path) -> dict[str, Any]:
        """
        Load configuration from a YAML file.

        Raises:
            ConfigurationError: If file not found or invalid YAML.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {path}",
                details={"path": str(path)},
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}",
                details={"path": str(path)},
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read configuration file: {e}",
                details={"path": str(path)},
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration file must contain a mapping",
                details={"path": str(path)},
            )
        return data

    def _merge_config(
        self,
        base: SchemaBindConfig,
        override: dict[str, Any],
    ) -> SchemaBindConfig:
        """Merge file configuration into base configuration."""
        if not override:
            return base

        if "logging" in override:
            base.logging = self._merge_logging(base.logging, override["logging"] or {})
        if "docs" in override:
            base.docs = self._merge_docs(base.docs, override["docs"] or {})
        if "server" in override:
            base.server = self._merge_server(base.server, override["server"] or {})
        if "output" in override:
            base.output = self._merge_output(base.output, override["output"] or {})

        return base

    def _merge_logging(self, base: LoggingConfig, override: dict[str, Any]) -> LoggingConfig:
        """Merge logging configuration."""
        return LoggingConfig(
            level=str(override.get("level", base.level)),
            format=override.get("format", base.format),
            output_path=override.get("output_path", base.output_path),
        )

    def _merge_docs(self, base: DocsConfig, override: dict[str, Any]) -> DocsConfig:
        """Merge docs configuration."""
        return DocsConfig(
            base_path=override.get("base_path", base.base_path),
            ui=override.get("ui", base.ui),
            title=override.get("title", base.title),
            json_filename=override.get("json_filename", base.json_filename),
            yaml_filename=override.get("yaml_filename", base.yaml_filename),
            disable_docs=override.get("disable_docs", base.disable_docs),
            swagger_ui_config=dict(
                override.get("swagger_ui_config", base.swagger_ui_config) or {}
            ),
        )

    def _merge_server(self, base: ServerConfig, override: dict[str, Any]) -> ServerConfig:
        """Merge server configuration."""
        return ServerConfig(
            host=override.get("host", base.host),
            port=override.get("port", base.port),
        )

    def _merge_output(self, base: OutputConfig, override: dict[str, Any]) -> OutputConfig:
        """Merge output configuration."""
        return OutputConfig(
            format=override.get("format", base.format),
            indent=override.get("indent", base.indent),
            path=override.get("path", base.path),
        )

    def _apply_env_overrides(self, config: SchemaBindConfig) -> SchemaBindConfig:
        """
        Apply environment variable overrides to configuration.

        For example:
        - SCHEMABIND_LOG_LEVEL=DEBUG
        - SCHEMABIND_DOCS_UI=redoc
        - SCHEMABIND_PORT=9000
        """
        env_mapping = {
            # Logging
            "SCHEMABIND_LOG_LEVEL": ("logging.level", str),
            "SCHEMABIND_LOG_OUTPUT_PATH": ("logging.output_path", str),
            # Docs
            "SCHEMABIND_DOCS_PATH": ("docs.base_path", str),
            "SCHEMABIND_DOCS_UI": ("docs.ui", str),
            "SCHEMABIND_DOCS_TITLE": ("docs.title", str),
            "SCHEMABIND_DOCS_JSON_FILENAME": ("docs.json_filename", str),
            "SCHEMABIND_DOCS_YAML_FILENAME": ("docs.yaml_filename", str),
            "SCHEMABIND_DOCS_DISABLE": ("docs.disable_docs", self._parse_bool),
            # Server
            "SCHEMABIND_HOST": ("server.host", str),
            "SCHEMABIND_PORT": ("server.port", int),
            # Output
            "SCHEMABIND_OUTPUT_FORMAT": ("output.format", str),
            "SCHEMABIND_OUTPUT_INDENT": ("output.indent", int),
            "SCHEMABIND_OUTPUT_PATH": ("output.path", str),
        }

        for env_var, (path, converter) in env_mapping.items():
            value = os.environ.get(env_var)
            if value is not None:
                try:
                    converted = converter(value)
                    self._set_nested_attr(config, path, converted)
                except (ValueError, TypeError) as e:
                    raise ConfigurationError(
                        f"Invalid value for {env_var}: {e}",
                        details={"env_var": env_var, "value": value},
                    ) from e

        return config

    def _set_nested_attr(self, obj: Any, path: str, value: Any) -> None:
        """Set a nested attribute using dot notation."""
        parts = path.split(".")
        for part in parts[:-1]:
            obj = getattr(obj, part)
        setattr(obj, parts[-1], value)

    def _parse_bool(self, value: str) -> bool:
        """Parse a string to boolean."""
        if value.lower() in ("true", "1", "yes", "on"):
            return True
        elif value.lower() in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"Cannot parse '{value}' as boolean")

    def _validate(self, config: SchemaBindConfig) -> None:
        """
        Validate the complete configuration.

        Environment overrides bypass the section constructors, so each
        section is rebuilt here to rerun its checks.

        Raises:
            ConfigurationError: If configuration is invalid.
        """
        errors: list[str] = []

        try:
            LoggingConfig(
                level=config.logging.level,
                format=config.logging.format,
                output_path=config.logging.output_path,
            )
        except ValueError as e:
            errors.append(f"logging: {e}")

        try:
            DocsConfig(
                base_path=config.docs.base_path,
                ui=config.docs.ui,
                title=config.docs.title,
                json_filename=config.docs.json_filename,
                yaml_filename=config.docs.yaml_filename,
                disable_docs=config.docs.disable_docs,
                swagger_ui_config=config.docs.swagger_ui_config,
            )
        except ValueError as e:
            errors.append(f"docs: {e}")

        try:
            ServerConfig(host=config.server.host, port=config.server.port)
        except ValueError as e:
            errors.append(f"server: {e}")

        try:
            OutputConfig(
                format=config.output.format,
                indent=config.output.indent,
                path=config.output.path,
            )
        except ValueError as e:
            errors.append(f"output: {e}")

        if errors:
            raise ConfigurationError(
                f"Configuration validation failed: {'; '.join(errors)}",
                details={"errors": errors},
            )

    @property
    def config(self) -> SchemaBindConfig:
        """Get the currently loaded configuration."""
        if self._config is None:
            raise ConfigurationError("Configuration not loaded. Call load() first.")
        return self._config


def load_config(config_path: str | Path | None = None) -> SchemaBindConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to a YAML configuration file.

    Returns:
        A validated SchemaBindConfig object.
    """
    loader = ConfigLoader()
    return loader.load(config_path)
