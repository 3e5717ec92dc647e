"""
Pytest configuration and shared fixtures for SchemaBind tests.

This module provides:
- Spec fixtures (an empty APISpec, a route table)
- Compiler fixtures
- Configuration fixtures
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest

from schemabind import APISpec, Info, RouteTable, SchemaCompiler
from schemabind.config.loader import ConfigLoader


# =============================================================================
# Spec Fixtures
# =============================================================================


@pytest.fixture
def spec() -> APISpec:
    """Create an APISpec with a minimal info block."""
    return APISpec(Info(title="Test API", version="1.0.0"))


@pytest.fixture
def table() -> RouteTable:
    """Create an empty in-memory route table."""
    return RouteTable()


@pytest.fixture
def compiler() -> SchemaCompiler:
    """Create a schema compiler with a fresh registry."""
    return SchemaCompiler()


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Remove SCHEMABIND_ environment overrides for the duration of a test."""
    import os

    for key in list(os.environ):
        if key.startswith(ConfigLoader.ENV_PREFIX):
            monkeypatch.delenv(key)
    yield


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a valid configuration file and return its path."""
    path = tmp_path / "schemabind.yaml"
    path.write_text(
        "logging:\n"
        "  level: DEBUG\n"
        "docs:\n"
        "  base_path: /api/docs\n"
        "  ui: redoc\n"
        "  title: Internal API\n"
        "server:\n"
        "  port: 9090\n"
        "output:\n"
        "  format: yaml\n",
        encoding="utf-8",
    )
    return path
