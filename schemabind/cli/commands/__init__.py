"""
CLI command modules for SchemaBind.

Modules:
    generate: Document generation
    serve: Serving an application
    config: Configuration management
"""

from schemabind.cli.commands import config, generate, serve

__all__ = ["generate", "serve", "config"]
