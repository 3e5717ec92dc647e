"""
SchemaBind Command Line Interface.

Commands:
    generate: Build a document from an application and write it out
    serve: Run an aiohttp application with its documentation endpoints
    config: Configuration management

Usage:
    schemabind --help
    schemabind generate myapp.api:app --format yaml
    schemabind serve myapp.api:app --port 8080
"""

from schemabind.cli.main import main

__all__ = ["main"]
