"""Version information for SchemaBind."""

__version__ = "0.1.0"
