"""
Record types and applications used by the SchemaBind tests.

Usage:
    from tests.fixtures.models import User, Wrapper
    from tests.fixtures.api import spec, table
"""
