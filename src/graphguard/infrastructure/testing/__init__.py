"""
Testing utilities module.

Provides helpers for building registration catalogs in tests.
"""

from .utilities import CatalogBuilder

__all__ = [
    "CatalogBuilder",
]
