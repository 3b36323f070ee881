"""
Infrastructure layer - External integrations.

This layer contains reporting, framework integrations and testing tools.
It depends on both Application and Domain layers. The FastAPI integration
is imported explicitly from ``graphguard.infrastructure.fastapi_integration``.
"""

from . import reporting, testing

__all__ = [
    "reporting",
    "testing",
]
