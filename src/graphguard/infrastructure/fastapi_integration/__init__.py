"""
FastAPI integration module.

Provides a diagnostics endpoint reporting dependency graph findings.
"""

from .integration import ValidationResponse, create_validation_router, create_validator_dependency

__all__ = [
    "create_validation_router",
    "create_validator_dependency",
    "ValidationResponse",
]
