"""
Domain layer - Core validation models.

This layer contains the registrations, findings and collaborator interfaces
the validator works with. It has no dependencies on other layers.
"""

from .enums import Lifetime, ValidationSeverity
from .exceptions import (
    ConstructorSelectionError,
    GraphGuardError,
    InvalidRankError,
    ValidationFailedError,
)
from .interfaces import IConstructorSelector, ILifetimeRankTable, ITypeInspector
from .models import (
    ConstructorParameter,
    CustomLifetime,
    Finding,
    LifetimeKind,
    ServiceRegistration,
    ValidationTarget,
    describe_type,
)

__all__ = [
    # Enums
    "Lifetime",
    "ValidationSeverity",
    # Exceptions
    "GraphGuardError",
    "InvalidRankError",
    "ConstructorSelectionError",
    "ValidationFailedError",
    # Interfaces
    "ITypeInspector",
    "IConstructorSelector",
    "ILifetimeRankTable",
    # Models
    "CustomLifetime",
    "LifetimeKind",
    "ServiceRegistration",
    "ConstructorParameter",
    "ValidationTarget",
    "Finding",
    "describe_type",
]
