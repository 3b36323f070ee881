"""
graphguard: Static dependency-graph validator for DI registration catalogs.

Public API exports for the graphguard package.
"""

# Application exports
from graphguard.application import (
    GraphValidator,
    Lazy,
    LifetimeRankTable,
    default_rank_table,
    get_rank,
    set_rank,
    validate,
)

# Domain exports
from graphguard.domain import (
    ConstructorParameter,
    ConstructorSelectionError,
    CustomLifetime,
    Finding,
    GraphGuardError,
    InvalidRankError,
    Lifetime,
    ServiceRegistration,
    ValidationFailedError,
    ValidationSeverity,
    ValidationTarget,
)

# Reporting exports
from graphguard.infrastructure.reporting import ValidationPolicy, ensure_valid, log_findings, summarize

__version__ = "0.1.0"

__all__ = [
    # Validation
    "GraphValidator",
    "validate",
    "Lazy",
    # Lifetime ranks
    "LifetimeRankTable",
    "default_rank_table",
    "set_rank",
    "get_rank",
    # Enums
    "Lifetime",
    "ValidationSeverity",
    # Models
    "CustomLifetime",
    "ServiceRegistration",
    "ConstructorParameter",
    "ValidationTarget",
    "Finding",
    # Reporting
    "ValidationPolicy",
    "ensure_valid",
    "log_findings",
    "summarize",
    # Exceptions
    "GraphGuardError",
    "InvalidRankError",
    "ConstructorSelectionError",
    "ValidationFailedError",
]
