"""
Application layer - Validation use cases and orchestration.

This layer contains the dry-run resolver and the rule engine.
It depends only on the Domain layer.
"""

from .constructor_selector import SignatureConstructorSelector
from .constructor_validator import ConstructorValidator
from .findings import FindingCollector
from .rank_table import DEFAULT_RANKS, LifetimeRankTable, default_rank_table, get_rank, set_rank
from .resolution_policy import Resolution, ResolutionPolicy
from .service_index import ServiceIndex
from .type_inspector import Lazy, TypingInspector, is_disposable
from .validator import GraphValidator, validate

__all__ = [
    "GraphValidator",
    "validate",
    "ConstructorValidator",
    "ResolutionPolicy",
    "Resolution",
    "ServiceIndex",
    "FindingCollector",
    "LifetimeRankTable",
    "DEFAULT_RANKS",
    "default_rank_table",
    "set_rank",
    "get_rank",
    "SignatureConstructorSelector",
    "TypingInspector",
    "Lazy",
    "is_disposable",
]
