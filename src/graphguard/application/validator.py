"""Application layer - Validation entry point over a registration catalog."""

import logging
from collections import Counter
from functools import partial
from typing import Any, Callable, Iterable, List, Optional

from graphguard.application.constructor_selector import SignatureConstructorSelector
from graphguard.application.constructor_validator import ConstructorValidator
from graphguard.application.rank_table import default_rank_table
from graphguard.application.resolution_policy import ResolutionPolicy
from graphguard.application.service_index import ServiceIndex
from graphguard.application.type_inspector import TypingInspector, is_disposable
from graphguard.domain import (
    Finding,
    IConstructorSelector,
    ILifetimeRankTable,
    ITypeInspector,
    LifetimeKind,
    ServiceRegistration,
)

logger = logging.getLogger(__name__)


class GraphValidator:
    """Validates a catalog of registrations without constructing anything.

    Orchestrates index construction and walks every registration with an
    implementing type, asking the constructor selector for its parameters and
    delegating to the constructor validator. Validation never stops early, so
    a single pass reports the complete list of findings.

    Attributes:
        _type_inspector: Type introspection shared by the index, policy and selector.
        _constructor_selector: Chooses the constructor of implementing types.
        _rank_table: Lifetime ranks, read-only during validation.
        _constructor_validator: Applies the rules to one constructor.
    """

    def __init__(
        self,
        constructor_selector: Optional[IConstructorSelector] = None,
        type_inspector: Optional[ITypeInspector] = None,
        rank_table: Optional[ILifetimeRankTable] = None,
        disposal_predicate: Optional[Callable[[Any], bool]] = None,
    ) -> None:
        """Initialize the validator with its collaborators.

        Args:
            constructor_selector: Defaults to selecting ``__init__`` from type hints.
            type_inspector: Defaults to the ``typing`` based inspector.
            rank_table: Defaults to the process-wide rank table.
            disposal_predicate: Defaults to ``is_disposable``.
        """
        self._type_inspector = type_inspector or TypingInspector()
        self._constructor_selector = constructor_selector or SignatureConstructorSelector(self._type_inspector)
        self._rank_table = rank_table or default_rank_table
        self._constructor_validator = ConstructorValidator(
            policy=ResolutionPolicy(self._type_inspector),
            rank_table=self._rank_table,
            disposal_predicate=disposal_predicate or partial(is_disposable, type_inspector=self._type_inspector),
        )

    def validate(self, catalog: Iterable[ServiceRegistration]) -> List[Finding]:
        """Validate a catalog snapshot.

        Args:
            catalog: Registrations in catalog order.

        Returns:
            Findings ordered by registration, then by constructor parameter.

        Raises:
            Exception: Whatever the constructor selector raises is propagated.

        Example:
            >>> validator = GraphValidator()
            >>> findings = validator.validate([
            ...     ServiceRegistration(service_type=Foo, implementing_type=Foo, lifetime=Lifetime.PER_CONTAINER),
            ...     ServiceRegistration(service_type=Bar, implementing_type=Bar),
            ... ])
            >>> [finding.severity for finding in findings]
            [<ValidationSeverity.CAPTIVE: 'captive'>]
        """
        registrations = list(catalog)
        index = ServiceIndex.build(registrations, self._type_inspector)
        self._warn_unranked(registrations)

        findings: List[Finding] = []
        for registration in registrations:
            if registration.implementing_type is None:
                continue
            parameters = self._constructor_selector.select(registration.implementing_type)
            findings.extend(self._constructor_validator.validate_registration(index, registration, parameters))

        if findings:
            counts = Counter(str(finding.severity) for finding in findings)
            logger.info(
                "Validated %d registration(s): %d finding(s) (%s)",
                len(registrations),
                len(findings),
                ", ".join(f"{severity}={count}" for severity, count in sorted(counts.items())),
            )
        else:
            logger.info("Validated %d registration(s): no findings", len(registrations))
        return findings

    def _warn_unranked(self, registrations: List[ServiceRegistration]) -> None:
        unranked: List[LifetimeKind] = []
        for registration in registrations:
            lifetime = registration.lifetime
            if lifetime not in unranked and not self._rank_table.has_rank(lifetime):
                unranked.append(lifetime)
        for lifetime in unranked:
            logger.warning(
                "The lifetime '%s' does not have a rank and is treated as transient. "
                "Use set_rank to specify its rank.",
                lifetime,
            )


def validate(
    catalog: Iterable[ServiceRegistration],
    constructor_selector: Optional[IConstructorSelector] = None,
    rank_table: Optional[ILifetimeRankTable] = None,
) -> List[Finding]:
    """Validate a catalog with the default collaborators.

    Args:
        catalog: Registrations in catalog order.
        constructor_selector: Optional constructor selector override.
        rank_table: Optional rank table, defaults to the process-wide one.

    Returns:
        Findings ordered by registration, then by constructor parameter.
    """
    return GraphValidator(constructor_selector=constructor_selector, rank_table=rank_table).validate(catalog)
