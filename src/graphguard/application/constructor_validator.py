"""Application layer - Captivity and disposal rules for one constructor."""

import logging
from typing import Any, Callable, List, Optional, Sequence

from graphguard.application.findings import FindingCollector
from graphguard.application.rank_table import default_rank_table
from graphguard.application.resolution_policy import ResolutionPolicy
from graphguard.application.service_index import ServiceIndex
from graphguard.application.type_inspector import is_disposable
from graphguard.domain import (
    ConstructorParameter,
    Finding,
    ILifetimeRankTable,
    Lifetime,
    ServiceRegistration,
    ValidationSeverity,
    ValidationTarget,
    describe_type,
)

logger = logging.getLogger(__name__)


class ConstructorValidator:
    """Applies the captivity, disposal and resolution rules to one constructor.

    Attributes:
        _policy: Resolution policy used for every parameter.
        _rank_table: Lifetime ranks used for captivity checks.
        _disposal_predicate: Tells whether a type exposes a release capability.
    """

    def __init__(
        self,
        policy: Optional[ResolutionPolicy] = None,
        rank_table: Optional[ILifetimeRankTable] = None,
        disposal_predicate: Optional[Callable[[Any], bool]] = None,
    ) -> None:
        self._policy = policy or ResolutionPolicy()
        self._rank_table = rank_table or default_rank_table
        self._disposal_predicate = disposal_predicate or is_disposable

    def validate_registration(
        self,
        index: ServiceIndex,
        registration: ServiceRegistration,
        parameters: Sequence[ConstructorParameter],
    ) -> List[Finding]:
        """Validate every constructor parameter of a registration.

        Args:
            index: The service index of the catalog.
            registration: The consuming registration.
            parameters: Parameters of the constructor selected for its implementing type.

        Returns:
            Findings in parameter order. Empty for instance and factory registrations.
        """
        if registration.implementing_type is None:
            return []

        collector = FindingCollector(registration)
        for parameter in parameters:
            target = ValidationTarget.for_parameter(parameter)
            resolution = self._policy.resolve_target(index, target, collector)
            if resolution is None or resolution.deferred:
                continue

            dependency = resolution.registration
            self._check_captivity(collector, target, registration, dependency)
            self._check_disposal(collector, target, registration, dependency)

        logger.debug("Validated %s: %d finding(s)", registration, len(collector))
        return collector.findings

    def _check_captivity(
        self,
        collector: FindingCollector,
        target: ValidationTarget,
        consumer: ServiceRegistration,
        dependency: ServiceRegistration,
    ) -> None:
        consumer_rank = self._rank_table.get_rank(consumer.lifetime)
        dependency_rank = self._rank_table.get_rank(dependency.lifetime)
        if consumer_rank > dependency_rank:
            collector.add(
                target,
                ValidationSeverity.CAPTIVE,
                f"Class: '{describe_type(target.parameter.owner)}', Parameter: '{target.parameter}' -> "
                f"The injected '{dependency}' with lifetime '{dependency.lifetime}' is being injected into "
                f"'{consumer}' with lifetime '{consumer.lifetime}' that has a longer lifetime.",
            )

    def _check_disposal(
        self,
        collector: FindingCollector,
        target: ValidationTarget,
        consumer: ServiceRegistration,
        dependency: ServiceRegistration,
    ) -> None:
        if dependency.lifetime != Lifetime.TRANSIENT:
            return
        disposable = self._disposal_predicate(dependency.service_type) or (
            dependency.implementing_type is not None and self._disposal_predicate(dependency.implementing_type)
        )
        if disposable:
            collector.add(
                target,
                ValidationSeverity.NOT_DISPOSED,
                f"Class: '{describe_type(target.parameter.owner)}', Parameter: '{target.parameter}' -> "
                f"The injected '{dependency}' is disposable and registered without a lifetime, "
                f"so it will never be disposed after being injected into '{consumer}'.",
            )
