"""Application layer - Dry-run resolution of a single constructor parameter."""

from typing import Any, NamedTuple, Optional

from graphguard.application.findings import FindingCollector
from graphguard.application.service_index import ServiceIndex
from graphguard.application.type_inspector import TypingInspector
from graphguard.domain import (
    ConstructorParameter,
    ITypeInspector,
    ServiceRegistration,
    ValidationSeverity,
    ValidationTarget,
    describe_type,
)


class Resolution(NamedTuple):
    """Outcome of a successful resolution.

    Attributes:
        registration: The registration satisfying the request.
        deferred: True when reached through a deferred-construction wrapper.
    """

    registration: ServiceRegistration
    deferred: bool = False


class ResolutionPolicy:
    """Decides which registration, if any, satisfies a requested type.

    Mirrors the resolution rules of a container without constructing anything:
    the default (unnamed) registration wins, a single registration is treated as
    the default, otherwise the suggested name disambiguates. Deferred wrappers
    are unwrapped and open generics are looked up by their definition. Failures
    are reported to the collector, never raised.

    Attributes:
        _type_inspector: Type introspection capability.
    """

    def __init__(self, type_inspector: Optional[ITypeInspector] = None) -> None:
        self._type_inspector = type_inspector or TypingInspector()

    def resolve(
        self,
        index: ServiceIndex,
        requested_type: Any,
        suggested_name: str,
        parameter: ConstructorParameter,
        collector: FindingCollector,
    ) -> Optional[ServiceRegistration]:
        """Resolve a requested type for a constructor parameter.

        Args:
            index: The service index of the catalog.
            requested_type: The type to look up.
            suggested_name: Name used to disambiguate between named registrations.
            parameter: The parameter findings are attributed to.
            collector: Receives findings for failed resolutions.

        Returns:
            The satisfying registration, or None.
        """
        target = ValidationTarget(parameter=parameter, service_type=requested_type, service_name=suggested_name)
        resolution = self.resolve_target(index, target, collector)
        return resolution.registration if resolution else None

    def resolve_target(
        self,
        index: ServiceIndex,
        target: ValidationTarget,
        collector: FindingCollector,
    ) -> Optional[Resolution]:
        """Resolve a validation target, reporting why it failed if it did.

        Args:
            index: The service index of the catalog.
            target: The parameter and its effective lookup key.
            collector: Receives findings for failed resolutions.

        Returns:
            The resolution, or None if the target cannot be satisfied.
        """
        target = self._normalize(target)
        registrations = index.lookup(target.service_type)

        if registrations is None:
            inner_type = self._type_inspector.unwrap_deferred(target.service_type)
            if inner_type is not None:
                # The wrapper itself is not reported, only the unwrapped service
                resolution = self.resolve_target(index, target.with_service(inner_type), collector)
                return Resolution(resolution.registration, deferred=True) if resolution else None

            definition = self._closed_generic_definition(index, target.service_type)
            if definition is not None:
                return self.resolve_target(index, target.with_service(definition, target.service_name), collector)

            collector.add(
                target,
                ValidationSeverity.MISSING_DEPENDENCY,
                f"Class: '{describe_type(target.parameter.owner)}', "
                f"Parameter: '{target.parameter}' -> The injected '{describe_type(target.service_type)}' "
                "is not registered.",
            )
            return None

        if "" in registrations:
            return Resolution(registrations[""])

        if len(registrations) == 1:
            return Resolution(next(iter(registrations.values())))

        named = registrations.get(target.service_name.casefold())
        if named is not None:
            return Resolution(named)

        candidates = ", ".join(sorted(f"'{registration.service_name}'" for registration in registrations.values()))
        collector.add(
            target,
            ValidationSeverity.AMBIGUOUS,
            f"Class: '{describe_type(target.parameter.owner)}', "
            f"Parameter: '{target.parameter}' -> The injected '{describe_type(target.service_type)}' "
            f"is ambiguous: there are {len(registrations)} named registrations ({candidates}), "
            f"none matching the parameter name '{target.service_name}' and no default registration.",
        )
        collector.add(
            target,
            ValidationSeverity.MISSING_DEPENDENCY,
            f"Class: '{describe_type(target.parameter.owner)}', "
            f"Parameter: '{target.parameter}' -> No default or name-matched registration "
            f"of '{describe_type(target.service_type)}' can be selected.",
        )
        return None

    def _normalize(self, target: ValidationTarget) -> ValidationTarget:
        if self._type_inspector.is_open_generic(target.service_type):
            definition = self._type_inspector.generic_type_definition(target.service_type)
            return target.with_service(definition, target.service_name)
        return target

    def _closed_generic_definition(self, index: ServiceIndex, service_type: Any) -> Optional[Any]:
        """Return the registered open-generic definition of a closed generic, or None."""
        if not self._type_inspector.is_generic(service_type):
            return None
        definition = self._type_inspector.generic_type_definition(service_type)
        if definition is service_type or definition not in index:
            return None
        return definition
