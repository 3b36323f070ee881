"""Application layer - Lookup structure over a registration catalog."""

import logging
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional

from graphguard.application.type_inspector import TypingInspector
from graphguard.domain import ITypeInspector, ServiceRegistration

logger = logging.getLogger(__name__)


def _name_key(service_name: str) -> str:
    return service_name.casefold()


class ServiceIndex:
    """Read-only projection of a catalog: service type -> service name -> registration.

    Names are compared case-insensitively. When two registrations share the
    same type and name, the later one in catalog order wins. Open-generic
    service types such as ``Repository[T]`` are keyed by their definition.

    Attributes:
        _services: Registrations grouped by service type, keyed by folded name.
    """

    def __init__(self, services: Dict[Any, Dict[str, ServiceRegistration]]) -> None:
        self._services = services

    @classmethod
    def build(
        cls,
        catalog: Iterable[ServiceRegistration],
        type_inspector: Optional[ITypeInspector] = None,
    ) -> "ServiceIndex":
        """Group a catalog snapshot by service type and name.

        Args:
            catalog: The registrations to index, in catalog order.
            type_inspector: Used to key open generics by their definition.

        Returns:
            A new index over the catalog.
        """
        type_inspector = type_inspector or TypingInspector()
        services: Dict[Any, Dict[str, ServiceRegistration]] = {}
        for registration in catalog:
            service_type = registration.service_type
            if type_inspector.is_open_generic(service_type):
                service_type = type_inspector.generic_type_definition(service_type)
            services.setdefault(service_type, {})[_name_key(registration.service_name)] = registration
        logger.debug("Indexed %d service type(s)", len(services))
        return cls(services)

    def lookup(self, service_type: Any) -> Optional[Mapping[str, ServiceRegistration]]:
        """Return the registrations for a service type keyed by folded name, or None."""
        try:
            return self._services.get(service_type)
        except TypeError:
            # Unhashable annotations can never match a registration
            return None

    def find(self, service_type: Any, service_name: str = "") -> Optional[ServiceRegistration]:
        """Return the registration for an exact (type, name) pair, or None."""
        registrations = self.lookup(service_type)
        if registrations is None:
            return None
        return registrations.get(_name_key(service_name))

    def __contains__(self, service_type: Any) -> bool:
        return self.lookup(service_type) is not None

    def __iter__(self) -> Iterator[Any]:
        return iter(self._services)

    def __len__(self) -> int:
        return len(self._services)
