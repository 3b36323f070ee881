from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence, Tuple

from graphguard.domain.models import ConstructorParameter, LifetimeKind


class ITypeInspector(ABC):
    """Abstract interface for the type-introspection capability of the host."""

    @abstractmethod
    def is_generic(self, tp: Any) -> bool:
        """Return True if the type is a parameterized generic."""

    @abstractmethod
    def is_open_generic(self, tp: Any) -> bool:
        """Return True if every type argument of the generic is an unbound type parameter."""

    @abstractmethod
    def generic_type_definition(self, tp: Any) -> Any:
        """Return the generic type definition of a parameterized generic.

        Args:
            tp: A parameterized generic, e.g. ``Repository[T]``.

        Returns:
            The unparameterized definition, e.g. ``Repository``.
        """

    @abstractmethod
    def generic_type_arguments(self, tp: Any) -> Tuple[Any, ...]:
        """Return the type arguments of a parameterized generic."""

    @abstractmethod
    def declared_interfaces(self, tp: Any) -> Tuple[Any, ...]:
        """Return the types a type derives from, excluding ``object``."""

    @abstractmethod
    def is_deferred_wrapper(self, tp: Any) -> bool:
        """Return True if the type defers construction of a single inner type."""

    @abstractmethod
    def unwrap_deferred(self, tp: Any) -> Optional[Any]:
        """Return the inner type of a deferred-construction wrapper, or None."""


class IConstructorSelector(ABC):
    """Abstract interface for choosing the constructor of an implementing type."""

    @abstractmethod
    def select(self, implementing_type: Any) -> Sequence[ConstructorParameter]:
        """Return the ordered parameters of the constructor chosen for a type.

        Args:
            implementing_type: The concrete type that would be constructed.

        Returns:
            Parameters in declaration order, possibly empty.
        """


class ILifetimeRankTable(ABC):
    """Abstract interface for the lifetime rank configuration."""

    @abstractmethod
    def set_rank(self, lifetime: LifetimeKind, rank: int) -> None:
        """Insert or overwrite the rank of a lifetime kind.

        Args:
            lifetime: The lifetime kind to rank.
            rank: Non-negative rank, higher means longer-lived.
        """

    @abstractmethod
    def get_rank(self, lifetime: LifetimeKind) -> int:
        """Return the rank of a lifetime kind, or 0 when it has none."""

    @abstractmethod
    def has_rank(self, lifetime: LifetimeKind) -> bool:
        """Return True if a rank was registered for the lifetime kind."""

    @abstractmethod
    def ranks(self) -> Dict[LifetimeKind, int]:
        """Return a snapshot of the registered ranks."""
