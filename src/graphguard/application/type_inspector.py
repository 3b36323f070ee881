"""Application layer - Type introspection on top of the typing module."""

import collections.abc
import inspect
from typing import Any, Callable, Generic, Optional, Set, Tuple, TypeVar, get_args, get_origin

from graphguard.domain import ITypeInspector

T = TypeVar("T")

_DISPOSAL_MEMBERS = ("close", "aclose", "dispose", "__exit__", "__aexit__")


class Lazy(Generic[T]):
    """Deferred handle to a dependency, built on first access.

    Annotating a constructor parameter with ``Lazy[Service]`` tells the
    validator that the service is not held at injection time, so lifetime
    captivity and disposal rules do not apply to that edge.

    Example:
        >>> class ReportJob:
        ...     def __init__(self, session: Lazy[DatabaseSession]):
        ...         self._session = session
        ...
        ...     def run(self):
        ...         return self._session.value.query()
    """

    _UNSET = object()

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._value: Any = Lazy._UNSET

    @property
    def is_value_created(self) -> bool:
        return self._value is not Lazy._UNSET

    @property
    def value(self) -> T:
        if self._value is Lazy._UNSET:
            self._value = self._factory()
        return self._value


def is_disposable(tp: Any, type_inspector: Optional[ITypeInspector] = None) -> bool:
    """Return True if the type exposes a resource-release capability.

    A type is disposable when its generic definition, or one of the interfaces
    it declares, defines ``close``, ``aclose`` or ``dispose``, or acts as a sync
    or async context manager.

    Args:
        tp: The service or implementing type to test.
        type_inspector: Defaults to the ``typing`` based inspector.
    """
    type_inspector = type_inspector or TypingInspector()
    candidate = type_inspector.generic_type_definition(tp)
    if not inspect.isclass(candidate):
        return False
    for owner in (candidate, *type_inspector.declared_interfaces(candidate)):
        members = vars(owner)
        if any(callable(members.get(member)) for member in _DISPOSAL_MEMBERS):
            return True
    return False


class TypingInspector(ITypeInspector):
    """Type inspector using ``typing.get_origin`` and ``typing.get_args``.

    Recognizes two deferred-construction wrappers out of the box: a
    zero-argument factory ``Callable[[], X]`` and ``Lazy[X]``. Further
    single-argument wrapper generics can be added with ``add_deferred_wrapper``.

    Attributes:
        _wrappers: Generic definitions treated as deferred wrappers.
    """

    def __init__(self) -> None:
        self._wrappers: Set[Any] = {Lazy}

    def add_deferred_wrapper(self, definition: Any) -> None:
        """Treat a single-argument generic as a deferred-construction wrapper.

        Args:
            definition: The generic type definition, e.g. ``Provider``.
        """
        self._wrappers.add(definition)

    def is_generic(self, tp: Any) -> bool:
        return get_origin(tp) is not None and len(get_args(tp)) > 0

    def is_open_generic(self, tp: Any) -> bool:
        if not self.is_generic(tp):
            return False
        return all(isinstance(argument, TypeVar) for argument in get_args(tp))

    def generic_type_definition(self, tp: Any) -> Any:
        return get_origin(tp) or tp

    def generic_type_arguments(self, tp: Any) -> Tuple[Any, ...]:
        return get_args(tp)

    def declared_interfaces(self, tp: Any) -> Tuple[Any, ...]:
        candidate = get_origin(tp) or tp
        if not inspect.isclass(candidate):
            return ()
        return tuple(base for base in inspect.getmro(candidate)[1:] if base is not object)

    def is_deferred_wrapper(self, tp: Any) -> bool:
        return self.unwrap_deferred(tp) is not None

    def unwrap_deferred(self, tp: Any) -> Optional[Any]:
        origin = get_origin(tp)
        if origin is None:
            return None
        arguments = get_args(tp)
        if origin is collections.abc.Callable:
            # Only zero-argument factories defer construction
            if len(arguments) == 2 and arguments[0] == []:
                return arguments[1]
            return None
        if origin in self._wrappers and len(arguments) == 1:
            return arguments[0]
        return None
