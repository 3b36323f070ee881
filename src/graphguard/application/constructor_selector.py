"""Application layer - Default constructor selection from type hints."""

import inspect
from typing import Any, Dict, List, Optional, TypeVar, get_type_hints

from graphguard.application.type_inspector import TypingInspector
from graphguard.domain import ConstructorParameter, ConstructorSelectionError, IConstructorSelector, ITypeInspector


class SignatureConstructorSelector(IConstructorSelector):
    """Selects ``__init__`` and describes its parameters from type hints.

    Uses Python's inspect module to analyze the constructor signature. Parameters
    with a default value are skipped since they can be satisfied without the
    container. A closed generic such as ``Service[User]`` is inspected through
    its definition, and its type variables are replaced by the alias arguments.

    Attributes:
        _type_inspector: Splits generic aliases into definition and arguments.
    """

    def __init__(self, type_inspector: Optional[ITypeInspector] = None) -> None:
        self._type_inspector = type_inspector or TypingInspector()

    def select(self, implementing_type: Any) -> List[ConstructorParameter]:
        """Describe the constructor parameters of a type.

        Args:
            implementing_type: The concrete type to inspect.

        Returns:
            Parameters in declaration order.

        Raises:
            ConstructorSelectionError: If the signature cannot be inspected or a
                parameter lacks a type hint.

        Example:
            >>> class UserService:
            ...     def __init__(self, db: DatabaseConnection, logger: Logger):
            ...         ...
            >>>
            >>> SignatureConstructorSelector().select(UserService)
            [ConstructorParameter(declared_type=DatabaseConnection, name='db', ...), ...]
        """
        definition = self._type_inspector.generic_type_definition(implementing_type)
        constructor = getattr(definition, "__init__", object.__init__)
        if constructor is object.__init__:
            return []

        try:
            signature = inspect.signature(constructor)
            type_hints = get_type_hints(constructor)
        except Exception as e:
            raise ConstructorSelectionError(
                implementing_type,
                f"Failed to inspect constructor of {implementing_type}: {e}",
            ) from e

        substitutions = self._substitutions(definition, implementing_type)

        parameters = []
        for param_name, param in signature.parameters.items():
            if param_name == "self":
                continue

            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue

            if param.default is not inspect.Parameter.empty:
                continue

            if param_name not in type_hints:
                raise ConstructorSelectionError(
                    implementing_type,
                    f"Parameter '{param_name}' lacks type hint and has no default value.",
                )

            parameters.append(
                ConstructorParameter(
                    declared_type=_substitute(type_hints[param_name], substitutions),
                    name=param_name,
                    owner=implementing_type,
                )
            )

        return parameters

    def _substitutions(self, definition: Any, implementing_type: Any) -> Dict[Any, Any]:
        if definition is implementing_type or not self._type_inspector.is_generic(implementing_type):
            return {}
        type_parameters = getattr(definition, "__parameters__", ())
        arguments = self._type_inspector.generic_type_arguments(implementing_type)
        if len(type_parameters) != len(arguments):
            return {}
        return dict(zip(type_parameters, arguments))


def _substitute(hint: Any, substitutions: Dict[Any, Any]) -> Any:
    if not substitutions:
        return hint
    if isinstance(hint, TypeVar):
        return substitutions.get(hint, hint)
    if inspect.isclass(hint):
        return hint
    hint_parameters = getattr(hint, "__parameters__", ())
    if not hint_parameters:
        return hint
    try:
        return hint[tuple(substitutions.get(parameter, parameter) for parameter in hint_parameters)]
    except TypeError:
        return hint
