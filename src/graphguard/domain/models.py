from typing import Any, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field

from graphguard.domain.enums import Lifetime, ValidationSeverity


def describe_type(value: Any) -> str:
    """Render a type or typing alias for use in messages.

    Generic aliases are rendered from their origin name and argument names,
    e.g. ``Repository[User]`` or ``Callable[[], Bar]``, without module paths.
    """
    if value is type(None):
        return "None"
    if value is Ellipsis:
        return "..."
    if isinstance(value, TypeVar):
        return value.__name__
    if isinstance(value, list):
        return "[" + ", ".join(describe_type(item) for item in value) + "]"
    origin = get_origin(value)
    arguments = get_args(value)
    if origin is not None and arguments:
        name = "Union" if origin is Union else getattr(value, "_name", None) or describe_type(origin)
        rendered = ", ".join(describe_type(argument) for argument in arguments)
        return f"{name}[{rendered}]"
    if isinstance(value, type):
        return value.__name__
    return str(value).replace("typing.", "").replace("collections.abc.", "")


class CustomLifetime(BaseModel):
    """User-defined lifetime kind identified by name.

    Custom lifetimes are ranked through the lifetime rank table like the
    built-in ones, e.g. between ``PER_SCOPE`` and ``PER_CONTAINER``.

    Attributes:
        name: Unique name of the lifetime.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Name of the custom lifetime.")

    def __str__(self) -> str:
        return self.name


LifetimeKind = Union[Lifetime, CustomLifetime]


class ServiceRegistration(BaseModel):
    """Value object representing one configured binding.

    Attributes:
        service_type: The contract type being requested.
        service_name: Name of the binding, empty for the default binding.
        implementing_type: Concrete type to construct. None for instance or factory registrations.
        lifetime: How long an instance should live, transient when not specified.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    service_type: Any = Field(..., description="The service type being registered.")
    service_name: str = Field(default="", description="The service name, empty for the default binding.")
    implementing_type: Any = Field(default=None, description="The concrete type constructed for the service.")
    lifetime: LifetimeKind = Field(default=Lifetime.TRANSIENT, description="The lifetime of the registration.")

    def __str__(self) -> str:
        implementing = describe_type(self.implementing_type) if self.implementing_type is not None else "<none>"
        return (
            f"ServiceType: '{describe_type(self.service_type)}', ServiceName: '{self.service_name}', "
            f"ImplementingType: '{implementing}', Lifetime: '{self.lifetime}'"
        )


class ConstructorParameter(BaseModel):
    """One parameter of the constructor selected for an implementing type.

    Attributes:
        declared_type: The type hint of the parameter.
        name: The parameter name, also used as a name-based disambiguator.
        owner: The implementing type that declares the constructor.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    declared_type: Any = Field(..., description="The declared type of the parameter.")
    name: str = Field(..., description="The parameter name.")
    owner: Any = Field(default=None, description="The type declaring the constructor.")

    def __str__(self) -> str:
        return f"{self.name}: {describe_type(self.declared_type)}"


class ValidationTarget(BaseModel):
    """A constructor parameter together with the effective lookup key.

    The lookup key differs from the declared parameter type once open generics
    have been normalized or a deferred wrapper has been unwrapped.

    Attributes:
        parameter: The constructor parameter under analysis.
        service_type: The effective service type used for lookup.
        service_name: The suggested service name used for disambiguation.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    parameter: ConstructorParameter
    service_type: Any
    service_name: str = ""

    @classmethod
    def for_parameter(cls, parameter: ConstructorParameter) -> "ValidationTarget":
        return cls(parameter=parameter, service_type=parameter.declared_type, service_name=parameter.name)

    def with_service(self, service_type: Any, service_name: str = "") -> "ValidationTarget":
        """Return a copy looking up another service for the same parameter."""
        return ValidationTarget(parameter=self.parameter, service_type=service_type, service_name=service_name)


class Finding(BaseModel):
    """A single validation result.

    Attributes:
        message: Human readable description of the problem.
        severity: The kind of problem.
        target: The validation target the finding is attributed to.
        registration: The consuming registration whose constructor declared the parameter.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    message: str
    severity: ValidationSeverity
    target: ValidationTarget
    registration: ServiceRegistration

    @property
    def parameter(self) -> ConstructorParameter:
        return self.target.parameter

    def __str__(self) -> str:
        return f"[{self.severity}] {self.message}"
