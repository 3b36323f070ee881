from enum import Enum


class Lifetime(str, Enum):
    """Built-in lifetimes a registration can be tagged with.

    Attributes:
        TRANSIENT: New instance on each resolution, owned by nobody.
        PER_REQUEST: Single instance per resolution request.
        PER_SCOPE: Single instance per scope (e.g., per HTTP request).
        PER_CONTAINER: Single instance shared for the lifetime of the container.
    """

    TRANSIENT = "transient"
    PER_REQUEST = "per_request"
    PER_SCOPE = "per_scope"
    PER_CONTAINER = "per_container"

    def __str__(self) -> str:
        return self.value


class ValidationSeverity(str, Enum):
    """Kind of misconfiguration reported by a finding.

    Attributes:
        CAPTIVE: A longer-lived service holds a shorter-lived dependency.
        NOT_DISPOSED: A transient disposable dependency has no owner to release it.
        MISSING_DEPENDENCY: No registration satisfies a constructor parameter.
        AMBIGUOUS: Several registrations compete and none is a clear winner.
    """

    CAPTIVE = "captive"
    NOT_DISPOSED = "not_disposed"
    MISSING_DEPENDENCY = "missing_dependency"
    AMBIGUOUS = "ambiguous"

    def __str__(self) -> str:
        return self.value
