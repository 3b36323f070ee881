from typing import TYPE_CHECKING, Any, Optional, Sequence

if TYPE_CHECKING:
    from graphguard.domain.models import Finding


class GraphGuardError(Exception):
    """Base exception for graphguard errors."""


class InvalidRankError(GraphGuardError):
    """Raised when a lifetime rank is not a non-negative integer.

    Attributes:
        lifetime: The lifetime kind the rank was meant for.
        rank: The rejected rank value.
    """

    def __init__(self, lifetime: Any, rank: Any) -> None:
        self.lifetime = lifetime
        self.rank = rank
        super().__init__(f"Rank for lifetime '{lifetime}' must be a non-negative integer, got {rank!r}")


class ConstructorSelectionError(GraphGuardError):
    """Raised when a constructor cannot be turned into a parameter list.

    This occurs when:
    - A constructor parameter lacks a type hint and has no default value.
    - The constructor signature cannot be introspected.

    Attributes:
        implementing_type: The type whose constructor was inspected.
        reason: Optional reason for the failure.
    """

    def __init__(self, implementing_type: Any, reason: Optional[str] = None) -> None:
        self.implementing_type = implementing_type
        self.reason = reason
        name = getattr(implementing_type, "__name__", repr(implementing_type))
        message = f"Cannot select constructor for type: {name}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)


class ValidationFailedError(GraphGuardError):
    """Raised by a reporting policy when findings should fail the build.

    Attributes:
        findings: The findings that triggered the failure.
    """

    def __init__(self, findings: Sequence["Finding"]) -> None:
        self.findings = list(findings)
        lines = [f"  [{finding.severity}] {finding.message}" for finding in self.findings]
        message = f"Dependency graph validation failed with {len(self.findings)} finding(s)"
        if lines:
            message += ":\n" + "\n".join(lines)
        super().__init__(message)
