import logging
from typing import Dict, FrozenSet, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from graphguard.domain import Finding, ValidationFailedError, ValidationSeverity, describe_type

logger = logging.getLogger(__name__)

_LOG_LEVELS: Dict[ValidationSeverity, int] = {
    ValidationSeverity.CAPTIVE: logging.ERROR,
    ValidationSeverity.MISSING_DEPENDENCY: logging.ERROR,
    ValidationSeverity.AMBIGUOUS: logging.ERROR,
    ValidationSeverity.NOT_DISPOSED: logging.WARNING,
}


class ValidationPolicy(BaseModel):
    """Decides which findings fail the build.

    Attributes:
        fail_on: Severities that make ``ensure_valid`` raise.
    """

    model_config = ConfigDict(frozen=True)

    fail_on: FrozenSet[ValidationSeverity] = Field(
        default=frozenset(
            {
                ValidationSeverity.CAPTIVE,
                ValidationSeverity.MISSING_DEPENDENCY,
                ValidationSeverity.AMBIGUOUS,
            }
        ),
        description="Severities that fail validation.",
    )

    def failing(self, findings: Sequence[Finding]) -> List[Finding]:
        """Return the findings whose severity fails the build."""
        return [finding for finding in findings if finding.severity in self.fail_on]


class FindingReport(BaseModel):
    """JSON-serialisable projection of a finding.

    Attributes:
        severity: The kind of problem.
        message: Human readable description.
        service_type: Service type of the consuming registration.
        service_name: Service name of the consuming registration.
        parameter: Name of the offending constructor parameter.
        parameter_type: Declared type of the offending constructor parameter.
    """

    severity: ValidationSeverity
    message: str
    service_type: str
    service_name: str
    parameter: str
    parameter_type: str

    @classmethod
    def from_finding(cls, finding: Finding) -> "FindingReport":
        return cls(
            severity=finding.severity,
            message=finding.message,
            service_type=describe_type(finding.registration.service_type),
            service_name=finding.registration.service_name,
            parameter=finding.parameter.name,
            parameter_type=describe_type(finding.parameter.declared_type),
        )


def summarize(findings: Sequence[Finding]) -> Dict[ValidationSeverity, int]:
    """Count findings per severity, including severities with no findings."""
    summary = {severity: 0 for severity in ValidationSeverity}
    for finding in findings:
        summary[finding.severity] += 1
    return summary


def ensure_valid(findings: Sequence[Finding], policy: Optional[ValidationPolicy] = None) -> Sequence[Finding]:
    """Raise if any finding fails the policy.

    Args:
        findings: Findings returned by a validation pass.
        policy: The policy to apply, defaults to failing on everything but ``NOT_DISPOSED``.

    Returns:
        The findings, unchanged, when none of them fails the policy.

    Raises:
        ValidationFailedError: If at least one finding fails the policy.

    Example:
        >>> findings = GraphValidator().validate(catalog)
        >>> ensure_valid(findings)  # Stop startup on captive or missing dependencies
    """
    failing = (policy or ValidationPolicy()).failing(findings)
    if failing:
        raise ValidationFailedError(failing)
    return findings


def log_findings(findings: Sequence[Finding], target_logger: Optional[logging.Logger] = None) -> None:
    """Log each finding at a level derived from its severity."""
    target_logger = target_logger or logger
    for finding in findings:
        target_logger.log(_LOG_LEVELS[finding.severity], "%s", finding)
