"""Application layer - Per-registration findings sink."""

from typing import List

from graphguard.domain import Finding, ServiceRegistration, ValidationSeverity, ValidationTarget


class FindingCollector:
    """Accumulates findings for the constructor of one registration.

    Attributes:
        registration: The consuming registration being validated.
        findings: Findings in discovery order.
    """

    def __init__(self, registration: ServiceRegistration) -> None:
        self.registration = registration
        self.findings: List[Finding] = []

    def add(self, target: ValidationTarget, severity: ValidationSeverity, message: str) -> None:
        self.findings.append(
            Finding(message=message, severity=severity, target=target, registration=self.registration)
        )

    def __len__(self) -> int:
        return len(self.findings)
