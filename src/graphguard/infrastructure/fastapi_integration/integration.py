from typing import Callable, Dict, Iterable, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from graphguard.application import GraphValidator
from graphguard.domain import ServiceRegistration, ValidationSeverity
from graphguard.infrastructure.reporting import FindingReport, ValidationPolicy, summarize

CatalogSource = Callable[[], Iterable[ServiceRegistration]]


class ValidationResponse(BaseModel):
    """Response body of the diagnostics endpoint.

    Attributes:
        valid: False when at least one finding fails the policy.
        summary: Number of findings per severity.
        findings: The findings in discovery order.
    """

    valid: bool
    summary: Dict[ValidationSeverity, int]
    findings: List[FindingReport]


def create_validator_dependency(validator: Optional[GraphValidator] = None) -> Callable[[], GraphValidator]:
    """Create a FastAPI Depends() callable returning a shared validator.

    Args:
        validator: The validator to share, a default one is created if omitted.

    Returns:
        A callable that FastAPI can use with Depends().
    """
    shared = validator or GraphValidator()

    def dependency() -> GraphValidator:
        """Return the shared validator."""
        return shared

    return dependency


def create_validation_router(
    catalog_source: CatalogSource,
    validator: Optional[GraphValidator] = None,
    policy: Optional[ValidationPolicy] = None,
    path: str = "/diagnostics/dependencies",
) -> APIRouter:
    """Create a router exposing dependency graph diagnostics.

    The catalog is read from ``catalog_source`` on every request, so the
    endpoint always reports on the current registrations.

    Args:
        catalog_source: Callable returning the current catalog snapshot.
        validator: Validator to run, defaults to one with the default collaborators.
        policy: Decides whether the graph is reported as valid.
        path: Path of the diagnostics endpoint.

    Returns:
        A router to include in the application.

    Example:
        >>> app = FastAPI()
        >>> app.include_router(create_validation_router(lambda: catalog))
        >>>
        >>> # GET /diagnostics/dependencies
        >>> # {"valid": false, "summary": {"captive": 1, ...}, "findings": [...]}
    """
    router = APIRouter()
    get_validator = create_validator_dependency(validator)
    active_policy = policy or ValidationPolicy()

    @router.get(path, response_model=ValidationResponse)
    def validate_dependencies(graph_validator: GraphValidator = Depends(get_validator)) -> ValidationResponse:
        """Validate the current catalog and report the findings."""
        findings = graph_validator.validate(catalog_source())
        return ValidationResponse(
            valid=not active_policy.failing(findings),
            summary=summarize(findings),
            findings=[FindingReport.from_finding(finding) for finding in findings],
        )

    return router
