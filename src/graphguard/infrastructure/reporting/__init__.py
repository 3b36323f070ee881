"""
Reporting module.

Provides helpers to summarize, log and fail a build on validation findings.
"""

from .reporting import FindingReport, ValidationPolicy, ensure_valid, log_findings, summarize

__all__ = [
    "ValidationPolicy",
    "FindingReport",
    "ensure_valid",
    "log_findings",
    "summarize",
]
