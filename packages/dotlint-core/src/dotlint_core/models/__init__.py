from .dotter import DotterConfig, DotterGroup
from .issues import Issue, RunSummary, Severity, ValidationResult

__all__ = [
    "DotterConfig",
    "DotterGroup",
    "Issue",
    "RunSummary",
    "Severity",
    "ValidationResult",
]
