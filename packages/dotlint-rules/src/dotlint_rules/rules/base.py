from abc import ABC, abstractmethod
from collections.abc import Iterable

from dotlint_core.config import Config
from dotlint_core.models.issues import Issue, ValidationResult
from dotlint_core.repo.git import RepositoryInspector


class BaseRule(ABC):
    CODE: str = ""
    NAME: str = ""

    @abstractmethod
    def evaluate(self, config: Config, repo: RepositoryInspector) -> ValidationResult:
        """Check the repository and return this rule's result.

        Expected findings are returned as issues; only run-aborting problems raise.
        """
        ...

    def _result(self, issues: Iterable[Issue], name: str | None = None) -> ValidationResult:
        issues = tuple(issues)
        return ValidationResult(rule_name=name or self.NAME, passed=not issues, issues=issues)
