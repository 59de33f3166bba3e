from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["error", "warning"]


class Issue(BaseModel):
    """A single finding produced by a rule."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    severity: Severity
    message: str
    file: str | None = None
    fix_suggestion: str | None = None

    @classmethod
    def error(cls, message: str) -> "Issue":
        return cls(severity="error", message=message)

    @classmethod
    def warning(cls, message: str) -> "Issue":
        return cls(severity="warning", message=message)

    def with_file(self, file: str) -> "Issue":
        return self.model_copy(update={"file": file})

    def with_fix(self, fix: str) -> "Issue":
        return self.model_copy(update={"fix_suggestion": fix})

    @property
    def is_error(self) -> bool:
        return self.severity == "error"


class ValidationResult(BaseModel):
    """Outcome of one rule. `passed` follows the rule's own pass policy."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    rule_name: str
    passed: bool
    issues: tuple[Issue, ...] = ()

    @property
    def errors(self) -> list[Issue]:
        return [i for i in self.issues if i.is_error]

    @property
    def warnings(self) -> list[Issue]:
        return [i for i in self.issues if not i.is_error]


class RunSummary(BaseModel):
    """Aggregate over every result of a run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    total_issues: int = Field(ge=0)
    errors: int = Field(ge=0)
    warnings: int = Field(ge=0)
    exit_code: int
    # Remediation groups, printed only in fix mode on failure
    ignored_files: tuple[str, ...] = ()
    untracked_files: tuple[str, ...] = ()

    @property
    def failed(self) -> bool:
        return self.errors > 0
