import logging
from collections.abc import Iterable, Sequence
from typing import Protocol

from dotlint_core.codebase.debug import spy_trace
from dotlint_core.config import Config
from dotlint_core.models.issues import Issue, RunSummary, ValidationResult
from dotlint_core.repo.git import GitRepository, RepositoryInspector

from .rules.base import BaseRule
from .rules.dot001_config_exists import DotterConfigExistsRule
from .rules.dot002_config_refs_tracked import DotterFilesTrackedRule
from .rules.dot003_broken_symlinks import NoBrokenSymlinksRule
from .rules.dot004_toml_valid import TomlFilesValidRule
from .rules.dot005_json_valid import JsonFilesValidRule

_logger = logging.getLogger("dotlint.checker")

GITIGNORE_FIX_MARKER = ".gitignore"
GIT_ADD_FIX_MARKER = "git add"


def default_rules() -> tuple[BaseRule, ...]:
    return (
        DotterConfigExistsRule(),
        DotterFilesTrackedRule(),
        NoBrokenSymlinksRule(),
        TomlFilesValidRule(),
        JsonFilesValidRule(),
    )


class Reporter(Protocol):
    def print_result(self, result: ValidationResult) -> None: ...

    def print_summary(self, summary: RunSummary, fix_mode: bool) -> None: ...


def _files_with_fix(issues: Iterable[Issue], marker: str) -> tuple[str, ...]:
    return tuple(i.file for i in issues if i.file and i.fix_suggestion and marker in i.fix_suggestion)


class Validator:
    def __init__(
        self,
        config: Config,
        repo: RepositoryInspector | None = None,
        rules: Sequence[BaseRule] | None = None,
    ):
        self.config = config
        self.repo = repo if repo is not None else GitRepository(config.dotfiles_dir)
        self.rules = tuple(rules) if rules is not None else default_rules()

    @spy_trace
    def run_rules(self) -> list[ValidationResult]:
        """Run every rule in order. A DotlintError from any rule aborts the run."""
        results = []
        for rule in self.rules:
            _logger.info("Checking %s (%s)...", rule.NAME, rule.CODE)
            results.append(rule.evaluate(self.config, self.repo))
        return results

    def summarize(self, results: Sequence[ValidationResult]) -> RunSummary:
        issues = [i for r in results for i in r.issues]
        errors = sum(1 for i in issues if i.is_error)
        return RunSummary(
            total_issues=len(issues),
            errors=errors,
            warnings=len(issues) - errors,
            exit_code=1 if errors else 0,
            ignored_files=_files_with_fix(issues, GITIGNORE_FIX_MARKER),
            untracked_files=_files_with_fix(issues, GIT_ADD_FIX_MARKER),
        )

    def validate(self, reporter: Reporter) -> int:
        results = self.run_rules()
        for result in results:
            reporter.print_result(result)
        summary = self.summarize(results)
        reporter.print_summary(summary, self.config.fix_mode)
        return summary.exit_code
