import logging

from dotlint_core.codebase.debug import spy_trace
from dotlint_core.config import Config
from dotlint_core.data.dotter import GLOBAL_CONFIG, PLATFORM_CONFIGS, referenced_sources
from dotlint_core.models.issues import Issue, ValidationResult
from dotlint_core.repo.git import RepositoryInspector

from .base import BaseRule

_logger = logging.getLogger("dotlint.rules")


class DotterFilesTrackedRule(BaseRule):
    """Every source referenced from a dotter `files` table exists and is in git.

    Unlike the syntax rules, a broken dotter document is not collected as an
    issue: ConfigDocumentError propagates and aborts the run.
    """

    CODE = "DOT002"
    NAME = "Dotter files exist and are tracked"
    DOCUMENTS = (GLOBAL_CONFIG, *PLATFORM_CONFIGS)

    @spy_trace
    def evaluate(self, config: Config, repo: RepositoryInspector) -> ValidationResult:
        sources = referenced_sources(config.dotfiles_dir, self.DOCUMENTS)
        _logger.info("Found %d files referenced in dotter configs", len(sources))

        issues = [issue for source, group in sources.items() if (issue := self._check(config, repo, source, group))]

        # Warning-only results (untracked but not ignored) still pass
        passed = all(not i.is_error for i in issues)
        return ValidationResult(rule_name=self.NAME, passed=passed, issues=tuple(issues))

    def _check(self, config: Config, repo: RepositoryInspector, source: str, group: str) -> Issue | None:
        if not (config.dotfiles_dir / source).exists():
            return Issue.error(f"File missing: {source} (from {group})").with_file(source)

        if repo.is_tracked(source):
            return None

        if repo.is_ignored(source):
            return (
                Issue.error(f"File ignored by git: {source} (from {group})")
                .with_file(source)
                .with_fix(f"Add to .gitignore: !{source}")
            )
        return (
            Issue.warning(f"File not tracked: {source} (from {group})")
            .with_file(source)
            .with_fix(f"Run: git add {source}")
        )
