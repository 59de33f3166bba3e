from dotlint_core.codebase.debug import spy_trace
from dotlint_core.config import Config
from dotlint_core.data.dotter import GLOBAL_CONFIG
from dotlint_core.models.issues import Issue, ValidationResult
from dotlint_core.repo.git import RepositoryInspector

from .base import BaseRule


class DotterConfigExistsRule(BaseRule):
    CODE = "DOT001"
    NAME = "Dotter configuration files exist"

    @spy_trace
    def evaluate(self, config: Config, repo: RepositoryInspector) -> ValidationResult:
        issues = []
        if not (config.dotfiles_dir / GLOBAL_CONFIG).exists():
            issues.append(Issue.error("Dotter global.toml not found").with_file(GLOBAL_CONFIG))
        return self._result(issues)
