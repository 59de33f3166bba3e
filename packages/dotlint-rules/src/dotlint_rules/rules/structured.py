from abc import abstractmethod

from dotlint_core.codebase.debug import spy_trace
from dotlint_core.config import Config
from dotlint_core.models.issues import Issue, ValidationResult
from dotlint_core.repo.git import RepositoryInspector

from .base import BaseRule


class StructuredDataRule(BaseRule):
    """Strict syntax check over tracked files with the given extensions.

    Files that cannot be read are skipped; only content that was read and
    fails to parse is reported.
    """

    LABEL: str = ""
    EXTENSIONS: tuple[str, ...] = ()

    def selects(self, path: str) -> bool:
        return path.endswith(self.EXTENSIONS)

    def skips(self, path: str) -> bool:
        return False

    @abstractmethod
    def parses(self, text: str) -> bool: ...

    @spy_trace
    def evaluate(self, config: Config, repo: RepositoryInspector) -> ValidationResult:
        selected = [f for f in repo.list_tracked_files() if self.selects(f)]
        issues = []

        for file in selected:
            if self.skips(file):
                continue
            try:
                text = (config.dotfiles_dir / file).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                continue
            if not self.parses(text):
                issues.append(Issue.error(f"Invalid {self.LABEL} syntax: {file}").with_file(file))

        return self._result(issues, name=f"All {len(selected)} {self.LABEL} files are valid")
