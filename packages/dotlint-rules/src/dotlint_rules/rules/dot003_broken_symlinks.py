import stat
from pathlib import Path

from dotlint_core.codebase.debug import spy_trace
from dotlint_core.config import Config
from dotlint_core.models.issues import Issue, ValidationResult
from dotlint_core.repo.git import RepositoryInspector

from .base import BaseRule


def is_broken_symlink(path: Path) -> bool:
    """True if `path` itself is a symlink and following it fails."""
    try:
        st = path.lstat()
    except OSError:
        return False
    if not stat.S_ISLNK(st.st_mode):
        return False
    try:
        path.stat()
    except OSError:
        return True
    return False


class NoBrokenSymlinksRule(BaseRule):
    CODE = "DOT003"
    NAME = "No broken symlinks"

    @spy_trace
    def evaluate(self, config: Config, repo: RepositoryInspector) -> ValidationResult:
        issues = [
            Issue.error(f"Broken symlink: {file}").with_file(file)
            for file in repo.list_tracked_files()
            if is_broken_symlink(config.dotfiles_dir / file)
        ]
        return self._result(issues)
