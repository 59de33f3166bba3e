"""
Read-only git queries against the dotfiles repository.

Boolean queries never raise: any failure (not a repository, git missing,
...) reads as "no". Listing tracked files returns an empty list when git
runs but reports failure, and raises RepositoryQueryError only when git
cannot be launched or its output cannot be decoded.
"""

import logging
import subprocess
from pathlib import Path
from typing import Protocol, runtime_checkable

from dotlint_core.errors import RepositoryQueryError

_logger = logging.getLogger("dotlint.git")

GIT = "git"


@runtime_checkable
class RepositoryInspector(Protocol):
    def is_tracked(self, path: str) -> bool: ...

    def is_ignored(self, path: str) -> bool: ...

    def list_tracked_files(self) -> list[str]: ...


class GitRepository:
    """RepositoryInspector backed by the `git` executable. No caching."""

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def _run(self, *args: str) -> subprocess.CompletedProcess[bytes]:
        return subprocess.run([GIT, *args], cwd=self.root, capture_output=True, check=False)

    def _succeeds(self, *args: str) -> bool:
        try:
            proc = self._run(*args)
        except OSError as e:
            _logger.debug("git %s failed to start: %s", " ".join(args), e)
            return False
        return proc.returncode == 0

    def is_tracked(self, path: str) -> bool:
        return self._succeeds("ls-files", "--error-unmatch", "--", path)

    def is_ignored(self, path: str) -> bool:
        return self._succeeds("check-ignore", "-q", "--", path)

    def list_tracked_files(self) -> list[str]:
        try:
            proc = self._run("ls-files")
        except OSError as e:
            raise RepositoryQueryError(f"Failed to run git ls-files in {self.root}: {e}") from e

        if proc.returncode != 0:
            _logger.debug(
                "git ls-files exited %d in %s: %s",
                proc.returncode,
                self.root,
                proc.stderr.decode("utf-8", errors="replace").strip(),
            )
            return []

        try:
            out = proc.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise RepositoryQueryError(f"Invalid UTF-8 in git ls-files output: {e}") from e

        return [line for line in out.splitlines() if line]
