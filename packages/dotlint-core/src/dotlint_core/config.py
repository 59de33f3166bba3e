import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DOTFILES_DIR_ENV = "DOTFILES_DIR"


@dataclass(frozen=True)
class Config:
    """Run parameters shared read-only by every rule."""

    dotfiles_dir: Path
    verbose: bool = False
    fix_mode: bool = False

    @classmethod
    def from_env(
        cls,
        *,
        verbose: bool = False,
        fix_mode: bool = False,
        environ: Mapping[str, str] | None = None,
    ) -> "Config":
        env = os.environ if environ is None else environ
        raw = env.get(DOTFILES_DIR_ENV, "").strip()
        dotfiles_dir = Path(raw) if raw else Path.cwd()
        return cls(dotfiles_dir=dotfiles_dir, verbose=verbose, fix_mode=fix_mode)
