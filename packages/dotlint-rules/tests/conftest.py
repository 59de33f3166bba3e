from dataclasses import dataclass, field

import pytest
from dotlint_core.config import Config


@dataclass
class FakeRepository:
    """In-memory RepositoryInspector; no git subprocess involved."""

    tracked: list[str] = field(default_factory=list)
    ignored: set[str] = field(default_factory=set)
    calls: list[tuple[str, str]] = field(default_factory=list)

    def is_tracked(self, path: str) -> bool:
        self.calls.append(("is_tracked", path))
        return path in self.tracked

    def is_ignored(self, path: str) -> bool:
        self.calls.append(("is_ignored", path))
        return path in self.ignored

    def list_tracked_files(self) -> list[str]:
        self.calls.append(("list_tracked_files", ""))
        return list(self.tracked)


@pytest.fixture
def fake_repo():
    return FakeRepository()


@pytest.fixture
def dotfiles(tmp_path):
    """Repository root with a helper to write files relative to it."""

    class Root:
        path = tmp_path

        def write(self, rel: str, content: str = "") -> str:
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
            return rel

        def dotter(self, content: str, name: str = "global.toml") -> None:
            self.write(f".dotter/{name}", content)

    return Root()


@pytest.fixture
def config(tmp_path):
    return Config(dotfiles_dir=tmp_path)
