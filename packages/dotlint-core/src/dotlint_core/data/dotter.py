"""
Dotter configuration documents.

Dotter keeps its deployment config under `.dotter/`: a shared `global.toml`
plus optional per-platform documents. Only the `files` tables matter here;
their keys are source paths relative to the repository root.
"""

from pathlib import Path

from dotlint_core.data.loader import load_toml_typed
from dotlint_core.errors import ConfigDocumentError
from dotlint_core.models.dotter import DotterConfig

DOTTER_DIR = ".dotter"
GLOBAL_CONFIG = f"{DOTTER_DIR}/global.toml"
PLATFORM_CONFIGS = (f"{DOTTER_DIR}/macos.toml",)


def load_dotter_config(path: str | Path) -> DotterConfig:
    """Load one dotter document. Any read or parse problem is fatal."""
    try:
        return load_toml_typed(Path(path), model=DotterConfig)
    except (FileNotFoundError, ValueError) as e:
        raise ConfigDocumentError(f"Failed to parse {path}: {e}") from e


def referenced_sources(dotfiles_dir: Path, documents: tuple[str, ...]) -> dict[str, str]:
    """Collect every source path referenced by the documents that exist.

    Returns source -> group of first reference, sorted by source.
    """
    sources: dict[str, str] = {}
    for rel in documents:
        path = dotfiles_dir / rel
        if not path.exists():
            continue
        for source, group in load_dotter_config(path).sources().items():
            sources.setdefault(source, group)
    return dict(sorted(sources.items()))
