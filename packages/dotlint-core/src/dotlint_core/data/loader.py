import tomllib
from pathlib import Path
from typing import Any, TypeVar, overload

from pydantic import TypeAdapter, ValidationError

T = TypeVar("T")


# -------------------------------
# Internal raw TOML reader (single source of truth)
# -------------------------------


def _read_toml_raw(path: Path | str) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {p}")

    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"Unable to decode UTF-8 in {p}: {e}") from e
    except OSError as e:
        raise ValueError(f"Unable to read {p}: {e}") from e

    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {p}: {e}") from e


# -------------------------------
# Public typed TOML loader
# -------------------------------


@overload
def load_toml_typed(path: Path | str, *, adapter: TypeAdapter[T]) -> T: ...


@overload
def load_toml_typed(path: Path | str, *, model: type[T]) -> T: ...


def load_toml_typed(
    path: Path | str,
    *,
    adapter: TypeAdapter[T] | None = None,
    model: type[T] | None = None,
) -> T:
    """Read TOML and validate/parse it into a typed object using Pydantic v2.

    Exactly one of {adapter, model} must be supplied.

    Example:
        load_toml_typed(".dotter/global.toml", model=DotterConfig)
    """
    if (adapter is None) == (model is None):
        raise ValueError("Provide exactly one of 'adapter' or 'model'.")

    data = _read_toml_raw(path)

    try:
        if adapter is not None:
            return adapter.validate_python(data)
        return TypeAdapter(model).validate_python(data)  # type: ignore[arg-type]
    except ValidationError as e:
        # Normalize error so callers see the file path in the message
        raise ValueError(f"Invalid structure in {path}: {e}") from e
