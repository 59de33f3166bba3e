from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator, model_validator


class DotterGroup(BaseModel):
    """One dotter package table, e.g. `[default]` with its `[default.files]`."""

    model_config = ConfigDict(extra="ignore")
    # source path (repo-relative) -> target path or target table
    files: dict[str, Any] = Field(default_factory=dict)

    @field_validator("files", mode="before")
    @classmethod
    def _tables_only(cls, v):
        return v if isinstance(v, dict) else {}


class DotterConfig(RootModel[dict[str, DotterGroup]]):
    """A dotter document: group name -> group definition."""

    @model_validator(mode="before")
    @classmethod
    def _drop_non_tables(cls, data):
        # Top-level scalars (e.g. a stray `key = "value"`) are not groups
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if isinstance(v, dict)}
        return data

    def sources(self) -> dict[str, str]:
        """Map each referenced source path to the first group that names it."""
        out: dict[str, str] = {}
        for group_name, group in self.root.items():
            for source in group.files:
                out.setdefault(source, group_name)
        return out
