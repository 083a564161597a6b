"""Configuration contracts."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator


class Replacement(BaseModel):
    """One literal ``source -> target`` token pair."""

    source: str = Field(min_length=1)
    target: str

    model_config = {"frozen": True}


class SubstitutionTable(BaseModel):
    """An explicit, ordered sequence of replacement pairs.

    The order given here only matters as the tie-break between source tokens of
    equal length; :meth:`ordered` always puts longer tokens first.
    """

    replacements: tuple[Replacement, ...] = ()

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_unique_sources(self) -> SubstitutionTable:
        seen: set[str] = set()
        for replacement in self.replacements:
            if replacement.source in seen:
                raise ValueError(f"duplicate source token: {replacement.source!r}")
            seen.add(replacement.source)
        return self

    @classmethod
    def from_pairs(cls, pairs: Mapping[str, str] | Iterable[tuple[str, str]]) -> SubstitutionTable:
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        return cls(replacements=tuple(Replacement(source=source, target=target) for source, target in items))

    def ordered(self) -> tuple[Replacement, ...]:
        # sorted() is stable with reverse=True, so equal lengths keep insertion order.
        return tuple(sorted(self.replacements, key=lambda r: len(r.source), reverse=True))

    def __len__(self) -> int:
        return len(self.replacements)


class TemplatePass(BaseModel):
    """One substitution pass over part of the materialized tree.

    With ``files`` unset the pass walks ``path`` recursively and honours the
    binary denylist; otherwise only the listed files under ``path`` are
    rewritten. ``optional`` passes skip listed files that do not exist.
    """

    name: str = Field(min_length=1)
    path: Path = Path(".")
    table: SubstitutionTable
    files: tuple[str, ...] | None = None
    optional: bool = False

    model_config = {"frozen": True}

    @property
    def recursive(self) -> bool:
        return self.files is None


class TemplateConfig(BaseModel):
    repo_url: str = Field(min_length=1)
    skip_extensions: frozenset[str] = frozenset()
    passes: tuple[TemplatePass, ...] = ()
    next_steps: tuple[str, ...] = ()

    model_config = {"frozen": True}

    @field_validator("skip_extensions", mode="after")
    @classmethod
    def normalize_extensions(cls, value: frozenset[str]) -> frozenset[str]:
        normalized = set()
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                raise ValueError("skip_extensions must not contain empty entries")
            normalized.add(ext if ext.startswith(".") else f".{ext}")
        return frozenset(normalized)

    @model_validator(mode="after")
    def validate_pass_names(self) -> TemplateConfig:
        names = [p.name for p in self.passes]
        if len(names) != len(set(names)):
            raise ValueError("template pass names must be unique")
        return self


class ProjectOptions(BaseModel):
    project_name: str
    target_dir: Path | None = None

    model_config = {"frozen": True}

    @field_validator("project_name", mode="after")
    @classmethod
    def validate_project_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("project name must not be empty")
        return value

    @property
    def resolved_target_dir(self) -> Path:
        if self.target_dir is None:
            return Path(self.project_name)
        return self.target_dir
