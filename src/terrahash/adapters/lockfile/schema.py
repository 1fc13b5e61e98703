"""Pydantic models describing the ``.terraform.module.hcl`` lock file.

Unlike Terraform's own record, modules are stored as a mapping keyed by module
key. The key of each mapping entry must equal the entry's ``Key`` field.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from terrahash.domain.model import DependencyEntry, DependencySet


class LockBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LockedModule(LockBaseModel):
    key: str = Field(alias="Key")
    source: str = Field(default="", alias="Source")
    version: str = Field(default="", alias="Version")
    dir: str = Field(alias="Dir")
    hash: str = Field(alias="Hash")

    @classmethod
    def from_entry(cls, entry: DependencyEntry) -> LockedModule:
        return cls(
            key=entry.key,
            source=entry.source,
            version=entry.version,
            dir=entry.local_path,
            hash=entry.digest,
        )

    def to_entry(self) -> DependencyEntry:
        return DependencyEntry(
            key=self.key,
            source=self.source,
            version=self.version,
            local_path=self.dir,
            digest=self.hash,
        )


class LockFileDocument(LockBaseModel):
    modules: dict[str, LockedModule] = Field(default_factory=dict, alias="Modules")

    @model_validator(mode="after")
    def _keys_match_entries(self) -> Self:
        for key, module in self.modules.items():
            if not key:
                raise ValueError("lock file contains an entry with an empty key")
            if key != module.key:
                raise ValueError(f"lock file entry {key!r} has mismatched Key {module.key!r}")
        return self

    @classmethod
    def from_dependency_set(cls, entries: DependencySet) -> LockFileDocument:
        return cls(modules={key: LockedModule.from_entry(entry) for key, entry in entries.items()})

    def to_dependency_set(self) -> DependencySet:
        return DependencySet(module.to_entry() for module in self.modules.values())

    def dumps(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2) + "\n"
