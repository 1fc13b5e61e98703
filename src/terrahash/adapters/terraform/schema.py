"""Pydantic models describing Terraform's ``.terraform/modules/modules.json``."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TerraformBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ModuleRecord(TerraformBaseModel):
    """One module Terraform installed; the root module has an empty key."""

    key: str = Field(alias="Key")
    source: str = Field(default="", alias="Source")
    version: str = Field(default="", alias="Version")
    dir: str = Field(alias="Dir")

    @property
    def is_root(self) -> bool:
        return not self.key


class ModulesManifest(TerraformBaseModel):
    modules: list[ModuleRecord] = Field(default_factory=list, alias="Modules")
