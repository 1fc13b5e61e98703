"""Public interface for the Terraform module record adapter."""

from __future__ import annotations

from .reader import TerraformManifestReader, load_modules_manifest, terraform_initialized
from .schema import ModuleRecord, ModulesManifest
from .translator import is_fetched, to_dependency_set

__all__ = [
    "ModuleRecord",
    "ModulesManifest",
    "TerraformManifestReader",
    "is_fetched",
    "load_modules_manifest",
    "terraform_initialized",
    "to_dependency_set",
]
