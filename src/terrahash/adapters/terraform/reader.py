"""Read and fingerprint the modules Terraform has materialised."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from terrahash.adapters.hashing import DirectoryHasher
from terrahash.domain.errors import CorruptRecordError, HashingError, NotInitializedError

from .schema import ModulesManifest
from .translator import to_dependency_set

if TYPE_CHECKING:
    from terrahash.config import ProjectConfig
    from terrahash.domain.model import DependencySet
    from terrahash.domain.ports import Fingerprinter

    from .schema import ModuleRecord

log = getLogger(__name__)


def terraform_initialized(config: ProjectConfig) -> None:
    """Raise ``NotInitializedError`` unless ``terraform init`` has run."""

    log.debug("checking whether Terraform has been initialized in %s", config.source)
    if not config.terraform_path.is_dir():
        raise NotInitializedError(
            "terraform has not been initialized, run `terraform init` first",
            path=config.terraform_path,
        )
    if not config.manifest_path.is_file():
        raise NotInitializedError(
            "no modules record found, run `terraform init` first",
            path=config.manifest_path,
        )


def load_modules_manifest(config: ProjectConfig) -> ModulesManifest:
    path = config.manifest_path
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise NotInitializedError(f"unable to read modules record ({exc})", path=path) from exc
    try:
        return ModulesManifest.model_validate_json(raw)
    except ValidationError as exc:
        raise CorruptRecordError(
            f"could not decode modules record ({exc.error_count()} error(s))", path=path
        ) from exc


@dataclass(slots=True)
class TerraformManifestReader:
    fingerprint: Fingerprinter = field(default_factory=DirectoryHasher)

    def read_current_set(self, config: ProjectConfig) -> DependencySet:
        terraform_initialized(config)
        manifest = load_modules_manifest(config)

        def digest_for(record: ModuleRecord) -> str:
            path = config.resolve(record.dir)
            try:
                return self.fingerprint(path)
            except OSError as exc:
                raise HashingError(record.key, path=path, reason=str(exc)) from exc

        try:
            current = to_dependency_set(
                manifest.modules,
                digest_for=digest_for,
                managed_dir=config.terraform_dirname,
            )
        except ValueError as exc:
            raise CorruptRecordError(str(exc), path=config.manifest_path) from exc
        log.debug("module processing complete: %d external module(s)", len(current))
        return current
