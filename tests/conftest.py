from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.helpers.terraform import TerraformProject

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TERRAHASH_SOURCE", raising=False)
    monkeypatch.delenv("TERRAHASH_LOG_LEVEL", raising=False)


@pytest.fixture
def terraform_project(tmp_path: Path) -> TerraformProject:
    """An initialised project with one registry module (``vnet``)."""

    project = TerraformProject(root=tmp_path)
    project.add_registry_module("vnet")
    return project


@pytest.fixture
def empty_project(tmp_path: Path) -> TerraformProject:
    """An initialised project that only has the root module."""

    project = TerraformProject(root=tmp_path)
    project.write_manifest()
    return project
