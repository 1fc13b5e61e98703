from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING

import pytest

from terrahash import __version__
from terrahash.adapters.lockfile import JsonLockStore
from terrahash.ui import cli
from tests.helpers.terraform import TerraformProject

if TYPE_CHECKING:
    from pathlib import Path


def _run(*args: str) -> int:
    try:
        cli.main(list(args))
    except SystemExit as exc:
        return int(exc.code or 0)
    return 0


def _tamper_lock(project: TerraformProject, key: str, **fields: str) -> None:
    payload = json.loads(project.lock_path.read_text())
    payload["Modules"][key].update(fields)
    project.lock_path.write_text(json.dumps(payload, indent=2))


def test_init_creates_lock_file_with_current_modules(
    terraform_project: TerraformProject,
) -> None:
    assert _run("init", "--source", str(terraform_project.root)) == 0

    locked = JsonLockStore().read(terraform_project.lock_path)
    assert list(locked) == ["vnet"]
    assert locked["vnet"].version == "4.1.0"


def test_init_fails_when_lock_file_exists(terraform_project: TerraformProject) -> None:
    assert _run("init", "-s", str(terraform_project.root)) == 0
    before = terraform_project.lock_path.read_bytes()

    assert _run("init", "-s", str(terraform_project.root)) == 1
    assert terraform_project.lock_path.read_bytes() == before


def test_init_fails_when_terraform_not_initialized(tmp_path: Path) -> None:
    assert _run("init", "--source", str(tmp_path)) == 1


def test_check_passes_after_init(
    terraform_project: TerraformProject, capsys: pytest.CaptureFixture[str]
) -> None:
    _run("init", "--source", str(terraform_project.root))

    assert _run("check", "--source", str(terraform_project.root)) == 0
    assert "All modules match the lock file." in capsys.readouterr().out


def test_check_fails_on_non_matching_hash(
    terraform_project: TerraformProject, capsys: pytest.CaptureFixture[str]
) -> None:
    _run("init", "--source", str(terraform_project.root))
    _tamper_lock(terraform_project, "vnet", Hash="newhash")

    assert _run("check", "--source", str(terraform_project.root)) == 1
    out = capsys.readouterr().out
    assert "Non matching modules were found:" in out
    assert "vnet" in out


def test_check_fails_on_non_matching_version(terraform_project: TerraformProject) -> None:
    _run("init", "--source", str(terraform_project.root))
    _tamper_lock(terraform_project, "vnet", Version="4.0.0")

    assert _run("check", "--source", str(terraform_project.root)) == 1


def test_check_fails_on_module_missing_from_lock_file(
    terraform_project: TerraformProject, capsys: pytest.CaptureFixture[str]
) -> None:
    _run("init", "--source", str(terraform_project.root))
    terraform_project.add_registry_module("subnet")

    assert _run("check", "--source", str(terraform_project.root)) == 1
    assert "not found in the lock file" in capsys.readouterr().out


def test_check_ignores_module_removed_from_configuration(
    terraform_project: TerraformProject,
) -> None:
    terraform_project.add_registry_module("subnet")
    _run("init", "--source", str(terraform_project.root))
    terraform_project.records = [r for r in terraform_project.records if r["Key"] != "subnet"]
    terraform_project.write_manifest()

    assert _run("check", "--source", str(terraform_project.root)) == 0


def test_check_fails_after_module_content_changes(terraform_project: TerraformProject) -> None:
    _run("init", "--source", str(terraform_project.root))
    module_file = terraform_project.root / ".terraform" / "modules" / "vnet" / "main.tf"
    module_file.write_text("# tampered\n")

    assert _run("check", "--source", str(terraform_project.root)) == 1


def test_check_without_lock_file_fails(terraform_project: TerraformProject) -> None:
    assert _run("check", "--source", str(terraform_project.root)) == 1


def test_upgrade_without_changes_does_not_write(
    terraform_project: TerraformProject, capsys: pytest.CaptureFixture[str]
) -> None:
    _run("init", "--source", str(terraform_project.root))
    before = terraform_project.lock_path.stat().st_mtime_ns

    assert _run("upgrade", "--source", str(terraform_project.root)) == 0
    assert "No changes to the lock file." in capsys.readouterr().out
    assert terraform_project.lock_path.stat().st_mtime_ns == before


def test_upgrade_auto_approve_rewrites_lock_file(terraform_project: TerraformProject) -> None:
    _run("init", "--source", str(terraform_project.root))
    terraform_project.set_version("vnet", "4.2.0")
    terraform_project.add_registry_module("subnet")

    assert _run("upgrade", "--auto-approve", "--source", str(terraform_project.root)) == 0

    locked = JsonLockStore().read(terraform_project.lock_path)
    assert list(locked) == ["subnet", "vnet"]
    assert locked["vnet"].version == "4.2.0"
    assert _run("check", "--source", str(terraform_project.root)) == 0


def test_upgrade_interactive_yes_rewrites_lock_file(
    terraform_project: TerraformProject, monkeypatch: pytest.MonkeyPatch
) -> None:
    _run("init", "--source", str(terraform_project.root))
    terraform_project.set_version("vnet", "4.2.0")
    monkeypatch.setattr("sys.stdin", io.StringIO("yes\n"))

    assert _run("upgrade", "--source", str(terraform_project.root)) == 0
    assert JsonLockStore().read(terraform_project.lock_path)["vnet"].version == "4.2.0"


@pytest.mark.parametrize("answer", ["no\n", "\n", "", "YES\n"])
def test_upgrade_rejection_leaves_lock_file_byte_identical(
    terraform_project: TerraformProject, monkeypatch: pytest.MonkeyPatch, answer: str
) -> None:
    _run("init", "--source", str(terraform_project.root))
    before = terraform_project.lock_path.read_bytes()
    terraform_project.set_version("vnet", "4.2.0")
    monkeypatch.setattr("sys.stdin", io.StringIO(answer))

    assert _run("upgrade", "--source", str(terraform_project.root)) == 1
    assert terraform_project.lock_path.read_bytes() == before


def test_source_can_come_from_environment(
    terraform_project: TerraformProject, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TERRAHASH_SOURCE", str(terraform_project.root))

    assert _run("init") == 0
    assert terraform_project.lock_path.exists()


def test_source_before_command(terraform_project: TerraformProject) -> None:
    assert _run("-s", str(terraform_project.root), "init") == 0
    assert _run("--source", str(terraform_project.root), "-v", "check") == 0


@pytest.mark.parametrize(
    "argv",
    [
        ["-s", "infra", "-v", "check"],
        ["check", "-s", "infra", "-v"],
        ["-v", "check", "--source", "infra"],
    ],
)
def test_common_options_accepted_on_either_side_of_command(argv: list[str]) -> None:
    args = cli._parse_args(argv)  # noqa: SLF001

    assert args.command == "check"
    assert args.source == "infra"
    assert args.verbose is True


def test_common_options_default_when_omitted() -> None:
    args = cli._parse_args(["check"])  # noqa: SLF001

    assert args.source is None
    assert args.verbose is False


def test_version_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run("version") == 0
    assert capsys.readouterr().out.strip() == f"terrahash version is {__version__}"


def test_invalid_log_level_exits_with_usage_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERRAHASH_LOG_LEVEL", "chatty")

    assert _run("version") == 2


def test_missing_command_is_usage_error() -> None:
    assert _run() == 2
