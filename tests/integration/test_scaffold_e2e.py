"""End-to-end scaffold against a local template repository.

Clones a throw-away git repository through the real shell, with ``true``
standing in for the package manager so no network access is needed.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest
from rich.console import Console

from create_kii_dapp.config import Config, ToolchainConfig
from create_kii_dapp.models import InvocationConfig, ProjectType
from create_kii_dapp.pipeline import EXIT_FAILURE, EXIT_SUCCESS, ScaffoldPipeline


pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed"),
]


@pytest.fixture
def template_repo(tmp_path: Path) -> Path:
    """A git repository shaped like the dApp templates."""
    repo_dir = tmp_path / "template"
    (repo_dir / "frontend").mkdir(parents=True)
    (repo_dir / "backend").mkdir()
    (repo_dir / "frontend" / "package.json").write_text("{}\n", encoding="utf-8")
    (repo_dir / "backend" / "package.json").write_text("{}\n", encoding="utf-8")

    def git(*args: str) -> None:
        subprocess.run(["git", *args], cwd=repo_dir, check=True, capture_output=True)

    git("init")
    git("config", "user.email", "test@create-kii-dapp.local")
    git("config", "user.name", "create-kii-dapp Test")
    git("config", "commit.gpgsign", "false")
    git("add", ".")
    git("commit", "-m", "Initial template")
    return repo_dir


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    target = tmp_path / "work"
    target.mkdir()
    monkeypatch.chdir(target)
    return target


def _local_config(template_repo: Path) -> Config:
    url = template_repo.as_uri()
    return Config(
        package_manager="true",
        toolchains={
            ProjectType.HARDHAT: ToolchainConfig(
                template_url=url, install_backend=True, backend_commands=["npx hardhat test"]
            ),
            ProjectType.FOUNDRY: ToolchainConfig(
                template_url=url, install_backend=False, backend_commands=["forge test"]
            ),
        },
    )


@pytest.mark.asyncio
async def test_hardhat_scaffold_clones_template(template_repo: Path, workdir: Path, monkeypatch):
    monkeypatch.setattr("create_kii_dapp.reporter.default_console", Console(record=True))
    invocation = InvocationConfig(repo_name="my-dapp", project_type=ProjectType.HARDHAT)

    code = await ScaffoldPipeline(_local_config(template_repo)).run(invocation)

    assert code == EXIT_SUCCESS
    assert (workdir / "my-dapp" / "frontend" / "package.json").is_file()
    assert (workdir / "my-dapp" / "backend" / "package.json").is_file()


@pytest.mark.asyncio
async def test_existing_target_aborts(template_repo: Path, workdir: Path):
    (workdir / "my-dapp").mkdir()
    (workdir / "my-dapp" / "keep.txt").write_text("mine", encoding="utf-8")
    invocation = InvocationConfig(repo_name="my-dapp", project_type=ProjectType.FOUNDRY)

    code = await ScaffoldPipeline(_local_config(template_repo)).run(invocation)

    # git refuses to clone into a non-empty directory.
    assert code == EXIT_FAILURE
    assert not (workdir / "my-dapp" / "frontend").exists()
