"""Data models that flow through a single create-kii-dapp invocation.

``InvocationConfig`` is built once from the command line and the interactive
answers; ``CommandPlan`` is derived from it by the planner.  Both are frozen
Pydantic v2 models so nothing downstream can mutate them.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectType(str, Enum):
    """Smart-contract toolchain the generated project is built on."""

    HARDHAT = "hardhat"
    FOUNDRY = "foundry"

    @classmethod
    def choices(cls) -> list[str]:
        """Return the selectable values in prompt order."""
        return [member.value for member in cls]


class InvocationConfig(BaseModel):
    """Everything the user told us: target directory, toolchain, author."""

    model_config = ConfigDict(frozen=True)

    repo_name: str = Field(..., min_length=1, description="Directory to clone the template into")
    project_type: ProjectType
    author_name: str = Field(default="", description="Optional name for the thank-you line")

    @field_validator("repo_name")
    @classmethod
    def _repo_name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("repository name must not be blank")
        return value

    @field_validator("author_name")
    @classmethod
    def _strip_author(cls, value: str) -> str:
        return value.strip()


class CommandPlan(BaseModel):
    """The three shell commands executed, in order, for one invocation."""

    model_config = ConfigDict(frozen=True)

    clone_command: str
    frontend_install_command: str
    backend_install_command: str

    def steps(self, repo_name: str) -> Iterator[tuple[str, str]]:
        """Yield ``(command, description)`` pairs in execution order."""
        yield self.clone_command, "Cloning the repository"
        yield (
            self.frontend_install_command,
            f"Installing frontend dependencies for {repo_name}",
        )
        yield (
            self.backend_install_command,
            f"Installing backend dependencies for {repo_name}",
        )
