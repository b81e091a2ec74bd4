"""Command planning: turns an invocation into the three shell commands to run."""

from __future__ import annotations

import logging
import shlex

from create_kii_dapp.config import Config
from create_kii_dapp.models import CommandPlan, InvocationConfig, ProjectType

logger = logging.getLogger(__name__)


class ScaffoldError(Exception):
    """Base class for errors raised while scaffolding a project."""


class UnknownProjectTypeError(ScaffoldError):
    """Raised when a project type has no entry in the toolchain table."""

    def __init__(self, project_type: object) -> None:
        self.project_type = project_type
        super().__init__(f"Unknown project type: {project_type!r}")


def plan_commands(invocation: InvocationConfig, config: Config) -> CommandPlan:
    """Derive the clone/frontend/backend commands for *invocation*.

    The foundry template manages backend dependencies through git submodules,
    so its backend step only changes directory.

    Raises:
        UnknownProjectTypeError: If ``invocation.project_type`` is not in
            ``config.toolchains``.
    """
    toolchain = config.toolchains.get(invocation.project_type)
    if toolchain is None:
        raise UnknownProjectTypeError(invocation.project_type)

    target = shlex.quote(invocation.repo_name)

    clone_command = (
        f"git clone --depth {config.clone_depth} {toolchain.template_url} {target}"
    )
    frontend_command = f"cd {target} && cd frontend && {config.install_command}"
    backend_command = f"cd {target} && cd backend"
    if toolchain.install_backend:
        backend_command = f"{backend_command} && {config.install_command}"

    plan = CommandPlan(
        clone_command=clone_command,
        frontend_install_command=frontend_command,
        backend_install_command=backend_command,
    )
    logger.debug(
        "Planned %s commands for %s: %s",
        ProjectType(invocation.project_type).value,
        invocation.repo_name,
        plan.model_dump(),
    )
    return plan
