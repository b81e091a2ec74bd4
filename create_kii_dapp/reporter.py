"""Completion report printed after every command succeeded."""

from __future__ import annotations

import shlex

from rich.console import Console

from create_kii_dapp.config import Config
from create_kii_dapp.models import InvocationConfig
from create_kii_dapp.planner import UnknownProjectTypeError
from create_kii_dapp.templates import TemplateRenderer
from create_kii_dapp.utils import console as default_console

COMPLETION_TEMPLATE = "completion.j2"


def render_completion(
    invocation: InvocationConfig,
    config: Config,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render the success banner and next-step instructions as Rich markup."""
    toolchain = config.toolchains.get(invocation.project_type)
    if toolchain is None:
        raise UnknownProjectTypeError(invocation.project_type)

    renderer = renderer or TemplateRenderer()
    return renderer.render(
        COMPLETION_TEMPLATE,
        {
            "tool_name": config.tool_name,
            "network_name": config.network_name,
            "shell_repo_name": shlex.quote(invocation.repo_name),
            "author_name": invocation.author_name,
            "backend_commands": toolchain.backend_commands,
            "dev_server_command": config.dev_server_command,
        },
    )


def report_completion(
    invocation: InvocationConfig,
    config: Config,
    console: Console | None = None,
) -> None:
    """Print the completion report to *console* (stdout by default).

    Lines are never wrapped: the snippets are meant to be copied verbatim.
    """
    (console or default_console).print(render_completion(invocation, config), soft_wrap=True)
