"""Interactive questions asked before scaffolding.

Uses Rich prompts: a single-choice toolchain selection and an optional
free-text author name.  Values already given on the command line are not
asked again.
"""

from __future__ import annotations

from rich.prompt import Prompt

from create_kii_dapp.models import InvocationConfig, ProjectType
from create_kii_dapp.utils import console


def ask_project_type() -> ProjectType:
    """Ask which toolchain to scaffold; the first choice is preselected."""
    choices = ProjectType.choices()
    answer = Prompt.ask(
        "Please select the project type",
        choices=choices,
        default=choices[0],
        console=console,
    )
    return ProjectType(answer)


def ask_author_name() -> str:
    """Ask for the author's name.  An empty answer is accepted."""
    return Prompt.ask(
        "Enter your name (optional)",
        default="",
        show_default=False,
        console=console,
    )


def collect_invocation(
    repo_name: str,
    project_type: ProjectType | str | None = None,
    author_name: str | None = None,
) -> InvocationConfig:
    """Build the invocation config, prompting for anything not supplied.

    Args:
        repo_name: Target directory from the command line.
        project_type: Toolchain given via ``--project-type``, if any.
        author_name: Name given via ``--author``, if any.

    Returns:
        A frozen ``InvocationConfig``.
    """
    if project_type is None:
        project_type = ask_project_type()
    if author_name is None:
        author_name = ask_author_name()

    return InvocationConfig(
        repo_name=repo_name,
        project_type=ProjectType(project_type),
        author_name=author_name,
    )
