"""Shared utility functions for create-kii-dapp.

Provides async shell command execution and the Rich-based console helpers
(error messages, spinners, tables) used by the runner and the pipeline.
"""

from __future__ import annotations

import asyncio

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from create_kii_dapp.models import CommandPlan

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: str) -> int:
    """Run *cmd* through the system shell and wait for it to exit.

    The child inherits this process's stdin, stdout and stderr, and no
    timeout is applied.

    Returns:
        The child's exit status.
    """
    process = await asyncio.create_subprocess_shell(cmd)
    return await process.wait()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{message}[/bold red]")


def print_plan_table(plan: CommandPlan, repo_name: str, title: str = "Planned commands") -> None:
    """Print the planned commands as a numbered table.

    Args:
        plan: The command plan to display.
        repo_name: Target directory, used in the step descriptions.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Step")
    table.add_column("Command", style="cyan")

    for index, (command, description) in enumerate(plan.steps(repo_name), start=1):
        table.add_row(str(index), escape(description), escape(command))

    console.print(table)
    console.print()


def create_progress() -> Progress:
    """Create a transient Rich spinner for a single long-running command.

    Returns:
        A ``Progress`` instance suitable for use as a context manager.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )
