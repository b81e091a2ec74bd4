"""Runs one planned shell command behind a spinner."""

from __future__ import annotations

import logging

from rich.markup import escape

from create_kii_dapp.utils import console, create_progress, run_command

logger = logging.getLogger(__name__)


async def run_step(command: str, description: str) -> bool:
    """Run *command* through the shell with inherited stdio.

    A spinner labelled *description* is shown while the command runs and is
    replaced by a success or failure line once it exits.  No timeout is
    applied.

    Returns:
        ``True`` if the command exited with status 0, ``False`` otherwise.
        Failures are logged together with the command; nothing is raised.
    """
    label = f"[green]{escape(description)}[/green]"
    error: str | None = None

    with create_progress() as progress:
        progress.add_task(label, total=None)
        try:
            returncode = await run_command(command)
        except OSError as exc:
            error = str(exc) or exc.__class__.__name__
        else:
            if returncode != 0:
                error = f"exit status {returncode}"

    if error is not None:
        console.print(f"[bold red]✖[/bold red] {label}")
        logger.error("Failed to execute %s: %s", command, error)
        return False

    console.print(f"[bold green]✔[/bold green] {label}")
    return True
