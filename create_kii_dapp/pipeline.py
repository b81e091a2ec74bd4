"""create-kii-dapp pipeline orchestrator.

Scaffolds a KiiChain dApp in one linear pass:

1. COLLECT  -- repository name from argv, toolchain and author from prompts.
2. PLAN     -- derive the clone / frontend / backend commands.
3. RUN      -- execute them in order, aborting on the first failure.
4. REPORT   -- print toolchain-specific next steps.

Usage::

    create-kii-dapp my-dapp
    create-kii-dapp my-dapp --project-type foundry --author Ada
    python -m create_kii_dapp my-dapp --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError
from rich.markup import escape

from create_kii_dapp import __version__
from create_kii_dapp.config import Config
from create_kii_dapp.logging_setup import setup_logging
from create_kii_dapp.models import InvocationConfig, ProjectType
from create_kii_dapp.planner import ScaffoldError, plan_commands
from create_kii_dapp.prompts import collect_invocation
from create_kii_dapp.reporter import report_completion
from create_kii_dapp.runner import run_step
from create_kii_dapp.utils import print_error, print_plan_table

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = -1

MISSING_REPO_NAME_MESSAGE = (
    "Please provide a repository name as the first argument like "
    "> create-kii-dapp my-dapp"
)


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class ScaffoldPipeline:
    """Plans and runs the scaffolding commands for one invocation.

    Attributes:
        config: Template table and package-manager settings.
        dry_run: Print the plan instead of executing it.
    """

    def __init__(self, config: Config, dry_run: bool = False) -> None:
        self.config = config
        self.dry_run = dry_run

    async def run(self, invocation: InvocationConfig) -> int:
        """Execute the pipeline and return the process exit code.

        Steps run strictly in order; the first failing step stops the run and
        the completion report is skipped.
        """
        plan = plan_commands(invocation, self.config)

        if self.dry_run:
            print_plan_table(plan, invocation.repo_name, title="Dry run: nothing executed")
            return EXIT_SUCCESS

        for command, description in plan.steps(invocation.repo_name):
            if not await run_step(command, description):
                logger.debug("Aborting after failed step: %s", description)
                return EXIT_FAILURE

        report_completion(invocation, self.config)
        return EXIT_SUCCESS


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``create-kii-dapp``."""
    parser = argparse.ArgumentParser(
        prog="create-kii-dapp",
        description="Scaffold a KiiChain dApp from the hardhat or foundry template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-kii-dapp my-dapp\n"
            "  create-kii-dapp my-dapp --project-type foundry --author Ada\n"
            "  create-kii-dapp my-dapp --dry-run\n"
            "\n"
            "Environment Variables:\n"
            "  KII_DAPP_PACKAGE_MANAGER   Package manager (default: npm)\n"
            "  KII_DAPP_CLONE_DEPTH       git clone --depth (default: 1)\n"
            "  KII_DAPP_HARDHAT_TEMPLATE  Hardhat template repository URL\n"
            "  KII_DAPP_FOUNDRY_TEMPLATE  Foundry template repository URL\n"
        ),
    )

    # Optional so that a missing name gets our own message and exit code.
    parser.add_argument(
        "repo_name",
        nargs="?",
        help="Directory to create the project in",
    )
    parser.add_argument(
        "--project-type", "-t",
        choices=ProjectType.choices(),
        default=None,
        help="Toolchain to use (prompted for if omitted)",
    )
    parser.add_argument(
        "--author", "-a",
        default=None,
        help="Your name for the completion message (prompted for if omitted)",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="JSON file overriding the built-in template table",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the commands that would run without executing them",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _load_config(path: Path | None) -> Config:
    base = Config.load(path) if path is not None else None
    return Config.from_env(base)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``create-kii-dapp`` and ``python -m create_kii_dapp``."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if not args.repo_name or not args.repo_name.strip():
        print_error(MISSING_REPO_NAME_MESSAGE)
        return EXIT_FAILURE

    try:
        config = _load_config(args.config)
    except (OSError, ValueError) as exc:
        # pydantic.ValidationError is a ValueError.
        print_error(f"Invalid configuration: {escape(str(exc))}")
        return EXIT_FAILURE

    try:
        invocation = collect_invocation(
            args.repo_name,
            project_type=args.project_type,
            author_name=args.author,
        )
        return asyncio.run(ScaffoldPipeline(config, dry_run=args.dry_run).run(invocation))
    except (KeyboardInterrupt, EOFError):
        print_error("\nAborted.")
        return EXIT_FAILURE
    except (ScaffoldError, ValidationError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        return EXIT_FAILURE
