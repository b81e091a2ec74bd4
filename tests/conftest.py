"""Shared pytest fixtures for the create-kii-dapp test suite.

Provides reusable fixtures for:
- Default configuration and invocations for both toolchains
- A recording Rich console for asserting on terminal output
- Isolation from ``KII_DAPP_*`` environment overrides
"""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from create_kii_dapp.config import Config
from create_kii_dapp.models import InvocationConfig, ProjectType


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_kii_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure a developer's shell overrides never leak into tests."""
    for name in (
        "KII_DAPP_PACKAGE_MANAGER",
        "KII_DAPP_CLONE_DEPTH",
        "KII_DAPP_HARDHAT_TEMPLATE",
        "KII_DAPP_FOUNDRY_TEMPLATE",
    ):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Configuration & invocations
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> Config:
    """Stock configuration with the built-in template table."""
    return Config()


@pytest.fixture
def hardhat_invocation() -> InvocationConfig:
    return InvocationConfig(repo_name="my-dapp", project_type=ProjectType.HARDHAT)


@pytest.fixture
def foundry_invocation() -> InvocationConfig:
    return InvocationConfig(
        repo_name="my-dapp",
        project_type=ProjectType.FOUNDRY,
        author_name="Ada",
    )


# ---------------------------------------------------------------------------
# Console capture
# ---------------------------------------------------------------------------

@pytest.fixture
def record_console() -> Console:
    """Wide, colourless console that records everything printed to it."""
    return Console(
        file=io.StringIO(),
        record=True,
        width=250,
        color_system=None,
        force_terminal=False,
    )
