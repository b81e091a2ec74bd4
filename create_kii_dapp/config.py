"""create-kii-dapp configuration.

Centralised, typed configuration for the scaffolder.  All settings use
Pydantic v2 models so they are validated at construction time and can be
loaded from JSON or overridden from environment variables.  The defaults
reproduce the stock KiiChain template table; nothing needs to be configured
for a normal run.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from create_kii_dapp.models import ProjectType


HARDHAT_TEMPLATE_URL = "https://github.com/AsharibAli/create-kii-dapp-hardhat"
FOUNDRY_TEMPLATE_URL = "https://github.com/AsharibAli/create-kii-dapp-foundry"

KII_TESTNET_RPC_URL = "https://a.sentry.testnet.kiivalidator.com:8645/"


class ToolchainConfig(BaseModel):
    """Per-toolchain template and follow-up instructions."""

    template_url: str = Field(..., min_length=1, description="Remote template repository")
    install_backend: bool = Field(
        default=True,
        description="Run the package manager in backend/ (foundry manages its own deps)",
    )
    backend_commands: list[str] = Field(
        default_factory=list,
        description="Compile/test/deploy snippets printed after a successful run",
    )


def _default_toolchains() -> dict[ProjectType, ToolchainConfig]:
    return {
        ProjectType.HARDHAT: ToolchainConfig(
            template_url=HARDHAT_TEMPLATE_URL,
            install_backend=True,
            backend_commands=[
                "npx hardhat compile",
                "npx hardhat test",
                "npx hardhat run scripts/deploy.ts --network kiichain",
            ],
        ),
        ProjectType.FOUNDRY: ToolchainConfig(
            template_url=FOUNDRY_TEMPLATE_URL,
            install_backend=False,
            backend_commands=[
                "forge compile",
                "forge test",
                "forge script script/DeployGreeter.s.sol --broadcast "
                f"--rpc-url {KII_TESTNET_RPC_URL} --gas-limit 30000000 "
                "--with-gas-price 5gwei --skip-simulation",
            ],
        ),
    }


class Config(BaseModel):
    """Global create-kii-dapp configuration.

    Instances are created once by the CLI entry point and passed to the
    planner, the pipeline and the completion reporter.
    """

    tool_name: str = Field(default="create-kii-dapp")
    network_name: str = Field(default="KiiChain")
    package_manager: str = Field(default="npm", min_length=1)
    clone_depth: int = Field(default=1, ge=1, description="git clone --depth value")
    toolchains: dict[ProjectType, ToolchainConfig] = Field(default_factory=_default_toolchains)

    # ------------------------------------------------------------------
    # Derived commands
    # ------------------------------------------------------------------

    @property
    def install_command(self) -> str:
        """Dependency install command run inside frontend/ and backend/."""
        return f"{self.package_manager} install"

    @property
    def dev_server_command(self) -> str:
        """Frontend dev-server command shown in the completion report."""
        return f"{self.package_manager} run dev"

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a configuration from a JSON file.

        Keys that are absent keep their defaults.  Note that a ``toolchains``
        mapping replaces the built-in table as a whole.

        Raises:
            FileNotFoundError: If the file does not exist.
            pydantic.ValidationError: If the content does not validate.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls, base: "Config | None" = None) -> "Config":
        """Apply environment variable overrides on top of *base*.

        Recognised variables (all optional):
            KII_DAPP_PACKAGE_MANAGER, KII_DAPP_CLONE_DEPTH,
            KII_DAPP_HARDHAT_TEMPLATE, KII_DAPP_FOUNDRY_TEMPLATE.
        """
        config = base or cls()
        updates: dict[str, Any] = {}
        if os.environ.get("KII_DAPP_PACKAGE_MANAGER"):
            updates["package_manager"] = os.environ["KII_DAPP_PACKAGE_MANAGER"]
        if os.environ.get("KII_DAPP_CLONE_DEPTH"):
            updates["clone_depth"] = int(os.environ["KII_DAPP_CLONE_DEPTH"])

        template_overrides = {
            ProjectType.HARDHAT: os.environ.get("KII_DAPP_HARDHAT_TEMPLATE"),
            ProjectType.FOUNDRY: os.environ.get("KII_DAPP_FOUNDRY_TEMPLATE"),
        }
        toolchains = dict(config.toolchains)
        for project_type, url in template_overrides.items():
            if url and project_type in toolchains:
                toolchains[project_type] = toolchains[project_type].model_copy(
                    update={"template_url": url}
                )
        updates["toolchains"] = toolchains

        # Round-trip through validation so overrides obey the field constraints.
        return cls.model_validate({**config.model_dump(), **updates})
