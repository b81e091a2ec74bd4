"""create-kii-dapp -- scaffold a KiiChain dApp from a hardhat or foundry template.

Quick usage::

    from create_kii_dapp import Config, InvocationConfig, ProjectType, plan_commands

    invocation = InvocationConfig(repo_name="my-dapp", project_type=ProjectType.HARDHAT)
    plan = plan_commands(invocation, Config())
"""

__version__ = "0.1.0"

from create_kii_dapp.config import Config, ToolchainConfig
from create_kii_dapp.models import CommandPlan, InvocationConfig, ProjectType
from create_kii_dapp.planner import ScaffoldError, UnknownProjectTypeError, plan_commands

__all__ = [
    "CommandPlan",
    "Config",
    "InvocationConfig",
    "ProjectType",
    "ScaffoldError",
    "ToolchainConfig",
    "UnknownProjectTypeError",
    "__version__",
    "plan_commands",
]
