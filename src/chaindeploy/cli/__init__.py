"""
CLI commands for chaindeploy.
"""

from chaindeploy.cli.deploy import deploy_command
from chaindeploy.cli.plan import plan_command

__all__ = [
    "deploy_command",
    "plan_command",
]
