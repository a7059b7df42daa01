"""
CLI command for deploying a target's contracts.
"""

from __future__ import annotations

import asyncio
import json
from typing import List, Optional

from chaindeploy.cli.ux import console, header, print_table, success, warning
from chaindeploy.config.loader import load_deploy_config
from chaindeploy.config.settings import get_settings
from chaindeploy.core.errors import PartialDeploymentWarning, main_with_error_handling
from chaindeploy.logging import bind_run_id, clear_run_context
from chaindeploy.orchestration.engine import DeploymentEngine
from chaindeploy.orchestration.results import DeploymentResult
from chaindeploy.target import load_target


def print_deploy_summary(result: DeploymentResult) -> None:
    """Print deployed addresses and failures."""
    console.print(f"[cyan]Registry:[/cyan] [address]{result.registry.address}[/address]")
    console.print()

    rows = [[name, address] for name, address in result.addresses().items()]
    if rows:
        print_table("Deployed contracts", ["Contract", "Address"], rows)

    console.print()
    if result.success:
        success(f"Deployed {len(result.contracts)} contracts")
    else:
        warning(
            f"Deployed {len(result.contracts)} contracts, "
            f"{len(result.failed_deployments)} failed"
        )
        for name in result.failed_deployments:
            console.print(f"  [dim]•[/dim] {name}")
    console.print()


def print_deploy_json(result: DeploymentResult) -> None:
    """Print deploy result in JSON format."""
    print(json.dumps(result.to_dict(), indent=2))


@main_with_error_handling()
def deploy_command(
    target: str,
    config_path: Optional[str] = None,
    only: Optional[List[str]] = None,
    registry_address: Optional[str] = None,
    output_format: str = "text",
) -> int:
    """
    Deploy every eligible contract of a target.

    Exit codes: 0 = all deployed, 1 = some contracts failed, >=10 = run aborted
    """
    settings = get_settings()
    deployment_target = load_target(target)
    config = load_deploy_config(
        config_path,
        signer=deployment_target.signer(settings),
        registry_address=registry_address,
        dependencies=only,
        settings=settings,
    )

    if output_format != "json":
        header(f"Deploying {deployment_target.name}")

    engine = DeploymentEngine(deployment_target.resolve_factory, deployment_target.build_plan)
    bind_run_id()
    try:
        result = asyncio.run(engine.deploy(config))
    finally:
        clear_run_context()

    if output_format == "json":
        print_deploy_json(result)
    else:
        print_deploy_summary(result)

    if not result.success:
        raise PartialDeploymentWarning(
            "Some contracts failed to deploy",
            {"failed": ",".join(result.failed_deployments)},
        )
    return 0
