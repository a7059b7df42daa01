"""
CLI command for previewing a deployment plan without sending transactions.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, List, Optional

from chaindeploy.cli.ux import console, header, print_table
from chaindeploy.config.loader import load_deploy_config
from chaindeploy.config.models import DeployConfig
from chaindeploy.config.settings import get_settings
from chaindeploy.core.errors import main_with_error_handling
from chaindeploy.orchestration.engine import DeploymentEngine
from chaindeploy.orchestration.plan import DeploymentPlan
from chaindeploy.orchestration.registry import REGISTRY_CONTRACT, PendingRegistry
from chaindeploy.target import DeploymentTarget, load_target


def describe_plan(plan: DeploymentPlan, config: DeployConfig) -> List[dict[str, Any]]:
    """One row per plan entry, eligible or not, in plan order."""
    rows = []
    for position, name in enumerate(plan, 1):
        descriptor = plan[name]
        rows.append(
            {
                "position": position,
                "contract": name,
                "eligible": config.allows(name),
                "constructor_args": len(descriptor.constructor_args),
                "after_deploy": descriptor.after_deploy is not None,
            }
        )
    return rows


async def _build(target: DeploymentTarget, config: DeployConfig) -> DeploymentPlan:
    engine = DeploymentEngine(target.resolve_factory, target.build_plan)
    if config.registry_address:
        # Attaching is read-only, so a dry run may use the real registry.
        registry = target.resolve_factory(REGISTRY_CONTRACT, config.signer).attach(config.registry_address)
    else:
        registry = PendingRegistry()
    return await engine.build_plan(config, registry)


@main_with_error_handling()
def plan_command(
    target: str,
    config_path: Optional[str] = None,
    only: Optional[List[str]] = None,
    registry_address: Optional[str] = None,
    output_format: str = "text",
) -> int:
    """Show what a deploy run would do, in order."""
    settings = get_settings()
    deployment_target = load_target(target)
    config = load_deploy_config(
        config_path,
        signer=deployment_target.signer(settings),
        registry_address=registry_address,
        dependencies=only,
        settings=settings,
    )

    plan = asyncio.run(_build(deployment_target, config))
    rows = describe_plan(plan, config)

    if output_format == "json":
        print(json.dumps({"target": target, "entries": rows}, indent=2))
        return 0

    header(f"Deployment plan: {target}")
    registry_line = config.registry_address or "new registry will be deployed"
    console.print(f"[cyan]Registry:[/cyan] {registry_line}")
    if not config.overrides.is_empty:
        console.print(f"[cyan]Overrides:[/cyan] {config.overrides.to_tx_params()}")
    console.print()

    print_table(
        "Contracts",
        ["#", "Contract", "Args", "Hook", "Status"],
        [
            [
                str(row["position"]),
                row["contract"],
                str(row["constructor_args"]),
                "yes" if row["after_deploy"] else "",
                "deploy" if row["eligible"] else "[muted]skipped[/muted]",
            ]
            for row in rows
        ],
    )
    return 0
