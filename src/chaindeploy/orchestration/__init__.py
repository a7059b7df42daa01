"""Orchestration package — ordered contract deployment against an address registry."""

from chaindeploy.orchestration.engine import DeploymentEngine, deploy
from chaindeploy.orchestration.plan import (
    DeploymentDescriptor,
    DeploymentPlan,
    PlanBuilder,
    coerce_plan,
    plan_from_items,
)
from chaindeploy.orchestration.registry import REGISTRY_CONTRACT, PendingRegistry, resolve_registry
from chaindeploy.orchestration.results import DeploymentResult, ResultCollector

__all__ = [
    "DeploymentDescriptor",
    "DeploymentEngine",
    "DeploymentPlan",
    "DeploymentResult",
    "PendingRegistry",
    "PlanBuilder",
    "REGISTRY_CONTRACT",
    "ResultCollector",
    "coerce_plan",
    "deploy",
    "plan_from_items",
    "resolve_registry",
]
