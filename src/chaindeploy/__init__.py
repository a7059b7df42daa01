"""chaindeploy — ordered contract deployment against an on-chain address registry."""

from chaindeploy.config.models import DeployConfig, TxOverrides
from chaindeploy.orchestration import (
    DeploymentDescriptor,
    DeploymentEngine,
    DeploymentPlan,
    DeploymentResult,
    deploy,
)

__version__ = "0.1.0"

__all__ = [
    "DeployConfig",
    "DeploymentDescriptor",
    "DeploymentEngine",
    "DeploymentPlan",
    "DeploymentResult",
    "TxOverrides",
    "deploy",
]
