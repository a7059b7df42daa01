"""Result types for deployment runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from chaindeploy.contracts.base import ContractHandle


@dataclass
class DeploymentResult:
    """Outcome of one deployment run.

    There is no separate status flag: a run with failed contracts still
    returns normally, so callers must look at ``failed_deployments``.
    """

    registry: ContractHandle
    failed_deployments: List[str] = field(default_factory=list)
    contracts: Dict[str, ContractHandle] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        """Whether every eligible contract deployed."""
        return len(self.failed_deployments) == 0

    def addresses(self) -> Dict[str, str]:
        """Deployed contract addresses in deployment order."""
        return {name: handle.address for name, handle in self.contracts.items()}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "registry": self.registry.address,
            "contracts": self.addresses(),
            "failed_deployments": list(self.failed_deployments),
            "success": self.success,
        }


class ResultCollector:
    """Aggregates per-contract outcomes during the deploy pass."""

    def __init__(self, registry: ContractHandle) -> None:
        self._result = DeploymentResult(registry=registry)
        self._errors: Dict[str, str] = {}

    @property
    def contracts(self) -> Dict[str, ContractHandle]:
        """Live view of successful deployments, handed to after-deploy hooks."""
        return self._result.contracts

    def record(self, name: str, handle: ContractHandle) -> None:
        """Record a successful deployment."""
        self._result.contracts[name] = handle

    def record_error(self, name: str, error: Exception) -> None:
        """Record a failed deployment."""
        self._result.failed_deployments.append(name)
        self._errors[name] = str(error)

    def error_for(self, name: str) -> str | None:
        return self._errors.get(name)

    def finalize(self) -> DeploymentResult:
        return self._result
