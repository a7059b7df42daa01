"""
Deployment targets.

A target is an importable module describing one system of contracts. It must
define:

- ``resolve_factory(name, signer)`` returning a contract factory
- ``build_plan(config, registry)`` returning the ordered deployment plan

and may define ``make_signer(settings)``; without it the run has no signer
and factories are expected to carry their own.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Any, Callable, Optional

from chaindeploy.config.settings import Settings
from chaindeploy.contracts.base import FactoryResolver
from chaindeploy.core.errors import ConfigurationError
from chaindeploy.orchestration.plan import PlanBuilder


@dataclass(frozen=True)
class DeploymentTarget:
    name: str
    resolve_factory: FactoryResolver
    build_plan: PlanBuilder
    make_signer: Optional[Callable[[Settings], Any]] = None

    def signer(self, settings: Settings) -> Any:
        if self.make_signer is None:
            return None
        return self.make_signer(settings)


def load_target(module_path: str) -> DeploymentTarget:
    """Import ``module_path`` and pull the target hooks out of it."""
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import deployment target: {e}", {"target": module_path}) from e

    missing = [attr for attr in ("resolve_factory", "build_plan") if not callable(getattr(module, attr, None))]
    if missing:
        raise ConfigurationError(
            "Deployment target is missing required callables",
            {"target": module_path, "missing": ",".join(missing)},
        )

    make_signer = getattr(module, "make_signer", None)
    return DeploymentTarget(
        name=module_path,
        resolve_factory=module.resolve_factory,
        build_plan=module.build_plan,
        make_signer=make_signer if callable(make_signer) else None,
    )
