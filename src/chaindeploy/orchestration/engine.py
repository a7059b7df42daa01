"""Deployment engine: registry resolution, deploy pass, hook pass."""

from __future__ import annotations

import inspect

import structlog

from chaindeploy.config.models import DeployConfig
from chaindeploy.contracts.base import AddressRegistry, FactoryResolver
from chaindeploy.core.errors import HookError, RegistrationError
from chaindeploy.orchestration.plan import DeploymentPlan, PlanBuilder, coerce_plan
from chaindeploy.orchestration.registry import REGISTRY_CONTRACT, resolve_registry
from chaindeploy.orchestration.results import DeploymentResult, ResultCollector

logger = structlog.get_logger()


class DeploymentEngine:
    """Deploys a plan of contracts one at a time and registers their addresses.

    Every remote call is awaited before the next one is issued, so registry
    writes happen in plan order and a run is replayable. Deploy failures are
    recorded and skipped; registration and hook failures end the run.
    """

    def __init__(
        self,
        resolve_factory: FactoryResolver,
        build_plan: PlanBuilder,
        *,
        registry_contract: str = REGISTRY_CONTRACT,
    ) -> None:
        self._resolve_factory = resolve_factory
        self._build_plan = build_plan
        self._registry_contract = registry_contract

    async def deploy(self, config: DeployConfig) -> DeploymentResult:
        registry = await resolve_registry(
            self._resolve_factory,
            config.signer,
            config.registry_address,
            contract_name=self._registry_contract,
        )
        plan = await self.build_plan(config, registry)

        collector = ResultCollector(registry)
        await self._deploy_pass(plan, config, registry, collector)
        await self._hook_pass(plan, config, collector)

        result = collector.finalize()
        logger.info(
            "deployment_finished",
            deployed=len(result.contracts),
            failed=result.failed_deployments,
        )
        return result

    async def build_plan(self, config: DeployConfig, registry: AddressRegistry) -> DeploymentPlan:
        plan = self._build_plan(config, registry)
        if inspect.isawaitable(plan):
            plan = await plan
        return coerce_plan(plan)

    async def _deploy_pass(
        self,
        plan: DeploymentPlan,
        config: DeployConfig,
        registry: AddressRegistry,
        collector: ResultCollector,
    ) -> None:
        overrides = config.overrides.to_tx_params()

        for name, descriptor in plan.eligible(config.dependencies):
            log = logger.bind(contract=name)
            try:
                contract = await descriptor.factory.deploy(*descriptor.constructor_args, overrides)
            except Exception as e:
                log.error("contract_deploy_failed", error=str(e), error_type=type(e).__name__)
                collector.record_error(name, e)
                continue

            collector.record(name, contract)
            log.info("contract_deployed", address=contract.address)

            try:
                await registry.setAddress(name, contract.address)
            except Exception as e:
                raise RegistrationError(
                    f"Deployed '{name}' but could not register its address: {e}",
                    {
                        "contract": name,
                        "address": contract.address,
                        "deployed": ",".join(collector.contracts),
                    },
                ) from e
            log.info("contract_registered", address=contract.address)

    async def _hook_pass(
        self,
        plan: DeploymentPlan,
        config: DeployConfig,
        collector: ResultCollector,
    ) -> None:
        # Runs for every eligible entry, including ones whose deploy failed;
        # hooks see whatever made it into ``contracts``.
        for name, descriptor in plan.eligible(config.dependencies):
            if descriptor.after_deploy is None:
                continue

            logger.info("after_deploy_hook_started", contract=name)
            try:
                outcome = descriptor.after_deploy(collector.contracts)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception as e:
                raise HookError(
                    f"after_deploy hook for '{name}' failed: {e}",
                    {"contract": name},
                ) from e


async def deploy(
    config: DeployConfig,
    *,
    resolve_factory: FactoryResolver,
    build_plan: PlanBuilder,
    registry_contract: str = REGISTRY_CONTRACT,
) -> DeploymentResult:
    """Run a full deployment: resolve registry, deploy, register, run hooks."""
    engine = DeploymentEngine(resolve_factory, build_plan, registry_contract=registry_contract)
    return await engine.deploy(config)
