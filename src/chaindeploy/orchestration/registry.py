"""Resolution of the address registry a run writes to."""

from __future__ import annotations

from typing import Any

import structlog

from chaindeploy.contracts.base import AddressRegistry, FactoryResolver
from chaindeploy.core.errors import ChainDeployError, RegistryResolutionError

logger = structlog.get_logger()

REGISTRY_CONTRACT = "Lib_AddressManager"


async def resolve_registry(
    resolve_factory: FactoryResolver,
    signer: Any,
    registry_address: str | None = None,
    *,
    contract_name: str = REGISTRY_CONTRACT,
) -> AddressRegistry:
    """Attach to an existing registry, or deploy a fresh one.

    Attaching sends no transaction and does not check that the address really
    hosts a registry; a wrong address only shows up later when registrations
    misbehave.
    """
    try:
        factory = resolve_factory(contract_name, signer)
        if registry_address:
            logger.info("registry_attached", contract=contract_name, address=registry_address)
            return factory.attach(registry_address)

        logger.info("registry_not_provided_deploying_new", contract=contract_name)
        registry = await factory.deploy()
    except ChainDeployError:
        raise
    except Exception as e:
        raise RegistryResolutionError(
            f"Could not resolve registry: {e}",
            {"contract": contract_name, "address": registry_address},
        ) from e

    logger.info("registry_deployed", contract=contract_name, address=registry.address)
    return registry


class PendingRegistry:
    """Stand-in registry for dry runs when no registry address is configured."""

    address: str | None = None

    async def setAddress(self, name: str, address: str) -> Any:  # noqa: N802
        raise RuntimeError("PendingRegistry cannot record addresses")

    def __repr__(self) -> str:
        return "PendingRegistry()"
