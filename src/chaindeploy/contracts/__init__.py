"""Contract-facing interfaces: handles, factories and the factory table."""

from chaindeploy.contracts.base import (
    AddressRegistry,
    AfterDeployHook,
    ContractFactory,
    ContractHandle,
    DeployedContracts,
    FactoryResolver,
)
from chaindeploy.contracts.registry import FactoryBuilder, FactoryRegistry, FactorySpec

__all__ = [
    "AddressRegistry",
    "AfterDeployHook",
    "ContractFactory",
    "ContractHandle",
    "DeployedContracts",
    "FactoryBuilder",
    "FactoryRegistry",
    "FactoryResolver",
    "FactorySpec",
]
