from __future__ import annotations

from typing import Any, Awaitable, Callable, Protocol, Union, runtime_checkable


@runtime_checkable
class ContractHandle(Protocol):
    """A deployed (or attached) contract.

    Only ``address`` is required here; hooks may call anything else the
    concrete contract exposes.
    """

    address: str


class AddressRegistry(ContractHandle, Protocol):
    """Contract mapping names to addresses (an address manager)."""

    async def setAddress(self, name: str, address: str) -> Any:  # noqa: N802
        ...


@runtime_checkable
class ContractFactory(Protocol):
    """Knows how to attach to or deploy one kind of contract."""

    def attach(self, address: str) -> ContractHandle:
        ...

    async def deploy(self, *args: Any) -> ContractHandle:
        """Deploy with constructor args; the last positional is the tx overrides dict."""
        ...


FactoryResolver = Callable[[str, Any], ContractFactory]

DeployedContracts = dict[str, ContractHandle]

AfterDeployHook = Callable[[DeployedContracts], Union[Awaitable[None], None]]
