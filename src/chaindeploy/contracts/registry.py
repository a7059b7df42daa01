from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from chaindeploy.contracts.base import ContractFactory
from chaindeploy.core.errors import ConfigurationError

# Called with the signer; returns a factory bound to it.
FactoryBuilder = Callable[[Any], ContractFactory]


@dataclass(frozen=True)
class FactorySpec:
    """Metadata describing a registered contract factory."""

    name: str
    builder: FactoryBuilder
    description: str | None = None


class FactoryRegistry:
    """Name-keyed table of contract factories.

    Instances are callable with ``(name, signer)`` so one can be handed to the
    orchestrator directly as its factory resolver.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, FactorySpec] = {}

    def register(
        self,
        name: str,
        builder: FactoryBuilder,
        *,
        description: str | None = None,
    ) -> None:
        if not name:
            raise ValueError("Contract name is required")
        self._factories[name] = FactorySpec(name=name, builder=builder, description=description)

    def resolve(self, name: str, signer: Any) -> ContractFactory:
        spec = self._factories.get(name)
        if spec is None:
            raise ConfigurationError(f"No factory registered for contract '{name}'", {"contract": name})
        return spec.builder(signer)

    __call__ = resolve

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def list(self) -> List[FactorySpec]:
        return list(self._factories.values())
