"""Deployment plan: ordered contract descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from chaindeploy.config.models import DeployConfig
from chaindeploy.contracts.base import AfterDeployHook, ContractFactory, ContractHandle
from chaindeploy.core.errors import ValidationError


@dataclass(frozen=True)
class DeploymentDescriptor:
    """How to deploy one contract, and what to do once everything is deployed."""

    factory: ContractFactory
    constructor_args: Tuple[Any, ...] = ()
    after_deploy: Optional[AfterDeployHook] = None

    def __post_init__(self) -> None:
        if self.factory is None:
            raise ValidationError("Deployment descriptor requires a factory")
        # Accept lists from plan builders; keep the descriptor immutable.
        if not isinstance(self.constructor_args, tuple):
            object.__setattr__(self, "constructor_args", tuple(self.constructor_args))


class DeploymentPlan:
    """Insertion-ordered mapping of contract name to descriptor.

    Order is deployment order. Names are unique.
    """

    def __init__(self, entries: Iterable[Tuple[str, DeploymentDescriptor]] = ()) -> None:
        self._entries: Dict[str, DeploymentDescriptor] = {}
        for name, descriptor in entries:
            self.add(name, descriptor)

    def add(self, name: str, descriptor: DeploymentDescriptor) -> None:
        if not name:
            raise ValidationError("Contract name is required")
        if name in self._entries:
            raise ValidationError(f"Duplicate contract in plan: {name}", {"contract": name})
        if not isinstance(descriptor, DeploymentDescriptor):
            raise ValidationError(
                f"Plan entry '{name}' is not a DeploymentDescriptor",
                {"contract": name, "type": type(descriptor).__name__},
            )
        self._entries[name] = descriptor

    def names(self) -> List[str]:
        return list(self._entries)

    def items(self) -> List[Tuple[str, DeploymentDescriptor]]:
        return list(self._entries.items())

    def eligible(self, dependencies: Optional[Sequence[str]]) -> Iterator[Tuple[str, DeploymentDescriptor]]:
        """Yield entries in plan order that pass the allow-list.

        ``None`` means every entry is eligible.
        """
        for name, descriptor in self._entries.items():
            if dependencies is not None and name not in dependencies:
                continue
            yield name, descriptor

    def __getitem__(self, name: str) -> DeploymentDescriptor:
        return self._entries[name]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DeploymentPlan({self.names()!r})"


PlanLike = Union[DeploymentPlan, Mapping[str, DeploymentDescriptor]]

PlanBuilder = Callable[[DeployConfig, ContractHandle], Union[PlanLike, Awaitable[PlanLike]]]


def plan_from_items(items: Iterable[Tuple[str, DeploymentDescriptor]]) -> DeploymentPlan:
    return DeploymentPlan(items)


def coerce_plan(plan: PlanLike) -> DeploymentPlan:
    """Accept a DeploymentPlan or any ordered mapping produced by a plan builder."""
    if isinstance(plan, DeploymentPlan):
        return plan
    if isinstance(plan, Mapping):
        return DeploymentPlan(plan.items())
    raise ValidationError(
        "Plan builder must return a DeploymentPlan or a mapping",
        {"type": type(plan).__name__},
    )
