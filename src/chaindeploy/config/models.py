"""Validated deployment configuration models."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


class TxOverrides(BaseModel):
    """Transaction-level options passed along with every contract deployment.

    Only the fields below are recognised. ``gas_price`` (legacy) and the
    EIP-1559 fee fields cannot be combined.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    gas_limit: int | None = Field(default=None, gt=0)
    gas_price: int | None = Field(default=None, ge=0)
    max_fee_per_gas: int | None = Field(default=None, ge=0)
    max_priority_fee_per_gas: int | None = Field(default=None, ge=0)
    nonce: int | None = Field(default=None, ge=0)
    value: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_fee_model(self) -> "TxOverrides":
        eip1559 = self.max_fee_per_gas is not None or self.max_priority_fee_per_gas is not None
        if self.gas_price is not None and eip1559:
            raise ValueError("gas_price cannot be combined with max_fee_per_gas/max_priority_fee_per_gas")
        if (
            self.max_fee_per_gas is not None
            and self.max_priority_fee_per_gas is not None
            and self.max_priority_fee_per_gas > self.max_fee_per_gas
        ):
            raise ValueError("max_priority_fee_per_gas cannot exceed max_fee_per_gas")
        return self

    def to_tx_params(self) -> dict[str, int]:
        """Render as a transaction parameter dict, omitting unset fields."""
        mapping = {
            "gas": self.gas_limit,
            "gasPrice": self.gas_price,
            "maxFeePerGas": self.max_fee_per_gas,
            "maxPriorityFeePerGas": self.max_priority_fee_per_gas,
            "nonce": self.nonce,
            "value": self.value,
        }
        return {key: val for key, val in mapping.items() if val is not None}

    @property
    def is_empty(self) -> bool:
        return not self.to_tx_params()


class DeployConfig(BaseModel):
    """Everything a single deployment run needs."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    signer: Any = None
    registry_address: str | None = None
    dependencies: list[str] | None = None
    overrides: TxOverrides = Field(default_factory=TxOverrides)
    parameters: dict[str, Any] = Field(default_factory=dict)

    @field_validator("registry_address")
    @classmethod
    def _check_address(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not ADDRESS_RE.match(value):
            raise ValueError(f"not a 20-byte hex address: {value!r}")
        return value

    @field_validator("dependencies")
    @classmethod
    def _check_dependencies(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        seen: set[str] = set()
        for name in value:
            if not name:
                raise ValueError("dependency names must be non-empty")
            if name in seen:
                raise ValueError(f"duplicate dependency: {name}")
            seen.add(name)
        return value

    def allows(self, name: str) -> bool:
        """Whether ``name`` passes the dependency allow-list."""
        return self.dependencies is None or name in self.dependencies
