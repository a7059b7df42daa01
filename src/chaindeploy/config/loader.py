"""
Deploy file loading and merging.

Search order:
1. Explicit path (--config flag)
2. .chaindeploy/deploy.yaml (project root)
3. ~/.chaindeploy/deploy.yaml (user home)
4. Settings only (environment / .env)

Values given on the command line win over the deploy file, which wins over
settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pydantic
import structlog
import yaml

from chaindeploy.config.models import DeployConfig
from chaindeploy.config.settings import Settings, get_settings
from chaindeploy.core.errors import ConfigurationError

logger = structlog.get_logger()

KNOWN_KEYS = frozenset({"registry_address", "dependencies", "overrides", "parameters"})


def get_config_path(explicit_path: str | Path | None = None) -> Path | None:
    """
    Find the deploy file to use.

    An explicit path that does not exist is an error rather than a fallthrough,
    so a typo never silently deploys with another file.
    """
    if explicit_path:
        path = Path(explicit_path)
        if not path.exists():
            raise ConfigurationError("Deploy file not found", {"path": str(path)})
        return path

    cwd_config = Path.cwd() / ".chaindeploy" / "deploy.yaml"
    if cwd_config.exists():
        return cwd_config

    home_config = Path.home() / ".chaindeploy" / "deploy.yaml"
    if home_config.exists():
        return home_config

    return None


def read_deploy_file(path: Path) -> dict[str, Any]:
    """Parse a deploy file into a plain mapping, rejecting unknown keys."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError("Deploy file is not valid YAML", {"path": str(path), "error": str(e)}) from e

    if not isinstance(data, dict):
        raise ConfigurationError("Deploy file must contain a mapping", {"path": str(path)})

    unknown = sorted(set(data) - KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(
            "Unknown keys in deploy file", {"path": str(path), "keys": ",".join(unknown)}
        )

    logger.debug("loaded_deploy_file", path=str(path))
    return data


def _overrides_from_settings(settings: Settings) -> dict[str, Any]:
    defaults: dict[str, Any] = {}
    if settings.default_gas_limit is not None:
        defaults["gas_limit"] = settings.default_gas_limit
    if settings.default_gas_price is not None:
        defaults["gas_price"] = settings.default_gas_price
    return defaults


def load_deploy_config(
    path: str | Path | None = None,
    *,
    signer: Any = None,
    registry_address: str | None = None,
    dependencies: list[str] | None = None,
    settings: Settings | None = None,
) -> DeployConfig:
    """Build a validated DeployConfig from CLI values, deploy file and settings."""
    settings = settings or get_settings()
    config_path = get_config_path(path)
    data = read_deploy_file(config_path) if config_path else {}

    overrides = data.get("overrides")
    if overrides is None:
        overrides = _overrides_from_settings(settings)

    merged: dict[str, Any] = {
        "signer": signer,
        "registry_address": registry_address or data.get("registry_address") or settings.registry_address,
        "dependencies": dependencies if dependencies is not None else data.get("dependencies", settings.dependencies),
        "overrides": overrides,
        "parameters": data.get("parameters") or {},
    }

    try:
        return DeployConfig.model_validate(merged)
    except pydantic.ValidationError as e:
        details: dict[str, Any] = {"errors": "; ".join(err["msg"] for err in e.errors())}
        if config_path:
            details["path"] = str(config_path)
        raise ConfigurationError("Invalid deploy configuration", details) from e
