"""
chaindeploy configuration.

- Pydantic settings (CHAINDEPLOY_ environment variables, .env files)
- Validated deploy run configuration and transaction overrides
- YAML deploy file discovery and merging
"""

from chaindeploy.config.loader import get_config_path, load_deploy_config, read_deploy_file
from chaindeploy.config.models import DeployConfig, TxOverrides
from chaindeploy.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "DeployConfig",
    "TxOverrides",
    "get_config_path",
    "load_deploy_config",
    "read_deploy_file",
]
