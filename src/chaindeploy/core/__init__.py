"""Core modules for chaindeploy - centralized definitions and utilities."""

from chaindeploy.core.errors import (
    ChainDeployError,
    ConfigurationError,
    ExitCode,
    HookError,
    PartialDeploymentWarning,
    ProviderError,
    RegistrationError,
    RegistryResolutionError,
    ValidationError,
    format_error_message,
    main_with_error_handling,
)

__all__ = [
    "ExitCode",
    "ChainDeployError",
    "ConfigurationError",
    "ProviderError",
    "RegistryResolutionError",
    "RegistrationError",
    "HookError",
    "ValidationError",
    "PartialDeploymentWarning",
    "main_with_error_handling",
    "format_error_message",
]
