"""Application configuration helpers."""

from __future__ import annotations

from .env import env_choice, env_flag, optional_env_var
from .errors import ConfigurationError
from .hydration import (
    LOG_LEVEL_ENV,
    STRICT_COERCION_ENV,
    UNKNOWN_FIELDS_ENV,
    HydrationConfig,
    get_hydration_config,
)

__all__ = [
    "LOG_LEVEL_ENV",
    "STRICT_COERCION_ENV",
    "UNKNOWN_FIELDS_ENV",
    "ConfigurationError",
    "HydrationConfig",
    "env_choice",
    "env_flag",
    "get_hydration_config",
    "optional_env_var",
]
