"""Hydration configuration values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from dto_hydrator.domain.model import UnknownFieldPolicy

from .env import env_choice, env_flag

UNKNOWN_FIELDS_ENV: Final[str] = "DTO_HYDRATOR_UNKNOWN_FIELDS"
STRICT_COERCION_ENV: Final[str] = "DTO_HYDRATOR_STRICT_COERCION"
LOG_LEVEL_ENV: Final[str] = "DTO_HYDRATOR_LOG_LEVEL"

_LOG_LEVELS: Final[dict[str, int]] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(frozen=True, slots=True)
class HydrationConfig:
    """Holds hydrator behaviour settings."""

    unknown_fields: UnknownFieldPolicy = UnknownFieldPolicy.IGNORE
    strict_coercion: bool = False
    log_level: int = logging.INFO


def get_hydration_config() -> HydrationConfig:
    unknown_fields = env_choice(
        UNKNOWN_FIELDS_ENV,
        [policy.value for policy in UnknownFieldPolicy],
        UnknownFieldPolicy.IGNORE.value,
    )
    log_level = env_choice(LOG_LEVEL_ENV, _LOG_LEVELS, "info")
    return HydrationConfig(
        unknown_fields=UnknownFieldPolicy(unknown_fields),
        strict_coercion=env_flag(STRICT_COERCION_ENV),
        log_level=_LOG_LEVELS[log_level],
    )
