"""Environment variable readers for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Collection

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def optional_env_var(name: str) -> str | None:
    """Return the stripped value of an environment variable; blank counts as unset."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def env_choice(name: str, choices: Collection[str], default: str) -> str:
    value = optional_env_var(name)
    if value is None:
        return default
    normalized = value.lower()
    if normalized not in choices:
        allowed = ", ".join(sorted(choices))
        raise ConfigurationError(f"Invalid value for {name}: {value!r} (expected one of {allowed})")
    return normalized


def env_flag(name: str, *, default: bool = False) -> bool:
    value = optional_env_var(name)
    if value is None:
        return default
    normalized = value.lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}")
