from __future__ import annotations

import logging

import pytest

from dto_hydrator.config import (
    LOG_LEVEL_ENV,
    STRICT_COERCION_ENV,
    UNKNOWN_FIELDS_ENV,
    ConfigurationError,
    HydrationConfig,
    get_hydration_config,
    optional_env_var,
)
from dto_hydrator.domain import UnknownFieldPolicy


def test_defaults_without_environment() -> None:
    assert get_hydration_config() == HydrationConfig()


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(UNKNOWN_FIELDS_ENV, "Reject")
    monkeypatch.setenv(STRICT_COERCION_ENV, "yes")
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

    config = get_hydration_config()

    assert config.unknown_fields is UnknownFieldPolicy.REJECT
    assert config.strict_coercion is True
    assert config.log_level == logging.DEBUG


def test_blank_values_count_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(UNKNOWN_FIELDS_ENV, "   ")

    assert optional_env_var(UNKNOWN_FIELDS_ENV) is None
    assert get_hydration_config().unknown_fields is UnknownFieldPolicy.IGNORE


def test_invalid_policy_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(UNKNOWN_FIELDS_ENV, "explode")

    with pytest.raises(ConfigurationError) as exc:
        get_hydration_config()

    assert UNKNOWN_FIELDS_ENV in str(exc.value)
    assert "ignore, reject, warn" in str(exc.value)


def test_invalid_flag_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(STRICT_COERCION_ENV, "maybe")

    with pytest.raises(ConfigurationError, match=STRICT_COERCION_ENV):
        get_hydration_config()
