from __future__ import annotations

import pytest

from dto_hydrator.config import LOG_LEVEL_ENV, STRICT_COERCION_ENV, UNKNOWN_FIELDS_ENV
from tests.helpers.fakes import RecordingCoercer


@pytest.fixture(autouse=True)
def clean_hydrator_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (UNKNOWN_FIELDS_ENV, STRICT_COERCION_ENV, LOG_LEVEL_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def coercer() -> RecordingCoercer:
    return RecordingCoercer()
