from __future__ import annotations

import logging

import pytest

from dto_hydrator.common import configure_logging


def test_configure_logging_uses_project_format(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(level=logging.DEBUG, force=True)

    assert calls == [
        {
            "level": logging.DEBUG,
            "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
            "datefmt": "%H:%M:%S",
            "force": True,
        }
    ]
