from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING, cast

import pytest

from dto_hydrator import main as main_module

if TYPE_CHECKING:
    from pathlib import Path

    from dto_hydrator.config import HydrationConfig


def _write_payload(tmp_path: Path, payload: object) -> str:
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_main_prints_hydrated_object(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    payload = _write_payload(tmp_path, {"x": "4", "y": 2})

    main_module.main(["tests.helpers.targets:Point", payload])

    assert capsys.readouterr().out.strip() == "Point(x=4, y=2)"


def test_main_reads_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO('{"x": 1}'))

    main_module.main(["tests.helpers.targets:Point"])

    assert capsys.readouterr().out.strip() == "Point(x=1, y=0)"


def test_main_passes_flags_to_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_hydrate(target_type: type, data: dict[str, object], **kwargs: object) -> object:
        captured.update(kwargs, target_type=target_type, data=data)
        return None

    monkeypatch.setattr(main_module, "hydrate", fake_hydrate)
    payload = _write_payload(tmp_path, {"x": 1})

    main_module.main(
        ["tests.helpers.targets:Point", payload, "--unknown-fields", "reject", "--strict"]
    )

    config = cast("HydrationConfig", captured["config"])
    assert captured["data"] == {"x": 1}
    assert config.unknown_fields == "reject"
    assert config.strict_coercion is True


def test_main_invalid_target(tmp_path: Path) -> None:
    payload = _write_payload(tmp_path, {})

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["not-a-target", payload])

    assert excinfo.value.code == 2


def test_main_rejects_non_object_payload(tmp_path: Path) -> None:
    payload = _write_payload(tmp_path, [1, 2])

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["tests.helpers.targets:Point", payload])

    assert excinfo.value.code == 2


def test_main_hydration_failure(tmp_path: Path) -> None:
    payload = _write_payload(tmp_path, {"y": 1})

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["tests.helpers.targets:Point", payload])

    assert excinfo.value.code == 1


def test_main_invalid_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DTO_HYDRATOR_UNKNOWN_FIELDS", "explode")
    payload = _write_payload(tmp_path, {"x": 1})

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["tests.helpers.targets:Point", payload])

    assert excinfo.value.code == 2


def test_main_custom_absent_error(tmp_path: Path) -> None:
    payload = _write_payload(tmp_path, {})

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["tests.helpers.targets:Voucher", payload])

    assert excinfo.value.code == 1


def test_main_prints_object_with_ignored_fields(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    payload = _write_payload(tmp_path, {"name": "db", "secret": "s3cr3t"})

    main_module.main(["tests.helpers.targets:SlottedSecret", payload])

    assert capsys.readouterr().out.strip() == "SlottedSecret(name='db', secret='hidden')"
