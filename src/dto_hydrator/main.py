#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from dto_hydrator.app import hydrate
from dto_hydrator.common import configure_logging
from dto_hydrator.config import ConfigurationError, get_hydration_config
from dto_hydrator.domain import UnknownFieldPolicy

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Hydrate an object from a JSON payload")
    parser.add_argument(
        "target",
        help="Target class as 'package.module:ClassName'",
    )
    parser.add_argument(
        "payload",
        nargs="?",
        default="-",
        help="Path to a JSON object, or '-' to read stdin (default: %(default)s)",
    )
    parser.add_argument(
        "--unknown-fields",
        choices=[policy.value for policy in UnknownFieldPolicy],
        help="How to treat input keys no property accepts (defaults to config)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Require exact input types instead of lax coercion",
    )
    return parser.parse_args(list(argv))


def _load_target(spec: str) -> type:
    module_name, _, attribute_path = spec.partition(":")
    if not module_name or not attribute_path:
        raise ValueError(f"Invalid target {spec!r}; expected 'package.module:ClassName'")
    target: object = importlib.import_module(module_name)
    for attribute in attribute_path.split("."):
        target = getattr(target, attribute)
    if not isinstance(target, type):
        raise ValueError(f"Target {spec!r} is not a class")
    return target


def _load_payload(source: str) -> dict[str, object]:
    raw = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    payload = json.loads(raw)
    if not isinstance(payload, dict):
        raise ValueError("Payload must be a JSON object")
    return payload


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        config = get_hydration_config()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    configure_logging(level=config.log_level)
    try:
        parsed_args = _parse_args(args_list)
        target = _load_target(parsed_args.target)
        payload = _load_payload(parsed_args.payload)
    except (ImportError, AttributeError, OSError, ValueError):
        log.exception("CLI validation error")
        sys.exit(2)

    if parsed_args.unknown_fields is not None:
        config = replace(config, unknown_fields=UnknownFieldPolicy(parsed_args.unknown_fields))
    if parsed_args.strict:
        config = replace(config, strict_coercion=True)

    try:
        result = hydrate(target, payload, config=config)
    except Exception:
        log.exception("Hydration of %s failed", target.__qualname__)
        sys.exit(1)

    print(repr(result))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
