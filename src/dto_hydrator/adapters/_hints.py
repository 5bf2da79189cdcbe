"""Private helpers for reading type hints.

Only adapter code should import this module.
"""

from __future__ import annotations

import types
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, TypeAliasType, Union, get_args, get_origin


@dataclass(frozen=True, slots=True)
class UnwrappedHint:
    declared_type: Any
    metadata: tuple[object, ...] = ()
    is_static: bool = False


def unwrap_hint(hint: object) -> UnwrappedHint:
    """Strip ``Annotated``, ``ClassVar`` and ``type`` aliases off a hint."""

    metadata: list[object] = []
    is_static = False
    while True:
        if isinstance(hint, TypeAliasType):
            hint = hint.__value__
            continue
        if hint is ClassVar:
            is_static = True
            hint = Any
            break
        origin = get_origin(hint)
        if origin is Annotated:
            metadata.extend(hint.__metadata__)  # pyright: ignore[reportAttributeAccessIssue]
            hint = get_args(hint)[0]
            continue
        if origin is ClassVar:
            is_static = True
            args = get_args(hint)
            hint = args[0] if args else Any
            continue
        break
    return UnwrappedHint(declared_type=hint, metadata=tuple(metadata), is_static=is_static)


def is_nullable(declared_type: object) -> bool:
    while isinstance(declared_type, TypeAliasType):
        declared_type = declared_type.__value__
    if declared_type in (Any, object, None, types.NoneType):
        return True
    if get_origin(declared_type) in (Union, types.UnionType):
        return any(is_nullable(arg) for arg in get_args(declared_type))
    return False
