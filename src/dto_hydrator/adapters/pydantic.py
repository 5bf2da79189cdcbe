"""Value coercion backed by pydantic ``TypeAdapter``s."""

from __future__ import annotations

from logging import getLogger
from typing import Any

from pydantic import TypeAdapter, ValidationError

from dto_hydrator.domain.errors import CoercionError

log = getLogger(__name__)


class PydanticCoercer:
    """``ValueCoercer`` validating raw input against the declared type.

    Lax mode by default (``"5"`` -> ``5``, dicts -> nested dataclasses/models);
    pass ``strict=True`` to require exact types.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self._strict = strict
        self._adapters: dict[object, TypeAdapter[Any]] = {}

    @property
    def strict(self) -> bool:
        return self._strict

    def coerce(self, value: object, declared_type: object) -> object:
        adapter = self._adapter_for(declared_type)
        try:
            return adapter.validate_python(value, strict=self._strict)
        except ValidationError as exc:
            message = f"Cannot coerce {value!r} to {_type_name(declared_type)}: {_summary(exc)}"
            raise CoercionError(message, value=value, declared_type=declared_type) from exc

    def _adapter_for(self, declared_type: object) -> TypeAdapter[Any]:
        try:
            adapter = self._adapters.get(declared_type)
        except TypeError:
            # unhashable hint, build uncached
            return TypeAdapter(declared_type)
        if adapter is None:
            log.debug("Building type adapter for %s", _type_name(declared_type))
            adapter = TypeAdapter(declared_type)
            self._adapters[declared_type] = adapter
        return adapter


def _type_name(declared_type: object) -> str:
    if isinstance(declared_type, type):
        return declared_type.__qualname__
    return repr(declared_type)


def _summary(exc: ValidationError) -> str:
    return "; ".join(error["msg"] for error in exc.errors())


__all__ = ["PydanticCoercer"]
