"""Ports the hydration core depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .configuration import PropertyConfig
    from .model import TargetFacts


@runtime_checkable
class TargetIntrospector(Protocol):
    """Lists the properties of a target type together with its constructor."""

    def describe(self, target_type: type) -> TargetFacts: ...


@runtime_checkable
class ValueCoercer(Protocol):
    """Converts a raw input value into a property's declared type."""

    def coerce(self, value: object, declared_type: object) -> object: ...


@runtime_checkable
class ConfigurationSource(Protocol):
    """Supplies the hydration configuration of one property."""

    def property_config(self, target_type: type, name: str) -> PropertyConfig: ...


__all__ = ["ConfigurationSource", "TargetIntrospector", "ValueCoercer"]
