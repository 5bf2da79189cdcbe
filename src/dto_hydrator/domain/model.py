"""Introspection facts and derived per-property values (pure, dependency-light)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from collections.abc import Callable


class UnknownFieldPolicy(StrEnum):
    """What the hydrator does with input keys no property consumed."""

    IGNORE = "ignore"
    WARN = "warn"
    REJECT = "reject"


@dataclass(frozen=True, slots=True)
class PropertyDescriptor:
    """One declared property of a target type."""

    name: str
    declared_type: Any = Any
    nullable: bool = False
    is_static: bool = False
    has_default: bool = False
    default: object = None
    # dataclass `field(default_factory=...)`, also for fields outside `__init__`
    default_factory: Callable[[], object] | None = None
    # declaring class; static assignment targets it
    owner: type | None = None


@dataclass(frozen=True, slots=True)
class ConstructorParameter:
    """One parameter of the owning type's constructor."""

    name: str
    promoted: bool = False
    optional: bool = False
    default: object = None
    default_factory: Callable[[], object] | None = None


@dataclass(frozen=True, slots=True)
class TargetFacts:
    """Everything the hydrator needs to know about a target type."""

    target_type: type
    properties: tuple[PropertyDescriptor, ...] = ()
    constructor: tuple[ConstructorParameter, ...] = ()

    def property_names(self) -> tuple[str, ...]:
        return tuple(prop.name for prop in self.properties)


@dataclass(frozen=True, slots=True)
class NoDefault:
    """The property must be supplied by input."""


NO_DEFAULT: Final = NoDefault()


@dataclass(frozen=True, slots=True)
class HasDefault:
    """A default that is assigned as-is, without coercion.

    ``factory`` wins over ``value`` and is called on every ``resolve`` so that
    mutable defaults are never shared between hydrated objects.
    """

    value: object = None
    factory: Callable[[], object] | None = None

    def resolve(self) -> object:
        if self.factory is not None:
            return self.factory()
        return self.value


type DefaultSpec = NoDefault | HasDefault
