"""Per-property resolution: accepted names, defaults, ignore handling, assignment."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .configuration import EMPTY_CONFIG
from .errors import MissingValueError
from .model import NO_DEFAULT, HasDefault

if TYPE_CHECKING:
    from collections.abc import Iterable, MutableMapping

    from .configuration import Absent, Ignore, PropertyConfig
    from .model import ConstructorParameter, DefaultSpec, PropertyDescriptor
    from .ports import ValueCoercer

log = logging.getLogger(__name__)


def resolve_names(property_name: str, config: PropertyConfig) -> tuple[str, ...]:
    """Return the ordered, de-duplicated input keys accepted for a property.

    Primary names replace the property's own name; aliases are always appended.
    """

    names: dict[str, None] = {}
    for entry in config.names:
        names[entry.name] = None

    if not names:
        names[property_name] = None

    for alias in config.aliases:
        names[alias.name] = None

    return tuple(names)


def derive_default(
    descriptor: PropertyDescriptor,
    constructor: Iterable[ConstructorParameter] = (),
) -> DefaultSpec:
    """Work out what a property falls back to when input does not supply it.

    Order:
    1) the property's own default or default factory;
    2) the default of an optional promoted constructor parameter of the same name;
    3) ``None`` when the declared type admits it;
    4) no default.
    """

    if descriptor.has_default or descriptor.default_factory is not None:
        return HasDefault(descriptor.default, factory=descriptor.default_factory)

    parameter = _promoted_parameter(constructor, descriptor.name)
    if parameter is not None and parameter.optional:
        return HasDefault(parameter.default, factory=parameter.default_factory)

    if descriptor.nullable:
        return HasDefault(None)

    return NO_DEFAULT


def missing_value_error(names: tuple[str, ...]) -> MissingValueError:
    if not names:
        return MissingValueError("Expected a value", names=names)
    if len(names) == 1:
        return MissingValueError(f'Expected a value for "{names[0]}"', names=names)
    return MissingValueError(f'Expected one of "{", ".join(names)}"', names=names)


class PropertyResolver:
    """Hydrates one declared property of one target instance.

    Built per hydration pass; the input mapping and the instance are borrowed and
    never outlive the call that uses them.
    """

    __slots__ = ("_absent", "_coercer", "_default", "_descriptor", "_ignore", "_instance", "_names")

    def __init__(
        self,
        descriptor: PropertyDescriptor,
        *,
        instance: object,
        coercer: ValueCoercer,
        constructor: Iterable[ConstructorParameter] = (),
        config: PropertyConfig = EMPTY_CONFIG,
    ) -> None:
        self._descriptor = descriptor
        self._instance = instance
        self._coercer = coercer
        self._ignore: Ignore | None = _first(config.ignores, "Ignore", descriptor.name)
        self._absent: Absent | None = _first(config.absents, "Absent", descriptor.name)
        self._names = resolve_names(descriptor.name, config)
        self._default = derive_default(descriptor, constructor)

    @property
    def name(self) -> str:
        return self._descriptor.name

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @property
    def default(self) -> DefaultSpec:
        return self._default

    @property
    def is_ignored(self) -> bool:
        return self._ignore is not None

    def ignore_in(self, data: MutableMapping[str, object]) -> None:
        """Drop every accepted key from ``data`` without assigning anything.

        The ignore action runs before its key is removed, so a raising action
        leaves the offending key in place.
        """

        for name in self._names:
            if name in data and self._ignore is not None:
                self._ignore.execute()
            data.pop(name, None)

    def set_value_from(self, data: MutableMapping[str, object]) -> None:
        """Assign the first accepted key found in ``data``, else the default.

        Only the winning key is consumed; other accepted keys stay in ``data``.
        """

        for name in self._names:
            if name not in data:
                continue

            value = data.pop(name)
            self._assign(self._coercer.coerce(value, self._descriptor.declared_type))
            return

        if isinstance(self._default, HasDefault):
            self._assign(self._default.resolve())
            return

        raise self._missing_error()

    def assign_default(self) -> bool:
        """Assign the default, if any, and report whether one was assigned.

        Objects allocated without their constructor hold no value for ignored
        properties until this runs.
        """

        if not isinstance(self._default, HasDefault):
            return False
        self._assign(self._default.resolve())
        return True

    def _assign(self, value: object) -> None:
        descriptor = self._descriptor
        if descriptor.is_static:
            setattr(descriptor.owner or type(self._instance), descriptor.name, value)
            return
        # bypasses frozen dataclass guards, still honours data descriptors
        object.__setattr__(self._instance, descriptor.name, value)

    def _missing_error(self) -> BaseException:
        if self._absent is not None:
            return self._absent.get_error()
        return missing_value_error(self._names)


def _promoted_parameter(
    constructor: Iterable[ConstructorParameter], name: str
) -> ConstructorParameter | None:
    for parameter in constructor:
        if parameter.promoted and parameter.name == name:
            return parameter
    return None


def _first[TEntry](entries: tuple[TEntry, ...], kind: str, property_name: str) -> TEntry | None:
    if not entries:
        return None
    if len(entries) > 1:
        log.warning(
            "Property %s declares %s %s entries; only the first is used",
            property_name,
            len(entries),
            kind,
        )
    return entries[0]


__all__ = ["PropertyResolver", "derive_default", "missing_value_error", "resolve_names"]
