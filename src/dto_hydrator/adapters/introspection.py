"""Describe dataclasses and annotated classes for the hydrator."""

from __future__ import annotations

import dataclasses
import inspect
import types
from typing import TYPE_CHECKING, Any, get_type_hints

from dto_hydrator.domain.model import ConstructorParameter, PropertyDescriptor, TargetFacts

from ._hints import is_nullable, unwrap_hint

if TYPE_CHECKING:
    from collections.abc import Mapping


class ClassIntrospector:
    """``TargetIntrospector`` backed by type hints and ``inspect``.

    Dataclass fields are promoted constructor parameters; annotated attributes of
    other classes are plain properties whose class-level value is their default.
    ``ClassVar`` annotations become static properties.
    """

    def __init__(self) -> None:
        self._cache: dict[type, TargetFacts] = {}

    def describe(self, target_type: type) -> TargetFacts:
        facts = self._cache.get(target_type)
        if facts is None:
            facts = self._describe(target_type)
            self._cache[target_type] = facts
        return facts

    def _describe(self, target_type: type) -> TargetFacts:
        hints = get_type_hints(target_type, include_extras=True)
        if dataclasses.is_dataclass(target_type):
            return _describe_dataclass(target_type, hints)
        return _describe_class(target_type, hints)


def _describe_dataclass(target_type: type, hints: Mapping[str, object]) -> TargetFacts:
    properties: list[PropertyDescriptor] = []
    constructor: list[ConstructorParameter] = []
    for field in dataclasses.fields(target_type):
        declared_type = unwrap_hint(hints.get(field.name, Any)).declared_type
        has_default = field.default is not dataclasses.MISSING
        default = field.default if has_default else None
        has_factory = field.default_factory is not dataclasses.MISSING
        default_factory = field.default_factory if has_factory else None
        properties.append(
            PropertyDescriptor(
                name=field.name,
                declared_type=declared_type,
                nullable=is_nullable(declared_type),
                has_default=has_default,
                default=default,
                default_factory=default_factory,
                owner=_declaring_class(target_type, field.name),
            )
        )
        if not field.init:
            continue
        constructor.append(
            ConstructorParameter(
                name=field.name,
                promoted=True,
                optional=has_default or has_factory,
                default=default,
                default_factory=default_factory,
            )
        )

    for name, hint in hints.items():
        unwrapped = unwrap_hint(hint)
        if unwrapped.is_static:
            properties.append(_class_property(target_type, name, unwrapped.declared_type, static=True))

    return TargetFacts(
        target_type=target_type,
        properties=tuple(properties),
        constructor=tuple(constructor),
    )


def _describe_class(target_type: type, hints: Mapping[str, object]) -> TargetFacts:
    properties: list[PropertyDescriptor] = []
    for name, hint in hints.items():
        unwrapped = unwrap_hint(hint)
        properties.append(
            _class_property(target_type, name, unwrapped.declared_type, static=unwrapped.is_static)
        )
    return TargetFacts(
        target_type=target_type,
        properties=tuple(properties),
        constructor=_constructor_parameters(target_type),
    )


def _class_property(
    target_type: type, name: str, declared_type: object, *, static: bool
) -> PropertyDescriptor:
    has_default, default = _class_default(target_type, name)
    return PropertyDescriptor(
        name=name,
        declared_type=declared_type,
        nullable=is_nullable(declared_type),
        is_static=static,
        has_default=has_default,
        default=default,
        owner=_declaring_class(target_type, name),
    )


def _class_default(target_type: type, name: str) -> tuple[bool, object]:
    for klass in target_type.__mro__:
        namespace = vars(klass)
        if name not in namespace:
            continue
        value = namespace[name]
        # slot storage, not a value
        if isinstance(value, types.MemberDescriptorType):
            return False, None
        return True, value
    return False, None


def _declaring_class(target_type: type, name: str) -> type:
    for klass in target_type.__mro__:
        if name in inspect.get_annotations(klass):
            return klass
    return target_type


def _constructor_parameters(target_type: type) -> tuple[ConstructorParameter, ...]:
    init = target_type.__init__
    if init is object.__init__:
        return ()
    try:
        signature = inspect.signature(init)
    except (TypeError, ValueError):
        return ()

    parameters: list[ConstructorParameter] = []
    for index, parameter in enumerate(signature.parameters.values()):
        if index == 0:
            continue
        if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
            continue
        optional = parameter.default is not inspect.Parameter.empty
        parameters.append(
            ConstructorParameter(
                name=parameter.name,
                optional=optional,
                default=parameter.default if optional else None,
            )
        )
    return tuple(parameters)


__all__ = ["ClassIntrospector"]
