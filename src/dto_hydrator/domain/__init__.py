"""Hydration core: property resolution and object orchestration."""

from __future__ import annotations

from .configuration import EMPTY_CONFIG, Absent, Alias, Ignore, Name, PropertyConfig
from .errors import (
    CoercionError,
    HydrationError,
    IgnoredValuePresentError,
    MissingValueError,
    UnknownFieldsError,
)
from .hydrator import ObjectHydrator
from .model import (
    NO_DEFAULT,
    ConstructorParameter,
    HasDefault,
    NoDefault,
    PropertyDescriptor,
    TargetFacts,
    UnknownFieldPolicy,
)
from .ports import ConfigurationSource, TargetIntrospector, ValueCoercer
from .resolver import PropertyResolver, derive_default, missing_value_error, resolve_names

__all__ = [
    "EMPTY_CONFIG",
    "NO_DEFAULT",
    "Absent",
    "Alias",
    "CoercionError",
    "ConfigurationSource",
    "ConstructorParameter",
    "HasDefault",
    "HydrationError",
    "Ignore",
    "IgnoredValuePresentError",
    "MissingValueError",
    "Name",
    "NoDefault",
    "ObjectHydrator",
    "PropertyConfig",
    "PropertyDescriptor",
    "PropertyResolver",
    "TargetFacts",
    "TargetIntrospector",
    "UnknownFieldPolicy",
    "UnknownFieldsError",
    "ValueCoercer",
    "derive_default",
    "missing_value_error",
    "resolve_names",
]
