"""Default adapters for the hydration ports."""

from __future__ import annotations

from .annotations import METADATA_KEY, AnnotatedConfigurationSource
from .introspection import ClassIntrospector
from .pydantic import PydanticCoercer

__all__ = [
    "METADATA_KEY",
    "AnnotatedConfigurationSource",
    "ClassIntrospector",
    "PydanticCoercer",
]
