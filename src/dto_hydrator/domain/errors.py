"""Hydration error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class HydrationError(ValueError):
    """Base class for failures raised while hydrating an object."""


class MissingValueError(HydrationError):
    """Raised when a property has neither an input value nor a default."""

    def __init__(self, message: str = "Expected a value", *, names: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.names = tuple(names)


class IgnoredValuePresentError(HydrationError):
    """Raised when input supplies a value for a property that rejects input."""


class CoercionError(HydrationError):
    """Raised when a raw input value cannot be converted to the declared type."""

    def __init__(self, message: str, *, value: object = None, declared_type: object = None) -> None:
        super().__init__(message)
        self.value = value
        self.declared_type = declared_type


class UnknownFieldsError(HydrationError):
    """Raised when input keys remain that no property consumed."""

    def __init__(self, target_type: type, fields: Iterable[str]) -> None:
        self.target_type = target_type
        self.fields = tuple(fields)
        field_list = ", ".join(self.fields)
        super().__init__(f"Unknown fields for {target_type.__qualname__}: {field_list}")
