from __future__ import annotations

from importlib import metadata

from dto_hydrator.app import build_hydrator, hydrate
from dto_hydrator.domain import (
    Absent,
    Alias,
    CoercionError,
    HydrationError,
    Ignore,
    IgnoredValuePresentError,
    MissingValueError,
    Name,
    ObjectHydrator,
    PropertyResolver,
    UnknownFieldPolicy,
    UnknownFieldsError,
)

try:
    __version__ = metadata.version("dto-hydrator")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "Absent",
    "Alias",
    "CoercionError",
    "HydrationError",
    "Ignore",
    "IgnoredValuePresentError",
    "MissingValueError",
    "Name",
    "ObjectHydrator",
    "PropertyResolver",
    "UnknownFieldPolicy",
    "UnknownFieldsError",
    "__version__",
    "build_hydrator",
    "hydrate",
]
