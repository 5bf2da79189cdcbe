"""Read hydration markers from ``typing.Annotated`` metadata."""

from __future__ import annotations

import dataclasses
from typing import Final, get_type_hints

from dto_hydrator.domain.configuration import EMPTY_CONFIG, PropertyConfig

from ._hints import unwrap_hint

# dataclass ``field(metadata=...)`` key holding an iterable of markers
METADATA_KEY: Final[str] = "dto_hydrator"


class AnnotatedConfigurationSource:
    """``ConfigurationSource`` reading markers declared next to each property::

        @dataclass
        class Person:
            name: Annotated[str, Name("full_name"), Alias("fullName")]
            token: Annotated[str | None, Ignore.reject("token is read-only")] = None

    Dataclass fields may also carry markers in ``field(metadata={METADATA_KEY: [...]})``;
    those come after the ``Annotated`` ones.
    """

    def __init__(self) -> None:
        self._cache: dict[type, dict[str, PropertyConfig]] = {}

    def property_config(self, target_type: type, name: str) -> PropertyConfig:
        configs = self._cache.get(target_type)
        if configs is None:
            configs = _collect_configs(target_type)
            self._cache[target_type] = configs
        return configs.get(name, EMPTY_CONFIG)


def _collect_configs(target_type: type) -> dict[str, PropertyConfig]:
    markers: dict[str, list[object]] = {}
    for name, hint in get_type_hints(target_type, include_extras=True).items():
        markers[name] = list(unwrap_hint(hint).metadata)

    if dataclasses.is_dataclass(target_type):
        for field in dataclasses.fields(target_type):
            markers.setdefault(field.name, []).extend(field.metadata.get(METADATA_KEY, ()))

    return {
        name: PropertyConfig.from_markers(entries) for name, entries in markers.items() if entries
    }


__all__ = ["METADATA_KEY", "AnnotatedConfigurationSource"]
