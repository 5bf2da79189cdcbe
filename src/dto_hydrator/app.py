"""Application entry points wiring the default adapters."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from dto_hydrator.adapters import AnnotatedConfigurationSource, ClassIntrospector, PydanticCoercer
from dto_hydrator.config import HydrationConfig, get_hydration_config
from dto_hydrator.domain import ObjectHydrator

if TYPE_CHECKING:
    from collections.abc import Mapping

log = getLogger(__name__)

# introspection and configuration depend only on the target type; share their caches
_INTROSPECTOR = ClassIntrospector()
_CONFIGURATION = AnnotatedConfigurationSource()
_COERCERS: dict[bool, PydanticCoercer] = {}


def build_hydrator(config: HydrationConfig | None = None) -> ObjectHydrator:
    """Return an ``ObjectHydrator`` using the default adapters.

    Without an explicit ``config`` the settings are read from the environment.
    """

    settings = config or get_hydration_config()
    coercer = _COERCERS.get(settings.strict_coercion)
    if coercer is None:
        coercer = PydanticCoercer(strict=settings.strict_coercion)
        _COERCERS[settings.strict_coercion] = coercer
    log.debug(
        "Building hydrator: unknown_fields=%s, strict_coercion=%s",
        settings.unknown_fields,
        settings.strict_coercion,
    )
    return ObjectHydrator(
        introspector=_INTROSPECTOR,
        coercer=coercer,
        configuration=_CONFIGURATION,
        unknown_fields=settings.unknown_fields,
    )


def hydrate[TTarget](
    target_type: type[TTarget],
    data: Mapping[str, object],
    *,
    config: HydrationConfig | None = None,
) -> TTarget:
    """Create a ``target_type`` instance populated from ``data``."""

    return build_hydrator(config).hydrate(target_type, data)
