"""Hydrate whole objects by running one resolver per declared property."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import UnknownFieldsError
from .model import UnknownFieldPolicy
from .resolver import PropertyResolver

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .ports import ConfigurationSource, TargetIntrospector, ValueCoercer

log = logging.getLogger(__name__)


class ObjectHydrator:
    """Populate target objects from loosely typed mappings.

    Strategy:
    1) Describe the target type and build a resolver per property (none skipped).
    2) Route ignore-configured properties through ``ignore_in`` followed by
       ``assign_default``, all others through ``set_value_from``, in declaration
       order, against one working copy of the input.
    3) Apply the unknown-field policy to whatever keys are left.
    """

    def __init__(
        self,
        *,
        introspector: TargetIntrospector,
        coercer: ValueCoercer,
        configuration: ConfigurationSource,
        unknown_fields: UnknownFieldPolicy = UnknownFieldPolicy.IGNORE,
    ) -> None:
        self._introspector = introspector
        self._coercer = coercer
        self._configuration = configuration
        self._unknown_fields = unknown_fields

    @property
    def unknown_fields(self) -> UnknownFieldPolicy:
        return self._unknown_fields

    def resolvers_for(self, instance: object) -> list[PropertyResolver]:
        target_type = type(instance)
        facts = self._introspector.describe(target_type)
        return [
            PropertyResolver(
                descriptor,
                instance=instance,
                coercer=self._coercer,
                constructor=facts.constructor,
                config=self._configuration.property_config(target_type, descriptor.name),
            )
            for descriptor in facts.properties
        ]

    def hydrate[TTarget](self, target_type: type[TTarget], data: Mapping[str, object]) -> TTarget:
        """Allocate ``target_type`` without running its constructor and hydrate it."""

        instance = target_type.__new__(target_type)
        return self.hydrate_into(instance, data)

    def hydrate_into[TTarget](self, instance: TTarget, data: Mapping[str, object]) -> TTarget:
        target_type = type(instance)
        remaining = dict(data)
        log.debug("Hydrating %s from %s input keys", target_type.__qualname__, len(remaining))

        for resolver in self.resolvers_for(instance):
            if resolver.is_ignored:
                resolver.ignore_in(remaining)
                resolver.assign_default()
            else:
                resolver.set_value_from(remaining)

        if remaining:
            self._handle_unknown(target_type, remaining)

        log.debug("Hydrated %s", target_type.__qualname__)
        return instance

    def _handle_unknown(self, target_type: type, remaining: Mapping[str, object]) -> None:
        fields = list(remaining)
        if self._unknown_fields is UnknownFieldPolicy.REJECT:
            raise UnknownFieldsError(target_type, fields)
        if self._unknown_fields is UnknownFieldPolicy.WARN:
            log.warning(
                "Ignoring unknown fields for %s: %s", target_type.__qualname__, ", ".join(fields)
            )
            return
        log.debug("Ignoring unknown fields for %s: %s", target_type.__qualname__, ", ".join(fields))


__all__ = ["ObjectHydrator"]
