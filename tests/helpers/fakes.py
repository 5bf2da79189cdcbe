"""Hand-written port implementations for core tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from dto_hydrator.domain import EMPTY_CONFIG, CoercionError, PropertyConfig, TargetFacts


@dataclass
class RecordingCoercer:
    """Returns values unchanged and remembers every call."""

    calls: list[tuple[object, object]] = field(default_factory=list["tuple[object, object]"])

    def coerce(self, value: object, declared_type: object) -> object:
        self.calls.append((value, declared_type))
        return value


class FailingCoercer:
    def coerce(self, value: object, declared_type: object) -> object:
        raise CoercionError(f"cannot coerce {value!r}", value=value, declared_type=declared_type)


@dataclass
class StaticIntrospector:
    facts: TargetFacts

    def describe(self, target_type: type) -> TargetFacts:
        assert target_type is self.facts.target_type
        return self.facts


@dataclass
class DictConfigurationSource:
    configs: dict[str, PropertyConfig] = field(default_factory=dict["str", "PropertyConfig"])

    def property_config(self, target_type: type, name: str) -> PropertyConfig:
        return self.configs.get(name, EMPTY_CONFIG)


class Bag:
    """Plain attribute holder used as a hydration target."""
