"""Per-property hydration configuration.

Markers are plain frozen values so they can be placed in ``typing.Annotated``
metadata, returned by any ``ConfigurationSource`` or built by hand::

    name: Annotated[str, Name("full_name"), Alias("fullName")]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from .errors import IgnoredValuePresentError, MissingValueError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

type IgnoreAction = Callable[[], None]


@dataclass(frozen=True, slots=True)
class Name:
    """Accepted input key that replaces the property's own name."""

    name: str


@dataclass(frozen=True, slots=True)
class Alias:
    """Additional accepted input key."""

    name: str


@dataclass(frozen=True, slots=True)
class Ignore:
    """The property never receives a value from input.

    Without an action, matching keys are dropped silently.
    """

    action: IgnoreAction | None = None

    @classmethod
    def reject(
        cls,
        message: str = "Value is not accepted",
        *,
        error: type[Exception] = IgnoredValuePresentError,
    ) -> Ignore:
        def _raise() -> None:
            raise error(message)

        return cls(action=_raise)

    def execute(self) -> None:
        if self.action is not None:
            self.action()


@dataclass(frozen=True, slots=True)
class Absent:
    """Custom error raised when the property is missing from input."""

    message: str | None = None
    error: type[Exception] = MissingValueError
    factory: Callable[[], BaseException] | None = None

    def get_error(self) -> BaseException:
        if self.factory is not None:
            return self.factory()
        if self.message is None:
            return self.error()
        return self.error(self.message)


@dataclass(frozen=True, slots=True)
class PropertyConfig:
    names: tuple[Name, ...] = ()
    aliases: tuple[Alias, ...] = ()
    ignores: tuple[Ignore, ...] = ()
    absents: tuple[Absent, ...] = ()

    @classmethod
    def from_markers(cls, markers: Iterable[object]) -> PropertyConfig:
        """Collect known markers in order; anything else is skipped."""

        names: list[Name] = []
        aliases: list[Alias] = []
        ignores: list[Ignore] = []
        absents: list[Absent] = []
        for marker in markers:
            if isinstance(marker, Name):
                names.append(marker)
            elif isinstance(marker, Alias):
                aliases.append(marker)
            elif isinstance(marker, Ignore):
                ignores.append(marker)
            elif isinstance(marker, Absent):
                absents.append(marker)
        return cls(
            names=tuple(names),
            aliases=tuple(aliases),
            ignores=tuple(ignores),
            absents=tuple(absents),
        )


EMPTY_CONFIG: Final = PropertyConfig()
