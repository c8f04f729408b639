# SmartCLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Flag bookkeeping for `FlagParser`.

- `FlagRegistry`: Maps every alias to its `Flag` and keeps the distinct flags in
  registration order, so iteration never visits a flag twice.
- `RequiredFlagSet`: A cross-flag rule requiring at least one of a group of flags
  to be set.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from smartcli.exceptions import FlagDeclarationError
from smartcli.logger import logger
from smartcli.parser.flag import Flag
from smartcli.parser.parsing_error import ErrorType, MultiFlagParsingError


class FlagRegistry:
    """
    A mapping of names to flags plus the ordered set of distinct flags.

    Every name in `by_name` resolves to a flag that is also in `flags`.
    Registering the same instance twice is a no-op; registering a different flag
    under a name that is already taken raises `FlagDeclarationError`.
    """

    def __init__(self) -> None:
        self.by_name: dict[str, Flag] = {}
        self._flags: dict[Flag, None] = {}

    def register(self, flag: Flag) -> None:
        """Register `flag` under all of its names."""
        if not isinstance(flag, Flag):
            raise FlagDeclarationError(f"Expected a Flag, got {type(flag).__name__}")
        if flag in self._flags:
            logger.debug("Flag '%s' is already registered.", flag.name)
            return
        for name in flag.names:
            existing = self.by_name.get(name)
            if existing is not None:
                raise FlagDeclarationError(
                    f"Name '{name}' is already used by flag '{existing.name}'"
                )
        self._flags[flag] = None
        for name in flag.names:
            self.by_name[name] = flag

    def get(self, name: str | None) -> Flag | None:
        """Return the flag registered under `name`, or None."""
        if name is None:
            return None
        return self.by_name.get(name)

    def has_flag(self, name: str | None) -> bool:
        """Return True if `name` is a registered alias."""
        return self.get(name) is not None

    @property
    def flags(self) -> list[Flag]:
        """The distinct registered flags, in registration order."""
        return list(self._flags)

    def reset(self) -> None:
        """Reset the state of every registered flag."""
        for flag in self._flags:
            flag.reset()

    def __contains__(self, flag: object) -> bool:
        return flag in self._flags

    def __iter__(self) -> Iterator[Flag]:
        return iter(list(self._flags))

    def __len__(self) -> int:
        return len(self._flags)


class RequiredFlagSet:
    """At least one of the listed flags has to be set for parsing to succeed."""

    def __init__(self, flags: Iterable[Flag]) -> None:
        self.flags: tuple[Flag, ...] = tuple(flags)
        if not self.flags:
            raise FlagDeclarationError("A required flag set needs at least one flag")

    def is_satisfied(self) -> bool:
        return any(flag.is_set for flag in self.flags)

    def get_error(self) -> MultiFlagParsingError | None:
        if self.is_satisfied():
            return None
        return MultiFlagParsingError(ErrorType.REQUIRED_FLAG_SET_VIOLATION, self.flags)

    def __iter__(self) -> Iterator[Flag]:
        return iter(self.flags)

    def __len__(self) -> int:
        return len(self.flags)
