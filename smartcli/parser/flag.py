# SmartCLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Flag` dataclass, a single named and constrained command-line parameter.

A `Flag` owns the run of string values it consumed during a parse pass together with
its own validity state. Flags are declared once, registered with a `FlagParser`,
mutated by exactly one `consume()` call per selector occurrence, and cleared with
`reset()` between passes.

Key Attributes:
- `names`: One or more aliases without dashes (e.g. `("output", "o")`); the first is
  canonical and used for display.
- `required`: The flag must be set for the parse to succeed.
- `min_args` / `max_args`: Allowed number of values, normalized so that
  `0 <= min_args <= max_args`. Use `UNLIMITED_NUM_OF_ARGS` for no upper bound.
- `force_consume`: Take every non-flag token while consuming, but still enforce
  `max_args` when validating.
- `pattern`: Optional regex (string or compiled) or predicate every value must match.

Example:
    output = Flag(("output", "o"), required=True, min_args=1, max_args=1)
    verbose = Flag.create_switch(("verbose", "v"))
"""
from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from typing import Callable, Iterable, Union

from smartcli.exceptions import FlagDeclarationError
from smartcli.logger import logger
from smartcli.parser.parsing_error import ErrorType, SingleFlagParsingError
from smartcli.parser.token_stream import TokenStream
from smartcli.parser.utils import is_flag_like

UNLIMITED_NUM_OF_ARGS: int = sys.maxsize

PatternLike = Union[str, re.Pattern, Callable[[str], bool]]


@dataclass(eq=False)
class Flag:
    """
    Represents a command-line flag and the values it consumed.

    Flags compare and hash by identity so the same instance can be tracked in
    registries and required sets regardless of its current state.

    Attributes:
        names (tuple[str, ...]): Aliases for the flag, without leading dashes.
        required (bool): True if the flag must be set for parsing to succeed.
        min_args (int): Minimum number of values.
        max_args (int): Maximum number of values.
        pattern (str | re.Pattern | Callable[[str], bool] | None): Value constraint.
        force_consume (bool): Ignore `max_args` while consuming.
        help (str): Help text used when rendering usage.
        values (list[str]): Values consumed so far, in argument order.
        is_set (bool): True once the flag has been selected on the command line.
    """

    names: tuple[str, ...]
    required: bool = False
    min_args: int = 0
    max_args: int = 0
    pattern: PatternLike | None = None
    force_consume: bool = False
    help: str = ""
    values: list[str] = field(default_factory=list, init=False)
    is_set: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.names = self._validate_names(self.names)
        self.set_num_of_args(self.min_args, self.max_args)
        self.pattern = self._validate_pattern(self.pattern)

    @classmethod
    def create_switch(cls, names: Iterable[str] | str, help: str = "") -> Flag:
        """Create an optional flag that takes no values."""
        names = (names,) if isinstance(names, str) else tuple(names)
        return cls(names=names, help=help)

    @staticmethod
    def _validate_names(names: Iterable[str] | str) -> tuple[str, ...]:
        if isinstance(names, str):
            names = (names,)
        names = tuple(names)
        if not names:
            raise FlagDeclarationError("A flag needs at least one name")
        for name in names:
            if not isinstance(name, str):
                raise FlagDeclarationError(f"Flag name {name!r} must be a string")
            if not name:
                raise FlagDeclarationError("Flag names cannot be empty")
            if name.startswith("-"):
                raise FlagDeclarationError(
                    f"Flag name '{name}' must be given without leading dashes"
                )
        if len(set(names)) != len(names):
            raise FlagDeclarationError(f"Duplicate names in flag declaration: {names}")
        return names

    @staticmethod
    def _validate_pattern(pattern: PatternLike | None) -> PatternLike | None:
        if pattern is None or isinstance(pattern, re.Pattern):
            return pattern
        if isinstance(pattern, str):
            try:
                return re.compile(pattern)
            except re.error as error:
                raise FlagDeclarationError(
                    f"Invalid pattern {pattern!r}: {error}"
                ) from error
        if callable(pattern):
            return pattern
        raise FlagDeclarationError(
            f"pattern must be a string, compiled regex or callable, got {type(pattern)}"
        )

    @property
    def name(self) -> str:
        """The canonical (first) name of the flag."""
        return self.names[0]

    def has_name(self, name: str) -> bool:
        """Return True if `name` is one of this flag's aliases."""
        return name in self.names

    def set_num_of_args(self, min_args: int, max_args: int) -> None:
        """Set the allowed number of values, clamping to `0 <= min <= max`."""
        self.min_args = max(0, min(min_args, max_args))
        self.max_args = max(0, max(min_args, max_args))

    def consume(self, stream: TokenStream) -> None:
        """
        Consume this flag's values from `stream`, starting at its cursor.

        The flag is marked as set even if no values follow. Consumption stops at
        the next flag-like token, or once `max_args` values were taken unless
        `force_consume` is enabled. Consumed tokens are removed from the stream;
        the cursor is left on the first token that was not taken.
        """
        self.is_set = True
        taken = 0
        while stream.has_next():
            token = stream.peek()
            assert token is not None
            if is_flag_like(token):
                break
            if not self.force_consume and len(self.values) >= self.max_args:
                break
            self.values.append(stream.take())
            taken += 1
        logger.debug("Flag '%s' consumed %d value(s).", self.name, taken)

    def matches_pattern(self, value: str) -> bool:
        """Return True if `value` satisfies the pattern, or if there is none."""
        if self.pattern is None:
            return True
        if isinstance(self.pattern, re.Pattern):
            return self.pattern.fullmatch(value) is not None
        return bool(self.pattern(value))

    @property
    def pattern_text(self) -> str:
        """Printable form of the pattern."""
        if self.pattern is None:
            return ""
        if isinstance(self.pattern, re.Pattern):
            return self.pattern.pattern
        return getattr(self.pattern, "__name__", repr(self.pattern))

    def is_valid(self) -> bool:
        """
        Check whether the flag is in a valid state.

        Returns:
            bool: True if the flag was set with an allowed number of values that all
            match the pattern, or if it was not set and is not required.
        """
        if not self.is_set:
            return not self.required
        return self.min_args <= len(self.values) <= self.max_args and all(
            self.matches_pattern(value) for value in self.values
        )

    def get_error(self) -> SingleFlagParsingError | None:
        """Return the first violated constraint of this flag, or None."""
        if self.is_set:
            if len(self.values) < self.min_args:
                error_type = ErrorType.MIN_NUMBER_OF_ARGS_VIOLATION
            elif len(self.values) > self.max_args:
                error_type = ErrorType.MAX_NUMBER_OF_ARGS_VIOLATION
            elif not all(self.matches_pattern(value) for value in self.values):
                error_type = ErrorType.PATTERN_VIOLATION
            else:
                return None
        elif self.required:
            error_type = ErrorType.REQUIRED_FLAG_NOT_SET
        else:
            return None
        return SingleFlagParsingError(error_type, self.name, flag=self)

    def get_errors(self) -> list[SingleFlagParsingError]:
        """Return the errors of this flag. A flag reports at most one error."""
        error = self.get_error()
        return [error] if error else []

    def reset(self) -> None:
        """Forget consumed values and the set state."""
        self.values.clear()
        self.is_set = False

    def __str__(self) -> str:
        return (
            f"Flag(names={list(self.names)}, required={self.required}, "
            f"args={self.values})"
        )
