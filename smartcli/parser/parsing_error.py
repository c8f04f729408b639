# SmartCLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Error records produced when validating the outcome of a parse pass.

Parsing never raises for bad user input. Instead `FlagParser.get_errors()` rebuilds a
list of `ParsingError` records from the current flag state every time it is called.

Contents:
- `ErrorType`: The closed set of error kinds.
- `ParsingError`: Base record with a printable `description`.
- `SingleFlagParsingError`: An error tied to one flag, or to one unknown flag token.
- `MultiFlagParsingError`: An error tied to a group of flags (the required set).

Records render as `<name>: <KIND>: <description>`, for example:
    output: MIN_NUMBER_OF_ARGS_VIOLATION: Expected at least 1 arguments, but got 0
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smartcli.parser.flag import Flag


class ErrorType(Enum):
    """The kinds of errors a parse pass can report."""

    MIN_NUMBER_OF_ARGS_VIOLATION = "MIN_NUMBER_OF_ARGS_VIOLATION"
    MAX_NUMBER_OF_ARGS_VIOLATION = "MAX_NUMBER_OF_ARGS_VIOLATION"
    PATTERN_VIOLATION = "PATTERN_VIOLATION"
    REQUIRED_FLAG_NOT_SET = "REQUIRED_FLAG_NOT_SET"
    REQUIRED_FLAG_SET_VIOLATION = "REQUIRED_FLAG_SET_VIOLATION"
    UNKNOWN_FLAG = "UNKNOWN_FLAG"

    # Short aliases; records always report the long names above.
    MIN_ARGS_VIOLATION = "MIN_NUMBER_OF_ARGS_VIOLATION"
    MAX_ARGS_VIOLATION = "MAX_NUMBER_OF_ARGS_VIOLATION"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParsingError:
    """Base class for all parse-pass error records."""

    type: ErrorType

    @property
    def names(self) -> list[str]:
        return []

    @property
    def description(self) -> str:
        return ""

    def __str__(self) -> str:
        return f"{', '.join(self.names)}: {self.type}: {self.description}"


@dataclass(frozen=True)
class SingleFlagParsingError(ParsingError):
    """
    An error related to a single flag.

    Attributes:
        type (ErrorType): The kind of error.
        name (str): The flag's canonical name, or the raw token for UNKNOWN_FLAG.
        flag (Flag | None): The offending flag. None for UNKNOWN_FLAG.
    """

    name: str
    flag: Flag | None = field(default=None, compare=False)

    @property
    def names(self) -> list[str]:
        return [self.name]

    @property
    def description(self) -> str:
        flag = self.flag
        if self.type == ErrorType.UNKNOWN_FLAG:
            return f"Flag {self.name} does not exist."
        assert flag is not None, f"{self.type} requires a flag"
        if self.type == ErrorType.MIN_NUMBER_OF_ARGS_VIOLATION:
            return (
                f"Expected at least {flag.min_args} arguments, "
                f"but got {len(flag.values)}"
            )
        elif self.type == ErrorType.MAX_NUMBER_OF_ARGS_VIOLATION:
            return (
                f"Expected at most {flag.max_args} arguments, "
                f"but got {len(flag.values)}"
            )
        elif self.type == ErrorType.PATTERN_VIOLATION:
            return f"Arguments should follow the pattern {flag.pattern_text}."
        elif self.type == ErrorType.REQUIRED_FLAG_NOT_SET:
            return f"Required flag {self.name} was not set."
        return ""


@dataclass(frozen=True)
class MultiFlagParsingError(ParsingError):
    """An error related to several flags, such as an unsatisfied required set."""

    flags: tuple[Flag, ...] = field(default=(), compare=False)

    @property
    def names(self) -> list[str]:
        """The canonical name of every flag in the error."""
        return [flag.name for flag in self.flags]

    @property
    def description(self) -> str:
        if self.type == ErrorType.REQUIRED_FLAG_SET_VIOLATION:
            return "At least one of these flags needs to be set."
        return ""
