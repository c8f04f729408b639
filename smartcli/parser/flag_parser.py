# SmartCLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `FlagParser`, the engine that assigns the tokens of a raw
argument vector to declared flags and reports whether the result satisfies every
declared constraint.

Parsing happens in two passes over an owned `TokenStream`:
1. Left to right, every flag-like token whose name is registered is removed and the
   matching `Flag` consumes the values that follow it. Unknown flag-like tokens and
   plain values stay where they are.
2. Everything still in the stream is handed, in one block, to the reserved
   `unconsumed` flag. It follows the same rule as any other flag, so an unknown
   flag-like token halts it and the rest of the stream stays unaccounted.

A pass is successful when every declared flag is valid, the `unconsumed` flag is
valid, the required flag set (if any) is satisfied and the stream is empty. Parsing
never raises for bad input; use `get_errors()` to learn why a pass failed, or
`parse_args_or_raise()` to get a `ParsingFailedError`.

Public Interface:
- `add_flag(...)` / `register_flag(flag)`: Declare flags.
- `set_required_flag_set(flags)`: At least one of these flags must be set.
- `set_unconsumed_bounds(min, max)`: How many leftover tokens are allowed.
- `parse_args(tokens)`: Run a parse pass, returns True on success.
- `get_errors()`: Rebuild the error report from the current state.
- `clear()`: Reset every flag and the token list before another pass.

Example Usage:
    parser = FlagParser()
    output = parser.add_flag("output", "o", required=True, min_args=1, max_args=1)
    compress = parser.add_flag("compress", "c")

    parser.parse_args(["--output", "log.txt", "-c"])  # True
    output.values  # ["log.txt"]
"""
from __future__ import annotations

from typing import Iterable

from smartcli.exceptions import FlagDeclarationError, ParsingFailedError
from smartcli.logger import logger
from smartcli.parser.flag import UNLIMITED_NUM_OF_ARGS, Flag, PatternLike
from smartcli.parser.parsing_error import (
    ErrorType,
    ParsingError,
    SingleFlagParsingError,
)
from smartcli.parser.registry import FlagRegistry, RequiredFlagSet
from smartcli.parser.token_stream import TokenStream
from smartcli.parser.utils import extract_name, is_flag_like


class FlagParser:
    """
    Declarative flag parser.

    Flags are registered up front, then `parse_args()` mutates their `values` and
    `is_set` state. The parser is single-pass: call `clear()` before parsing again
    with the same instance.

    Attributes:
        registry (FlagRegistry): The declared flags.
        unconsumed (Flag): Reserved flag collecting tokens no declared flag claimed.
            It is not reachable by name from the command line.
        required_flag_set (RequiredFlagSet | None): Optional at-least-one-of rule.
    """

    UNCONSUMED_FLAG_NAME = "unconsumed"

    def __init__(self, program: str | None = None) -> None:
        self.program: str | None = program
        self.registry: FlagRegistry = FlagRegistry()
        self.required_flag_set: RequiredFlagSet | None = None
        self.unconsumed: Flag = Flag(
            names=(self.UNCONSUMED_FLAG_NAME,),
            min_args=0,
            max_args=0,
            force_consume=True,
        )
        self._stream: TokenStream = TokenStream()

    def register_flag(self, flag: Flag) -> Flag:
        """Register a flag. Registering the same instance twice is a no-op."""
        self.registry.register(flag)
        return flag

    def add_flag(
        self,
        *names: str,
        required: bool = False,
        min_args: int = 0,
        max_args: int = 0,
        pattern: PatternLike | None = None,
        force_consume: bool = False,
        help: str = "",
    ) -> Flag:
        """
        Declare and register a new flag.

        Args:
            *names (str): Aliases without leading dashes (e.g. "output", "o").
            required (bool): Whether the flag must be set.
            min_args (int): Minimum number of values.
            max_args (int): Maximum number of values, or `UNLIMITED_NUM_OF_ARGS`.
            pattern (str | re.Pattern | Callable | None): Constraint on every value.
            force_consume (bool): Consume past `max_args` and report the overflow.
            help (str): Help text for usage rendering.

        Returns:
            Flag: The registered flag, whose `values` are filled in by `parse_args()`.
        """
        flag = Flag(
            names=names,
            required=required,
            min_args=min_args,
            max_args=max_args,
            pattern=pattern,
            force_consume=force_consume,
            help=help,
        )
        return self.register_flag(flag)

    def set_required_flag_set(self, flags: Iterable[Flag | str]) -> RequiredFlagSet:
        """
        Require at least one of `flags` to be set. Replaces any previous set.

        Flags may be given as instances or by any of their registered names.
        """
        resolved: list[Flag] = []
        for item in flags:
            flag = self.registry.get(item) if isinstance(item, str) else item
            if flag is None or flag not in self.registry:
                raise FlagDeclarationError(
                    f"Required flag set member {item!r} is not a registered flag"
                )
            resolved.append(flag)
        self.required_flag_set = RequiredFlagSet(resolved)
        return self.required_flag_set

    def set_unconsumed_bounds(self, min_args: int, max_args: int) -> None:
        """Set how many tokens may be left over after all flags consumed theirs."""
        self.unconsumed.set_num_of_args(min_args, max_args)

    def has_flag(self, name: str | None) -> bool:
        """Return True if `name` (without dashes) is a registered flag name."""
        return self.registry.has_flag(name)

    def get_flag(self, name: str) -> Flag | None:
        """Return the flag registered under `name`, or None."""
        return self.registry.get(name)

    @property
    def flags(self) -> list[Flag]:
        """The declared flags in registration order."""
        return self.registry.flags

    @property
    def args(self) -> list[str]:
        """Tokens left in the stream after the last parse pass."""
        return self._stream.remaining

    def parse_args(self, tokens: Iterable[str]) -> bool:
        """
        Assign `tokens` to the registered flags.

        Args:
            tokens (Iterable[str]): The raw argument vector, without the program name.

        Returns:
            bool: True if the resulting state satisfies every constraint.
        """
        if self._stream or self.unconsumed.is_set or any(
            flag.is_set for flag in self.registry
        ):
            logger.debug("parse_args() called without clear(); state accumulates.")

        self._stream = TokenStream(tokens)
        stream = self._stream
        logger.debug("Parsing %d token(s): %s", len(stream), stream.remaining)

        while stream.has_next():
            token = stream.peek()
            assert token is not None
            flag = self.registry.get(extract_name(token))
            if flag is None:
                if is_flag_like(token):
                    logger.debug("Unknown flag token '%s' left in place.", token)
                stream.advance()
                continue
            stream.take()
            flag.consume(stream)

        stream.rewind()
        self.unconsumed.consume(stream)
        if stream:
            logger.debug(
                "%d token(s) could not be consumed: %s", len(stream), stream.remaining
            )

        valid = self.is_parsing_valid()
        logger.debug("Parse pass %s.", "succeeded" if valid else "failed")
        return valid

    def parse_args_or_raise(self, tokens: Iterable[str]) -> dict[str, list[str]]:
        """
        Parse `tokens` and return the values of every set flag.

        Raises:
            ParsingFailedError: If the parse pass failed. The error carries the
            full report in `errors`.
        """
        if not self.parse_args(tokens):
            raise ParsingFailedError(self.get_errors())
        return self.as_dict()

    def check_required_flag_set_satisfied(self) -> bool:
        """Return True if there is no required flag set or one of its flags is set."""
        if self.required_flag_set is None:
            return True
        return self.required_flag_set.is_satisfied()

    def is_parsing_valid(self) -> bool:
        """Check the outcome of the last parse pass against every constraint."""
        if not all(flag.is_valid() for flag in self.registry):
            return False
        if not self.check_required_flag_set_satisfied():
            return False
        return not self._stream and self.unconsumed.is_valid()

    def get_errors(self) -> list[ParsingError]:
        """
        Build the error report for the current state.

        The report lists per-flag errors in registration order, then the error of
        the `unconsumed` flag, then the required flag set violation, then one
        UNKNOWN_FLAG error per unknown flag-like token left in the stream.
        """
        errors: list[ParsingError] = []
        for flag in self.registry:
            errors.extend(flag.get_errors())
        errors.extend(self.unconsumed.get_errors())

        if self.required_flag_set is not None:
            required_set_error = self.required_flag_set.get_error()
            if required_set_error:
                errors.append(required_set_error)

        for token in self._stream:
            if is_flag_like(token) and not self.has_flag(extract_name(token)):
                errors.append(SingleFlagParsingError(ErrorType.UNKNOWN_FLAG, token))
        return errors

    def as_dict(self) -> dict[str, list[str]]:
        """Map the canonical name of every set flag to a copy of its values."""
        return {flag.name: list(flag.values) for flag in self.registry if flag.is_set}

    def clear(self) -> None:
        """Reset every flag, the `unconsumed` flag and the token list."""
        self.registry.reset()
        self.unconsumed.reset()
        self._stream.clear()

    def get_usage(self) -> str:
        """Render a one-line usage string from the declarations."""
        parts = [self.program] if self.program else []
        for flag in self.registry:
            text = get_selector(flag.name)
            metavar = get_metavar(flag)
            if metavar:
                text = f"{text} {metavar}"
            parts.append(text if flag.required else f"[{text}]")
        if self.unconsumed.max_args > 0:
            parts.append(get_metavar(self.unconsumed, "ARG"))
        return " ".join(parts)

    def __str__(self) -> str:
        required = sum(flag.required for flag in self.registry)
        return (
            f"FlagParser(flags={len(self.registry)}, "
            f"names={len(self.registry.by_name)}, required={required}, "
            f"unconsumed=({self.unconsumed.min_args}, {self.unconsumed.max_args}))"
        )

    def __repr__(self) -> str:
        return str(self)


def get_selector(name: str) -> str:
    """Return the command-line selector for a flag name, e.g. `-o` or `--output`."""
    return f"-{name}" if len(name) == 1 else f"--{name}"


def get_metavar(flag: Flag, metavar: str | None = None) -> str:
    """Describe how many values a flag takes, e.g. `OUTPUT` or `[INPUT ...]`."""
    metavar = metavar or flag.name.upper().replace("-", "_")
    if flag.max_args == 0:
        return ""
    if flag.max_args == UNLIMITED_NUM_OF_ARGS:
        if flag.min_args == 0:
            return f"[{metavar} ...]"
        required = " ".join([metavar] * flag.min_args)
        return f"{required} [{metavar} ...]"
    if flag.min_args == flag.max_args:
        return " ".join([metavar] * flag.min_args)
    return f"{metavar}{{{flag.min_args},{flag.max_args}}}"
