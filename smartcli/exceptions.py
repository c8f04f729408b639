# SmartCLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by SmartCLI.

Parsing user input never raises: `FlagParser.parse_args()` returns a boolean and
the reasons are collected as `ParsingError` records. The exceptions below cover
developer-facing mistakes (bad declarations, bad config files), file-system
failures of file-valued flags, and the opt-in `parse_args_or_raise()` path.

All exceptions inherit from `SmartCliError`, the base exception for the package.

Exception Hierarchy:
- SmartCliError
    ├── FlagDeclarationError
    ├── ParsingFailedError
    ├── FileSetError
    └── ConfigError
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from smartcli.parser.parsing_error import ParsingError


class SmartCliError(Exception):
    """Base exception for SmartCLI."""


class FlagDeclarationError(SmartCliError):
    """Exception raised when a flag is declared or registered incorrectly."""


class ParsingFailedError(SmartCliError):
    """Exception raised by `FlagParser.parse_args_or_raise()` when parsing fails."""

    def __init__(self, errors: Sequence[ParsingError]):
        self.errors: list[ParsingError] = list(errors)
        summary = "; ".join(str(error) for error in self.errors)
        super().__init__(summary or "Parsing failed.")


class FileSetError(SmartCliError):
    """Exception raised when a file-valued flag names a path that does not exist."""


class ConfigError(SmartCliError):
    """Exception raised when a flag declaration file is malformed."""
