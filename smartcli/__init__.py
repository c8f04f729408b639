"""
SmartCLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ConfigError,
    FileSetError,
    FlagDeclarationError,
    ParsingFailedError,
    SmartCliError,
)
from .parser import (
    UNLIMITED_NUM_OF_ARGS,
    ErrorType,
    FileSetFlag,
    Flag,
    FlagParser,
    ParsingError,
)
from .program import CommandLineProgram, run_program
from .version import __version__

logger = logging.getLogger("smartcli")


__all__ = [
    "Flag",
    "FileSetFlag",
    "FlagParser",
    "ErrorType",
    "ParsingError",
    "UNLIMITED_NUM_OF_ARGS",
    "CommandLineProgram",
    "run_program",
    "SmartCliError",
    "FlagDeclarationError",
    "ParsingFailedError",
    "FileSetError",
    "ConfigError",
    "__version__",
]
