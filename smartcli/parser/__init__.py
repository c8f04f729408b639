"""
SmartCLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .file_set_flag import FileSetFlag
from .flag import UNLIMITED_NUM_OF_ARGS, Flag
from .flag_parser import FlagParser
from .parsing_error import (
    ErrorType,
    MultiFlagParsingError,
    ParsingError,
    SingleFlagParsingError,
)
from .registry import FlagRegistry, RequiredFlagSet
from .token_stream import TokenStream
from .utils import extract_name, is_flag_like

__all__ = [
    "Flag",
    "FileSetFlag",
    "FlagParser",
    "FlagRegistry",
    "RequiredFlagSet",
    "TokenStream",
    "ErrorType",
    "ParsingError",
    "SingleFlagParsingError",
    "MultiFlagParsingError",
    "UNLIMITED_NUM_OF_ARGS",
    "extract_name",
    "is_flag_like",
]
