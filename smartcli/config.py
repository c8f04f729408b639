# SmartCLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads flag declarations for a `FlagParser` from YAML or TOML files.

Example (YAML):
    program: reverse
    unconsumed: {min: 0, max: 0}
    required_set: [uppercase, lowercase]
    flags:
      - names: [input, i]
        required: true
        min_args: 1
        max_args: unlimited
      - names: [uppercase, u]
      - names: [lowercase, l]

Only declarations are loaded; flag values always come from the command line.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from smartcli.exceptions import ConfigError, FlagDeclarationError
from smartcli.logger import logger
from smartcli.parser import UNLIMITED_NUM_OF_ARGS, FileSetFlag, Flag, FlagParser

UNLIMITED_ALIASES = {"unlimited", "inf", "*"}


def coerce_num_of_args(value: Any) -> Any:
    if isinstance(value, str) and value.strip().lower() in UNLIMITED_ALIASES:
        return UNLIMITED_NUM_OF_ARGS
    return value


class RawFlag(BaseModel):
    """A single flag declaration."""

    names: list[str] = Field(min_length=1)
    required: bool = False
    min_args: int = 0
    max_args: int = 0
    pattern: str | None = None
    force_consume: bool = False
    help: str = ""
    files: bool = False

    @field_validator("names", mode="before")
    @classmethod
    def validate_names(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("min_args", "max_args", mode="before")
    @classmethod
    def validate_num_of_args(cls, value: Any) -> Any:
        return coerce_num_of_args(value)

    def to_flag(self) -> Flag:
        flag_type = FileSetFlag if self.files else Flag
        return flag_type(
            names=tuple(self.names),
            required=self.required,
            min_args=self.min_args,
            max_args=self.max_args,
            pattern=self.pattern,
            force_consume=self.force_consume,
            help=self.help,
        )


class UnconsumedBounds(BaseModel):
    """How many tokens may be left over once every flag consumed its values."""

    min: int = 0
    max: int = 0

    @field_validator("min", "max", mode="before")
    @classmethod
    def validate_bounds(cls, value: Any) -> Any:
        return coerce_num_of_args(value)


class FlagConfig(BaseModel):
    """Flag declarations for one program."""

    program: str | None = None
    flags: list[RawFlag] = Field(default_factory=list)
    required_set: list[str] = Field(default_factory=list)
    unconsumed: UnconsumedBounds = Field(default_factory=UnconsumedBounds)

    def to_parser(self) -> FlagParser:
        parser = FlagParser(program=self.program)
        for raw_flag in self.flags:
            parser.register_flag(raw_flag.to_flag())
        if self.required_set:
            parser.set_required_flag_set(self.required_set)
        parser.set_unconsumed_bounds(self.unconsumed.min, self.unconsumed.max)
        return parser


def find_smartcli_config() -> Path | None:
    candidates = [
        Path.cwd() / "smartcli.yaml",
        Path.cwd() / "smartcli.toml",
        Path.cwd() / ".smartcli.yaml",
        Path.cwd() / ".smartcli.toml",
        Path(os.environ.get("SMARTCLI_CONFIG", "smartcli.yaml")),
        Path.home() / ".config" / "smartcli" / "smartcli.yaml",
        Path.home() / ".config" / "smartcli" / "smartcli.toml",
    ]
    return next((p for p in candidates if p.exists()), None)


def loader(file_path: Path | str) -> FlagParser:
    """
    Load flag declarations from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file (`.yaml`, `.yml` or `.toml`).

    Returns:
        FlagParser: A parser with every declared flag registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the format is unsupported or the declarations are invalid.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")
    path = Path(file_path)

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a dictionary with a list of flags.\n"
            "Example:\n"
            "flags:\n"
            "  - names: [output, o]\n"
            "    required: true\n"
            "    min_args: 1\n"
            "    max_args: 1"
        )

    try:
        parser = FlagConfig.model_validate(raw_config).to_parser()
    except ValidationError as error:
        raise ConfigError(f"Invalid flag declarations in {path}:\n{error}") from error
    except FlagDeclarationError as error:
        raise ConfigError(f"Invalid flag declarations in {path}: {error}") from error
    logger.debug("Loaded %d flag(s) from %s.", len(parser.flags), path)
    return parser
