"""
SmartCLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Usage:
    python -m smartcli check [--config FILE] -- TOKENS...

Loads flag declarations from a YAML/TOML file, parses TOKENS against them and
prints the outcome.
"""

import logging
import sys
from argparse import ArgumentParser
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from smartcli.config import find_smartcli_config, loader
from smartcli.console import console, error_console
from smartcli.exceptions import ConfigError
from smartcli.parser import FlagParser
from smartcli.program import render_errors
from smartcli.utils import LOG_MODES, setup_logging
from smartcli.version import __version__


def get_root_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="smartcli",
        description="Check command-line tokens against declared flags.",
        epilog="Tokens after '--' are passed to the flag parser untouched.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-mode", choices=LOG_MODES, default=None, help="Console log format."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    subparsers = parser.add_subparsers(dest="command")
    check_parser = subparsers.add_parser(
        "check",
        help="Parse tokens against a flag declaration file",
        description="Parse tokens against the flags declared in a YAML or TOML file.",
    )
    check_parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Flag declaration file. Defaults to ./smartcli.yaml and friends.",
    )
    check_parser.add_argument(
        "tokens", nargs="*", help="Tokens to parse (use '--' before dashed tokens)."
    )
    return parser


def split_tokens(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first '--' into our own arguments and the tokens to check."""
    argv = list(argv)
    if "--" in argv:
        index = argv.index("--")
        return argv[:index], argv[index + 1 :]
    return argv, []


def render_flags(parser: FlagParser) -> None:
    table = Table(title="Flags", title_justify="left")
    table.add_column("Flag", style="flag")
    table.add_column("Set")
    table.add_column("Values", style="value")
    table.add_column("Valid")
    for flag in [*parser.flags, parser.unconsumed]:
        table.add_row(
            escape(", ".join(flag.names)),
            "yes" if flag.is_set else "no",
            escape(" ".join(flag.values)),
            "[success]yes[/success]" if flag.is_valid() else "[error]no[/error]",
        )
    console.print(table)


def main(argv: Sequence[str] | None = None) -> int:
    cli_args, tokens = split_tokens(sys.argv[1:] if argv is None else argv)
    root_parser = get_root_parser()
    args = root_parser.parse_args(cli_args)

    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    if args.command != "check":
        root_parser.print_help()
        return 2

    config_path = args.config or find_smartcli_config()
    if config_path is None:
        error_console.print("[error]No flag declaration file found.[/error]")
        return 2
    try:
        parser = loader(config_path)
    except (FileNotFoundError, ConfigError) as error:
        error_console.print(f"[error]{escape(str(error))}[/error]", highlight=False)
        return 2

    success = parser.parse_args([*args.tokens, *tokens])
    render_flags(parser)
    if parser.args:
        console.print(
            f"[muted]Unaccounted tokens:[/muted] {escape(' '.join(parser.args))}",
            highlight=False,
        )
    if not success:
        render_errors(parser.get_errors())
        return 1
    console.print("[success]OK[/success]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
