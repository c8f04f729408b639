# SmartCLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Glue between a command-line program and `FlagParser`.

A program is anything that provides two callbacks:
- `declare_flags(parser)`: Register flags on a fresh `FlagParser`.
- `run(parser)`: Do the work. Only called after a successful parse.

`run_program()` wires the two together, renders parse errors with Rich and turns the
outcome into a process exit code. The parser itself never decides to exit.

Example:
    class Greet:
        def declare_flags(self, parser: FlagParser) -> None:
            self.name = parser.add_flag("name", "n", required=True, min_args=1, max_args=1)

        def run(self, parser: FlagParser) -> None:
            print(f"Hello, {self.name.values[0]}!")

    sys.exit(run_program(Greet(), sys.argv[1:]))
"""
from __future__ import annotations

import sys
from typing import Any, Protocol, Sequence, runtime_checkable

from rich.markup import escape
from rich.table import Table

from smartcli.console import error_console
from smartcli.logger import logger
from smartcli.parser import FlagParser, ParsingError
from smartcli.parser.flag_parser import get_metavar, get_selector
from smartcli.utils import get_program_invocation


@runtime_checkable
class CommandLineProgram(Protocol):
    def declare_flags(self, parser: FlagParser) -> None: ...

    def run(self, parser: FlagParser) -> Any: ...


def render_errors(errors: Sequence[ParsingError]) -> None:
    """Print parse errors, one per line, to stderr."""
    for error in errors:
        error_console.print(
            f"[flag]{escape(', '.join(error.names))}[/flag]: "
            f"[error.kind]{error.type}[/error.kind]: {escape(error.description)}",
            highlight=False,
            soft_wrap=True,
        )


def render_help(parser: FlagParser) -> None:
    """Print usage and a table of the declared flags to stderr."""
    error_console.print(
        f"[usage]usage:[/usage] {escape(parser.get_usage())}\n",
        highlight=False,
        soft_wrap=True,
    )
    table = Table(box=None, show_header=False, pad_edge=False)
    table.add_column("flag", style="flag", no_wrap=True)
    table.add_column("values", style="value")
    table.add_column("help")
    for flag in parser.flags:
        selectors = ", ".join(get_selector(name) for name in flag.names)
        help_text = flag.help
        if flag.required:
            help_text = f"{help_text} (required)".strip()
        table.add_row(escape(selectors), escape(get_metavar(flag)), escape(help_text))
    error_console.print(table)


def run_program(
    program: CommandLineProgram,
    argv: Sequence[str] | None = None,
    prog: str | None = None,
) -> int:
    """
    Declare, parse and run `program`.

    Args:
        program (CommandLineProgram): Supplies `declare_flags()` and `run()`.
        argv (Sequence[str] | None): Arguments without the program name. Defaults to
            `sys.argv[1:]`.
        prog (str | None): Program name for usage output.

    Returns:
        int: 0 on success (or the integer returned by `run()`), 1 on a failed parse.
    """
    if argv is None:
        argv = sys.argv[1:]
    parser = FlagParser(program=prog or get_program_invocation())
    program.declare_flags(parser)

    if not parser.parse_args(argv):
        errors = parser.get_errors()
        logger.info("Parsing failed with %d error(s).", len(errors))
        error_console.print("[error]Invalid use, see usage below.[/error]")
        render_errors(errors)
        render_help(parser)
        return 1

    result = program.run(parser)
    if isinstance(result, int) and not isinstance(result, bool):
        return result
    return 0
