"""
Reverses every input string, optionally changing its case.

    python examples/reverse.py -i hello world -u
"""
import sys

from smartcli import UNLIMITED_NUM_OF_ARGS, Flag, FlagParser, run_program
from smartcli.utils import setup_logging


class Reverse:
    def declare_flags(self, parser: FlagParser) -> None:
        self.input = parser.add_flag(
            "input",
            "i",
            required=True,
            min_args=1,
            max_args=UNLIMITED_NUM_OF_ARGS,
            help="Strings to reverse.",
        )
        self.uppercase = parser.register_flag(
            Flag.create_switch(("uppercase", "u"), help="Print in upper case.")
        )
        self.lowercase = parser.register_flag(
            Flag.create_switch(("lowercase", "l"), help="Print in lower case.")
        )

    def run(self, parser: FlagParser) -> None:
        for value in self.input.values:
            reversed_value = value[::-1]
            if self.lowercase.is_set:
                reversed_value = reversed_value.lower()
            elif self.uppercase.is_set:
                reversed_value = reversed_value.upper()
            print(reversed_value)


if __name__ == "__main__":
    setup_logging()
    sys.exit(run_program(Reverse(), prog="reverse"))
