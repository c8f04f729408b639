# SmartCLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Lexical helpers for recognizing flag selectors in a raw argument vector.

A token is *flag-like* when it is either:
- longer than two characters and starts with `--` (long form, e.g. `--output`), or
- exactly two characters, starts with `-` and is not `--` (short form, e.g. `-o`).

Everything else, including the bare strings `-` and `--` and single-dash words such
as `-hello`, is a plain value.

Functions:
- is_flag_like: Check whether a token selects a flag.
- extract_name: Strip the dash prefix from a flag-like token.
"""


def is_flag_like(token: str) -> bool:
    """Return True if `token` looks like a flag selector."""
    if len(token) > 2:
        return token.startswith("--")
    return len(token) == 2 and token != "--" and token.startswith("-")


def extract_name(token: str) -> str | None:
    """
    Extract the flag name from a flag-like token.

    Args:
        token (str): A raw command-line token.

    Returns:
        str | None: The token without its dash prefix, or None if the token is
        not flag-like.
    """
    if not is_flag_like(token):
        return None
    if len(token) > 2:
        return token[2:]
    return token[1:]
