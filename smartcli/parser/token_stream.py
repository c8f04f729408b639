# SmartCLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `TokenStream`, the owned token buffer walked by `FlagParser` and `Flag`.

The stream holds a private copy of the argument vector and an integer cursor.
Consumed tokens are removed in place, so the tokens left in the buffer after a
parse pass are exactly the ones no flag claimed. Only indices are shared between
the parser and its flags, never live iterators.
"""
from __future__ import annotations

from typing import Iterable, Iterator


class TokenStream:
    """
    A removable cursor over a list of command-line tokens.

    Example:
        stream = TokenStream(["-o", "out.txt"])
        stream.peek()   # "-o"
        stream.take()   # "-o", removed from the buffer
        stream.peek()   # "out.txt"
    """

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._tokens: list[str] = list(tokens)
        self.position: int = 0

    def has_next(self) -> bool:
        """Return True if a token is available at the cursor."""
        return self.position < len(self._tokens)

    def peek(self) -> str | None:
        """Return the token at the cursor without moving, or None at the end."""
        if not self.has_next():
            return None
        return self._tokens[self.position]

    def take(self) -> str:
        """Remove and return the token at the cursor. The cursor stays put."""
        if not self.has_next():
            raise IndexError("take from an exhausted TokenStream")
        return self._tokens.pop(self.position)

    def advance(self) -> None:
        """Move the cursor past the current token, leaving it in the buffer."""
        if self.has_next():
            self.position += 1

    def rewind(self) -> None:
        """Move the cursor back to the first remaining token."""
        self.position = 0

    def clear(self) -> None:
        """Drop every token and rewind."""
        self._tokens.clear()
        self.position = 0

    @property
    def remaining(self) -> list[str]:
        """A copy of the tokens still in the buffer."""
        return list(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tokens))

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def __repr__(self) -> str:
        return f"TokenStream(tokens={self._tokens!r}, position={self.position})"
