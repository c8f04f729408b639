# SmartCLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FileSetFlag`, a `Flag` whose values name files or directories.

Parsing treats the values as plain strings like any other flag. The file-system
lookups happen only when the program asks for the file set, and failures there raise
`FileSetError` rather than producing a `ParsingError`.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable

from smartcli.exceptions import FileSetError
from smartcli.logger import logger
from smartcli.parser.flag import Flag

TEXT_SNIFF_BYTES = 8192


def is_text_file(path: Path) -> bool:
    """Return True if the start of `path` decodes as UTF-8 and contains no NUL byte."""
    try:
        with path.open("rb") as file:
            chunk = file.read(TEXT_SNIFF_BYTES)
    except OSError as error:
        raise FileSetError(f"Could not read '{path}': {error}") from error
    if b"\x00" in chunk:
        return False
    try:
        chunk.decode("utf-8")
    except UnicodeDecodeError as error:
        # A multi-byte character cut off at the sniff boundary is still text.
        return error.start >= len(chunk) - 3 and len(chunk) == TEXT_SNIFF_BYTES
    return True


def collect_files(paths: Iterable[str]) -> list[Path]:
    """
    Expand file and directory names into a sorted list of files.

    Directories are walked recursively and only regular files are kept.

    Raises:
        FileSetError: If a path does not exist.
    """
    files: set[Path] = set()
    for raw_path in paths:
        path = Path(raw_path)
        if path.is_file():
            files.add(path)
        elif path.is_dir():
            files.update(child for child in path.rglob("*") if child.is_file())
        else:
            raise FileSetError(f"No such file or directory: '{raw_path}'")
    return sorted(files)


class FileSetFlag(Flag):
    """
    A flag used for specifying files on the command line.

    Example:
        inputs = FileSetFlag(("input", "i"), required=True, min_args=1, max_args=1)
        parser.register_flag(inputs)
        parser.parse_args(["-i", "docs/"])
        inputs.get_text_file_set()
    """

    def get_file_set(self) -> list[Path]:
        """Return every file named by, or found under, this flag's values."""
        files = collect_files(self.values)
        logger.debug("Flag '%s' resolved %d file(s).", self.name, len(files))
        return files

    def get_text_file_set(self) -> list[Path]:
        """Return the subset of `get_file_set()` that holds text."""
        return [path for path in self.get_file_set() if is_text_file(path)]
