"""Reading the command file and writing the transaction log."""

from __future__ import annotations

import os
from pathlib import Path


def is_readable(path: str | os.PathLike[str]) -> bool:
    candidate = Path(path)
    return candidate.is_file() and os.access(candidate, os.R_OK)


def read_command_lines(path: str | os.PathLike[str], encoding: str = "utf-8") -> list[str]:
    """Return the lines of *path* in file order, without line terminators.

    Trimming and blank-line skipping are left to the interpreter.
    """
    with open(path, encoding=encoding) as handle:
        return [line.rstrip("\n") for line in handle]


def write_log(path: str | os.PathLike[str], text: str, encoding: str = "utf-8") -> None:
    Path(path).write_text(text, encoding=encoding)
