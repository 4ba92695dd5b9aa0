"""
Command-line front end.

* Checks the two positional arguments and that the input file is readable.
* Configures logging (stderr) from ``settings.log_level``.
* Runs the interpreter over the input and writes the transaction log.

Exit status is 0 on success and 1 when a precondition fails; in that case
a fixed message is printed to stdout and no output file is written.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from src.commands.interpreter import CommandInterpreter
from src.commands.session import BookingSession
from src.config import Settings, settings as default_settings
from src.infrastructure.files import is_readable, read_command_lines, write_log

logger = logging.getLogger(__name__)

ARGUMENT_COUNT_ERROR = (
    "ERROR: This program works exactly with two command line arguments, the first "
    "one is the path to the input file whereas the second one is the path to the "
    "output file. Sample usage can be as follows: \"python main.py input.txt "
    "output.txt\". Program is going to terminate!"
)
UNREADABLE_INPUT_ERROR = (
    "ERROR: This program cannot read from the \"{path}\", either this program does "
    "not have read permission to read that file or file does not exist. Program is "
    "going to terminate!"
)


def main(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> int:
    settings = settings or default_settings
    args = list(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=settings.log_level.upper())

    if len(args) != 2:
        print(ARGUMENT_COUNT_ERROR)
        return 1

    input_path, output_path = args
    if not is_readable(input_path):
        print(UNREADABLE_INPUT_ERROR.format(path=input_path))
        return 1

    try:
        lines = read_command_lines(input_path, settings.file_encoding)
    except (OSError, UnicodeDecodeError):
        logger.exception("Failed to read %s", input_path)
        print(UNREADABLE_INPUT_ERROR.format(path=input_path))
        return 1

    logger.info("Read %d lines from %s", len(lines), input_path)
    interpreter = CommandInterpreter(BookingSession(settings=settings))
    output = interpreter.run(lines)

    try:
        write_log(output_path, output, settings.file_encoding)
    except OSError:
        logger.exception("Failed to write %s", output_path)
        return 1

    logger.info("Transaction log written to %s", output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
