"""
Command Interpreter
===================

Processes a command file line by line against one ``BookingSession``.

Per line
--------
1. Skip blank lines; trim the rest.
2. Echo the line to the log as ``COMMAND: <line>``.
3. Split on the field separator and dispatch on the first field.
4. Log the handler's result, or ``ERROR: <message>`` if it raised a
   ``CommandError``.  Nothing a command does stops the run.

At the end of input a Z report is appended unless the last command
already was one.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from src.domain.enums import CommandName

from .errors import CommandError, UnknownCommand
from .handlers import HANDLERS, Handler, z_report
from .session import BookingSession

logger = logging.getLogger(__name__)

UNEXPECTED_FAILURE = "Unexpected failure while processing the command!"


class CommandInterpreter:
    def __init__(self, session: Optional[BookingSession] = None):
        self.session = session or BookingSession()
        self.last_command: Optional[str] = None
        self.processed = 0
        self.rejected = 0

    # ── Public API ────────────────────────────────────────────────

    def run(self, lines: Iterable[str]) -> str:
        """Process every line, close the ledger and return the rendered log."""
        for line in lines:
            self.process_line(line)
        self.finish()
        logger.info(
            "Processed %d commands (%d rejected), %d voyages active",
            self.processed,
            self.rejected,
            len(self.session.voyages),
        )
        return self.session.log.render()

    def process_line(self, line: str) -> None:
        line = line.strip()
        if not line:
            return

        fields = line.split(self.session.settings.field_separator)
        self.last_command = fields[0]
        self.processed += 1
        self.session.log.command(line)
        self._record(line, lambda: self._resolve(fields[0])(self.session, fields))

    def finish(self) -> None:
        if not self.session.settings.auto_z_report:
            return
        if self.last_command != CommandName.Z_REPORT.value:
            logger.debug("Input did not end with Z_REPORT, appending one")
            self._record(
                CommandName.Z_REPORT.value,
                lambda: z_report(self.session, [CommandName.Z_REPORT.value]),
            )

    # ── Internals ─────────────────────────────────────────────────

    def _record(self, line: str, action: Callable[[], str]) -> None:
        """Run *action* and log its result or its error; never raises."""
        try:
            result = action()
        except CommandError as exc:
            self.rejected += 1
            logger.warning("Rejected %r: %s", line, exc.message)
            self.session.log.error(exc.message)
        except Exception:
            self.rejected += 1
            logger.exception("Unhandled error while processing %r", line)
            self.session.log.error(UNEXPECTED_FAILURE)
        else:
            logger.debug("Executed %r", line)
            self.session.log.append(result)

    @staticmethod
    def _resolve(name: str) -> Handler:
        try:
            return HANDLERS[CommandName(name)]
        except ValueError:
            raise UnknownCommand(name) from None
