"""
Shared test fixtures.

Every test gets a fresh session (empty registry, empty log) built from
default settings, so nothing leaks between tests and no ``.env`` file is
consulted.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from src.commands.interpreter import CommandInterpreter
from src.commands.session import BookingSession
from src.config import Settings

DIVIDER = "-" * 16


def cmd(*fields: str) -> str:
    """Build one tab-separated command line."""
    return "\t".join(fields)


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def session(settings: Settings) -> BookingSession:
    return BookingSession(settings=settings)


@pytest.fixture
def interpreter(session: BookingSession) -> CommandInterpreter:
    return CommandInterpreter(session)


@pytest.fixture
def execute(interpreter: CommandInterpreter) -> Callable[..., list[str]]:
    """Process command lines and return the log entries they produced."""

    def _execute(*lines: str) -> list[str]:
        before = len(interpreter.session.log)
        for line in lines:
            interpreter.process_line(line)
        return interpreter.session.log.entries[before:]

    return _execute


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[..., Path]:
    def _write(*lines: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
