"""
Transaction log and Z report.

The log is an ordered list of entries; an entry may span several lines
(voyage state blocks, the Z report).  ``render`` joins them with newlines,
so the written file never ends with one.
"""

from __future__ import annotations

from typing import Iterable

from src.domain.entities import Voyage

COMMAND_PREFIX = "COMMAND: "
ERROR_PREFIX = "ERROR: "
NO_VOYAGES = "No Voyages Available!"


class TransactionLog:
    def __init__(self) -> None:
        self._entries: list[str] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def append(self, entry: str) -> None:
        self._entries.append(entry)

    def command(self, line: str) -> None:
        self.append(f"{COMMAND_PREFIX}{line}")

    def error(self, message: str) -> None:
        self.append(f"{ERROR_PREFIX}{message}")

    def render(self) -> str:
        return "\n".join(self._entries)


def build_z_report(voyages: Iterable[Voyage], divider: str) -> str:
    """Every voyage's state block, in the given order, between dividers."""
    lines = ["Z Report:"]
    blocks = [voyage.describe_state() for voyage in voyages]
    if not blocks:
        lines += [divider, NO_VOYAGES]
    for block in blocks:
        lines += [divider, block]
    lines.append(divider)
    return "\n".join(lines)
