"""
Seat map rendering.

Each seat row becomes one text line: ``X`` for a sold seat, ``*`` for a
free one, cells separated by a single space.  Variants with an aisle put
``|`` between the left and right blocks of the row:

    Standard (2+2)   X * | * *
    Premium  (1+2)   X | * *
    Minibus  (2)     X *

Complexity: O(n) in the number of seats.
"""

from __future__ import annotations

from typing import Optional, Sequence

SOLD = "X"
FREE = "*"


def _cell(sold: bool) -> str:
    return SOLD if sold else FREE


def render_row(row: Sequence[bool], aisle_after: Optional[int] = None) -> str:
    cells = [_cell(sold) for sold in row]
    if aisle_after is None or aisle_after >= len(cells):
        return " ".join(cells)
    left = " ".join(cells[:aisle_after])
    right = " ".join(cells[aisle_after:])
    return f"{left} | {right}"


def render_seat_map(
    seats_sold: Sequence[bool],
    seats_per_row: int,
    aisle_after: Optional[int] = None,
) -> str:
    """Render *seats_sold* row by row; seat 1 is the first cell of row 1."""
    rows = [
        render_row(seats_sold[start:start + seats_per_row], aisle_after)
        for start in range(0, len(seats_sold), seats_per_row)
    ]
    return "\n".join(rows)
