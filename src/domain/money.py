"""Currency formatting shared by voyage descriptions and ledger lines."""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

_CENTS = Decimal("0.01")
_MIN_PRECISION = 28


def format_amount(value: float) -> str:
    """Two decimals with a ``.`` point, rounding half-up.

    Rounds the shortest decimal representation of *value* (``repr``), so
    ``0.125`` becomes ``0.13`` rather than the binary-exact ``0.12``.
    Precision grows with the magnitude, so every finite float prints in
    full.  Non-finite values print as ``Infinity``, ``-Infinity`` or ``NaN``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    amount = Decimal(repr(value))
    with localcontext() as ctx:
        ctx.prec = max(_MIN_PRECISION, amount.adjusted() + 4)
        return f"{amount.quantize(_CENTS, rounding=ROUND_HALF_UP):f}"
