"""Rounding shared by the gateway and the scoring engine."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal, localcontext

# Binary noise lives well below this; 9 * 0.075 == 0.6749999999999999 must round like 0.675.
_NOISE_QUANTUM = Decimal("1e-9")
# Enough significant digits to quantize any finite float (max ~1.8e308) at 1e-9.
_PRECISION = 400


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero at ``digits`` decimals; non-finite values pass through."""
    value = float(value)
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        exact = Decimal(repr(value)).quantize(_NOISE_QUANTUM, rounding=ROUND_HALF_EVEN)
        return float(exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP))


def round_to_int(value: float) -> int:
    return int(round_half_up(value, 0))
