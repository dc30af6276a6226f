"""Half-away-from-zero rounding on Decimal values."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

Number = int | float | Decimal


def to_decimal(value: Number) -> Decimal:
    """Convert *value* to a finite Decimal.

    Floats go through their shortest ``repr`` so ``1234.49`` becomes
    ``Decimal("1234.49")`` rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, int):
        result = Decimal(value)
    else:
        raise TypeError(f"Expected a number, got {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return result


def round_half_away(value: Number, places: int = 0) -> Decimal:
    """Round to *places* decimals, halves going away from zero.

    Precision grows with the magnitude so large amounts never overflow
    the default 28-digit context.
    """
    number = to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + places + 2)
        return number.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
