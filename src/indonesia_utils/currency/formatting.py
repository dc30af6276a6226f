"""Rupiah display formatting in fixed and compact notation."""

from __future__ import annotations

from ..utils.rounding import Number, round_half_away, to_decimal

SYMBOL = "Rp"

# Largest threshold first; the threshold doubles as the divisor.
COMPACT_SCALES: tuple[tuple[int, str], ...] = (
    (1_000_000_000_000, "T"),  # triliun
    (1_000_000_000, "B"),  # miliar
    (1_000_000, "M"),  # juta
    (1_000, "K"),  # ribu
)

# "1,234.56" -> "1.234,56"
_TO_INDONESIAN = str.maketrans(",.", ".,")


def _decorate(body: str, negative: bool, with_symbol: bool) -> str:
    if with_symbol:
        body = f"{SYMBOL} {body}"
    if negative:
        body = f"({body})"
    return body


def format_rupiah(amount: Number, with_symbol: bool = True, with_decimals: bool = True) -> str:
    """Format *amount* as an Indonesian Rupiah string.

    Examples:
    - 1000 -> "Rp 1.000,00"
    - 1000, with_symbol=False -> "1.000,00"
    - 1234.99, with_decimals=False -> "Rp 1.235"
    - -1234.56 -> "(Rp 1.234,56)"

    Negative amounts use the accounting convention: the whole string,
    symbol included, goes in parentheses.
    """
    value = to_decimal(amount)
    places = 2 if with_decimals else 0
    rounded = round_half_away(abs(value), places)
    body = f"{rounded:,.{places}f}".translate(_TO_INDONESIAN)
    return _decorate(body, value < 0, with_symbol)


def format_rupiah_compact(amount: Number, with_symbol: bool = True) -> str:
    """Format *amount* with a K/M/B/T magnitude suffix.

    Examples:
    - 1500 -> "Rp 1,5K"
    - 25_000_000 -> "Rp 25M"
    - 999 -> "Rp 999" (below 1000 falls back to ``format_rupiah``)

    The scale is picked from the unrounded magnitude, so 999_999_999
    renders as "Rp 1000M" and is not promoted to "Rp 1B".
    """
    value = to_decimal(amount)
    magnitude = abs(value)

    for threshold, suffix in COMPACT_SCALES:
        if magnitude >= threshold:
            break
    else:
        return format_rupiah(amount, with_symbol, with_decimals=False)

    scaled = f"{round_half_away(magnitude / threshold, 1):.1f}"
    if scaled.endswith(".0"):
        scaled = scaled[:-2]
    body = scaled.replace(".", ",") + suffix
    return _decorate(body, value < 0, with_symbol)
