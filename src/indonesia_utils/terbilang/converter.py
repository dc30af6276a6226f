"""Spell numbers out in Indonesian words (terbilang).

Invoices and receipts in Indonesia carry the amount in words next to the
figures. Conversion covers amounts up to 999.999.999.999.999 (999
triliun); decimals are spoken to two places after "koma".
"""

from __future__ import annotations

from ..utils.logging import get_logger
from ..utils.rounding import Number, round_half_away, to_decimal

logger = get_logger(__name__)

MAX_AMOUNT = 999_999_999_999_999

# 0 is empty inside compound numbers; a standalone zero is "nol".
ONES: tuple[str, ...] = (
    "",
    "satu",
    "dua",
    "tiga",
    "empat",
    "lima",
    "enam",
    "tujuh",
    "delapan",
    "sembilan",
    "sepuluh",
    "sebelas",
    "dua belas",
    "tiga belas",
    "empat belas",
    "lima belas",
    "enam belas",
    "tujuh belas",
    "delapan belas",
    "sembilan belas",
)

BANDS: tuple[tuple[int, str], ...] = (
    (1_000_000_000_000, "triliun"),
    (1_000_000_000, "miliar"),
    (1_000_000, "juta"),
    (1_000, "ribu"),
)


def _spell(number: int) -> str:
    if number < 20:
        return ONES[number]

    if number < 100:
        tens, ones = divmod(number, 10)
        words = f"{ONES[tens]} puluh"
        return f"{words} {ONES[ones]}" if ones else words

    if number < 1000:
        hundreds, remainder = divmod(number, 100)
        words = "seratus" if hundreds == 1 else f"{ONES[hundreds]} ratus"
    else:
        threshold, unit = next(band for band in BANDS if number >= band[0])
        multiplier, remainder = divmod(number, threshold)
        # 1.000 is "seribu", never "satu ribu"; juta and up have no such form.
        if threshold == 1_000 and multiplier == 1:
            words = "seribu"
        else:
            words = f"{_spell(multiplier)} {unit}"

    if remainder:
        words = f"{words} {_spell(remainder)}"
    return words


def terbilang(amount: Number) -> str:
    """Convert *amount* to Indonesian words.

    Examples:
    - 0 -> "nol"
    - 1500 -> "seribu lima ratus"
    - 1234567 -> "satu juta dua ratus tiga puluh empat ribu lima ratus enam puluh tujuh"
    - 1500.25 -> "seribu lima ratus koma dua puluh lima"
    - -100 -> "minus seratus"

    The fraction is rounded to two places and spoken as a whole number,
    so 5.05 reads "lima koma lima" and 1.999 reads "satu koma seratus".
    """
    value = to_decimal(amount)

    if value < 0:
        return "minus " + terbilang(-value)
    if value == 0:
        return "nol"

    integer_part = int(value)
    fraction = value - integer_part
    if fraction:
        decimal_part = int(round_half_away(fraction * 100))
        return f"{terbilang(integer_part)} koma {terbilang(decimal_part)}"

    if integer_part > MAX_AMOUNT:
        logger.warning("terbilang_out_of_range", amount=integer_part, max_amount=MAX_AMOUNT)
    return _spell(integer_part)


def terbilang_rupiah(amount: Number) -> str:
    """Convert *amount* to words followed by "rupiah".

    1500000 -> "satu juta lima ratus ribu rupiah"
    """
    return f"{terbilang(amount)} rupiah"
