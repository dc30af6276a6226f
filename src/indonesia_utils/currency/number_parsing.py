"""Rupiah string parsing across Indonesian and international conventions.

Handles:
- Indonesian: "Rp 1.234,56", "1.000", "1000,50"
- International: "1,234.56", "1000.50"
- Plain: "1000"
- Negative: "(Rp 1.000,00)", "-1.000,00"

A lone ``.`` followed by exactly two digits is read as a decimal point
("1000.50"); with any other digit count every ``.`` groups thousands
("1.000", "1.000.000"). When both separators appear the one that comes
last is the decimal separator.
"""

from __future__ import annotations

import re

from ..config import get_settings
from ..errors import FormatError
from ..models.locale import INDONESIAN, INTERNATIONAL, NumberFormat, ParsedAmount
from ..utils.logging import get_logger
from ..utils.rounding import round_half_away
from .formatting import SYMBOL

logger = get_logger(__name__)

_DIGITS = re.compile(r"[0-9]+")
_UNSIGNED_DECIMAL = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")


def _fail(message: str, raw: object) -> FormatError:
    logger.debug("rupiah_parse_failed", reason=message, raw=raw)
    return FormatError(message, raw=raw)


def _strip_sign_and_symbol(raw: str) -> tuple[str, bool]:
    """Return the bare numeric part of *raw* and whether it was negative."""
    cleaned = raw.strip()
    if not cleaned:
        raise _fail("Cannot parse empty string", raw)

    negative = False
    if cleaned.startswith("(") and cleaned.endswith(")"):
        negative = True
        cleaned = cleaned[1:-1].strip()
    elif cleaned.startswith("-"):
        negative = True
        cleaned = cleaned[1:]

    cleaned = cleaned.replace(SYMBOL, "").strip()
    # "Rp -1.000": the minus may also follow the symbol.
    if not negative and cleaned.startswith("-"):
        negative = True
        cleaned = cleaned[1:].strip()
    if not cleaned:
        raise _fail("Invalid format: no numeric value found", raw)

    return cleaned.replace(" ", ""), negative


def _normalize(numeric: str, raw: object) -> tuple[str, NumberFormat | None]:
    """Rewrite *numeric* with ``.`` as the only (decimal) separator.

    Returns the normalized string and the convention that resolved it.
    """
    has_comma = "," in numeric
    has_dot = "." in numeric

    if not has_comma and not has_dot:
        if not _DIGITS.fullmatch(numeric):
            raise _fail(f"Invalid format: '{numeric}' is not a valid number", raw)
        return numeric, None

    if has_comma and not has_dot:
        # Indonesian decimal comma without thousands grouping: "1000,50"
        return numeric.replace(",", "."), INDONESIAN

    if has_dot and not has_comma:
        after_dot = numeric.rsplit(".", 1)[1]
        if len(after_dot) == 2:
            return numeric, INTERNATIONAL
        return numeric.replace(".", ""), INDONESIAN

    if numeric.rfind(".") > numeric.rfind(","):
        return numeric.replace(",", ""), INTERNATIONAL
    return numeric.replace(".", "").replace(",", "."), INDONESIAN


def parse_amount(raw_string: str) -> ParsedAmount:
    """Parse a Rupiah string into a ``ParsedAmount``.

    Raises ``FormatError`` when the string does not hold a single
    unsigned number once sign, symbol and separators are accounted for.
    """
    if not isinstance(raw_string, str):
        raise _fail("value is required", raw_string)

    numeric, negative = _strip_sign_and_symbol(raw_string)
    normalized, number_format = _normalize(numeric, raw_string)

    if not _UNSIGNED_DECIMAL.fullmatch(normalized):
        raise _fail(f"Invalid format: '{numeric}'", raw_string)

    value = float(normalized)
    return ParsedAmount(
        value=-value if negative else value,
        original_string=raw_string,
        currency=get_settings().currency_code,
        negative=negative,
        number_format=number_format,
    )


def detect_number_format(raw_string: str) -> NumberFormat | None:
    """Return the separator convention *raw_string* is written in.

    ``None`` means the string is a plain number without separators.
    """
    return parse_amount(raw_string).number_format


def parse_rupiah(raw_string: str) -> float:
    """Parse a Rupiah string to a float.

    Examples:
    - "Rp 1.000,00" -> 1000.0
    - "1,000.50" -> 1000.5
    - "(Rp 1.000,00)" -> -1000.0
    """
    return parse_amount(raw_string).value


def parse_rupiah_to_int(raw_string: str) -> int:
    """Parse a Rupiah string to whole Rupiah, halves rounded away from zero.

    "Rp 1.000,50" -> 1001, "-1.234,99" -> -1235.
    """
    return int(round_half_away(parse_rupiah(raw_string)))
