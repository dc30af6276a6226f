"""Number-format conventions and parse results for Rupiah strings.

Two conventions are recognised: the Indonesian one (``.`` groups
thousands, ``,`` marks decimals) and the international one (the
reverse). ``ParsedAmount`` records which of them resolved a string.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ..utils.rounding import round_half_away


class NumberFormat(BaseModel):
    """Describes the separator convention a number was written in."""

    model_config = ConfigDict(frozen=True)

    decimal_separator: str = ","
    thousands_separator: str = "."
    example: str = "1.234,56"


INDONESIAN = NumberFormat(decimal_separator=",", thousands_separator=".", example="1.234,56")
INTERNATIONAL = NumberFormat(decimal_separator=".", thousands_separator=",", example="1,234.56")


class ParsedAmount(BaseModel):
    """Result of parsing a Rupiah string into a canonical float."""

    model_config = ConfigDict(frozen=True)

    value: float
    original_string: str
    currency: str = "IDR"
    negative: bool = False
    number_format: NumberFormat | None = None

    def to_int(self) -> int:
        """Whole-Rupiah value, halves rounded away from zero."""
        return int(round_half_away(self.value))
