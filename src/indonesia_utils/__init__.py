"""Rupiah formatting, parsing and terbilang for Indonesian locale conventions."""

from .currency.formatting import format_rupiah, format_rupiah_compact
from .currency.number_parsing import (
    detect_number_format,
    parse_amount,
    parse_rupiah,
    parse_rupiah_to_int,
)
from .errors import FormatError
from .models.locale import INDONESIAN, INTERNATIONAL, NumberFormat, ParsedAmount
from .terbilang.converter import terbilang, terbilang_rupiah
from .utils.logging import setup_logging

__version__ = "0.1.0"

__all__ = [
    "FormatError",
    "INDONESIAN",
    "INTERNATIONAL",
    "NumberFormat",
    "ParsedAmount",
    "detect_number_format",
    "format_rupiah",
    "format_rupiah_compact",
    "parse_amount",
    "parse_rupiah",
    "parse_rupiah_to_int",
    "setup_logging",
    "terbilang",
    "terbilang_rupiah",
]
