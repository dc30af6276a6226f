"""Error types raised by the parsing helpers."""

from __future__ import annotations


class FormatError(ValueError):
    """Raised when a string cannot be read as a Rupiah amount."""

    def __init__(self, message: str, raw: object = None):
        super().__init__(message)
        self.raw = raw
