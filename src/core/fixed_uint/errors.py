"""Exception types for the fixed-width integer core."""

from __future__ import annotations


class DivisionByZeroError(ZeroDivisionError):
    """Raised when the divisor of ``//``, ``%``, ``divmod`` or ``mod_exp`` is zero."""


class DecimalParseError(ValueError):
    """Raised by strict decimal parsing on malformed or out-of-range text."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"invalid decimal {text!r}: {reason}")
