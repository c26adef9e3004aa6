"""Decimal text conversion for 4096-bit words.

Parsing is lenient by default: every character that is not an ASCII digit is
skipped, and ``value * 10 + digit`` wraps like any other arithmetic. Strict
parsing rejects what lenient parsing skips or wraps.
"""

from __future__ import annotations

from typing import Sequence

from .errors import DecimalParseError
from .words import (
    MAX_WORDS,
    NUM_WORDS,
    ZERO_WORDS,
    Words,
    add_words,
    cmp_words,
    divmod_small,
    is_zero_words,
    mul_words,
)

_DIGITS = "0123456789"
_TEN: Words = (10,) + (0,) * (NUM_WORDS - 1)

# Largest value that can take one more digit without exceeding 2**4096 - 1.
_MAX_DIV_TEN, _MAX_MOD_TEN = divmod_small(MAX_WORDS, 10)


def _digit_words(digit: int) -> Words:
    return (digit,) + (0,) * (NUM_WORDS - 1)


def parse_decimal_words(text: str, *, strict: bool = False) -> Words:
    """Parse decimal ``text`` left to right into words.

    Lenient mode skips non-digit characters and yields zero for text with no
    digits. Strict mode raises ``DecimalParseError`` instead of skipping, on
    empty text, and on values above ``2**4096 - 1`` instead of wrapping.
    """
    if strict and not text:
        raise DecimalParseError(text, "empty")

    value = ZERO_WORDS
    for ch in text:
        digit = _DIGITS.find(ch)
        if digit < 0:
            if strict:
                raise DecimalParseError(text, f"non-digit character {ch!r}")
            continue
        if strict:
            order = cmp_words(value, _MAX_DIV_TEN)
            if order > 0 or (order == 0 and digit > _MAX_MOD_TEN):
                raise DecimalParseError(text, "exceeds 4096 bits")
        value = add_words(mul_words(value, _TEN), _digit_words(digit))
    return value


def render_decimal_words(a: Sequence[int]) -> str:
    """Render words as a decimal string without separators or leading zeros."""
    if is_zero_words(a):
        return "0"
    digits: list[str] = []
    value: Sequence[int] = a
    while not is_zero_words(value):
        value, digit = divmod_small(value, 10)
        digits.append(_DIGITS[digit])
    digits.reverse()
    return "".join(digits)
