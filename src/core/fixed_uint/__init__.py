"""`fixed_uint`: fixed-width 4096-bit unsigned integers in pure Python.

Values hold exactly 64 words of 64 bits (least-significant first):
- arithmetic wraps modulo 2**4096, there is no sign,
- values are immutable and hashable,
- division is restoring binary long division and raises
  ``DivisionByZeroError`` on a zero divisor.

Public API:
- `FixedUint4096` (operators, `from_int`, `from_words`, `parse_decimal`)
- `checked_divmod(a, b) -> DivModResult` / `divmod_or_raise(a, b)`
"""

from .checked import DIVISION_BY_ZERO, DivModResult, checked_divmod, divmod_or_raise
from .errors import DecimalParseError, DivisionByZeroError
from .value import ONE, ZERO, FixedUint4096
from .words import NUM_WORDS, TOTAL_BITS, WORD_BITS, WORD_MASK

__all__ = [
    "FixedUint4096",
    "ZERO",
    "ONE",
    "NUM_WORDS",
    "TOTAL_BITS",
    "WORD_BITS",
    "WORD_MASK",
    "DivModResult",
    "DIVISION_BY_ZERO",
    "checked_divmod",
    "divmod_or_raise",
    "DecimalParseError",
    "DivisionByZeroError",
]
