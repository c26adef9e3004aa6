"""Division that reports a zero divisor as a value instead of raising.

``checked_divmod()`` is for callers that prefer inspecting a ``DivModResult``;
``divmod_or_raise()`` turns a rejected result back into the exception.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import DivisionByZeroError
from .value import FixedUint4096, Operand

DIVISION_BY_ZERO = "division_by_zero"


@dataclass(frozen=True)
class DivModResult:
    """Outcome of ``checked_divmod``. ``error`` is set iff ``ok`` is False."""

    ok: bool
    quotient: FixedUint4096 | None = None
    remainder: FixedUint4096 | None = None
    error: str | None = None


def _as_uint(name: str, value: Operand) -> FixedUint4096:
    if isinstance(value, FixedUint4096):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return FixedUint4096.from_int(value)
    raise TypeError(f"{name} must be FixedUint4096 or int, got {type(value).__name__}")


def checked_divmod(dividend: Operand, divisor: Operand) -> DivModResult:
    a = _as_uint("dividend", dividend)
    b = _as_uint("divisor", divisor)
    if not b:
        return DivModResult(ok=False, error=DIVISION_BY_ZERO)
    q, r = divmod(a, b)
    return DivModResult(ok=True, quotient=q, remainder=r)


def divmod_or_raise(dividend: Operand, divisor: Operand) -> tuple[FixedUint4096, FixedUint4096]:
    """Like ``checked_divmod()`` but raises on rejection.

    Raises:
        DivisionByZeroError: ``divisor`` is zero.
    """
    result = checked_divmod(dividend, divisor)
    if not result.ok:
        raise DivisionByZeroError(result.error or DIVISION_BY_ZERO)
    assert result.quotient is not None and result.remainder is not None
    return result.quotient, result.remainder
