"""Property tests: FixedUint4096 vs Python int arithmetic modulo 2**4096.

Uses Hypothesis with plain ints as the oracle; every operation must agree with
the int result reduced modulo 2**4096.
"""

from __future__ import annotations

import importlib.util

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import given, settings

from src.core.fixed_uint import TOTAL_BITS, DivisionByZeroError, FixedUint4096

MOD = 1 << TOTAL_BITS
MAX = MOD - 1

uints = st.one_of(
    st.integers(min_value=0, max_value=(1 << 64) - 1),
    st.integers(min_value=0, max_value=(1 << 512) - 1),
    st.integers(min_value=0, max_value=MAX),
    st.sampled_from([0, 1, MAX, MAX - 1, 1 << 4095, (1 << 64) - 1, 1 << 64]),
)
nonzero = uints.filter(lambda v: v != 0)
shifts = st.integers(min_value=0, max_value=TOTAL_BITS + 64)

# Full-width restoring division walks up to 4096 bits per call.
slow = settings(max_examples=25, deadline=None)
fast = settings(max_examples=100, deadline=None)


def U(value: int) -> FixedUint4096:
    return FixedUint4096.from_int(value)


# ---------------------------------------------------------------------------
# Oracle equivalence
# ---------------------------------------------------------------------------

@fast
@given(a=uints, b=uints)
def test_add_matches_int(a: int, b: int) -> None:
    assert (U(a) + U(b)).to_int() == (a + b) % MOD


@fast
@given(a=uints, b=uints)
def test_sub_matches_int(a: int, b: int) -> None:
    assert (U(a) - U(b)).to_int() == (a - b) % MOD


@fast
@given(a=uints, b=uints)
def test_mul_matches_int(a: int, b: int) -> None:
    assert (U(a) * U(b)).to_int() == (a * b) % MOD


@slow
@given(a=uints, b=nonzero)
def test_divmod_matches_int(a: int, b: int) -> None:
    q, r = divmod(U(a), U(b))
    assert q.to_int() == a // b
    assert r.to_int() == a % b


@fast
@given(a=uints, b=uints)
def test_bitwise_matches_int(a: int, b: int) -> None:
    assert (U(a) & U(b)).to_int() == a & b
    assert (U(a) | U(b)).to_int() == a | b
    assert (U(a) ^ U(b)).to_int() == a ^ b
    assert (~U(a)).to_int() == MAX ^ a


@fast
@given(a=uints, s=shifts)
def test_shifts_match_int(a: int, s: int) -> None:
    assert (U(a) << s).to_int() == (a << s) % MOD
    assert (U(a) >> s).to_int() == a >> s


@fast
@given(a=uints, b=uints)
def test_comparisons_match_int(a: int, b: int) -> None:
    x, y = U(a), U(b)
    assert (x < y) == (a < b)
    assert (x <= y) == (a <= b)
    assert (x > y) == (a > b)
    assert (x >= y) == (a >= b)
    assert (x == y) == (a == b)
    assert (x != y) == (a != b)


# ---------------------------------------------------------------------------
# Algebraic properties
# ---------------------------------------------------------------------------

@fast
@given(a=uints)
def test_decimal_round_trip(a: int) -> None:
    text = str(U(a))
    assert text == str(a)
    assert text == "0" or not text.startswith("0")
    assert FixedUint4096(text) == U(a)


@fast
@given(a=uints, b=uints)
def test_additive_inverse(a: int, b: int) -> None:
    assert (U(a) + U(b)) - U(b) == U(a)


@fast
@given(a=uints, b=uints, c=uints)
def test_distributivity(a: int, b: int, c: int) -> None:
    x, y, z = U(a), U(b), U(c)
    assert x * (y + z) == x * y + x * z


@slow
@given(a=uints, b=nonzero)
def test_division_identity(a: int, b: int) -> None:
    x, y = U(a), U(b)
    q, r = x // y, x % y
    assert x == q * y + r
    assert r < y


@fast
@given(a=uints)
def test_division_by_zero_always_raises(a: int) -> None:
    with pytest.raises(DivisionByZeroError):
        U(a) // 0
    with pytest.raises(DivisionByZeroError):
        U(a) % 0


@fast
@given(data=st.data())
def test_shift_round_trip_without_loss(data: st.DataObject) -> None:
    s = data.draw(st.integers(min_value=0, max_value=TOTAL_BITS - 1))
    a = data.draw(st.integers(min_value=0, max_value=(1 << (TOTAL_BITS - s)) - 1))
    assert (U(a) << s) >> s == U(a)


@fast
@given(a=uints, extra=st.integers(min_value=0, max_value=1000))
def test_shifting_all_bits_out_is_zero(a: int, extra: int) -> None:
    assert U(a) << (TOTAL_BITS + extra) == 0
    assert U(a) >> (TOTAL_BITS + extra) == 0
    assert not (U(a) >> (a.bit_length() + extra))


@fast
@given(a=uints)
def test_truthiness(a: int) -> None:
    assert bool(U(a)) == (a != 0)
