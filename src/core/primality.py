"""
Modular exponentiation and Miller-Rabin over `FixedUint4096`.

Only the public operators of `FixedUint4096` are used here. Products are
formed at full width before reduction, so results are exact while
``modulus < 2**2048``; above that, intermediate products wrap like every other
4096-bit product.

Witnesses are fixed (the first five primes), so `is_prime` is deterministic:
the same input always yields the same verdict.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Union

from .fixed_uint import DivisionByZeroError, FixedUint4096

logger = logging.getLogger(__name__)

WITNESSES: tuple[int, ...] = (2, 3, 5, 7, 11)
DEFAULT_ROUNDS: int = 5
ROUNDS_ENV_VAR = "FIXED_UINT_MR_ROUNDS"

UintLike = Union[FixedUint4096, int]


def _as_uint(name: str, value: UintLike) -> FixedUint4096:
    if isinstance(value, FixedUint4096):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return FixedUint4096.from_int(value)
    raise TypeError(f"{name} must be FixedUint4096 or int")


def mod_exp(base: UintLike, exponent: UintLike, modulus: UintLike) -> FixedUint4096:
    """
    Compute ``base ** exponent % modulus`` by square-and-multiply.

    Exponent bits are consumed least-significant first; the base is squared
    every iteration whether or not the bit is set. An exponent of zero returns
    1 without reducing it, so ``mod_exp(b, 0, 1) == 1``.

    Raises:
        DivisionByZeroError: ``modulus`` is zero.
    """
    b = _as_uint("base", base)
    e = _as_uint("exponent", exponent)
    m = _as_uint("modulus", modulus)
    if not m:
        raise DivisionByZeroError("modulus must be nonzero")

    result = FixedUint4096(1)
    b = b % m
    while e:
        if e.is_odd():
            result = (result * b) % m
        e = e >> 1
        b = (b * b) % m
    return result


def decompose(n: UintLike) -> tuple[int, FixedUint4096]:
    """Return ``(r, d)`` with ``n - 1 == 2**r * d`` and ``d`` odd. Requires ``n >= 2``."""
    value = _as_uint("n", n)
    if value < 2:
        raise ValueError("n must be >= 2")
    d = value - 1
    r = 0
    while not d.is_odd():
        d = d >> 1
        r += 1
    return r, d


def _witness_passes(
    witness: FixedUint4096,
    n: FixedUint4096,
    n_minus_one: FixedUint4096,
    r: int,
    d: FixedUint4096,
) -> bool:
    x = mod_exp(witness, d, n)
    if x == 1 or x == n_minus_one:
        return True
    for _ in range(r - 1):
        x = (x * x) % n
        if x == n_minus_one:
            return True
    return False


def is_prime(n: UintLike, rounds: int = DEFAULT_ROUNDS) -> bool:
    """
    Miller-Rabin test using the first ``rounds`` entries of ``WITNESSES``.

    Fast paths: ``n <= 1`` is not prime, 2 and 3 are, other even numbers are
    not, and a witness itself is prime. ``False`` is exact while
    ``n < 2**2048`` (larger moduli wrap during squaring); ``True``
    means no witness proved ``n`` composite.

    Raises:
        ValueError: ``rounds`` is outside ``[0, len(WITNESSES)]``.
    """
    if not isinstance(rounds, int) or isinstance(rounds, bool):
        raise TypeError("rounds must be an int")
    if not (0 <= rounds <= len(WITNESSES)):
        raise ValueError(f"rounds must be in [0, {len(WITNESSES)}], got {rounds}")

    value = _as_uint("n", n)
    if value <= 1:
        return False
    if value == 2 or value == 3:
        return True
    if not value.is_odd():
        return False
    # a witness divisible by n proves nothing
    if value <= WITNESSES[-1] and int(value) in WITNESSES:
        return True

    r, d = decompose(value)
    n_minus_one = value - 1
    logger.debug("miller-rabin n-1 = 2^%d * d, bits=%d", r, value.bit_length())

    for witness in WITNESSES[:rounds]:
        if not _witness_passes(FixedUint4096(witness), value, n_minus_one, r, d):
            logger.debug("composite: witness %d", witness)
            return False
    return True


# -- Configuration -----------------------------------------------------------


def _env_int(name: str, default: int, *, lo: int, hi: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        logger.warning("ignoring non-integer %s=%r", name, raw)
        return int(default)
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


@dataclass(frozen=True)
class PrimalityConfig:
    rounds: int = DEFAULT_ROUNDS

    def __post_init__(self) -> None:
        if not (1 <= self.rounds <= len(WITNESSES)):
            raise ValueError(f"rounds must be in [1, {len(WITNESSES)}], got {self.rounds}")


def load_primality_config() -> PrimalityConfig:
    """Read ``FIXED_UINT_MR_ROUNDS`` (clamped to the witness count, default 5)."""
    rounds = _env_int(ROUNDS_ENV_VAR, DEFAULT_ROUNDS, lo=1, hi=len(WITNESSES))
    return PrimalityConfig(rounds=rounds)


def is_prime_with_config(n: UintLike, config: PrimalityConfig) -> bool:
    return is_prime(n, rounds=config.rounds)
