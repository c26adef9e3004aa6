"""Word-level kernels for 4096-bit unsigned integers.

Every function is stateless and operates on sequences of exactly ``NUM_WORDS``
64-bit words, least-significant word first. Results are fresh tuples.

Semantics are fixed-width: carries, borrows, shifted-out bits and partial
products beyond the top word are discarded (arithmetic modulo ``2**4096``).
Python ints stand in for the double-width (128-bit) intermediates; every stored
word is masked back to 64 bits.
"""

from __future__ import annotations

from typing import Sequence

from .errors import DivisionByZeroError

WORD_BITS: int = 64
NUM_WORDS: int = 64
TOTAL_BITS: int = WORD_BITS * NUM_WORDS
WORD_MASK: int = (1 << WORD_BITS) - 1

Words = tuple[int, ...]

ZERO_WORDS: Words = (0,) * NUM_WORDS
MAX_WORDS: Words = (WORD_MASK,) * NUM_WORDS


def significant_words(a: Sequence[int]) -> int:
    """Number of words up to and including the most significant nonzero word."""
    for i in range(NUM_WORDS - 1, -1, -1):
        if a[i]:
            return i + 1
    return 0


def is_zero_words(a: Sequence[int]) -> bool:
    return not any(a)


def bit_length_words(a: Sequence[int]) -> int:
    n = significant_words(a)
    if n == 0:
        return 0
    return (n - 1) * WORD_BITS + a[n - 1].bit_length()


# -- Additive ---------------------------------------------------------------

def add_words(a: Sequence[int], b: Sequence[int]) -> Words:
    """Word-by-word sum with a 1-bit carry; the final carry is dropped."""
    res = [0] * NUM_WORDS
    carry = 0
    for i in range(NUM_WORDS):
        total = a[i] + b[i] + carry
        res[i] = total & WORD_MASK
        carry = total >> WORD_BITS
    return tuple(res)


def sub_words(a: Sequence[int], b: Sequence[int]) -> Words:
    """Word-by-word difference with a 1-bit borrow; the final borrow is dropped."""
    res = [0] * NUM_WORDS
    borrow = 0
    for i in range(NUM_WORDS):
        diff = a[i] - b[i] - borrow
        res[i] = diff & WORD_MASK
        borrow = 1 if diff < 0 else 0
    return tuple(res)


# -- Multiplicative ---------------------------------------------------------

def mul_words(a: Sequence[int], b: Sequence[int]) -> Words:
    """Schoolbook product truncated to ``NUM_WORDS`` words.

    For each nonzero word ``a[i]`` the row ``a[i] * b[j]`` is accumulated into
    ``res[i + j]`` with carry. Terms landing at index ``>= NUM_WORDS`` are
    dropped. A row stops early once it is past the top of ``b`` with no carry
    left, since the remaining terms add nothing.
    """
    res = [0] * NUM_WORDS
    b_len = significant_words(b)
    if b_len == 0:
        return ZERO_WORDS
    for i in range(NUM_WORDS):
        ai = a[i]
        if ai == 0:
            continue
        carry = 0
        for j in range(NUM_WORDS - i):
            if j >= b_len and carry == 0:
                break
            acc = ai * b[j] + res[i + j] + carry
            res[i + j] = acc & WORD_MASK
            carry = acc >> WORD_BITS
    return tuple(res)


def divmod_words(a: Sequence[int], b: Sequence[int]) -> tuple[Words, Words]:
    """Restoring binary long division: returns ``(quotient, remainder)``.

    Walks the dividend from its most significant bit down to bit 0. The running
    remainder is shifted left one bit with the next dividend bit inserted at
    the bottom; whenever it reaches the divisor, the divisor is subtracted and
    the matching quotient bit is set. Leading zero bits of the dividend would
    only shift zeros into a zero remainder, so the walk starts at its highest
    set bit.

    Raises:
        DivisionByZeroError: ``b`` is zero.
    """
    b_len = significant_words(b)
    if b_len == 0:
        raise DivisionByZeroError("division by zero")

    quotient = [0] * NUM_WORDS
    current = [0] * NUM_WORDS
    # current[cur_len:] is all zero
    cur_len = 0

    for i in range(bit_length_words(a) - 1, -1, -1):
        word_idx, bit_idx = divmod(i, WORD_BITS)
        carry = (a[word_idx] >> bit_idx) & 1
        for k in range(min(cur_len + 1, NUM_WORDS)):
            w = current[k]
            current[k] = ((w << 1) | carry) & WORD_MASK
            carry = w >> (WORD_BITS - 1)
        if cur_len < NUM_WORDS and current[cur_len]:
            cur_len += 1

        if _cmp_prefix(current, cur_len, b, b_len) >= 0:
            borrow = 0
            for k in range(cur_len):
                diff = current[k] - b[k] - borrow
                current[k] = diff & WORD_MASK
                borrow = 1 if diff < 0 else 0
            while cur_len and current[cur_len - 1] == 0:
                cur_len -= 1
            quotient[word_idx] |= 1 << bit_idx

    return tuple(quotient), tuple(current)


def divmod_small(a: Sequence[int], divisor: int) -> tuple[Words, int]:
    """Short division by a single-word divisor: returns ``(quotient, remainder)``.

    Each step divides the double-width value ``remainder:a[i]`` by ``divisor``,
    from the most significant word down.
    """
    if not (0 < divisor <= WORD_MASK):
        if divisor == 0:
            raise DivisionByZeroError("division by zero")
        raise ValueError(f"divisor must fit in one word, got {divisor}")
    quotient = [0] * NUM_WORDS
    rem = 0
    for i in range(significant_words(a) - 1, -1, -1):
        quotient[i], rem = divmod((rem << WORD_BITS) | a[i], divisor)
    return tuple(quotient), rem


# -- Bitwise ----------------------------------------------------------------

def and_words(a: Sequence[int], b: Sequence[int]) -> Words:
    return tuple(x & y for x, y in zip(a, b))


def or_words(a: Sequence[int], b: Sequence[int]) -> Words:
    return tuple(x | y for x, y in zip(a, b))


def xor_words(a: Sequence[int], b: Sequence[int]) -> Words:
    return tuple(x ^ y for x, y in zip(a, b))


def not_words(a: Sequence[int]) -> Words:
    return tuple(x ^ WORD_MASK for x in a)


# -- Shifts -----------------------------------------------------------------

def shl_words(a: Sequence[int], shift: int) -> Words:
    """Left shift by ``shift`` bits; bits pushed past the top word are lost."""
    if shift < 0:
        raise ValueError("negative shift count")
    if shift >= TOTAL_BITS:
        return ZERO_WORDS
    word_shift, bit_shift = divmod(shift, WORD_BITS)
    res = [0] * NUM_WORDS
    for i in range(word_shift, NUM_WORDS):
        lower = (a[i - word_shift] << bit_shift) & WORD_MASK
        upper = 0
        if bit_shift and i > word_shift:
            upper = a[i - word_shift - 1] >> (WORD_BITS - bit_shift)
        res[i] = lower | upper
    return tuple(res)


def shr_words(a: Sequence[int], shift: int) -> Words:
    """Right shift by ``shift`` bits; bits pushed past word 0 are lost."""
    if shift < 0:
        raise ValueError("negative shift count")
    if shift >= TOTAL_BITS:
        return ZERO_WORDS
    word_shift, bit_shift = divmod(shift, WORD_BITS)
    res = [0] * NUM_WORDS
    for i in range(NUM_WORDS - word_shift):
        upper = a[i + word_shift] >> bit_shift
        lower = 0
        if bit_shift and i + word_shift + 1 < NUM_WORDS:
            lower = (a[i + word_shift + 1] << (WORD_BITS - bit_shift)) & WORD_MASK
        res[i] = upper | lower
    return tuple(res)


# -- Comparison -------------------------------------------------------------

def cmp_words(a: Sequence[int], b: Sequence[int]) -> int:
    """Unsigned three-way compare (-1, 0, 1), most significant word first."""
    for i in range(NUM_WORDS - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


def _cmp_prefix(a: Sequence[int], a_len: int, b: Sequence[int], b_len: int) -> int:
    if a_len != b_len:
        return -1 if a_len < b_len else 1
    for i in range(a_len - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


# -- Conversion -------------------------------------------------------------

def words_from_int(value: int) -> Words:
    """Split ``0 <= value < 2**4096`` into words. Callers check the range."""
    return tuple((value >> (WORD_BITS * i)) & WORD_MASK for i in range(NUM_WORDS))


def words_to_int(a: Sequence[int]) -> int:
    value = 0
    for i in range(significant_words(a) - 1, -1, -1):
        value = (value << WORD_BITS) | a[i]
    return value
