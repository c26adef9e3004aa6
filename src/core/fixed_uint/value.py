"""The ``FixedUint4096`` value type.

An immutable unsigned integer in ``[0, 2**4096 - 1]`` stored as exactly 64
words of 64 bits, least-significant word first. All arithmetic wraps modulo
``2**4096``; there is no sign.

Operands may be ``FixedUint4096`` or a non-negative ``int`` below ``2**4096``.
Augmented assignment (``x += y`` and friends) rebinds ``x`` to a new value; the
previous object is never mutated.
"""

from __future__ import annotations

from typing import Any, Iterable, Union

from .text import parse_decimal_words, render_decimal_words
from .words import (
    MAX_WORDS,
    NUM_WORDS,
    TOTAL_BITS,
    WORD_BITS,
    WORD_MASK,
    ZERO_WORDS,
    Words,
    add_words,
    and_words,
    bit_length_words,
    cmp_words,
    divmod_words,
    mul_words,
    not_words,
    or_words,
    shl_words,
    shr_words,
    sub_words,
    words_from_int,
    words_to_int,
    xor_words,
)

Operand = Union["FixedUint4096", int]


def _require_uint(value: int, *, bits: int) -> None:
    if value < 0:
        raise OverflowError(f"value must be non-negative, got {value}")
    if value >> bits:
        raise OverflowError(f"value does not fit in {bits} bits")


def _operand_words(other: Any) -> Words | None:
    if isinstance(other, FixedUint4096):
        return other._words
    if isinstance(other, int) and not isinstance(other, bool):
        _require_uint(other, bits=TOTAL_BITS)
        return words_from_int(other)
    return None


class FixedUint4096:
    """Unsigned 4096-bit integer with wraparound arithmetic."""

    __slots__ = ("_words",)

    _words: Words

    def __init__(self, value: int | str | FixedUint4096 = 0) -> None:
        if isinstance(value, FixedUint4096):
            words = value._words
        elif isinstance(value, bool):
            raise TypeError("bool is not accepted as an integer value")
        elif isinstance(value, int):
            # native integers fill the least-significant word only
            _require_uint(value, bits=WORD_BITS)
            words = (value,) + (0,) * (NUM_WORDS - 1)
        elif isinstance(value, str):
            words = parse_decimal_words(value)
        else:
            raise TypeError(f"cannot build FixedUint4096 from {type(value).__name__}")
        object.__setattr__(self, "_words", words)

    # -- Alternate constructors ---------------------------------------------

    @classmethod
    def _wrap(cls, words: Words) -> FixedUint4096:
        obj = cls.__new__(cls)
        object.__setattr__(obj, "_words", words)
        return obj

    @classmethod
    def from_int(cls, value: int) -> FixedUint4096:
        """Build from any ``int`` in ``[0, 2**4096)``."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("value must be an int")
        _require_uint(value, bits=TOTAL_BITS)
        return cls._wrap(words_from_int(value))

    @classmethod
    def from_words(cls, words: Iterable[int]) -> FixedUint4096:
        """Build from exactly 64 words, least-significant first."""
        ws = tuple(words)
        if len(ws) != NUM_WORDS:
            raise ValueError(f"expected {NUM_WORDS} words, got {len(ws)}")
        for i, w in enumerate(ws):
            if not isinstance(w, int) or isinstance(w, bool):
                raise TypeError(f"words[{i}] must be an int")
            if not (0 <= w <= WORD_MASK):
                raise ValueError(f"words[{i}] out of range: {w}")
        return cls._wrap(ws)

    @classmethod
    def parse_decimal(cls, text: str, *, strict: bool = False) -> FixedUint4096:
        """Parse decimal text. See ``text.parse_decimal_words`` for the rules."""
        return cls._wrap(parse_decimal_words(text, strict=strict))

    @classmethod
    def max_value(cls) -> FixedUint4096:
        return cls._wrap(MAX_WORDS)

    # -- Immutability -------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self).from_words, (self._words,))

    # -- Introspection ------------------------------------------------------

    @property
    def words(self) -> Words:
        return self._words

    def to_int(self) -> int:
        return words_to_int(self._words)

    def bit_length(self) -> int:
        return bit_length_words(self._words)

    def test_bit(self, index: int) -> bool:
        if not (0 <= index < TOTAL_BITS):
            raise IndexError(f"bit index out of range: {index}")
        word_idx, bit_idx = divmod(index, WORD_BITS)
        return bool((self._words[word_idx] >> bit_idx) & 1)

    def is_odd(self) -> bool:
        return bool(self._words[0] & 1)

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return any(self._words)

    def __hash__(self) -> int:
        return hash(self.to_int())

    def __str__(self) -> str:
        return render_decimal_words(self._words)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"

    # -- Arithmetic ---------------------------------------------------------

    def __add__(self, other: Operand) -> FixedUint4096:
        o = _operand_words(other)
        if o is None:
            return NotImplemented
        return self._wrap(add_words(self._words, o))

    def __radd__(self, other: Operand) -> FixedUint4096:
        o = _operand_words(other)
        if o is None:
            return NotImplemented
        return self._wrap(add_words(o, self._words))

    def __sub__(self, other: Operand) -> FixedUint4096:
        o = _operand_words(other)
        if o is None:
            return NotImplemented
        return self._wrap(sub_words(self._words, o))

    def __rsub__(self, other: Operand) -> FixedUint4096:
        o = _operand_words(other)
        if o is None:
            return NotImplemented
        return self._wrap(sub_words(o, self._words))

    def __mul__(self, other: Operand) -> FixedUint4096:
        o = _operand_words(other)
        if o is None:
            return NotImplemented
        return self._wrap(mul_words(self._words, o))

    def __rmul__(self, other: Operand) -> FixedUint4096:
        o = _operand_words(other)
        if o is None:
            return NotImplemented
        return self._wrap(mul_words(o, self._words))

    def __divmod__(self, other: Operand) -> tuple[FixedUint4096, FixedUint4096]:
        o = _operand_words(other)
        if o is None:
            return NotImplemented
        q, r = divmod_words(self._words, o)
        return self._wrap(q), self._wrap(r)

    def __rdivmod__(self, other: Operand) -> tuple[FixedUint4096, FixedUint4096]:
        o = _operand_words(other)
        if o is None:
            return NotImplemented
        q, r = divmod_words(o, self._words)
        return self._wrap(q), self._wrap(r)

    def __floordiv__(self, other: Operand) -> FixedUint4096:
        o = _operand_words(other)
        if o is None:
            return NotImplemented
        return self._wrap(divmod_words(self._words, o)[0])

    def __rfloordiv__(self, other: Operand) -> FixedUint4096:
        o = _operand_words(other)
        if o is None:
            return NotImplemented
        return self._wrap(divmod_words(o, self._words)[0])

    def __mod__(self, other: Operand) -> FixedUint4096:
        o = _operand_words(other)
        if o is None:
            return NotImplemented
        return self._wrap(divmod_words(self._words, o)[1])

    def __rmod__(self, other: Operand) -> FixedUint4096:
        o = _operand_words(other)
        if o is None:
            return NotImplemented
        return self._wrap(divmod_words(o, self._words)[1])

    # Named forms of the operators above.

    def add(self, other: Operand) -> FixedUint4096:
        return self + other

    def subtract(self, other: Operand) -> FixedUint4096:
        return self - other

    def multiply(self, other: Operand) -> FixedUint4096:
        return self * other

    def divide(self, other: Operand) -> FixedUint4096:
        return self // other

    def modulo(self, other: Operand) -> FixedUint4096:
        return self % other

    # -- Bitwise ------------------------------------------------------------

    def __and__(self, other: Operand) -> FixedUint4096:
        o = _operand_words(other)
        if o is None:
            return NotImplemented
        return self._wrap(and_words(self._words, o))

    __rand__ = __and__

    def __or__(self, other: Operand) -> FixedUint4096:
        o = _operand_words(other)
        if o is None:
            return NotImplemented
        return self._wrap(or_words(self._words, o))

    __ror__ = __or__

    def __xor__(self, other: Operand) -> FixedUint4096:
        o = _operand_words(other)
        if o is None:
            return NotImplemented
        return self._wrap(xor_words(self._words, o))

    __rxor__ = __xor__

    def __invert__(self) -> FixedUint4096:
        return self._wrap(not_words(self._words))

    def __lshift__(self, shift: int) -> FixedUint4096:
        if not isinstance(shift, int) or isinstance(shift, bool):
            return NotImplemented
        return self._wrap(shl_words(self._words, shift))

    def __rshift__(self, shift: int) -> FixedUint4096:
        if not isinstance(shift, int) or isinstance(shift, bool):
            return NotImplemented
        return self._wrap(shr_words(self._words, shift))

    # -- Comparison ---------------------------------------------------------

    def _compare(self, other: Any) -> int | None:
        if isinstance(other, FixedUint4096):
            return cmp_words(self._words, other._words)
        if isinstance(other, int) and not isinstance(other, bool):
            # plain ints compare numerically, including ones out of range
            value = self.to_int()
            return (value > other) - (value < other)
        return None

    def __eq__(self, other: object) -> bool:
        c = self._compare(other)
        if c is None:
            return NotImplemented
        return c == 0

    def __ne__(self, other: object) -> bool:
        c = self._compare(other)
        if c is None:
            return NotImplemented
        return c != 0

    def __lt__(self, other: Operand) -> bool:
        c = self._compare(other)
        if c is None:
            return NotImplemented
        return c < 0

    def __le__(self, other: Operand) -> bool:
        c = self._compare(other)
        if c is None:
            return NotImplemented
        return c <= 0

    def __gt__(self, other: Operand) -> bool:
        c = self._compare(other)
        if c is None:
            return NotImplemented
        return c > 0

    def __ge__(self, other: Operand) -> bool:
        c = self._compare(other)
        if c is None:
            return NotImplemented
        return c >= 0


ZERO = FixedUint4096()
ONE = FixedUint4096(1)
