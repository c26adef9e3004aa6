"""Tests for src/core/fixed_uint/text.py — decimal parsing and rendering."""

import pytest

from src.core.fixed_uint import TOTAL_BITS, DecimalParseError, FixedUint4096
from src.core.fixed_uint.text import parse_decimal_words, render_decimal_words
from src.core.fixed_uint.words import MAX_WORDS, ZERO_WORDS, words_from_int

MAX = (1 << TOTAL_BITS) - 1


class TestLenientParse:
    def test_plain_digits(self):
        assert parse_decimal_words("1234567890") == words_from_int(1234567890)

    def test_empty_is_zero(self):
        assert parse_decimal_words("") == ZERO_WORDS

    def test_no_digits_is_zero(self):
        assert parse_decimal_words("abc") == ZERO_WORDS

    def test_non_digits_are_skipped(self):
        assert FixedUint4096("12a3") == 123
        assert FixedUint4096("1,000,000") == 1_000_000
        assert FixedUint4096(" 42\n") == 42

    def test_sign_is_skipped(self):
        assert FixedUint4096("-5") == 5
        assert FixedUint4096("+5") == 5

    def test_non_ascii_digits_are_skipped(self):
        # Arabic-Indic three is a Unicode digit but not an ASCII one.
        assert FixedUint4096("1٣2") == 12

    def test_leading_zeros(self):
        assert FixedUint4096("000123") == 123

    def test_max_value(self):
        assert parse_decimal_words(str(MAX)) == MAX_WORDS

    def test_overflow_wraps(self):
        assert FixedUint4096(str(1 << TOTAL_BITS)) == 0
        assert FixedUint4096(str((1 << TOTAL_BITS) + 5)) == 5


class TestStrictParse:
    def test_accepts_digits(self):
        assert FixedUint4096.parse_decimal("987654321", strict=True) == 987654321

    def test_accepts_max(self):
        assert FixedUint4096.parse_decimal(str(MAX), strict=True) == MAX

    @pytest.mark.parametrize("text", ["", "12a3", "-5", " 42", "1_000", "1٣2"])
    def test_rejects_malformed(self, text):
        with pytest.raises(DecimalParseError):
            FixedUint4096.parse_decimal(text, strict=True)

    def test_rejects_overflow(self):
        with pytest.raises(DecimalParseError, match="exceeds 4096 bits"):
            FixedUint4096.parse_decimal(str(MAX + 1), strict=True)

    def test_rejects_one_more_digit(self):
        with pytest.raises(DecimalParseError):
            FixedUint4096.parse_decimal(str(MAX) + "0", strict=True)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError) as excinfo:
            FixedUint4096.parse_decimal("x", strict=True)
        assert excinfo.value.text == "x"

    def test_lenient_is_default(self):
        assert FixedUint4096.parse_decimal("1x2") == 12


class TestRender:
    def test_zero(self):
        assert render_decimal_words(ZERO_WORDS) == "0"

    def test_powers_of_ten(self):
        for k in range(0, 40):
            assert render_decimal_words(words_from_int(10**k)) == "1" + "0" * k

    def test_multi_word(self):
        value = (1 << 200) + 987654321
        assert render_decimal_words(words_from_int(value)) == str(value)

    def test_max(self):
        assert render_decimal_words(MAX_WORDS) == str(MAX)

    def test_no_leading_zeros(self):
        assert not str(FixedUint4096("0000000000000000000001")).startswith("0")
