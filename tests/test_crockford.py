"""Unit tests for the Crockford Base32 text form."""

import random

import pytest

from miniulid.codec.bits import MAX_VALUE
from miniulid.codec.crockford import ALPHABET, ENCODED_LENGTH, decode, encode
from miniulid.core.errors import (
    DecodeError,
    InvalidCharacterError,
    LengthError,
    NegativeValueError,
    RangeOverflowError,
)

EXAMPLE_VALUE = (1691 << 25) | (930 << 14) | 1234


class TestEncode:
    """Tests for encode()."""

    def test_alphabet_excludes_ambiguous_letters(self):
        """Alphabet has 32 symbols and no I, L, O, U."""
        assert len(ALPHABET) == 32
        for letter in "ILOU":
            assert letter not in ALPHABET

    def test_encode_example(self):
        """Known value encodes to known text."""
        assert encode(EXAMPLE_VALUE) == "1MVEH16J"

    def test_encode_bounds(self):
        """Zero and the largest value pad to 8 characters."""
        assert encode(0) == "00000000"
        assert encode(MAX_VALUE) == "ZZZZZZZZ"

    def test_encode_small_value(self):
        """Least significant group is last."""
        assert encode(1) == "00000001"
        assert encode(32) == "00000010"
        assert encode(31) == "0000000Z"

    def test_encode_is_uppercase(self):
        """Encoding is canonical uppercase."""
        text = encode(EXAMPLE_VALUE)
        assert text == text.upper()
        assert len(text) == ENCODED_LENGTH

    def test_encode_rejects_out_of_range(self):
        """Values outside 40 bits cannot be encoded."""
        with pytest.raises(RangeOverflowError):
            encode(MAX_VALUE + 1)
        with pytest.raises(NegativeValueError):
            encode(-1)

    def test_text_order_matches_numeric_order(self):
        """Sorting the text sorts the values."""
        rng = random.Random(7)
        values = [rng.randrange(MAX_VALUE + 1) for _ in range(200)]
        assert sorted(values, key=encode) == sorted(values)


class TestDecode:
    """Tests for decode()."""

    def test_decode_example(self):
        """Known text decodes to known value."""
        assert decode("1MVEH16J") == EXAMPLE_VALUE

    def test_decode_lowercase(self):
        """Lowercase decodes identically."""
        assert decode("1mveh16j") == EXAMPLE_VALUE

    def test_decode_mixed_case(self):
        """Mixed case decodes identically."""
        assert decode("1mVeH16j") == EXAMPLE_VALUE

    @pytest.mark.parametrize("alias", ["i", "I", "l", "L"])
    def test_decode_one_aliases(self, alias):
        """I and L in either case read as 1."""
        assert decode("0000000" + alias) == 1
        assert decode(alias + "0000000") == decode("10000000")

    @pytest.mark.parametrize("alias", ["o", "O"])
    def test_decode_zero_aliases(self, alias):
        """O in either case reads as 0."""
        assert decode(alias * 8) == 0
        assert decode("0000001" + alias) == 32

    def test_round_trip_samples(self):
        """decode(encode(x)) == x across the domain."""
        rng = random.Random(42)
        samples = [0, 1, 31, 32, MAX_VALUE] + [rng.randrange(MAX_VALUE + 1) for _ in range(500)]
        for value in samples:
            assert decode(encode(value)) == value

    def test_short_text(self):
        """Too few characters is a LengthError."""
        with pytest.raises(LengthError) as exc_info:
            decode("ABC")
        assert exc_info.value.context["length"] == 3

    def test_long_text(self):
        """Too many characters is a LengthError."""
        with pytest.raises(LengthError):
            decode("000000000")

    def test_empty_text(self):
        """Empty text is a LengthError."""
        with pytest.raises(LengthError):
            decode("")

    def test_invalid_character(self):
        """Symbols outside the alphabet are rejected."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            decode("!!!!!!!!")
        assert exc_info.value.character == "!"
        assert exc_info.value.context["position"] == 0

    def test_letter_u_is_invalid(self):
        """U is excluded and has no alias."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            decode("0000000U")
        assert exc_info.value.character == "U"
        assert exc_info.value.context["position"] == 7

    def test_non_ascii_character(self):
        """Non-ASCII characters are rejected."""
        with pytest.raises(InvalidCharacterError):
            decode("0000000é")

    def test_decode_errors_share_base(self):
        """Both decode failures are DecodeErrors."""
        assert issubclass(LengthError, DecodeError)
        assert issubclass(InvalidCharacterError, DecodeError)
