"""
Crockford Base32 text form.

Eight characters, most significant 5-bit group first. Encoding is canonical
uppercase; decoding is case-insensitive and folds I/L to 1 and O to 0.
"""

from miniulid.codec.bits import MAX_VALUE
from miniulid.core.errors import (
    InvalidCharacterError,
    LengthError,
    NegativeValueError,
    RangeOverflowError,
)

ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
ENCODED_LENGTH = 8


def _build_decode_table():
    table = {}
    for index, char in enumerate(ALPHABET):
        table[char] = index
        table[char.lower()] = index
    for alias in "iIlL":
        table[alias] = 1
    for alias in "oO":
        table[alias] = 0
    return table


DECODE_TABLE = _build_decode_table()


def encode(value):
    """Encode a 40-bit value as 8 uppercase Crockford characters."""
    if value < 0:
        raise NegativeValueError(f"cannot encode negative value {value}", value=value)
    if value > MAX_VALUE:
        raise RangeOverflowError(f"value {value} exceeds 40 bits", value=value)

    chars = []
    for _ in range(ENCODED_LENGTH):
        chars.append(ALPHABET[value & 31])
        value >>= 5

    return "".join(reversed(chars))


def decode(text):
    """Decode 8 Crockford characters into a 40-bit value."""
    if len(text) != ENCODED_LENGTH:
        raise LengthError(
            f"encoded form must be {ENCODED_LENGTH} characters, got {len(text)}",
            length=len(text),
        )

    value = 0
    for position, char in enumerate(text):
        digit = DECODE_TABLE.get(char)
        if digit is None:
            raise InvalidCharacterError(
                f"invalid Crockford character {char!r} at position {position}",
                character=char, position=position,
            )
        value = (value << 5) | digit

    return value
