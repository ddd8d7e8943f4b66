"""
Identifier - compact 40-bit sortable ID.

Format: 15 bits days since 2020-01-01 + 11 bits minute of day
+ 14 bits discriminator = 8 char Crockford Base32 string.
"""

from functools import total_ordering

from miniulid.codec import bits, crockford, timesplit
from miniulid.core.errors import NegativeValueError, RangeOverflowError


@total_ordering
class Identifier:
    """Immutable packed value. Ordering is numeric, which is chronological."""

    __slots__ = ("_value",)

    def __init__(self, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        if value < 0:
            raise NegativeValueError(f"negative value {value}", value=value)
        if value >> bits.TOTAL_BITS:
            raise RangeOverflowError(f"value {value} exceeds {bits.TOTAL_BITS} bits", value=value)
        self._value = value

    @property
    def days(self):
        return bits.unpack(self._value).days

    @property
    def minute(self):
        return bits.unpack(self._value).minute

    @property
    def discriminator(self):
        return self._value & bits.DISCRIMINATOR_MASK

    def to_integer(self):
        return self._value

    def to_text(self):
        return crockford.encode(self._value)

    def to_timestamp(self):
        """Creation time floored to the minute, as aware UTC."""
        days, minute, _ = bits.unpack(self._value)
        return timesplit.compose(days, minute)

    def components(self):
        return bits.unpack(self._value)

    def __int__(self):
        return self._value

    def __index__(self):
        return self._value

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f"Identifier({self.to_text()!r})"

    def __eq__(self, other):
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._value < other._value

    def __hash__(self):
        return hash(self._value)


def generate_with_components(t, discriminator):
    """Build an identifier from an explicit time and discriminator."""
    bits.check_discriminator(discriminator)
    days, minute = timesplit.split(t)
    return Identifier(bits.pack(days, minute, discriminator))


def parse(text):
    return Identifier(crockford.decode(text))


def from_integer(value):
    """Wrap an integer, rejecting anything outside [0, 2**40)."""
    return Identifier(value)
