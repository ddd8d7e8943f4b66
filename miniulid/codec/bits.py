"""
Bit layout of the 40-bit identifier.

High to low: [days:15][minute:11][discriminator:14]. Bits 40-63 are always zero.
"""

from collections import namedtuple

from miniulid.core.errors import DiscriminatorOverflowError

DAYS_BITS = 15
MINUTE_BITS = 11
DISCRIMINATOR_BITS = 14
TOTAL_BITS = DAYS_BITS + MINUTE_BITS + DISCRIMINATOR_BITS

DAYS_MASK = (1 << DAYS_BITS) - 1
MINUTE_MASK = (1 << MINUTE_BITS) - 1
DISCRIMINATOR_MASK = (1 << DISCRIMINATOR_BITS) - 1

MINUTE_SHIFT = DISCRIMINATOR_BITS
DAYS_SHIFT = MINUTE_BITS + DISCRIMINATOR_BITS

MAX_DISCRIMINATOR = DISCRIMINATOR_MASK
MAX_VALUE = (1 << TOTAL_BITS) - 1

Components = namedtuple("Components", ["days", "minute", "discriminator"])


def check_discriminator(discriminator):
    """Raise DiscriminatorOverflowError unless 0 <= discriminator <= 16383."""
    if discriminator < 0 or discriminator > MAX_DISCRIMINATOR:
        raise DiscriminatorOverflowError(
            f"discriminator {discriminator} outside 0..{MAX_DISCRIMINATOR}",
            value=discriminator, maximum=MAX_DISCRIMINATOR,
        )


def pack(days, minute, discriminator):
    """Pack the three fields into one integer. Days and minute are trusted."""
    check_discriminator(discriminator)
    return (days << DAYS_SHIFT) | (minute << MINUTE_SHIFT) | discriminator


def unpack(value):
    """Split a packed value back into Components. Never fails."""
    return Components(
        (value >> DAYS_SHIFT) & DAYS_MASK,
        (value >> MINUTE_SHIFT) & MINUTE_MASK,
        value & DISCRIMINATOR_MASK,
    )
