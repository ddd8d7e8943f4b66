"""Compact 40-bit sortable identifiers in 8 Crockford Base32 characters."""

from miniulid.codec.bits import Components, pack, unpack
from miniulid.codec.crockford import ALPHABET, decode, encode
from miniulid.codec.timesplit import EPOCH, compose, split
from miniulid.core.errors import (
    ConfigError,
    ConversionError,
    CounterOverflowError,
    DecodeError,
    DiscriminatorOverflowError,
    EntropyError,
    FutureRangeError,
    InvalidCharacterError,
    LengthError,
    MiniUlidError,
    NegativeValueError,
    PastEpochError,
    RangeOverflowError,
    TimeRangeError,
)
from miniulid.core.generator import IdGenerator
from miniulid.core.identifier import Identifier, from_integer, generate_with_components, parse
from miniulid.discriminator import (
    DiscriminatorSource,
    MonotonicCounter,
    RandomSource,
    SystemEntropy,
    create_source,
)
from miniulid.runtime import generate, get_generator, must_generate, setup, teardown

__version__ = "1.0.0"

__all__ = [
    "ALPHABET",
    "Components",
    "ConfigError",
    "ConversionError",
    "CounterOverflowError",
    "DecodeError",
    "DiscriminatorOverflowError",
    "DiscriminatorSource",
    "EPOCH",
    "EntropyError",
    "FutureRangeError",
    "IdGenerator",
    "Identifier",
    "InvalidCharacterError",
    "LengthError",
    "MiniUlidError",
    "MonotonicCounter",
    "NegativeValueError",
    "PastEpochError",
    "RandomSource",
    "RangeOverflowError",
    "SystemEntropy",
    "TimeRangeError",
    "compose",
    "create_source",
    "decode",
    "encode",
    "from_integer",
    "generate",
    "generate_with_components",
    "get_generator",
    "must_generate",
    "pack",
    "parse",
    "setup",
    "split",
    "teardown",
    "unpack",
]
