from miniulid.discriminator.base import DiscriminatorSource
from miniulid.discriminator.counter import MonotonicCounter, get_default_counter, reset_default_counter
from miniulid.discriminator.entropy import RandomSource, SystemEntropy
from miniulid.discriminator.factory import create_source

__all__ = [
    "DiscriminatorSource",
    "MonotonicCounter",
    "RandomSource",
    "SystemEntropy",
    "create_source",
    "get_default_counter",
    "reset_default_counter",
]
