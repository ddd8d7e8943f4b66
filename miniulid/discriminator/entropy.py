"""Random discriminators drawn from an entropy byte source."""

import os

from miniulid.codec.bits import DISCRIMINATOR_MASK
from miniulid.core.errors import EntropyError
from miniulid.discriminator.base import DiscriminatorSource
from miniulid.internal.logging import get_logger

DRAW_SIZE = 2


class SystemEntropy:
    """Operating system CSPRNG with a file-like read()."""

    def read(self, size):
        return os.urandom(size)


class RandomSource(DiscriminatorSource):
    """
    Uniform 14-bit draws. Two bytes per call, top two bits discarded.

    Collisions inside a minute are possible (about n**2 / 32768 for n ids)
    and are not detected.
    """

    name = "random"

    def __init__(self, entropy=None):
        self.entropy = entropy if entropy is not None else SystemEntropy()

    def _read_exact(self, size):
        """Read until `size` bytes arrive or the stream ends."""
        data = b""
        while len(data) < size:
            try:
                chunk = self.entropy.read(size - len(data))
            except Exception as exc:
                get_logger().warn("entropy read failed", error=exc)
                raise EntropyError(f"entropy read failed: {exc}", requested=size, received=len(data),
                                   cause=exc) from exc
            if not chunk:
                get_logger().warn("short entropy read", received=len(data))
                raise EntropyError(
                    f"entropy source returned {len(data)} of {size} bytes",
                    requested=size, received=len(data),
                )
            data += chunk
        return data

    def next(self, now=None):
        data = self._read_exact(DRAW_SIZE)
        return ((data[0] << 8) | data[1]) & DISCRIMINATOR_MASK
