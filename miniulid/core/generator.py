from miniulid.codec import bits, timesplit
from miniulid.core.identifier import Identifier
from miniulid.discriminator.entropy import RandomSource
from miniulid.utils.timestamp import utcnow


class IdGenerator:
    """Stamps identifiers with the clock's minute and a discriminator from `source`."""

    def __init__(self, source=None, clock=None):
        self.source = source if source is not None else RandomSource()
        self.clock = clock or utcnow

    def generate(self, now=None):
        if now is None:
            now = self.clock()
        # split first so an out-of-range clock leaves counter state untouched
        days, minute = timesplit.split(now)
        discriminator = self.source.next(now)
        return Identifier(bits.pack(days, minute, discriminator))
