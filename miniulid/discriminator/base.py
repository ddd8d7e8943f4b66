from abc import ABC, abstractmethod


class DiscriminatorSource(ABC):
    """Supplies the 14-bit field that separates identifiers within a minute."""

    name = None

    @abstractmethod
    def next(self, now):
        """Return a discriminator in 0..16383 for an identifier stamped at `now`."""
