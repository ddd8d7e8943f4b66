from miniulid.core.errors import ConfigError
from miniulid.discriminator.counter import MonotonicCounter, get_default_counter
from miniulid.discriminator.entropy import RandomSource

SOURCES = ("counter", "random")


def create_source(name, entropy=None, shared=True):
    """
    Build a discriminator source by config name.

    "counter" returns the process-wide counter unless shared is False;
    "random" reads from `entropy`, defaulting to the OS CSPRNG.
    """
    if name == "counter":
        return get_default_counter() if shared else MonotonicCounter()
    if name == "random":
        return RandomSource(entropy)
    raise ConfigError(f"unknown discriminator source {name!r}, expected one of {SOURCES}", source=name)
