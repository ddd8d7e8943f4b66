"""Process-wide default generator and the fail-loudly helper."""

import threading

from miniulid.config import load_config
from miniulid.core.errors import MiniUlidError
from miniulid.core.generator import IdGenerator
from miniulid.discriminator.counter import reset_default_counter
from miniulid.discriminator.factory import create_source
from miniulid.internal.logging import StructuredLogger, get_logger, parse_level
from miniulid.utils import crash

_generator = None
_generator_lock = threading.Lock()


def _build(config):
    StructuredLogger.configure(min_level=parse_level(config.logging.level))
    crash.configure(config.logging.crash_file)
    return IdGenerator(create_source(config.generator.source))


def setup(config=None):
    """Configure logging and crash output, then install the process-wide generator."""
    global _generator
    config = config or load_config()
    generator = _build(config)
    with _generator_lock:
        _generator = generator
    get_logger().info("generator ready", source=config.generator.source)
    return generator


def teardown():
    """Drop the process-wide generator and the shared counter."""
    global _generator
    with _generator_lock:
        _generator = None
    reset_default_counter()
    get_logger().debug("generator torn down")


def get_generator():
    global _generator
    if _generator is None:
        with _generator_lock:
            if _generator is None:
                _generator = _build(load_config())
    return _generator


def generate():
    """New identifier for the current minute from the process-wide generator."""
    return get_generator().generate()


def must_generate(generator=None):
    """Like generate(), but any failure is logged as a crash and exits the process."""
    try:
        return (generator or get_generator()).generate()
    except MiniUlidError as exc:
        crash.log_crash(type(exc), exc, exc.__traceback__)
        raise SystemExit(1) from exc
