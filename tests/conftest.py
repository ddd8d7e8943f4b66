"""Pytest fixtures for all tests."""

import io
from datetime import datetime, timezone

import pytest

from miniulid import runtime
from miniulid.discriminator.counter import MonotonicCounter
from miniulid.internal.logging import LogLevel, StructuredLogger
from miniulid.utils import crash


@pytest.fixture(autouse=True)
def isolate_process_state():
    """Drop the default generator, logger and crash path after each test."""
    yield
    runtime.teardown()
    StructuredLogger.configure()
    crash.configure("logs/crash.log")


@pytest.fixture
def example_time():
    """2024-08-18T15:30:00Z, day 1691 minute 930."""
    return datetime(2024, 8, 18, 15, 30, tzinfo=timezone.utc)


@pytest.fixture
def counter():
    """Independent counter, not the process-wide one."""
    return MonotonicCounter()


@pytest.fixture
def log_stream():
    """Route structured logs into a buffer at DEBUG level."""
    stream = io.StringIO()
    StructuredLogger.configure(min_level=LogLevel.DEBUG, stream=stream)
    return stream
