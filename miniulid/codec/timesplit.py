"""Split a timestamp into (days since epoch, minute of day) and back."""

from datetime import datetime, timedelta, timezone

from miniulid.codec.bits import DAYS_BITS
from miniulid.core.errors import FutureRangeError, PastEpochError
from miniulid.utils.timestamp import to_utc

EPOCH = datetime(2020, 1, 1, tzinfo=timezone.utc)
MAX_DAYS = 1 << DAYS_BITS
MINUTES_PER_DAY = 24 * 60

_ONE_DAY = timedelta(days=1)


def split(t):
    """Return (days, minute) for t. Seconds and below are floored."""
    utc = to_utc(t)
    if utc < EPOCH:
        raise PastEpochError(f"time {utc.isoformat()} before {EPOCH.isoformat()}", time=utc)

    days = (utc - EPOCH) // _ONE_DAY
    if days >= MAX_DAYS:
        raise FutureRangeError(f"time {utc.isoformat()} beyond supported range", time=utc)

    return days, utc.hour * 60 + utc.minute


def compose(days, minute):
    """Inverse of split, with minute precision."""
    return EPOCH + timedelta(days=days, minutes=minute)


def truncate_to_minute(t):
    return to_utc(t).replace(second=0, microsecond=0)
