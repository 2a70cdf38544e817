"""Wall-clock source for game start times."""
from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone

_TICK = timedelta(microseconds=1)
_lock = threading.Lock()
_last: datetime | None = None


def utc_now() -> datetime:
    """Return the current UTC time, strictly later than any previous call.

    Two readings inside the same clock tick (or a wall clock stepping back)
    are pushed forward by one microsecond so start times never compare equal.
    """
    global _last
    with _lock:
        now = datetime.now(timezone.utc)
        if _last is not None and now <= _last:
            now = _last + _TICK
        _last = now
        return now
