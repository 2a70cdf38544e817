from datetime import datetime, timedelta, timezone

import pytest


class StepClock:
    """Returns 2026-06-14 18:00 UTC, then one minute later on every call."""

    start = datetime(2026, 6, 14, 18, 0, tzinfo=timezone.utc)

    def __init__(self):
        self._next = self.start

    def __call__(self) -> datetime:
        now = self._next
        self._next = now + timedelta(minutes=1)
        return now


@pytest.fixture
def clock() -> StepClock:
    return StepClock()
