from datetime import datetime, timedelta, timezone

import pytest

from object_store import Repository

START = datetime(2026, 10, 17, 9, 5, tzinfo=timezone(timedelta(hours=2)))


class StepClock:
    """Returns START, then one minute later on every call."""

    def __init__(self, start: datetime = START, step: timedelta = timedelta(minutes=1)):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + self.step
        return current


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def repo(clock: StepClock) -> Repository:
    return Repository(clock=clock)
