from __future__ import annotations

from datetime import datetime

import pytest

from lifeclock.controller import ClockController


class FakeScheduler:
    """Stands in for Tk's after/after_cancel with a manual clock."""

    def __init__(self) -> None:
        self.pending: dict[int, tuple[int, object]] = {}
        self.cancelled: list[int] = []
        self._next = 0

    def after(self, ms, func):
        self._next += 1
        self.pending[self._next] = (ms, func)
        return self._next

    def after_cancel(self, id):
        self.cancelled.append(id)
        self.pending.pop(id, None)

    def fire(self) -> None:
        assert len(self.pending) == 1, self.pending
        id, (_ms, func) = next(iter(self.pending.items()))
        del self.pending[id]
        func()


class FakeClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def sched():
    return FakeScheduler()


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 5, 17, 14, 5, 9, 123000))


@pytest.fixture
def ctl(sched, clock):
    return ClockController(scheduler=sched, clock=clock)
