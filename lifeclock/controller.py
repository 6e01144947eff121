"""
State container and run control for the Life Clock.

The ``ClockController`` owns every piece of mutable state the window
shows: the birth date fields, whether the clock is running, the latest
breakdown, the error line and the light/dark flag.  It is decoupled from
the toolkit: the periodic tick is armed through an injected scheduler
exposing Tk's ``after``/``after_cancel`` pair, and views learn about
changes by subscribing to the controller.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Optional, Protocol

from lifeclock.engine import (
    FIELDS,
    BirthDate,
    ElapsedBreakdown,
    IncompleteDateError,
    LifeClockError,
    compute,
)

log = logging.getLogger(__name__)


class Scheduler(Protocol):
    def after(self, ms: int, func: Callable[[], None]) -> Any: ...

    def after_cancel(self, id: Any) -> None: ...


class ClockController:
    """
    Holds the clock state and keeps the tick timer in step with it.

    Whenever the running flag or the birth date changes, the pending tick
    is cancelled and, if the clock is running, a new one is armed with a
    copy of the current birth date.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        clock: Callable[[], datetime] = datetime.now,
        tick_ms: int = 1000,
        dark_mode: bool = False,
    ) -> None:
        self.scheduler = scheduler
        self.clock = clock
        self.tick_ms = tick_ms

        self.birth_date = BirthDate()
        self.running = False
        self.elapsed: Optional[ElapsedBreakdown] = None
        self.error = ""
        self.dark_mode = dark_mode

        self._pending: Any = None
        self._listeners: list[Callable[[ClockController], None]] = []

    # --- Observers ---
    def subscribe(self, fn: Callable[[ClockController], None]) -> None:
        self._listeners.append(fn)

    def _notify(self) -> None:
        for fn in self._listeners:
            fn(self)

    # --- Input ---
    def set_field(self, name: str, value: str) -> None:
        """Replace a single birth date field, leaving the others untouched."""
        if name not in FIELDS:
            raise KeyError(name)
        if getattr(self.birth_date, name) == value:
            return
        self.birth_date = replace(self.birth_date, **{name: value})
        self._rearm()
        self._notify()

    # --- Run control ---
    def start(self) -> None:
        if self.running:
            return
        if not self.birth_date.is_complete():
            self.error = str(IncompleteDateError())
            log.warning("Start rejected: %s", self.error)
        else:
            log.info("Clock started for %s", self.birth_date)
            self.running = True
            self._rearm()
        self._notify()

    def reset(self) -> None:
        log.info("Clock reset")
        self.running = False
        self.elapsed = None
        self.birth_date = BirthDate()
        self.error = ""
        self._rearm()
        self._notify()

    def set_display_mode(self, dark: bool) -> None:
        if self.dark_mode == bool(dark):
            return
        self.dark_mode = bool(dark)
        self._notify()

    def toggle_display_mode(self) -> None:
        self.set_display_mode(not self.dark_mode)

    def shutdown(self) -> None:
        """Cancel any pending tick, typically when the window closes."""
        self._disarm()

    # --- Timer ---
    def _disarm(self) -> None:
        if self._pending is not None:
            log.debug("Disarming tick %r", self._pending)
            self.scheduler.after_cancel(self._pending)
            self._pending = None

    def _arm(self, snapshot: BirthDate) -> None:
        self._pending = self.scheduler.after(self.tick_ms, lambda: self._fire(snapshot))
        log.debug("Armed tick %r for %s", self._pending, snapshot)

    def _rearm(self) -> None:
        self._disarm()
        if self.running:
            # BirthDate is frozen, so the snapshot cannot change under the timer.
            self._arm(self.birth_date)

    def _fire(self, snapshot: BirthDate) -> None:
        self._pending = None
        self.tick(snapshot)
        if self.running and self._pending is None:
            self._arm(snapshot)

    def tick(self, snapshot: Optional[BirthDate] = None) -> None:
        """Recompute the breakdown for ``snapshot`` (default: current date)."""
        birth = snapshot if snapshot is not None else self.birth_date
        if not birth.is_complete():
            return
        try:
            self.elapsed = compute(birth, self.clock())
        except LifeClockError as exc:
            log.warning("Stopping clock: %s", exc)
            self.error = str(exc)
            self.running = False
            self._disarm()
        else:
            self.error = ""
        self._notify()
