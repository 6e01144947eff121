"""
Elapsed-time arithmetic for the Life Clock.

This module turns a birth date typed by the user into the breakdown shown
on screen.  The years/months/days split is deliberately approximate: a
year is 365.25 days and a month is 30.44 days, and each remainder is taken
modulo its own period rather than modulo a calendar year.  The second
display row is the current time of day, not elapsed hours.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime, timedelta


MS_PER_DAY = 1000 * 60 * 60 * 24
# Evaluated in the same order as the display has always used so that the
# floating point results match exactly.
MS_PER_YEAR = 1000 * 60 * 60 * 24 * 365.25
MS_PER_MONTH = 1000 * 60 * 60 * 24 * 30.44

FIELDS = ("year", "month", "day")

_INTEGER_RE = re.compile(r"-?[0-9]+")


class LifeClockError(ValueError):
    """Base class for user-facing date errors."""

    message = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class IncompleteDateError(LifeClockError):
    message = "Please enter a valid date"


class InvalidDateError(LifeClockError):
    message = "Please enter a valid date"


class FutureDateError(LifeClockError):
    message = "Birth date cannot be in the future"


@dataclass(frozen=True)
class BirthDate:
    """Raw field values as typed; nothing is validated until use."""

    year: str = ""
    month: str = ""
    day: str = ""

    def is_complete(self) -> bool:
        return all(str(getattr(self, name)).strip() for name in FIELDS)


@dataclass(frozen=True)
class ElapsedBreakdown:
    years: int
    months: int
    days: int
    # time of day of ``now``
    hours: int
    minutes: int
    seconds: int
    milliseconds: int


def _parse_field(value: str) -> int:
    # Plain ASCII digits only; int() alone also takes "+7", "1_990" and
    # non-ASCII digits.
    text = str(value).strip()
    if not _INTEGER_RE.fullmatch(text):
        raise InvalidDateError()
    return int(text)


def birth_instant(birth: BirthDate) -> datetime:
    """
    Return local midnight of the given date.

    Out-of-range months and days roll over into neighbouring months and
    years (month 13 is January of the following year, day 0 is the last
    day of the previous month) instead of being rejected.
    """
    if not birth.is_complete():
        raise IncompleteDateError()
    year = _parse_field(birth.year)
    month = _parse_field(birth.month)
    day = _parse_field(birth.day)

    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        return datetime(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        raise InvalidDateError() from None


def elapsed_ms(birth: datetime, now: datetime) -> int:
    """Milliseconds of real elapsed time, accounting for DST changes."""
    return (now.astimezone() - birth.astimezone()) // timedelta(milliseconds=1)


def compute(birth: BirthDate, now: datetime) -> ElapsedBreakdown:
    """
    Compute the breakdown for ``birth`` as seen at ``now``.

    :param birth: The raw birth date fields.
    :param now: Naive local wall-clock time.
    :raises IncompleteDateError: if a field is empty.
    :raises InvalidDateError: if a field is not an integer or the date
        cannot be represented.
    :raises FutureDateError: if the birth instant is after ``now``.
    """
    start = birth_instant(birth)
    if start > now:
        raise FutureDateError()

    try:
        diff = float(elapsed_ms(start, now))
    except (OverflowError, OSError):
        # local time offset cannot be resolved this close to year 1
        raise InvalidDateError() from None
    years = math.floor(diff / MS_PER_YEAR)
    months = math.floor(math.fmod(diff, MS_PER_YEAR) / MS_PER_MONTH)
    days = math.floor(math.fmod(diff, MS_PER_MONTH) / MS_PER_DAY)

    return ElapsedBreakdown(
        years=years,
        months=months,
        days=days,
        hours=now.hour,
        minutes=now.minute,
        seconds=now.second,
        milliseconds=now.microsecond // 1000,
    )


def format_number(num: int) -> str:
    """Zero-pad to two digits; wider values are left intact."""
    return str(num).rjust(2, "0")


def format_date_row(b: ElapsedBreakdown) -> str:
    return ":".join(format_number(n) for n in (b.years, b.months, b.days))


def format_time_row(b: ElapsedBreakdown) -> str:
    return ":".join(
        format_number(n) for n in (b.hours, b.minutes, b.seconds, b.milliseconds)
    )
