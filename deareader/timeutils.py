"""Packed date/time helpers and local-time calculations."""

from __future__ import annotations

import time
from datetime import datetime, timedelta
from enum import IntEnum
from typing import Callable, Optional

SECONDS_IN_HOUR = 3600
SECONDS_IN_DAY = 86400
SECONDS_IN_WEEK = 7 * SECONDS_IN_DAY
SECONDS_IN_MONTH = 28 * SECONDS_IN_DAY
SECONDS_IN_YEAR = 365 * SECONDS_IN_DAY

ALWAYS_DAY = -1
ALWAYS_NIGHT = -2


class DstChange(IntEnum):
    """Kind of daylight saving transition observed between two checks."""

    NO_CHANGE = 0
    FALL_BACK = -1
    SPRING_FORWARD = 1


def pack_date(year: int, month: int, day: int) -> int:
    """Pack a calendar date into the 16-bit station date format."""
    return (((year - 2000) & 0x3F) << 9) | ((month & 0xF) << 5) | (day & 0x1F)


def unpack_date(packed: int) -> tuple[int, int, int]:
    """Split a packed date into (year, month, day)."""
    return ((packed >> 9) & 0x3F) + 2000, (packed >> 5) & 0xF, packed & 0x1F


def packed_to_datetime(packed_date: int, packed_time: int) -> datetime:
    """Return the naive local datetime for a packed date and time.

    Out-of-range fields roll over into the next unit, as calendar
    normalisation does (for example 24:00 becomes midnight of the next day).
    """
    year, month, day = unpack_date(packed_date)
    hour, minute = divmod(packed_time, 100)
    norm_year, month_index = divmod(year * 12 + month - 1, 12)
    return datetime(norm_year, month_index + 1, 1) + timedelta(
        days=day - 1, hours=hour, minutes=minute
    )


def packed_to_timestamp(packed_date: int, packed_time: int) -> int:
    """Return the epoch time of a packed local date and time."""
    return int(time.mktime(packed_to_datetime(packed_date, packed_time).timetuple()))


def packed_time_delta(new_date: int, new_time: int, old_date: int, old_time: int) -> int:
    """Minutes from the old packed date/time to the new one, truncated toward zero."""
    seconds = packed_to_timestamp(new_date, new_time) - packed_to_timestamp(old_date, old_time)
    minutes = abs(seconds) // 60
    return minutes if seconds >= 0 else -minutes


def increment_packed_time(packed_time: int, minutes: int) -> int:
    """Add minutes to a packed time; 24:00 is allowed, later times roll over."""
    minute = packed_time % 100 + minutes
    hour = packed_time // 100
    if minute >= 60:
        hour += minute // 60
        minute %= 60
    if hour > 24 or (hour == 24 and minute > 0):
        hour %= 24
    return (hour * 100 + minute) & 0xFFFF


def is_daytime(sunrise: int, sunset: int, now: Optional[float] = None) -> bool:
    """Tell whether the local time lies between packed sunrise and sunset."""
    if sunrise == ALWAYS_DAY:
        return True
    if sunrise == ALWAYS_NIGHT:
        return False

    local = time.localtime(now)
    current = (local.tm_hour, local.tm_min)
    rise = divmod(sunrise, 100)
    setting = divmod(sunset, 100)

    if rise > setting:
        if current < setting:
            return True
        return current >= rise
    if current < rise:
        return False
    return current < setting


def day_start_index(archive_interval: int, now: Optional[float] = None) -> int:
    """Index of the archive interval that started one day ago."""
    if archive_interval <= 0:
        raise ValueError("archive interval must be positive")
    local = time.localtime(now)
    floored = (local.tm_min // archive_interval) * archive_interval
    start = time.mktime(
        (
            local.tm_year,
            local.tm_mon,
            local.tm_mday,
            local.tm_hour,
            floored,
            0,
            local.tm_wday,
            local.tm_yday,
            local.tm_isdst,
        )
    )
    previous = time.localtime(int(start) - SECONDS_IN_DAY)
    return (60 * previous.tm_hour + previous.tm_min) // archive_interval


def _start_of_hour_before(now: Optional[float], span: int) -> int:
    moment = int(time.time() if now is None else now) - span - SECONDS_IN_HOUR
    local = time.localtime(moment)
    return int(
        time.mktime(
            (
                local.tm_year,
                local.tm_mon,
                local.tm_mday,
                local.tm_hour,
                0,
                local.tm_sec,
                local.tm_wday,
                local.tm_yday,
                local.tm_isdst,
            )
        )
    )


def week_start_time(now: Optional[float] = None) -> int:
    """Epoch time of the top of the hour starting a week-long history."""
    return _start_of_hour_before(now, SECONDS_IN_WEEK)


def month_start_time(now: Optional[float] = None) -> int:
    """Epoch time of the top of the hour starting a 28-day history."""
    return _start_of_hour_before(now, SECONDS_IN_MONTH)


def year_start_time(archive_interval: int, now: Optional[float] = None) -> int:
    """Epoch time of the first archive slot of the day one year ago."""
    moment = int(time.time() if now is None else now) - SECONDS_IN_YEAR - archive_interval * 60
    local = time.localtime(moment)
    midnight = time.mktime(
        (local.tm_year, local.tm_mon, local.tm_mday, 0, 0, 0, 0, 0, -1)
    )
    return int(midnight) + archive_interval * 60


def is_today(timestamp: float, now: Optional[float] = None) -> bool:
    """Tell whether the timestamp falls on the current local calendar day."""
    current = time.localtime(now)
    checked = time.localtime(timestamp)
    return (current.tm_year, current.tm_mon, current.tm_mday) == (
        checked.tm_year,
        checked.tm_mon,
        checked.tm_mday,
    )


class DstMonitor:
    """Detects daylight saving transitions between successive checks."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last_state = time.localtime(self._clock()).tm_isdst

    def check(self) -> DstChange:
        """Return the transition seen since the previous check, if any."""
        state = time.localtime(self._clock()).tm_isdst
        if state == self._last_state:
            return DstChange.NO_CHANGE
        change = DstChange.FALL_BACK if self._last_state != 0 else DstChange.SPRING_FORWARD
        self._last_state = state
        return change