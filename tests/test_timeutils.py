from datetime import datetime
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from deareader.timeutils import (
    SECONDS_IN_HOUR,
    SECONDS_IN_WEEK,
    DstChange,
    DstMonitor,
    day_start_index,
    increment_packed_time,
    is_daytime,
    is_today,
    month_start_time,
    pack_date,
    packed_time_delta,
    packed_to_datetime,
    packed_to_timestamp,
    unpack_date,
    week_start_time,
    year_start_time,
)


def _local(*fields):
    return datetime(*fields).timestamp()


@pytest.mark.parametrize("date", [(2021, 3, 4), (2000, 1, 1), (2063, 12, 31)])
def test_pack_unpack_round_trip(date):
    assert unpack_date(pack_date(*date)) == date


def test_packed_to_datetime():
    assert packed_to_datetime(pack_date(2021, 6, 15), 1230) == datetime(2021, 6, 15, 12, 30)


def test_packed_to_datetime_rolls_over_midnight():
    assert packed_to_datetime(pack_date(2021, 6, 30), 2400) == datetime(2021, 7, 1, 0, 0)


def test_packed_to_timestamp_round_trip():
    stamp = packed_to_timestamp(pack_date(2021, 6, 15), 1230)
    assert datetime.fromtimestamp(stamp) == datetime(2021, 6, 15, 12, 30)


def test_packed_time_delta_is_antisymmetric():
    date = pack_date(2021, 6, 15)
    forward = packed_time_delta(date, 1230, date, 1000)
    assert forward == 150
    assert packed_time_delta(date, 1000, date, 1230) == -forward


def test_packed_time_delta_over_a_day():
    assert packed_time_delta(pack_date(2021, 6, 16), 1000, pack_date(2021, 6, 15), 1000) == 24 * 60


def test_increment_zero_is_identity():
    assert increment_packed_time(1230, 0) == 1230


def test_increment_full_day_wraps_back():
    assert increment_packed_time(1230, 24 * 60) == 1230


def test_increment_allows_2400():
    assert increment_packed_time(2330, 30) == 2400


def test_increment_rolls_past_2400():
    assert increment_packed_time(2330, 45) == 15


@pytest.mark.parametrize(
    "hour,minute,expected",
    [(5, 0, False), (6, 0, True), (12, 0, True), (17, 59, True), (18, 0, False), (23, 0, False)],
)
def test_is_daytime_normal(hour, minute, expected):
    assert is_daytime(600, 1800, _local(2021, 6, 15, hour, minute)) is expected


@pytest.mark.parametrize(
    "hour,expected",
    [(3, True), (4, False), (12, False), (20, True), (23, True)],
)
def test_is_daytime_inverted(hour, expected):
    assert is_daytime(2000, 400, _local(2021, 6, 15, hour, 0)) is expected


def test_is_daytime_always_day_and_night():
    now = _local(2021, 6, 15, 3, 0)
    assert is_daytime(-1, 0, now) is True
    assert is_daytime(-2, 0, now) is False


def test_day_start_index():
    index = day_start_index(5, _local(2021, 6, 15, 10, 37, 42))
    assert index == 127
    assert 0 <= index < 1440 // 5


def test_day_start_index_rejects_zero_interval():
    with pytest.raises(ValueError):
        day_start_index(0, _local(2021, 6, 15, 10, 0))


def test_week_start_time():
    now = _local(2021, 6, 15, 10, 37)
    start = week_start_time(now)
    assert datetime.fromtimestamp(start) == datetime(2021, 6, 8, 9, 0)
    assert SECONDS_IN_WEEK <= now - start <= SECONDS_IN_WEEK + 2 * SECONDS_IN_HOUR


def test_month_start_time():
    start = month_start_time(_local(2021, 6, 15, 10, 37))
    assert datetime.fromtimestamp(start) == datetime(2021, 5, 18, 9, 0)


def test_year_start_time():
    start = year_start_time(5, _local(2021, 6, 15, 10, 37))
    assert datetime.fromtimestamp(start) == datetime(2020, 6, 15, 0, 5)


def test_is_today():
    now = _local(2021, 6, 15, 12, 0)
    assert is_today(now, now) is True
    assert is_today(_local(2021, 6, 15, 0, 1), now) is True
    assert is_today(_local(2021, 6, 13, 12, 0), now) is False


def test_dst_monitor_detects_transitions():
    states = {0: 0, 1: 1, 2: 1, 3: 0}
    clock = iter([0, 1, 2, 3]).__next__
    with patch("time.localtime", side_effect=lambda t: SimpleNamespace(tm_isdst=states[t])):
        monitor = DstMonitor(clock)
        assert monitor.check() is DstChange.SPRING_FORWARD
        assert monitor.check() is DstChange.NO_CHANGE
        assert monitor.check() is DstChange.FALL_BACK