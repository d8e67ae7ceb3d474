from datetime import datetime, timedelta, timezone

import pytest

from server_time.shared_kernel.primitives import TimeRange, UtcTimestamp


def test_utc_timestamp_rejects_naive_datetime() -> None:
    with pytest.raises(ValueError):
        UtcTimestamp(datetime(2025, 1, 1, 12, 0))


def test_utc_timestamp_normalizes_to_utc_and_truncates_to_milliseconds() -> None:
    plus_three = timezone(timedelta(hours=3))
    ts = UtcTimestamp(datetime(2025, 7, 1, 3, 0, 0, 123999, tzinfo=plus_three))

    assert ts.value == datetime(2025, 7, 1, 0, 0, 0, 123000, tzinfo=timezone.utc)
    assert ts.millisecond == 123
    assert str(ts) == "2025-07-01T00:00:00.123Z"


def test_time_range_is_half_open() -> None:
    start = UtcTimestamp(datetime(2025, 3, 9, 2, 0, tzinfo=timezone.utc))
    end = UtcTimestamp(datetime(2025, 11, 2, 2, 0, tzinfo=timezone.utc))
    tr = TimeRange(start=start, end=end)

    assert tr.contains(start)
    assert not tr.contains(end)
    assert tr.contains(UtcTimestamp(end.value - timedelta(milliseconds=1)))


def test_time_range_requires_start_before_end() -> None:
    ts = UtcTimestamp(datetime(2025, 3, 9, 2, 0, tzinfo=timezone.utc))
    with pytest.raises(ValueError):
        TimeRange(start=ts, end=ts)
