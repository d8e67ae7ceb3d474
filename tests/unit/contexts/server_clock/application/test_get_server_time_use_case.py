from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from server_time.contexts.server_clock.application import GetServerTimeUseCase
from server_time.contexts.server_clock.domain import ServerOffset
from server_time.platform.errors import ServerTimeError
from server_time.platform.time import SystemClock
from server_time.shared_kernel.primitives import UtcTimestamp


class _FixedClock:
    """Clock fake returning deterministic UTC timestamp."""

    def __init__(self, now_value: UtcTimestamp) -> None:
        """Store fixed value returned by `now()` calls."""
        self._now_value = now_value
        self.calls = 0

    def now(self) -> UtcTimestamp:
        """Return preconfigured timestamp."""
        self.calls += 1
        return self._now_value


class _BrokenClock:
    """Clock fake emulating an unavailable system clock."""

    def now(self) -> UtcTimestamp:
        raise OSError("clock unavailable")


def _fixed(*args: int) -> _FixedClock:
    return _FixedClock(UtcTimestamp(datetime(*args, tzinfo=timezone.utc)))


def test_get_server_time_iso_rolls_over_to_next_day() -> None:
    clock = _fixed(2025, 1, 1, 23, 30)
    use_case = GetServerTimeUseCase(clock=clock)

    assert use_case.get_server_time_iso() == "2025-01-02T01:30:00.000+02:00"
    assert clock.calls == 1


def test_get_server_time_iso_in_summer() -> None:
    use_case = GetServerTimeUseCase(clock=_fixed(2025, 7, 1, 0, 0))
    assert use_case.get_server_time_iso() == "2025-07-01T03:00:00.000+03:00"


def test_get_server_time_iso_switches_offset_at_dst_start() -> None:
    before = GetServerTimeUseCase(clock=_fixed(2025, 3, 9, 1, 59, 59)).get_server_time_iso()
    at = GetServerTimeUseCase(clock=_fixed(2025, 3, 9, 2, 0, 0)).get_server_time_iso()

    assert before == "2025-03-09T03:59:59.000+02:00"
    assert at == "2025-03-09T05:00:00.000+03:00"


def test_get_server_time_returns_aware_datetime_in_server_offset() -> None:
    server_dt = GetServerTimeUseCase(clock=_fixed(2025, 1, 1, 23, 30)).get_server_time()

    assert server_dt.utcoffset() == timedelta(hours=2)
    assert server_dt == datetime(2025, 1, 1, 23, 30, tzinfo=timezone.utc)
    assert (server_dt.day, server_dt.hour, server_dt.minute) == (2, 1, 30)


def test_get_offset_hours() -> None:
    assert GetServerTimeUseCase(clock=_fixed(2025, 7, 1)).get_offset_hours() == ServerOffset.SUMMER
    assert GetServerTimeUseCase(clock=_fixed(2025, 12, 1)).get_offset_hours() == ServerOffset.STANDARD


def test_convert_utc_iso_to_server_iso() -> None:
    convert = GetServerTimeUseCase.convert_utc_iso_to_server_iso
    assert convert("2025-01-01T23:30:00.000Z") == "2025-01-02T01:30:00.000+02:00"
    assert convert("2025-07-01T05:00:00+05:00") == "2025-07-01T03:00:00.000+03:00"


def test_convert_utc_iso_to_server_iso_rejects_garbage() -> None:
    with pytest.raises(ServerTimeError):
        GetServerTimeUseCase.convert_utc_iso_to_server_iso("yesterday")


def test_clock_failure_propagates() -> None:
    with pytest.raises(OSError):
        GetServerTimeUseCase(clock=_BrokenClock()).get_server_time_iso()


def test_requires_clock() -> None:
    with pytest.raises(ValueError):
        GetServerTimeUseCase(clock=None)  # type: ignore[arg-type]


def test_system_clock_round_trip_within_one_second() -> None:
    before = datetime.now(timezone.utc)
    rendered = GetServerTimeUseCase(clock=SystemClock()).get_server_time_iso()
    after = datetime.now(timezone.utc)

    parsed = datetime.fromisoformat(rendered)
    assert parsed.utcoffset() in (timedelta(hours=2), timedelta(hours=3))
    assert before - timedelta(seconds=1) <= parsed <= after + timedelta(seconds=1)


def test_get_server_time_iso_overflows_on_last_supported_day() -> None:
    use_case = GetServerTimeUseCase(clock=_fixed(9999, 12, 31, 23, 30))
    with pytest.raises(OverflowError):
        use_case.get_server_time_iso()
