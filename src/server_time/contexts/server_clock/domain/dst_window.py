from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta, timezone

from server_time.shared_kernel.primitives import TimeRange, UtcTimestamp

DST_SWITCH_HOUR_UTC = 2
_MARCH = 3
_NOVEMBER = 11
_SUNDAY = 6


@dataclass(frozen=True, slots=True)
class DstWindow:
    """
    DstWindow — yearly [start, end) interval in which the server applies its summer offset.

    Docs:
      - docs/architecture/server_clock/server-clock-dst-window-v1.md
    Related:
      - src/server_time/contexts/server_clock/domain/server_offset.py
      - src/server_time/shared_kernel/primitives/time_range.py
    """

    year: int
    bounds: TimeRange

    @property
    def start(self) -> UtcTimestamp:
        return self.bounds.start

    @property
    def end(self) -> UtcTimestamp:
        return self.bounds.end

    def contains(self, instant: UtcTimestamp) -> bool:
        """
        Check whether instant falls into the window with [start, end) semantics.

        Args:
            instant: UTC instant to test.
        Returns:
            bool: True when `start <= instant < end`.
        Assumptions:
            Caller picked the window for the instant's own calendar year.
        Raises:
            None.
        Side Effects:
            None.
        """
        return self.bounds.contains(instant)


def compute_dst_window(year: int) -> DstWindow:
    """
    Compute server DST window for one calendar year.

    Args:
        year: Calendar year.
    Returns:
        DstWindow: From the second Sunday of March 02:00 UTC to the first Sunday
            of November 02:00 UTC.
    Assumptions:
        The rule is fixed and identical for every year; windows never cross a year boundary.
    Raises:
        ValueError: If year is outside the range supported by `datetime` (1..9999).
            Server timestamps rendered from 9999-12-31 22:00 UTC on overflow the
            same upper bound, see `render_server_timestamp`.
    Side Effects:
        None.
    """
    if type(year) is bool or not isinstance(year, int):  # noqa: E721
        raise ValueError(f"year must be int, got {year!r}")
    if not MINYEAR <= year <= MAXYEAR:
        raise ValueError(f"year must be in [{MINYEAR}, {MAXYEAR}], got {year}")

    start_day = first_sunday(year=year, month=_MARCH) + timedelta(days=7)
    end_day = first_sunday(year=year, month=_NOVEMBER)
    return DstWindow(
        year=year,
        bounds=TimeRange(start=_at_switch_hour(start_day), end=_at_switch_hour(end_day)),
    )


def first_sunday(*, year: int, month: int) -> date:
    """
    Return the first Sunday of a month.

    Args:
        year: Calendar year.
        month: Calendar month, 1-12.
    Returns:
        date: Day `1 + ((7 - weekday_of_day_1) mod 7)` of the month, Sunday-based weekday.
    Assumptions:
        `date.weekday()` counts Monday as 0, so Sunday is 6.
    Raises:
        ValueError: If year/month are out of `date` range.
    Side Effects:
        None.
    """
    day_one = date(year, month, 1)
    return day_one + timedelta(days=(_SUNDAY - day_one.weekday()) % 7)


def _at_switch_hour(day: date) -> UtcTimestamp:
    return UtcTimestamp(
        datetime(day.year, day.month, day.day, DST_SWITCH_HOUR_UTC, tzinfo=timezone.utc)
    )
