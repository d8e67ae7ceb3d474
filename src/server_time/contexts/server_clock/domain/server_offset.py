from __future__ import annotations

import logging
from datetime import timedelta, timezone
from enum import IntEnum

from server_time.shared_kernel.primitives import UtcTimestamp

from .dst_window import compute_dst_window

log = logging.getLogger(__name__)


class ServerOffset(IntEnum):
    """
    Whole-hour UTC offsets observed by the trading server clock.

    Docs: docs/architecture/server_clock/server-clock-dst-window-v1.md
    Related: .dst_window, .server_timestamp
    """

    STANDARD = 2
    SUMMER = 3

    @property
    def hours(self) -> int:
        return int(self)

    def as_timedelta(self) -> timedelta:
        return timedelta(hours=self.hours)

    def as_tzinfo(self) -> timezone:
        """Fixed-offset tzinfo, e.g. `UTC+03:00`."""
        return timezone(self.as_timedelta())

    def suffix(self) -> str:
        """ISO offset suffix with a literal `:00` minute field, e.g. `+03:00`."""
        sign = "+" if self.hours >= 0 else "-"
        return f"{sign}{abs(self.hours):02d}:00"


def resolve_offset(instant: UtcTimestamp) -> ServerOffset:
    """
    Resolve server offset for one UTC instant.

    Args:
        instant: UTC instant.
    Returns:
        ServerOffset: `SUMMER` inside the DST window of the instant's own UTC year,
            `STANDARD` otherwise.
    Assumptions:
        Only the instant's calendar year is consulted; windows of adjacent years are ignored.
    Raises:
        ValueError: If the instant's year cannot carry a window (see `compute_dst_window`).
    Side Effects:
        None.
    """
    window = compute_dst_window(instant.value.year)
    offset = ServerOffset.SUMMER if window.contains(instant) else ServerOffset.STANDARD
    log.debug("resolved server offset %s for %s (window %s..%s)", offset.suffix(), instant, window.start, window.end)  # noqa: E501
    return offset
