from __future__ import annotations

import logging
from datetime import datetime

from server_time.contexts.server_clock.application.ports import Clock
from server_time.contexts.server_clock.domain import (
    ServerOffset,
    parse_server_timestamp,
    render_server_timestamp,
    resolve_offset,
    to_server_datetime,
)

log = logging.getLogger(__name__)


class GetServerTimeUseCase:
    """
    GetServerTimeUseCase — current trading server wall-clock time from an injected UTC clock.

    Docs:
      - docs/architecture/server_clock/server-clock-dst-window-v1.md
    Related:
      - src/server_time/contexts/server_clock/application/ports/clock.py
      - src/server_time/platform/time/system_clock.py
      - apps/cli/commands/server_time.py
    """

    def __init__(self, *, clock: Clock) -> None:
        """
        Initialize use-case with UTC clock dependency.

        Args:
            clock: UTC clock port.
        Returns:
            None.
        Assumptions:
            Clock returns normalized `UtcTimestamp` values.
        Raises:
            ValueError: If dependency is missing.
        Side Effects:
            None.
        """
        if clock is None:  # type: ignore[truthy-bool]
            raise ValueError("GetServerTimeUseCase requires clock")
        self._clock = clock

    def get_server_time_iso(self) -> str:
        """
        Render current server time as offset-qualified ISO-8601 string.

        Args:
            None.
        Returns:
            str: e.g. `2025-07-01T03:00:00.000+03:00`.
        Assumptions:
            Exactly one clock read per call.
        Raises:
            Exception: Whatever the clock raises; a missing clock reading is fatal.
        Side Effects:
            Reads clock.
        """
        now = self._clock.now()
        rendered = render_server_timestamp(now)
        log.debug("server time for utc=%s is %s", now, rendered)
        return rendered

    def get_server_time(self) -> datetime:
        """
        Return current server time as aware datetime in the fixed server offset.

        Args:
            None.
        Returns:
            datetime: Same instant as clock reading with `UTC+02:00` or `UTC+03:00` tzinfo.
        Assumptions:
            Wall-clock fields match `get_server_time_iso` for the same reading.
        Raises:
            Exception: Whatever the clock raises.
        Side Effects:
            Reads clock.
        """
        return to_server_datetime(self._clock.now())

    def get_offset_hours(self) -> ServerOffset:
        """Current server offset."""
        return resolve_offset(self._clock.now())

    @staticmethod
    def convert_utc_iso_to_server_iso(utc_iso: str) -> str:
        """
        Render an arbitrary offset-qualified timestamp as server timestamp.

        Args:
            utc_iso: ISO-8601 string with explicit offset or `Z`.
        Returns:
            str: Server timestamp for the same instant.
        Assumptions:
            Input offset is honoured, so any zone is accepted, not only UTC.
        Raises:
            ServerTimeError: If input is not a valid offset-qualified timestamp.
            OverflowError: If the server wall-clock date rolls past 9999-12-31.
        Side Effects:
            None.
        """
        return render_server_timestamp(parse_server_timestamp(utc_iso))
