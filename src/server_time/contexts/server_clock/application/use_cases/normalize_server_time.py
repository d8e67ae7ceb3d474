from __future__ import annotations

import logging
from datetime import timedelta

from server_time.contexts.server_clock.application.ports import Clock
from server_time.contexts.server_clock.domain import resolve_offset
from server_time.shared_kernel.primitives import UtcTimestamp

log = logging.getLogger(__name__)

_SHIFT_TOLERANCE = timedelta(minutes=30)


class NormalizeServerTimeUseCase:
    """
    NormalizeServerTimeUseCase — reconcile feed instants that may already carry the server shift.

    Some feeds store server wall-clock time as if it were UTC. A value roughly one server
    offset ahead of "now" is treated as shifted and moved back to true UTC; any other value
    is treated as raw UTC and moved forward into server wall-clock-as-UTC.

    Docs:
      - docs/architecture/server_clock/server-clock-dst-window-v1.md
    Related:
      - src/server_time/contexts/server_clock/domain/server_offset.py
    """

    def __init__(self, *, clock: Clock) -> None:
        if clock is None:  # type: ignore[truthy-bool]
            raise ValueError("NormalizeServerTimeUseCase requires clock")
        self._clock = clock

    def normalize(self, value: UtcTimestamp) -> UtcTimestamp:
        """
        Shift value by the current server offset in the direction implied by its distance to now.

        Args:
            value: Instant read from a feed.
        Returns:
            UtcTimestamp: `value - offset` when `value - now` is within 30 minutes of the
                offset, otherwise `value + offset`.
        Assumptions:
            Offset is resolved for the clock reading, not for the value.
        Raises:
            Exception: Whatever the clock raises.
        Side Effects:
            Reads clock.
        """
        now = self._clock.now()
        shift = resolve_offset(now).as_timedelta()
        ahead_by = value.value - now.value

        if abs(ahead_by - shift) < _SHIFT_TOLERANCE:
            log.debug("value %s already carries server shift, moving back by %s", value, shift)
            return UtcTimestamp(value.value - shift)
        return UtcTimestamp(value.value + shift)
