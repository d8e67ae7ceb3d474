from __future__ import annotations

from datetime import datetime, timezone

from server_time.contexts.server_clock.application.ports import Clock
from server_time.shared_kernel.primitives import UtcTimestamp


class SystemClock(Clock):
    """
    SystemClock — platform Clock implementation: "now" from system time.

    Returns UtcTimestamp(datetime.now(timezone.utc)).
    """

    def now(self) -> UtcTimestamp:
        return UtcTimestamp(datetime.now(timezone.utc))
