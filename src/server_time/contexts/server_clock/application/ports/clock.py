from __future__ import annotations

from typing import Protocol

from server_time.shared_kernel.primitives import UtcTimestamp


class Clock(Protocol):
    """
    Clock — source of "current time" for server clock use-cases, in UTC.

    Contract:
    - now() -> UtcTimestamp
    - a failing read propagates; there is no synthetic fallback time
    """

    def now(self) -> UtcTimestamp:
        ...
