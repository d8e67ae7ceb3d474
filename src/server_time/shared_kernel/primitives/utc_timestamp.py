from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True, slots=True)
class UtcTimestamp:
    """
    UtcTimestamp — absolute instant of the system, always held in UTC.

    Rules (docs/architecture/server_clock/server-clock-dst-window-v1.md):
    - input datetime must be timezone-aware (naive is forbidden)
    - value is stored in UTC
    - precision is truncated to milliseconds
    """

    value: datetime

    def __post_init__(self) -> None:
        dt = self.value

        # tzinfo may be set while utcoffset() still returns None.
        if dt.tzinfo is None or dt.utcoffset() is None:
            raise ValueError("UtcTimestamp requires a timezone-aware datetime (naive datetime is forbidden)")  # noqa: E501

        dt_utc = dt.astimezone(timezone.utc)

        # Truncate towards zero: rendered timestamps carry milliseconds only.
        ms = (dt_utc.microsecond // 1000) * 1000
        object.__setattr__(self, "value", dt_utc.replace(microsecond=ms))

    @property
    def millisecond(self) -> int:
        return self.value.microsecond // 1000

    def __str__(self) -> str:
        """
        ISO string in UTC with milliseconds and `Z` suffix.
        Example: 2025-03-30T02:00:00.000Z
        """
        s = self.value.isoformat(timespec="milliseconds")
        if s.endswith("+00:00"):
            s = s[:-6] + "Z"
        return s
