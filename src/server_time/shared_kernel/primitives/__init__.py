"""
Shared Kernel primitives.

Re-exports the time primitives so other modules import them from one place:

    from server_time.shared_kernel.primitives import TimeRange, UtcTimestamp
"""

from .time_range import TimeRange
from .utc_timestamp import UtcTimestamp

__all__ = [
    "TimeRange",
    "UtcTimestamp",
]
