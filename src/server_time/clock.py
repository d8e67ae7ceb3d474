"""
Module-level entry points wired with system adapters.

    from server_time import convert_to_user_local, get_server_time_iso

    server_iso = get_server_time_iso()          # '2025-07-01T03:00:00.000+03:00'
    user_local = convert_to_user_local(server_iso)

Callers needing deterministic time or custom rendering build the use-cases
from `server_time.contexts.server_clock.application` directly.
"""

from __future__ import annotations

from server_time.contexts.server_clock.adapters.outbound.rendering import (
    StrftimeLocalTimeRenderer,
)
from server_time.contexts.server_clock.application import (
    ConvertToUserLocalUseCase,
    GetServerTimeUseCase,
)
from server_time.platform.time import SystemClock


def get_server_time_iso() -> str:
    """Current server time as offset-qualified ISO-8601 string."""
    return GetServerTimeUseCase(clock=SystemClock()).get_server_time_iso()


def convert_to_user_local(server_timestamp: str) -> str:
    """Host-local, locale-formatted rendering of a server timestamp, or `INVALID_LOCAL_TIME`."""
    return ConvertToUserLocalUseCase(renderer=StrftimeLocalTimeRenderer()).convert(server_timestamp)
