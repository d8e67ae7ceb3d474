from .dst_window import DST_SWITCH_HOUR_UTC, DstWindow, compute_dst_window, first_sunday
from .server_offset import ServerOffset, resolve_offset
from .server_timestamp import (
    INVALID_TIMESTAMP_CODE,
    parse_server_timestamp,
    render_server_timestamp,
    to_server_datetime,
)

__all__ = [
    "DST_SWITCH_HOUR_UTC",
    "DstWindow",
    "INVALID_TIMESTAMP_CODE",
    "ServerOffset",
    "compute_dst_window",
    "first_sunday",
    "parse_server_timestamp",
    "render_server_timestamp",
    "resolve_offset",
    "to_server_datetime",
]
