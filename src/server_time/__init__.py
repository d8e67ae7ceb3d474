from .clock import convert_to_user_local, get_server_time_iso
from .contexts.server_clock.application import INVALID_LOCAL_TIME, is_valid_local_time

__all__ = [
    "INVALID_LOCAL_TIME",
    "convert_to_user_local",
    "get_server_time_iso",
    "is_valid_local_time",
]
