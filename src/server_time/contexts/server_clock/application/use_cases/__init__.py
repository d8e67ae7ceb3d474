from .convert_to_user_local import (
    INVALID_LOCAL_TIME,
    ConvertToUserLocalUseCase,
    is_valid_local_time,
)
from .get_server_time import GetServerTimeUseCase
from .normalize_server_time import NormalizeServerTimeUseCase

__all__ = [
    "ConvertToUserLocalUseCase",
    "GetServerTimeUseCase",
    "INVALID_LOCAL_TIME",
    "NormalizeServerTimeUseCase",
    "is_valid_local_time",
]
