from .ports import Clock, LocalTimeRenderer
from .use_cases import (
    INVALID_LOCAL_TIME,
    ConvertToUserLocalUseCase,
    GetServerTimeUseCase,
    NormalizeServerTimeUseCase,
    is_valid_local_time,
)

__all__ = [
    "Clock",
    "ConvertToUserLocalUseCase",
    "GetServerTimeUseCase",
    "INVALID_LOCAL_TIME",
    "LocalTimeRenderer",
    "NormalizeServerTimeUseCase",
    "is_valid_local_time",
]
