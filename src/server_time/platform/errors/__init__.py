from .server_time_error import ServerTimeError

__all__ = ["ServerTimeError"]
