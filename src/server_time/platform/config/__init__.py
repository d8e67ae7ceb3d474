from .server_time_config import ServerTimeConfig, load_server_time_config

__all__ = [
    "ServerTimeConfig",
    "load_server_time_config",
]
