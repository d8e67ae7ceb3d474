from .clock import Clock
from .local_time_renderer import LocalTimeRenderer

__all__ = [
    "Clock",
    "LocalTimeRenderer",
]
