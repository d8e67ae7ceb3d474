from .strftime_renderer import DEFAULT_DISPLAY_FORMAT, StrftimeLocalTimeRenderer

__all__ = [
    "DEFAULT_DISPLAY_FORMAT",
    "StrftimeLocalTimeRenderer",
]
