from __future__ import annotations

from datetime import tzinfo

from server_time.contexts.server_clock.application.ports import LocalTimeRenderer
from server_time.shared_kernel.primitives import UtcTimestamp

DEFAULT_DISPLAY_FORMAT = "%c"


class StrftimeLocalTimeRenderer(LocalTimeRenderer):
    """
    StrftimeLocalTimeRenderer — `LocalTimeRenderer` adapter built on `datetime.strftime`.

    `%c` follows the process `LC_TIME` locale, so callers wanting the user's locale
    must call `locale.setlocale(locale.LC_TIME, "")` once at startup.

    Docs:
      - docs/architecture/server_clock/server-clock-dst-window-v1.md
    Related:
      - src/server_time/contexts/server_clock/application/ports/local_time_renderer.py
      - src/server_time/platform/config/server_time_config.py
    """

    def __init__(self, *, display_timezone: tzinfo | None = None, display_format: str = DEFAULT_DISPLAY_FORMAT) -> None:  # noqa: E501
        """
        Store target timezone and strftime pattern.

        Args:
            display_timezone: Target tzinfo, `None` means host local timezone.
            display_format: strftime pattern.
        Returns:
            None.
        Assumptions:
            Pattern is validated by config loader.
        Raises:
            ValueError: If pattern is blank.
        Side Effects:
            None.
        """
        if not display_format.strip():
            raise ValueError("display_format must be non-empty")
        self._display_timezone = display_timezone
        self._display_format = display_format

    def render(self, instant: UtcTimestamp) -> str:
        # astimezone(None) converts to host local time.
        local = instant.value.astimezone(self._display_timezone)
        return local.strftime(self._display_format)
