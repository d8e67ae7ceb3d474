from __future__ import annotations

import logging

from server_time.contexts.server_clock.application.ports import LocalTimeRenderer
from server_time.contexts.server_clock.domain import INVALID_TIMESTAMP_CODE, parse_server_timestamp
from server_time.platform.errors import ServerTimeError

log = logging.getLogger(__name__)

INVALID_LOCAL_TIME = "Invalid Date"


def is_valid_local_time(text: str) -> bool:
    """Tell a rendered local time apart from the `INVALID_LOCAL_TIME` sentinel."""
    return text != INVALID_LOCAL_TIME


class ConvertToUserLocalUseCase:
    """
    ConvertToUserLocalUseCase — turn a server timestamp into observer's local display string.

    Docs:
      - docs/architecture/server_clock/server-clock-dst-window-v1.md
    Related:
      - src/server_time/contexts/server_clock/application/ports/local_time_renderer.py
      - src/server_time/contexts/server_clock/adapters/outbound/rendering/strftime_renderer.py
    """

    def __init__(self, *, renderer: LocalTimeRenderer) -> None:
        """
        Initialize use-case with local rendering dependency.

        Args:
            renderer: Local time rendering port.
        Returns:
            None.
        Assumptions:
            Renderer output format is locale-specific.
        Raises:
            ValueError: If dependency is missing.
        Side Effects:
            None.
        """
        if renderer is None:  # type: ignore[truthy-bool]
            raise ValueError("ConvertToUserLocalUseCase requires renderer")
        self._renderer = renderer

    def convert(self, server_timestamp: str) -> str:
        """
        Convert offset-qualified timestamp to local display string.

        Args:
            server_timestamp: Timestamp produced by `GetServerTimeUseCase.get_server_time_iso`.
        Returns:
            str: Rendered local time, or `INVALID_LOCAL_TIME` when input cannot be parsed.
        Assumptions:
            Parse failures are degraded results for the caller, not fatal errors.
        Raises:
            None.
        Side Effects:
            Logs one warning on parse or rendering failure.
        """
        try:
            instant = parse_server_timestamp(server_timestamp)
        except ServerTimeError as exc:
            log.warning("cannot convert server timestamp %r: %s", server_timestamp, exc.message)
            return INVALID_LOCAL_TIME
        try:
            return self._renderer.render(instant)
        except (OverflowError, ValueError) as exc:
            log.warning("cannot render %s in local time: %s", instant, exc)
            return INVALID_LOCAL_TIME

    def convert_strict(self, server_timestamp: str) -> str:
        """
        Same as `convert`, but raise on invalid input.

        Raises:
            ServerTimeError: If input is not a valid offset-qualified timestamp
                or cannot be represented in the display timezone.
        """
        instant = parse_server_timestamp(server_timestamp)
        try:
            return self._renderer.render(instant)
        except (OverflowError, ValueError) as exc:
            raise ServerTimeError(
                code=INVALID_TIMESTAMP_CODE,
                message="timestamp cannot be rendered in the display timezone",
                details={"value": str(instant)},
            ) from exc
