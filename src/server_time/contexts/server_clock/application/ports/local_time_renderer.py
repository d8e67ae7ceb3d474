from __future__ import annotations

from typing import Protocol

from server_time.shared_kernel.primitives import UtcTimestamp


class LocalTimeRenderer(Protocol):
    """
    LocalTimeRenderer — application port rendering an absolute instant for a human observer.

    Docs:
      - docs/architecture/server_clock/server-clock-dst-window-v1.md
    Related:
      - src/server_time/contexts/server_clock/application/use_cases/convert_to_user_local.py
      - src/server_time/contexts/server_clock/adapters/outbound/rendering/strftime_renderer.py
    """

    def render(self, instant: UtcTimestamp) -> str:
        """
        Render instant in observer's local timezone and formatting conventions.

        Args:
            instant: Absolute UTC instant.
        Returns:
            str: Human-readable local time string.
        Assumptions:
            Output format is host/locale specific and not part of any contract.
        Raises:
            None.
        Side Effects:
            May read host timezone and locale settings.
        """
        ...
