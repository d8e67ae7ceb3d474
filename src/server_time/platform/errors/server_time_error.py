from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class ServerTimeError(Exception):
    """
    ServerTimeError — invalid timestamp or config at a server clock boundary.

    `details` is a flat string mapping (offending value, input type) echoed
    to CLI users in the error payload.

    Docs:
      - docs/architecture/server_clock/server-clock-dst-window-v1.md
    Related:
      - src/server_time/contexts/server_clock/domain/server_timestamp.py
      - apps/cli/commands/server_time.py
    """

    code: str
    message: str
    details: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        """
        Strip code/message and freeze details into a key-sorted plain dict.

        Raises:
            ValueError: If `code` or `message` are blank.
        """
        code = self.code.strip()
        message = self.message.strip()
        if not code:
            raise ValueError("ServerTimeError.code must be non-empty")
        if not message:
            raise ValueError("ServerTimeError.message must be non-empty")

        object.__setattr__(self, "code", code)
        object.__setattr__(self, "message", message)
        if self.details is not None:
            details = {str(key): str(value) for key, value in sorted(self.details.items())}
            object.__setattr__(self, "details", details)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_payload(self) -> dict[str, Any]:
        """`{"error": {"code", "message", "details"}}` payload for CLI output."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": dict(self.details or {}),
            }
        }
