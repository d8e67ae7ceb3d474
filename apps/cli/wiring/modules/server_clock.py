from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from server_time.contexts.server_clock.adapters.outbound.rendering import (
    StrftimeLocalTimeRenderer,
)
from server_time.contexts.server_clock.application import (
    Clock,
    ConvertToUserLocalUseCase,
    GetServerTimeUseCase,
)
from server_time.platform.config import ServerTimeConfig, load_server_time_config
from server_time.platform.time import SystemClock


@dataclass(frozen=True, slots=True)
class ServerClockWiring:
    """
    Composition root for the `server-time` CLI.

    Env is the source of truth for config location and overrides.
    """

    environ: Mapping[str, str]

    def config(self) -> ServerTimeConfig:
        """
        Load runtime config for the current environment.

        Errors/Exceptions:
        - Propagates FileNotFoundError / ValueError from the config loader.
        """
        return load_server_time_config(environ=self.environ)

    def get_server_time(self, *, clock: Clock | None = None) -> GetServerTimeUseCase:
        return GetServerTimeUseCase(clock=clock if clock is not None else SystemClock())

    def convert_to_user_local(self, *, config: ServerTimeConfig) -> ConvertToUserLocalUseCase:
        renderer = StrftimeLocalTimeRenderer(
            display_timezone=config.display_tzinfo(),
            display_format=config.display_format,
        )
        return ConvertToUserLocalUseCase(renderer=renderer)
