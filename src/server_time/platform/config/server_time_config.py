"""
Runtime config loader for server clock display and logging settings.

Docs: docs/architecture/server_clock/server-clock-dst-window-v1.md
Related: server_time.contexts.server_clock.adapters.outbound.rendering,
  apps.cli.main.main
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timezone, tzinfo
from pathlib import Path
from typing import Any, Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

log = logging.getLogger(__name__)

_ENV_NAME_KEY = "SERVER_TIME_ENV"
_CONFIG_PATH_KEY = "SERVER_TIME_CONFIG"
_ALLOWED_ENVS = ("dev", "prod", "test")

_DISPLAY_TIMEZONE_ENV_KEYS = ("SERVER_TIME_DISPLAY_TIMEZONE",)
_DISPLAY_FORMAT_ENV_KEYS = ("SERVER_TIME_DISPLAY_FORMAT",)
_LOG_LEVEL_ENV_KEYS = ("SERVER_TIME_LOG_LEVEL",)

_LOCAL_TIMEZONE = "local"
_UTC_TIMEZONE = "UTC"
_ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_DEFAULT_DISPLAY_TIMEZONE = _LOCAL_TIMEZONE
_DEFAULT_DISPLAY_FORMAT = "%c"
_DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True, slots=True)
class ServerTimeConfig:
    """
    Immutable runtime config for server clock rendering and logging.

    The DST rule and server offsets are fixed and intentionally absent here.

    Docs: docs/architecture/server_clock/server-clock-dst-window-v1.md
    Related: server_time.contexts.server_clock.adapters.outbound.rendering.strftime_renderer
    """

    display_timezone: str = _DEFAULT_DISPLAY_TIMEZONE
    display_format: str = _DEFAULT_DISPLAY_FORMAT
    log_level: str = _DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        """
        Validate display and logging invariants.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            IANA names are resolvable through `zoneinfo` on the host.
        Raises:
            ValueError: If any value violates required bounds.
        Side Effects:
            Normalizes log level to upper case and strips string fields.
        """
        display_timezone = self.display_timezone.strip()
        if not display_timezone:
            raise ValueError("display_timezone must be non-empty")
        if not self.display_format.strip():
            raise ValueError("display_format must be non-empty")
        log_level = self.log_level.strip().upper()
        if log_level not in _ALLOWED_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {_ALLOWED_LOG_LEVELS}, got {self.log_level!r}"
            )

        object.__setattr__(self, "display_timezone", display_timezone)
        object.__setattr__(self, "log_level", log_level)
        _resolve_tzinfo(display_timezone)

    def display_tzinfo(self) -> tzinfo | None:
        """
        Resolve configured display timezone.

        Args:
            None.
        Returns:
            tzinfo | None: `None` for host local time, tzinfo otherwise.
        Assumptions:
            Value was validated during initialization.
        Raises:
            None.
        Side Effects:
            May read tz database files.
        """
        return _resolve_tzinfo(self.display_timezone)


def load_server_time_config(
    *,
    environ: Mapping[str, str],
) -> ServerTimeConfig:
    """
    Load server clock runtime config from YAML and env overrides.

    Args:
        environ: Environment mapping used to resolve env and override values.
    Returns:
        ServerTimeConfig: Validated runtime settings.
    Assumptions:
        Optional `server_time` section lives in the YAML file. A missing env-derived
        `configs/<env>/server_time.yaml` means built-in defaults plus env overrides.
    Raises:
        FileNotFoundError: If explicit `SERVER_TIME_CONFIG` path does not exist.
        ValueError: If YAML or environment values are invalid.
    Side Effects:
        Reads at most one YAML file from disk.
    """
    config_path = _resolve_config_path(environ=environ)
    explicit = bool(environ.get(_CONFIG_PATH_KEY, "").strip())
    if not explicit and not config_path.exists():
        log.info("server time config %s not found, using defaults", config_path)
        payload: Mapping[str, Any] = {}
    else:
        payload = _load_server_time_payload(path=config_path)
    display_payload = _optional_section(payload=payload, key="display")
    logging_payload = _optional_section(payload=payload, key="logging")

    return ServerTimeConfig(
        display_timezone=_resolve_str_setting(
            environ=environ,
            env_keys=_DISPLAY_TIMEZONE_ENV_KEYS,
            payload=display_payload,
            payload_key="display.timezone",
            default=_DEFAULT_DISPLAY_TIMEZONE,
        ),
        display_format=_resolve_str_setting(
            environ=environ,
            env_keys=_DISPLAY_FORMAT_ENV_KEYS,
            payload=display_payload,
            payload_key="display.format",
            default=_DEFAULT_DISPLAY_FORMAT,
        ),
        log_level=_resolve_str_setting(
            environ=environ,
            env_keys=_LOG_LEVEL_ENV_KEYS,
            payload=logging_payload,
            payload_key="logging.level",
            default=_DEFAULT_LOG_LEVEL,
        ),
    )


def _resolve_config_path(*, environ: Mapping[str, str]) -> Path:
    """
    Resolve YAML path using explicit override or `SERVER_TIME_ENV`.

    Args:
        environ: Environment mapping.
    Returns:
        Path: Server time YAML path.
    Assumptions:
        `SERVER_TIME_CONFIG` has priority over env-derived path.
    Raises:
        ValueError: If env value is invalid.
    Side Effects:
        None.
    """
    override = environ.get(_CONFIG_PATH_KEY, "").strip()
    if override:
        return Path(override)

    raw_env = environ.get(_ENV_NAME_KEY, "dev").strip().lower()
    if raw_env not in _ALLOWED_ENVS:
        raise ValueError(
            f"{_ENV_NAME_KEY} must be one of {_ALLOWED_ENVS}, got {raw_env!r}"
        )
    return Path("configs") / raw_env / "server_time.yaml"


def _load_server_time_payload(*, path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"server time config not found: {path}")
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as error:
        raise ValueError(f"server time config is not valid YAML: {path}") from error
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError("server time config must be a mapping at top-level")

    section = raw.get("server_time")
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError("server_time section must be a mapping")
    return section


def _optional_section(*, payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    section = payload.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"server_time.{key} section must be a mapping")
    return section


def _resolve_str_setting(
    *,
    environ: Mapping[str, str],
    env_keys: tuple[str, ...],
    payload: Mapping[str, Any],
    payload_key: str,
    default: str,
) -> str:
    """
    Resolve string setting from env -> payload -> default precedence.

    Args:
        environ: Environment mapping.
        env_keys: Candidate env variable names by priority.
        payload: Parsed YAML subsection.
        payload_key: Dotted key name, last segment is looked up in payload.
        default: Fallback default value.
    Returns:
        str: Resolved non-empty value.
    Assumptions:
        Blank env values are treated as unset.
    Raises:
        ValueError: If YAML value is non-string or blank.
    Side Effects:
        None.
    """
    for env_key in env_keys:
        raw = environ.get(env_key, "").strip()
        if raw:
            return raw

    payload_value = payload.get(payload_key.rsplit(".", 1)[-1])
    if payload_value is None:
        return default
    if not isinstance(payload_value, str):
        raise ValueError(
            f"expected string for server_time.{payload_key}, "
            f"got {type(payload_value).__name__}"
        )
    if not payload_value.strip():
        raise ValueError(f"server_time.{payload_key} must be non-empty")
    return payload_value


def _resolve_tzinfo(name: str) -> tzinfo | None:
    if name.lower() == _LOCAL_TIMEZONE:
        return None
    if name.upper() == _UTC_TIMEZONE:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as error:
        raise ValueError(f"unknown display timezone {name!r}") from error


__all__ = [
    "ServerTimeConfig",
    "load_server_time_config",
]
