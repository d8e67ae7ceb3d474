from __future__ import annotations

from datetime import datetime, timedelta

from server_time.platform.errors import ServerTimeError
from server_time.shared_kernel.primitives import UtcTimestamp

from .server_offset import ServerOffset, resolve_offset

INVALID_TIMESTAMP_CODE = "invalid_timestamp"


def render_server_timestamp(instant: UtcTimestamp) -> str:
    """
    Render UTC instant as server wall-clock ISO string with explicit offset.

    Args:
        instant: UTC instant.
    Returns:
        str: `YYYY-MM-DDTHH:mm:ss.sss+HH:00` where calendar fields are the UTC
            instant shifted by the resolved server offset.
    Assumptions:
        Server offset is whole-hour, so minutes, seconds and milliseconds never shift.
    Raises:
        ValueError: If the instant's year cannot carry a DST window.
        OverflowError: If the server wall-clock date rolls past 9999-12-31.
    Side Effects:
        None.
    """
    offset = resolve_offset(instant)
    utc = instant.value

    day = utc.date()
    hour = utc.hour + offset.hours
    if hour >= 24:
        hour -= 24
        day += timedelta(days=1)
    elif hour < 0:
        hour += 24
        day -= timedelta(days=1)

    return (
        f"{day.year:04d}-{day.month:02d}-{day.day:02d}T"
        f"{hour:02d}:{utc.minute:02d}:{utc.second:02d}.{instant.millisecond:03d}"
        f"{offset.suffix()}"
    )


def parse_server_timestamp(text: str) -> UtcTimestamp:
    """
    Parse offset-qualified ISO-8601 timestamp into absolute UTC instant.

    Args:
        text: Timestamp such as `2025-01-02T01:30:00.000+02:00` or `...Z`.
    Returns:
        UtcTimestamp: Instant with the embedded offset discounted.
    Assumptions:
        Any form accepted by `datetime.fromisoformat` is allowed if it carries an offset.
    Raises:
        ServerTimeError: If text is not a string, not ISO-8601, has no offset,
            or its UTC instant falls outside the `datetime` range.
    Side Effects:
        None.
    """
    if not isinstance(text, str):
        raise ServerTimeError(
            code=INVALID_TIMESTAMP_CODE,
            message="timestamp must be a string",
            details={"type": type(text).__name__},
        )

    raw = text.strip()
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ServerTimeError(
            code=INVALID_TIMESTAMP_CODE,
            message="timestamp is not valid ISO-8601",
            details={"value": raw},
        ) from exc

    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise ServerTimeError(
            code=INVALID_TIMESTAMP_CODE,
            message="timestamp must carry an explicit UTC offset",
            details={"value": raw},
        )
    try:
        return UtcTimestamp(parsed)
    except (OverflowError, ValueError) as exc:
        raise ServerTimeError(
            code=INVALID_TIMESTAMP_CODE,
            message="timestamp is outside the supported UTC range",
            details={"value": raw},
        ) from exc


def to_server_datetime(instant: UtcTimestamp) -> datetime:
    """Aware datetime in the fixed server offset resolved for the instant."""
    offset: ServerOffset = resolve_offset(instant)
    return instant.value.astimezone(offset.as_tzinfo())
