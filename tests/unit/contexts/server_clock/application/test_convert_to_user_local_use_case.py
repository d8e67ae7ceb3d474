from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import pytest

from server_time.contexts.server_clock.adapters.outbound.rendering import (
    StrftimeLocalTimeRenderer,
)
from server_time.contexts.server_clock.application import (
    INVALID_LOCAL_TIME,
    ConvertToUserLocalUseCase,
    is_valid_local_time,
)
from server_time.platform.errors import ServerTimeError
from server_time.shared_kernel.primitives import UtcTimestamp


class _RecordingRenderer:
    """Renderer fake returning UTC ISO of the received instant."""

    def __init__(self) -> None:
        self.received: list[UtcTimestamp] = []

    def render(self, instant: UtcTimestamp) -> str:
        self.received.append(instant)
        return str(instant)


def test_convert_recovers_absolute_instant_before_rendering() -> None:
    renderer = _RecordingRenderer()
    use_case = ConvertToUserLocalUseCase(renderer=renderer)

    result = use_case.convert("2025-01-02T01:30:00.000+02:00")

    assert result == "2025-01-01T23:30:00.000Z"
    assert renderer.received == [UtcTimestamp(datetime(2025, 1, 1, 23, 30, tzinfo=timezone.utc))]
    assert is_valid_local_time(result)


def test_convert_returns_invalid_sentinel_for_malformed_input(
    caplog: pytest.LogCaptureFixture,
) -> None:
    renderer = _RecordingRenderer()
    use_case = ConvertToUserLocalUseCase(renderer=renderer)

    with caplog.at_level(logging.WARNING):
        result = use_case.convert("not-a-timestamp")

    assert result == INVALID_LOCAL_TIME
    assert not is_valid_local_time(result)
    assert renderer.received == []
    assert "not-a-timestamp" in caplog.text


def test_convert_treats_missing_offset_as_invalid() -> None:
    use_case = ConvertToUserLocalUseCase(renderer=_RecordingRenderer())
    assert use_case.convert("2025-07-01T03:00:00.000") == INVALID_LOCAL_TIME


def test_convert_treats_non_string_as_invalid() -> None:
    use_case = ConvertToUserLocalUseCase(renderer=_RecordingRenderer())
    assert use_case.convert(None) == INVALID_LOCAL_TIME  # type: ignore[arg-type]


def test_convert_strict_raises_on_malformed_input() -> None:
    use_case = ConvertToUserLocalUseCase(renderer=_RecordingRenderer())
    with pytest.raises(ServerTimeError) as exc_info:
        use_case.convert_strict("not-a-timestamp")
    assert exc_info.value.to_payload()["error"]["code"] == "invalid_timestamp"


def test_requires_renderer() -> None:
    with pytest.raises(ValueError):
        ConvertToUserLocalUseCase(renderer=None)  # type: ignore[arg-type]


def test_convert_returns_invalid_sentinel_for_instant_before_year_one() -> None:
    renderer = _RecordingRenderer()
    use_case = ConvertToUserLocalUseCase(renderer=renderer)

    assert use_case.convert("0001-01-01T00:00:00.000+05:00") == INVALID_LOCAL_TIME
    assert renderer.received == []


def test_convert_returns_invalid_sentinel_when_local_date_passes_year_9999(
    caplog: pytest.LogCaptureFixture,
) -> None:
    renderer = StrftimeLocalTimeRenderer(display_timezone=timezone(timedelta(hours=9)))
    use_case = ConvertToUserLocalUseCase(renderer=renderer)

    with caplog.at_level(logging.WARNING):
        result = use_case.convert("9999-12-31T23:00:00.000+00:00")

    assert result == INVALID_LOCAL_TIME
    assert "9999-12-31T23:00:00.000Z" in caplog.text


def test_convert_strict_raises_when_local_date_passes_year_9999() -> None:
    renderer = StrftimeLocalTimeRenderer(display_timezone=timezone(timedelta(hours=9)))
    use_case = ConvertToUserLocalUseCase(renderer=renderer)

    with pytest.raises(ServerTimeError) as exc_info:
        use_case.convert_strict("9999-12-31T23:00:00.000+00:00")
    assert exc_info.value.code == "invalid_timestamp"
