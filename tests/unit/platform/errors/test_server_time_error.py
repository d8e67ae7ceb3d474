from __future__ import annotations

import pytest

from server_time.platform.errors import ServerTimeError


def test_server_time_error_normalizes_fields_and_payload() -> None:
    error = ServerTimeError(
        code=" invalid_timestamp ",
        message=" timestamp is not valid ISO-8601 ",
        details={"value": "x", "type": "str"},
    )

    payload = error.to_payload()

    assert payload["error"]["code"] == "invalid_timestamp"
    assert payload["error"]["message"] == "timestamp is not valid ISO-8601"
    assert list(payload["error"]["details"]) == ["type", "value"]
    assert str(error) == "invalid_timestamp: timestamp is not valid ISO-8601"


def test_server_time_error_without_details_has_empty_payload_details() -> None:
    error = ServerTimeError(code="c", message="m")
    assert error.to_payload() == {"error": {"code": "c", "message": "m", "details": {}}}


def test_server_time_error_rejects_blank_code() -> None:
    with pytest.raises(ValueError):
        ServerTimeError(code=" ", message="m")


def test_server_time_error_rejects_blank_message() -> None:
    with pytest.raises(ValueError):
        ServerTimeError(code="c", message="")


def test_server_time_error_is_raisable() -> None:
    with pytest.raises(ServerTimeError) as exc_info:
        raise ServerTimeError(code="c", message="m")
    assert exc_info.value.code == "c"
