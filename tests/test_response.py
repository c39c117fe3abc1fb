"""parse_flag_response のユニットテスト"""

import httpx
import pytest
from rocketflag import (
    APIError,
    FlagStatus,
    InvalidResponseError,
    RocketFlagErrorCodes,
    parse_flag_response,
)


def test_success() -> None:
    resp = httpx.Response(200, json={"name": "Dark Mode", "enabled": True, "id": "dark-mode"})
    assert parse_flag_response(resp) == FlagStatus(name="Dark Mode", enabled=True, id="dark-mode")


def test_non_success_status() -> None:
    """非 2xx はステータスとテキストを持つ APIError。"""
    resp = httpx.Response(503, json={"name": "n", "enabled": True, "id": "i"})
    with pytest.raises(APIError, match="503") as exc_info:
        parse_flag_response(resp)
    assert exc_info.value.status == 503
    assert exc_info.value.status_text == "Service Unavailable"
    assert exc_info.value.code == RocketFlagErrorCodes.API_ERROR


def test_undecodable_body() -> None:
    resp = httpx.Response(200, text="<html>oops</html>")
    with pytest.raises(InvalidResponseError, match="Failed to parse JSON response") as exc_info:
        parse_flag_response(resp)
    assert exc_info.value.__cause__ is not None


@pytest.mark.parametrize("content", [b'"hello"', b"42", b"[1, 2]", b"null"])
def test_body_not_an_object(content: bytes) -> None:
    resp = httpx.Response(200, content=content)
    with pytest.raises(InvalidResponseError, match="response is not an object"):
        parse_flag_response(resp)


def test_empty_object_fails_shape_check() -> None:
    resp = httpx.Response(200, json={})
    with pytest.raises(InvalidResponseError, match="Invalid response from server") as exc_info:
        parse_flag_response(resp)
    assert exc_info.value.code == RocketFlagErrorCodes.INVALID_RESPONSE
