"""HTTP レスポンスの分類"""

from __future__ import annotations

from typing import Any

import httpx

from .exceptions import APIError, InvalidResponseError
from .models import FlagStatus
from .validate import is_flag_status


def parse_flag_response(resp: httpx.Response) -> FlagStatus:
    """取得済みレスポンスを FlagStatus に変換する。

    判定順: ステータス → JSON デコード → オブジェクトか → フラグの形状。

    Raises:
        APIError: ステータスが 2xx 以外の場合
        InvalidResponseError: ボディが不正な場合
    """
    if not resp.is_success:
        raise APIError(
            f"API request failed with status {resp.status_code}",
            resp.status_code,
            resp.reason_phrase,
        )

    try:
        data: Any = resp.json()
    except ValueError as e:
        raise InvalidResponseError("Failed to parse JSON response", cause=e) from e

    if not isinstance(data, dict):
        raise InvalidResponseError("Invalid response format: response is not an object")
    if not is_flag_status(data):
        raise InvalidResponseError("Invalid response from server")

    return FlagStatus(name=data["name"], enabled=data["enabled"], id=data["id"])
