"""フラグレスポンスの形状検証"""

from __future__ import annotations

from typing import Any


def is_flag_status(data: dict[str, Any]) -> bool:
    """デコード済み JSON オブジェクトが FlagStatus の形をしているか判定する。

    name と id は str、enabled は bool でなければならない。型変換は行わない
    （文字列 "true" や 1 は enabled として認めない）。未知のキーは無視する。
    """
    return (
        "name" in data
        and "enabled" in data
        and "id" in data
        and isinstance(data["name"], str)
        and isinstance(data["enabled"], bool)
        and isinstance(data["id"], str)
    )
