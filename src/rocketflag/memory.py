"""InMemoryRocketFlagClient 実装"""

from __future__ import annotations

from .client import RocketFlagClient
from .exceptions import APIError
from .models import FlagStatus, UserContext
from .request import validate_flag_id, validate_user_context


class InMemoryRocketFlagClient(RocketFlagClient):
    """テスト用インメモリクライアント。"""

    def __init__(self) -> None:
        self._flags: dict[str, FlagStatus] = {}
        self.calls = 0

    def set_flag(self, flag: FlagStatus) -> None:
        """フラグを設定する。"""
        self._flags[flag.id] = flag

    async def get_flag(
        self, flag_id: str, user_context: UserContext | None = None
    ) -> FlagStatus:
        validate_flag_id(flag_id)
        validate_user_context(user_context)
        self.calls += 1
        flag = self._flags.get(flag_id)
        if flag is None:
            raise APIError("API request failed with status 404", 404, "Not Found")
        return flag
