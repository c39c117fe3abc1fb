"""RocketFlagClient 抽象基底クラス"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self

from .exceptions import RocketFlagError
from .models import FlagResult, FlagStatus, UserContext


class RocketFlagClient(ABC):
    """フラグ取得クライアント抽象基底クラス。"""

    @abstractmethod
    async def get_flag(
        self, flag_id: str, user_context: UserContext | None = None
    ) -> FlagStatus:
        """フラグの評価結果を取得する。失敗時は RocketFlagError を送出する。"""
        ...

    async def is_enabled(
        self, flag_id: str, user_context: UserContext | None = None
    ) -> bool:
        """フラグが有効か判定する。"""
        flag = await self.get_flag(flag_id, user_context)
        return flag.enabled

    async def try_get_flag(
        self, flag_id: str, user_context: UserContext | None = None
    ) -> FlagResult:
        """get_flag を実行し、RocketFlagError を値として返す。"""
        try:
            return FlagResult(value=await self.get_flag(flag_id, user_context))
        except RocketFlagError as e:
            return FlagResult(error=e)

    async def aclose(self) -> None:
        """保持しているリソースを解放する。既定では何もしない。"""

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
