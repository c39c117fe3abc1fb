"""RocketFlag HTTP クライアント実装"""

from __future__ import annotations

import logging

import httpx

from .client import RocketFlagClient
from .config import RocketFlagConfig
from .exceptions import NetworkError
from .models import FlagStatus, UserContext
from .request import build_flag_url
from .response import parse_flag_response

logger = logging.getLogger(__name__)


class HttpRocketFlagClient(RocketFlagClient):
    """httpx を使った RocketFlag HTTP クライアント。

    http_client を渡した場合はそれを全リクエストで使い回し、aclose() または
    async with の終了時に閉じる。渡さない場合はリクエストごとに
    リダイレクト追従付きの AsyncClient を生成して閉じる。
    """

    def __init__(
        self,
        config: RocketFlagConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or RocketFlagConfig()
        self._http_client = http_client

    @property
    def config(self) -> RocketFlagConfig:
        return self._config

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._config.timeout_seconds,
            follow_redirects=True,
        )

    async def _send(self, url: str) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.get(url)
        async with self._make_client() as client:
            return await client.get(url)

    async def get_flag(
        self, flag_id: str, user_context: UserContext | None = None
    ) -> FlagStatus:
        url = build_flag_url(flag_id, user_context, self._config)
        logger.debug("Requesting flag", extra={"flag_id": flag_id, "url": url})

        try:
            resp = await self._send(url)
        except Exception as e:
            raise NetworkError(f"Network error: {str(e) or type(e).__name__}", cause=e) from e

        flag = parse_flag_response(resp)
        logger.debug(
            "Flag retrieved",
            extra={"flag_id": flag_id, "enabled": flag.enabled, "status": resp.status_code},
        )
        return flag

    async def aclose(self) -> None:
        """注入された AsyncClient を閉じる。注入していなければ何もしない。"""
        if self._http_client is not None:
            await self._http_client.aclose()
