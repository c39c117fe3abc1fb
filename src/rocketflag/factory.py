"""クライアント生成"""

from __future__ import annotations

import httpx

from .cache import CachedRocketFlagClient
from .client import RocketFlagClient
from .config import DEFAULT_API_URL, DEFAULT_TIMEOUT_SECONDS, DEFAULT_VERSION, RocketFlagConfig
from .http_client import HttpRocketFlagClient


def create_rocketflag_client(
    version: str = DEFAULT_VERSION,
    api_url: str = DEFAULT_API_URL,
    *,
    timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS,
    cache: bool = False,
    http_client: httpx.AsyncClient | None = None,
) -> RocketFlagClient:
    """RocketFlag クライアントを生成する。

    Args:
        version: API バージョンのパスセグメント
        api_url: API のベース URL
        timeout_seconds: httpx に渡すタイムアウト（秒）。None で無制限
        cache: True の場合、取得結果をインスタンス内にキャッシュする
        http_client: 使い回す httpx.AsyncClient。返したクライアントの aclose()
            または async with の終了時に一緒に閉じられる

    Raises:
        ValidationError: version または api_url が不正な場合
    """
    config = RocketFlagConfig(
        version=version, api_url=api_url, timeout_seconds=timeout_seconds
    )
    client: RocketFlagClient = HttpRocketFlagClient(config, http_client=http_client)
    if cache:
        client = CachedRocketFlagClient(client)
    return client
