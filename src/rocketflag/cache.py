"""CachedRocketFlagClient 実装"""

from __future__ import annotations

import hashlib
import json
import logging

from .client import RocketFlagClient
from .models import FlagStatus, UserContext
from .request import validate_flag_id, validate_user_context

logger = logging.getLogger(__name__)


def cache_key(flag_id: str, user_context: UserContext | None) -> str:
    """flag_id とコンテキストのダイジェストからキャッシュキーを作る。

    コンテキストはキー順に正規化するため、挿入順が違っても同じキーになる。
    """
    context = dict(validate_user_context(user_context))
    canonical = json.dumps(context, sort_keys=True, separators=(",", ":"))
    digest = hashlib.sha256(canonical.encode("utf-8")).hexdigest()
    return f"{flag_id}:{digest}"


class CachedRocketFlagClient(RocketFlagClient):
    """取得に成功したフラグをインスタンス内に保持するクライアント。

    キャッシュは無期限・上限なしで、このインスタンスと共に破棄される。
    同じ flag_id でもコンテキストが異なれば別エントリとして扱う。
    失敗した取得はキャッシュしない。
    """

    def __init__(self, inner: RocketFlagClient) -> None:
        self._inner = inner
        self._cache: dict[str, FlagStatus] = {}

    def __len__(self) -> int:
        return len(self._cache)

    async def get_flag(
        self, flag_id: str, user_context: UserContext | None = None
    ) -> FlagStatus:
        key = cache_key(validate_flag_id(flag_id), user_context)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Flag cache hit", extra={"flag_id": flag_id})
            return cached
        flag = await self._inner.get_flag(flag_id, user_context)
        self._cache[key] = flag
        return flag

    async def aclose(self) -> None:
        await self._inner.aclose()
