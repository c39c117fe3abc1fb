"""フラグ取得リクエストの URL 組み立て"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, quote_plus, urlencode

from .config import RocketFlagConfig
from .exceptions import ContextFormatError, ValidationError
from .models import ContextValue

ENVIRONMENT_KEY = "environment"

_ENVIRONMENT_RE = re.compile(r"^[a-zA-Z0-9]+$")
# RFC 3986 の pchar のうちパスにそのまま置けるもの
_PATH_SAFE = "/:@!$&'()*+,;=-._~"


def validate_flag_id(flag_id: Any) -> str:
    """flag_id が空でない文字列であることを検証する。"""
    if not flag_id:
        raise ValidationError("flag_id", "flag_id is required")
    if not isinstance(flag_id, str):
        raise ValidationError("flag_id", "flag_id must be a string")
    return flag_id


def validate_user_context(user_context: Any) -> Mapping[str, ContextValue]:
    """user_context がスカラー値のみを持つマッピングであることを検証する。

    None は空のコンテキストとして扱う。予約キー environment の値は
    英数字のみの空でない文字列でなければならない。
    """
    if user_context is None:
        return {}
    if not isinstance(user_context, Mapping):
        raise ValidationError("user_context", "user_context must be a mapping")
    for key, value in user_context.items():
        if not isinstance(key, str):
            raise ValidationError(
                "user_context", f"user_context key {key!r} must be a string"
            )
        if not isinstance(value, (str, int, float, bool)):
            raise ValidationError(
                key,
                f"user_context value for {key!r} must be a string, number or boolean",
            )
        if key == ENVIRONMENT_KEY and (
            not isinstance(value, str) or not _ENVIRONMENT_RE.match(value)
        ):
            raise ContextFormatError(
                key,
                f"user_context value for {key!r} must be alphanumeric",
            )
    return user_context


def _quote_form(value: str, safe: str, encoding: str | None, errors: str | None) -> str:
    # application/x-www-form-urlencoded: "*" はそのまま、"~" はエンコードする
    return quote_plus(value, safe="*", encoding=encoding, errors=errors).replace("~", "%7E")


def _format_value(value: ContextValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_flag_url(
    flag_id: Any,
    user_context: Any = None,
    config: RocketFlagConfig | None = None,
) -> str:
    """フラグ取得先の URL を組み立てる。

    {api_url}/{version}/flags/{flag_id} に user_context の各エントリを
    クエリパラメータとして挿入順に付与する。I/O は行わない。

    Raises:
        ValidationError: flag_id または user_context が不正な場合
    """
    flag_id = validate_flag_id(flag_id)
    context = validate_user_context(user_context)
    config = config or RocketFlagConfig()

    url = f"{config.api_url}/{config.version}/flags/{quote(flag_id, safe=_PATH_SAFE)}"
    if context:
        pairs = [(key, _format_value(value)) for key, value in context.items()]
        url += "?" + urlencode(pairs, quote_via=_quote_form)
    return url
