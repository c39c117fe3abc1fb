"""rocketflag データモデル"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from .exceptions import RocketFlagError

ContextValue: TypeAlias = str | int | float | bool
UserContext: TypeAlias = Mapping[str, ContextValue]


@dataclass(frozen=True)
class FlagStatus:
    """フラグ評価結果。"""

    name: str
    enabled: bool
    id: str


@dataclass(frozen=True)
class FlagResult:
    """例外を送出しない呼び出し規約での取得結果。

    成功時は value、失敗時は error のいずれか一方だけが設定される。
    呼び出し側は error.code で分岐する。
    """

    value: FlagStatus | None = None
    error: RocketFlagError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
